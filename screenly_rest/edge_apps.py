"""
Edge app operations for Screenly REST API

Handles the edge app manifest (screenly.yml) and its publish round-trip,
plus read-only listings of edge apps, their settings and installations.

A manifest moves from draft (local file, no id) to published (local file
rewritten with the record the API created, including its id). Republishing
a manifest that already has an id is refused so the same app is never
created twice by accident.
"""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from . import core
from .authentication import Authentication
from .config import MANIFEST_FIELDS
from .errors import (
    InvalidManifestValueError,
    ManifestValidationError,
    SerializationError,
)
from .logging_config import logger

PUBLISH_ENDPOINT = "v4/edge_apps?select=" + ",".join(MANIFEST_FIELDS)


@dataclass
class EdgeAppManifest:
    name: str
    version: str
    description: str
    icon: str
    author: str
    homepage_url: str
    id: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> "EdgeAppManifest":
        """Build a manifest, rejecting unknown, missing or non-string fields"""
        if not isinstance(data, dict):
            raise ManifestValidationError("Manifest must be a mapping of fields")

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            raise ManifestValidationError(
                f"Unknown manifest fields: {', '.join(unknown)}"
            )

        missing = [name for name in MANIFEST_FIELDS if name != "id" and name not in data]
        if missing:
            raise ManifestValidationError(
                f"Missing manifest fields: {', '.join(missing)}"
            )

        for key, value in data.items():
            if not isinstance(value, str):
                raise ManifestValidationError(f"Manifest field '{key}' must be a string")

        return cls(**data)

    def to_dict(self) -> Dict[str, str]:
        data = asdict(self)
        return {name: data[name] for name in MANIFEST_FIELDS}


def _write_yaml(path: Path, data: Dict[str, str]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)


def load_manifest_data(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a manifest file and check it against the manifest schema

    Returns the raw field mapping in file order.
    """
    with open(path, encoding="utf-8") as f:
        text = f.read()

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SerializationError(f"Could not parse manifest {path}: {e}") from e

    EdgeAppManifest.from_dict(data)
    return data


def read_manifest(path: Union[str, Path]) -> EdgeAppManifest:
    return EdgeAppManifest.from_dict(load_manifest_data(path))


def init_manifest(path: Union[str, Path]) -> Path:
    """Write an empty manifest draft to path

    The draft has no id field at all; the id is assigned by the API on
    publish.
    """
    path = Path(path)
    draft = {name: "" for name in MANIFEST_FIELDS if name != "id"}
    _write_yaml(path, draft)
    logger.log_operation_end("init_manifest", True, path=str(path))
    return path


def publish_manifest(auth: Authentication, path: Union[str, Path]) -> EdgeAppManifest:
    """Create the edge app described by a manifest draft

    The manifest is validated before any request is sent; the file is only
    rewritten after the API confirms creation of exactly one edge app.

    Parameters:
        :auth: Authentication instance
        :path: path to the manifest file
    """
    path = Path(path)
    logger.log_operation_start("publish_manifest", path=str(path))

    payload = dict(load_manifest_data(path))

    if payload.get("id"):
        raise InvalidManifestValueError(
            "id", "Only empty id accepted when publishing manifest"
        )
    payload.pop("id", None)

    for key, value in payload.items():
        logger.debug(f"Edge app manifest field {key}: {value}")
        if not value:
            raise InvalidManifestValueError(key)

    created = core.post(auth, PUBLISH_ENDPOINT, payload, unwrap=False)
    if not isinstance(created, list) or len(created) != 1:
        raise SerializationError(
            "Expected exactly one edge app in the publish response"
        )

    record = created[0]
    if not isinstance(record, dict):
        raise SerializationError("Expected an edge app record in the publish response")

    # The API may echo columns beyond the manifest; only manifest fields are kept
    try:
        manifest = EdgeAppManifest.from_dict(
            {key: record[key] for key in MANIFEST_FIELDS if key in record}
        )
    except ManifestValidationError as e:
        raise SerializationError(f"Unexpected edge app in publish response: {e}") from e
    if not manifest.id:
        raise SerializationError("Publish response did not include an edge app id")

    _write_yaml(path, manifest.to_dict())
    logger.log_operation_end("publish_manifest", True, id=manifest.id)
    return manifest


def list_edge_apps(auth: Authentication) -> List[Dict[str, Any]]:
    return core.get(auth, "v4/edge-apps?select=id,name&deleted=eq.false")


def list_edge_app_settings(auth: Authentication, app_uuid: str) -> List[Dict[str, Any]]:
    """List the settings an edge app declares, ordered by name"""
    endpoint = (
        f"v4.1/edge-apps/settings?app_id=eq.{app_uuid}"
        "&select=name,type,default_value,optional,title,help_text&order=name.asc"
    )
    return core.get(auth, endpoint)


def list_edge_app_instances(
    auth: Authentication, app_uuid: str
) -> List[Dict[str, Any]]:
    """List the installations of an edge app"""
    return core.get(
        auth, f"v4.1/edge-apps/installations?select=id,name&app_id=eq.{app_uuid}"
    )
