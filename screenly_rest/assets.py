"""
Asset operations for Screenly REST API

Handles assets and asset groups (folders used to organize assets)
"""

import json
from typing import Any, Dict, List, Optional

from . import core
from .authentication import Authentication
from .errors import NoFieldsToUpdateError, ValidationError


def list_assets(auth: Authentication) -> List[Dict[str, Any]]:
    """List all assets, leaving out the files that belong to edge apps"""
    return core.get(auth, "v4/assets?type=neq.edge-app-file")


def get_asset(auth: Authentication, uuid: str) -> List[Dict[str, Any]]:
    return core.get(auth, f"v4/assets?id=eq.{uuid}")


def create_asset(auth: Authentication, title: str, source_url: str) -> Any:
    """Create an asset from a URL

    Parameters:
        :auth: Authentication instance
        :title: string asset title
        :source_url: web page, image or video URL
    """
    payload = {"title": title, "source_url": source_url}
    return core.post(auth, "v4/assets", payload)


def update_asset(
    auth: Authentication,
    uuid: str,
    title: Optional[str] = None,
    js_injection: Optional[str] = None,
    headers: Optional[str] = None,
) -> Any:
    """Update the supplied properties of an asset

    Parameters:
        :auth: Authentication instance
        :uuid: string asset id
        :title: new title
        :js_injection: JavaScript code injected into web assets
        :headers: HTTP headers as a JSON object string
    """
    payload: Dict[str, Any] = {}

    if title is not None:
        payload["title"] = title

    if js_injection is not None:
        payload["js_injection"] = js_injection

    if headers is not None:
        try:
            payload["headers"] = json.loads(headers)
        except ValueError as e:
            raise ValidationError(f"Invalid headers JSON: {e}") from e

    if not payload:
        raise NoFieldsToUpdateError()

    return core.patch(auth, f"v4/assets?id=eq.{uuid}", payload)


def delete_asset(auth: Authentication, uuid: str) -> Dict[str, str]:
    core.delete(auth, f"v4/assets?id=eq.{uuid}")
    return {"status": "deleted", "id": uuid}


def list_asset_groups(auth: Authentication) -> List[Dict[str, Any]]:
    return core.get(auth, "v4/asset-groups")


def create_asset_group(auth: Authentication, title: str) -> Any:
    return core.post(auth, "v4/asset-groups", {"title": title})


def update_asset_group(auth: Authentication, uuid: str, title: str) -> Any:
    return core.patch(auth, f"v4/asset-groups?id=eq.{uuid}", {"title": title})


def delete_asset_group(auth: Authentication, uuid: str) -> Dict[str, str]:
    """Delete an asset group together with every asset inside it"""
    core.delete(auth, f"v4/asset-groups?id=eq.{uuid}")
    return {"status": "deleted", "id": uuid}
