"""
Playlist operations for Screenly REST API

Handles playlists, the items inside them, and playlists shared with
other teams.
"""

from typing import Any, Dict, List, Optional

from . import core
from .authentication import Authentication
from .config import POSITION_MULTIPLIER
from .errors import NoFieldsToUpdateError, ValidationError
from .logging_config import logger


def list_playlists(auth: Authentication) -> List[Dict[str, Any]]:
    return core.get(auth, "v4/playlists")


def create_playlist(
    auth: Authentication,
    title: str,
    predicate: Optional[str] = None,
    priority: Optional[bool] = None,
    is_enabled: Optional[bool] = None,
) -> Any:
    """Create a playlist

    Parameters:
        :auth: Authentication instance
        :title: string playlist title
        :predicate: scheduling expression, defaults to "TRUE" (always shown)
        :priority: whether this is a priority playlist, defaults to False
        :is_enabled: defaults to True
    """
    payload = {
        "title": title,
        "predicate": predicate if predicate is not None else "TRUE",
        "priority": priority if priority is not None else False,
        "is_enabled": is_enabled if is_enabled is not None else True,
        "transitions": True,
    }
    return core.post(auth, "v4/playlists", payload)


def update_playlist(
    auth: Authentication,
    uuid: str,
    title: Optional[str] = None,
    predicate: Optional[str] = None,
    priority: Optional[bool] = None,
    is_enabled: Optional[bool] = None,
) -> Any:
    """Update only the supplied fields of a playlist"""
    fields = {
        "title": title,
        "predicate": predicate,
        "priority": priority,
        "is_enabled": is_enabled,
    }
    payload = {key: value for key, value in fields.items() if value is not None}
    if not payload:
        raise NoFieldsToUpdateError()

    return core.patch(auth, f"v4/playlists?id=eq.{uuid}", payload)


def delete_playlist(auth: Authentication, uuid: str) -> Dict[str, str]:
    core.delete(auth, f"v4/playlists?id=eq.{uuid}")
    return {"status": "deleted", "id": uuid}


# Playlist items


def _check_non_negative(**values: Optional[int]) -> None:
    for name, value in values.items():
        if value is not None and value < 0:
            raise ValidationError(f"{name} must not be negative: {value}")


def next_item_position(
    auth: Authentication, playlist_uuid: str, position: Optional[int] = None
) -> int:
    """Choose the position for an item appended to a playlist

    An explicit position is returned unchanged without querying the API.
    Otherwise the item goes POSITION_MULTIPLIER after the current highest
    position, or at POSITION_MULTIPLIER in an empty playlist. Existing items
    are never renumbered and colliding explicit positions are not detected.

    Parameters:
        :auth: Authentication instance
        :playlist_uuid: string playlist id
        :position: caller-chosen position, if any
    """
    if position is not None:
        return position

    endpoint = (
        f"v4/playlist-items?select=position&playlist_id=eq.{playlist_uuid}"
        "&order=position.desc&limit=1"
    )
    items = core.get(auth, endpoint)

    if not isinstance(items, list) or not items:
        return POSITION_MULTIPLIER

    highest = items[0].get("position") if isinstance(items[0], dict) else None
    if isinstance(highest, bool) or not isinstance(highest, int) or highest < 0:
        logger.debug(
            "Ignoring unusable playlist item position",
            playlist_id=playlist_uuid,
            position=highest,
        )
        return POSITION_MULTIPLIER

    return highest + POSITION_MULTIPLIER


def list_playlist_items(
    auth: Authentication, playlist_uuid: str
) -> List[Dict[str, Any]]:
    """List the items of a playlist in playback order"""
    return core.get(
        auth, f"v4/playlist-items?playlist_id=eq.{playlist_uuid}&order=position.asc"
    )


def create_playlist_item(
    auth: Authentication,
    playlist_uuid: str,
    asset_uuid: str,
    duration: int,
    position: Optional[int] = None,
) -> Any:
    """Add an asset to a playlist

    Parameters:
        :auth: Authentication instance
        :playlist_uuid: string playlist id
        :asset_uuid: string id of the asset to add
        :duration: display time in seconds
        :position: explicit position; appended to the end when omitted
    """
    _check_non_negative(duration=duration, position=position)
    final_position = next_item_position(auth, playlist_uuid, position)

    payload = [
        {
            "playlist_id": playlist_uuid,
            "asset_id": asset_uuid,
            "duration": duration,
            "position": final_position,
        }
    ]
    return core.post(auth, "v4/playlist-items", payload)


def update_playlist_item(
    auth: Authentication,
    playlist_uuid: str,
    item_uuid: str,
    duration: Optional[int] = None,
    position: Optional[int] = None,
) -> Any:
    _check_non_negative(duration=duration, position=position)
    payload: Dict[str, Any] = {}

    if duration is not None:
        payload["duration"] = duration

    if position is not None:
        payload["position"] = position

    if not payload:
        raise NoFieldsToUpdateError()

    endpoint = f"v4/playlist-items?playlist_id=eq.{playlist_uuid}&id=eq.{item_uuid}"
    return core.patch(auth, endpoint, payload)


def delete_playlist_item(
    auth: Authentication, playlist_uuid: str, item_uuid: str
) -> Dict[str, str]:
    endpoint = f"v4/playlist-items?playlist_id=eq.{playlist_uuid}&id=eq.{item_uuid}"
    core.delete(auth, endpoint)
    return {"status": "deleted", "playlist_id": playlist_uuid, "item_id": item_uuid}


# Shared playlists


def list_shared_playlists(auth: Authentication) -> List[Dict[str, Any]]:
    return core.get(auth, "v4/playlists/shared")


def share_playlist(auth: Authentication, playlist_uuid: str, team_uuid: str) -> Any:
    """Share a playlist with another team"""
    payload = {"playlist_id": playlist_uuid, "team_id": team_uuid}
    return core.post(auth, "v4/playlists/shared", payload)


def unshare_playlist(
    auth: Authentication, playlist_uuid: str, team_uuid: str
) -> Dict[str, str]:
    endpoint = f"v4/playlists/shared?playlist_id=eq.{playlist_uuid}&team_id=eq.{team_uuid}"
    core.delete(auth, endpoint)
    return {"status": "unshared", "playlist_id": playlist_uuid, "team_id": team_uuid}
