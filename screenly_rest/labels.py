"""
Label operations for Screenly REST API

Labels group screens and target playlists at them.
"""

from typing import Any, Dict, List

from . import core
from .authentication import Authentication


def list_labels(auth: Authentication) -> List[Dict[str, Any]]:
    return core.get(auth, "v4/labels")


def create_label(auth: Authentication, name: str) -> Any:
    return core.post(auth, "v4/labels", {"name": name})


def update_label(auth: Authentication, uuid: str, name: str) -> Any:
    return core.patch(auth, f"v4/labels?id=eq.{uuid}", {"name": name})


def delete_label(auth: Authentication, uuid: str) -> Dict[str, str]:
    core.delete(auth, f"v4/labels?id=eq.{uuid}")
    return {"status": "deleted", "id": uuid}


def link_screen(auth: Authentication, label_uuid: str, screen_uuid: str) -> Any:
    """Attach a label to a screen

    Parameters:
        :auth: Authentication instance
        :label_uuid: string label id
        :screen_uuid: string screen id
    """
    payload = {"label_id": label_uuid, "screen_id": screen_uuid}
    return core.post(auth, "v4/labels/screens", payload)


def unlink_screen(
    auth: Authentication, label_uuid: str, screen_uuid: str
) -> Dict[str, str]:
    """Remove a label from a screen"""
    endpoint = f"v4/labels/screens?label_id=eq.{label_uuid}&screen_id=eq.{screen_uuid}"
    core.delete(auth, endpoint)
    return {"status": "unlinked", "label_id": label_uuid, "screen_id": screen_uuid}


def link_playlist(auth: Authentication, label_uuid: str, playlist_uuid: str) -> Any:
    """Attach a label to a playlist"""
    payload = {"label_id": label_uuid, "playlist_id": playlist_uuid}
    return core.post(auth, "v4/labels/playlists", payload)


def unlink_playlist(
    auth: Authentication, label_uuid: str, playlist_uuid: str
) -> Dict[str, str]:
    endpoint = (
        f"v4/labels/playlists?label_id=eq.{label_uuid}&playlist_id=eq.{playlist_uuid}"
    )
    core.delete(auth, endpoint)
    return {
        "status": "unlinked",
        "label_id": label_uuid,
        "playlist_id": playlist_uuid,
    }
