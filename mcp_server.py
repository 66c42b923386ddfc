"""FastMCP server exposing the Screenly API as assistant tools.

Every tool returns the pretty-printed JSON result of the operation, or an
``{"error": "<message>"}`` envelope when it fails.
"""

from __future__ import annotations

from typing import Any, Callable

from fastmcp import FastMCP

import screenly_rest as screenly
from screenly_rest.authentication import Authentication
from screenly_rest.errors import ScreenlyError
from screenly_rest.logging_config import logger
from screenly_rest.utils import error_envelope, to_json

INSTRUCTIONS = (
    "Screenly MCP Server - Manage digital signage screens, assets, and playlists. "
    "Use API_TOKEN environment variable or ~/.screenly file for authentication.\n\n"
    "PLAYLIST PREDICATES: Playlists use a predicate DSL for scheduling. Variables: "
    "$DATE (Unix ms), $TIME (ms since midnight, 0-86400000), $WEEKDAY (0=Sun..6=Sat). "
    "Operators: =, <=, >=, <, >, AND, OR, NOT, BETWEEN {min,max}, IN {values}. "
    "Examples: 'TRUE' (always show), '$WEEKDAY IN {1,2,3,4,5}' (weekdays only), "
    "'$TIME BETWEEN {32400000, 61200000}' (9AM-5PM), "
    "'$TIME >= 32400000 AND $TIME <= 61200000 AND NOT $WEEKDAY IN {0, 6}' (business hours). "
    "Time reference: 32400000=9AM, 43200000=12PM, 61200000=5PM, 72000000=8PM."
)

TOOL_NAMES = [
    "screen_list",
    "screen_get",
    "asset_list",
    "asset_get",
    "asset_create",
    "asset_update",
    "asset_delete",
    "asset_group_list",
    "asset_group_create",
    "asset_group_update",
    "asset_group_delete",
    "playlist_list",
    "playlist_create",
    "playlist_update",
    "playlist_delete",
    "playlist_item_list",
    "playlist_item_create",
    "playlist_item_update",
    "playlist_item_delete",
    "label_list",
    "label_create",
    "label_update",
    "label_delete",
    "label_link_screen",
    "label_unlink_screen",
    "label_link_playlist",
    "label_unlink_playlist",
    "shared_playlist_list",
    "shared_playlist_create",
    "shared_playlist_delete",
    "edge_app_list",
    "edge_app_list_settings",
    "edge_app_list_instances",
]


class ScreenlyTools:
    """Tool callables bound to one Authentication"""

    def __init__(self, auth: Authentication) -> None:
        self.auth = auth

    def _run(self, action: str, operation: Callable[..., Any], *args: Any, **kwargs: Any) -> str:
        try:
            result = operation(self.auth, *args, **kwargs)
        except (ScreenlyError, OSError) as e:
            logger.log_error(e, {"tool": operation.__name__})
            return error_envelope(f"Failed to {action}: {e}")
        return to_json(result)

    # Screens

    def screen_list(self) -> str:
        """List all screens with their status, hardware info, and sync state."""
        return self._run("list screens", screenly.list_screens)

    def screen_get(self, uuid: str) -> str:
        """Get a screen by UUID."""
        return self._run("get screen", screenly.get_screen, uuid)

    # Assets

    def asset_list(self) -> str:
        """List all assets with their type, status, and metadata."""
        return self._run("list assets", screenly.list_assets)

    def asset_get(self, uuid: str) -> str:
        """Get an asset by UUID."""
        return self._run("get asset", screenly.get_asset, uuid)

    def asset_create(self, title: str, source_url: str) -> str:
        """Create a new asset from a URL. Supports web pages, images, and videos."""
        return self._run("create asset", screenly.create_asset, title, source_url)

    def asset_update(
        self,
        uuid: str,
        title: str | None = None,
        js_injection: str | None = None,
        headers: str | None = None,
    ) -> str:
        """Update an asset's properties (title, js_injection, headers as a JSON object string)."""
        return self._run(
            "update asset",
            screenly.update_asset,
            uuid,
            title=title,
            js_injection=js_injection,
            headers=headers,
        )

    def asset_delete(self, uuid: str) -> str:
        """Delete an asset by UUID."""
        return self._run("delete asset", screenly.delete_asset, uuid)

    # Asset groups

    def asset_group_list(self) -> str:
        """List all asset groups (folders for organizing assets)."""
        return self._run("list asset groups", screenly.list_asset_groups)

    def asset_group_create(self, title: str) -> str:
        """Create a new asset group."""
        return self._run("create asset group", screenly.create_asset_group, title)

    def asset_group_update(self, uuid: str, title: str) -> str:
        """Update an asset group."""
        return self._run("update asset group", screenly.update_asset_group, uuid, title)

    def asset_group_delete(self, uuid: str) -> str:
        """Delete an asset group. WARNING: Also deletes all assets in the group."""
        return self._run("delete asset group", screenly.delete_asset_group, uuid)

    # Playlists

    def playlist_list(self) -> str:
        """List all playlists."""
        return self._run("list playlists", screenly.list_playlists)

    def playlist_create(
        self,
        title: str,
        predicate: str | None = None,
        priority: bool | None = None,
        is_enabled: bool | None = None,
    ) -> str:
        """Create a new playlist. The predicate controls when it is shown and defaults to TRUE."""
        return self._run(
            "create playlist",
            screenly.create_playlist,
            title,
            predicate=predicate,
            priority=priority,
            is_enabled=is_enabled,
        )

    def playlist_update(
        self,
        uuid: str,
        title: str | None = None,
        predicate: str | None = None,
        priority: bool | None = None,
        is_enabled: bool | None = None,
    ) -> str:
        """Update a playlist."""
        return self._run(
            "update playlist",
            screenly.update_playlist,
            uuid,
            title=title,
            predicate=predicate,
            priority=priority,
            is_enabled=is_enabled,
        )

    def playlist_delete(self, uuid: str) -> str:
        """Delete a playlist by UUID."""
        return self._run("delete playlist", screenly.delete_playlist, uuid)

    # Playlist items

    def playlist_item_list(self, uuid: str) -> str:
        """List all items in a playlist."""
        return self._run("list playlist items", screenly.list_playlist_items, uuid)

    def playlist_item_create(
        self,
        playlist_uuid: str,
        asset_uuid: str,
        duration: int,
        position: int | None = None,
    ) -> str:
        """Add an asset to a playlist. Appended to the end unless a position is given."""
        return self._run(
            "create playlist item",
            screenly.create_playlist_item,
            playlist_uuid,
            asset_uuid,
            duration,
            position=position,
        )

    def playlist_item_update(
        self,
        playlist_uuid: str,
        item_uuid: str,
        duration: int | None = None,
        position: int | None = None,
    ) -> str:
        """Update a playlist item (duration, position)."""
        return self._run(
            "update playlist item",
            screenly.update_playlist_item,
            playlist_uuid,
            item_uuid,
            duration=duration,
            position=position,
        )

    def playlist_item_delete(self, playlist_uuid: str, item_uuid: str) -> str:
        """Remove an item from a playlist."""
        return self._run(
            "delete playlist item", screenly.delete_playlist_item, playlist_uuid, item_uuid
        )

    # Labels

    def label_list(self) -> str:
        """List all labels. Labels group screens and target playlists."""
        return self._run("list labels", screenly.list_labels)

    def label_create(self, name: str) -> str:
        """Create a new label."""
        return self._run("create label", screenly.create_label, name)

    def label_update(self, uuid: str, name: str) -> str:
        """Update a label."""
        return self._run("update label", screenly.update_label, uuid, name)

    def label_delete(self, uuid: str) -> str:
        """Delete a label."""
        return self._run("delete label", screenly.delete_label, uuid)

    def label_link_screen(self, label_uuid: str, screen_uuid: str) -> str:
        """Attach a label to a screen."""
        return self._run("link label to screen", screenly.link_screen, label_uuid, screen_uuid)

    def label_unlink_screen(self, label_uuid: str, screen_uuid: str) -> str:
        """Remove a label from a screen."""
        return self._run(
            "unlink label from screen", screenly.unlink_screen, label_uuid, screen_uuid
        )

    def label_link_playlist(self, label_uuid: str, playlist_uuid: str) -> str:
        """Attach a label to a playlist."""
        return self._run(
            "link label to playlist", screenly.link_playlist, label_uuid, playlist_uuid
        )

    def label_unlink_playlist(self, label_uuid: str, playlist_uuid: str) -> str:
        """Remove a label from a playlist."""
        return self._run(
            "unlink label from playlist", screenly.unlink_playlist, label_uuid, playlist_uuid
        )

    # Shared playlists

    def shared_playlist_list(self) -> str:
        """List shared playlists."""
        return self._run("list shared playlists", screenly.list_shared_playlists)

    def shared_playlist_create(self, playlist_uuid: str, team_uuid: str) -> str:
        """Share a playlist with another team."""
        return self._run("share playlist", screenly.share_playlist, playlist_uuid, team_uuid)

    def shared_playlist_delete(self, playlist_uuid: str, team_uuid: str) -> str:
        """Unshare a playlist from a team."""
        return self._run(
            "unshare playlist", screenly.unshare_playlist, playlist_uuid, team_uuid
        )

    # Edge apps

    def edge_app_list(self) -> str:
        """List all Edge Apps."""
        return self._run("list Edge Apps", screenly.list_edge_apps)

    def edge_app_list_settings(self, app_uuid: str) -> str:
        """List settings for an Edge App."""
        return self._run("list Edge App settings", screenly.list_edge_app_settings, app_uuid)

    def edge_app_list_instances(self, app_uuid: str) -> str:
        """List instances of an Edge App."""
        return self._run(
            "list Edge App instances", screenly.list_edge_app_instances, app_uuid
        )


def create_mcp_server(auth: Authentication | None = None) -> FastMCP:
    """Create a FastMCP server whose tools share one Authentication."""

    mcp = FastMCP("screenly", instructions=INSTRUCTIONS)
    tools = ScreenlyTools(auth or Authentication())

    for name in TOOL_NAMES:
        mcp.tool(getattr(tools, name))

    return mcp


def run(auth: Authentication | None = None) -> None:
    """Serve the tools over stdio."""
    create_mcp_server(auth).run()
