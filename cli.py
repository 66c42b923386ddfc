#!/usr/bin/env python3
"""
Screenly REST CLI

Command-line interface for managing Screenly screens, assets, playlists,
labels and edge apps.
"""

import sys
from typing import Any, Callable, Optional

import click

import screenly_rest as screenly
from screenly_rest.authentication import Authentication
from screenly_rest.config import (
    DEFAULT_MANIFEST_FILENAME,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
)
from screenly_rest.errors import ScreenlyError
from screenly_rest.logging_config import logger
from screenly_rest.utils import format_result


class ScreenlyCLI:
    def __init__(self, auth: Optional[Authentication] = None):
        self._auth = auth
        self.output_format = DEFAULT_OUTPUT_FORMAT

    @property
    def auth(self) -> Authentication:
        # Credentials are only read when a command needs them
        if self._auth is None:
            self._auth = Authentication()
        return self._auth

    @auth.setter
    def auth(self, value: Optional[Authentication]):
        self._auth = value

    def fail(self, message: str):
        click.echo(f"❌ {message}", err=True)
        sys.exit(1)

    def run(self, operation: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Run a library operation with the current credentials, exiting on failure"""
        try:
            return operation(self.auth, *args, **kwargs)
        except (ScreenlyError, OSError) as e:
            logger.log_error(e, {"operation": operation.__name__})
            self.fail(str(e))

    def show(self, operation: Callable[..., Any], *args: Any, **kwargs: Any):
        """Run an operation and print its result"""
        result = self.run(operation, *args, **kwargs)
        click.echo(format_result(result, self.output_format))

    def login(self, token: str) -> bool:
        try:
            path = self.auth.verify_and_store_token(token)
        except (ScreenlyError, OSError) as e:
            logger.log_error(e, {"operation": "login"})
            self.fail(f"Login failed: {e}")
        click.echo(f"✅ Token verified and stored in {path}")
        return True

    def logout(self) -> bool:
        try:
            removed = self.auth.store.clear()
        except (ScreenlyError, OSError) as e:
            self.fail(f"Logout failed: {e}")
        if removed:
            click.echo("✅ Stored token removed")
        else:
            click.echo("No stored token found")
        return removed


# Global CLI instance
cli = ScreenlyCLI()


@click.group()
@click.option(
    "--output",
    "-o",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=DEFAULT_OUTPUT_FORMAT,
    show_default=True,
    help="Print results as JSON or as human-readable tables",
)
def main(output_format: str):
    """Screenly CLI - manage your digital signage from the command line"""
    cli.output_format = output_format


@main.command()
@click.option("--token", help="API token; prompted for when omitted")
def login(token: Optional[str]):
    """Verify an API token and store it for later commands"""
    if not token:
        token = click.prompt("API token", hide_input=True)
    cli.login(token)


@main.command()
def logout():
    """Remove the stored API token"""
    cli.logout()


@main.command()
def mcp():
    """Serve the Screenly tools over MCP (stdio)"""
    from mcp_server import run

    run(cli.auth)


# Screens


@main.group()
def screen():
    """Screen commands"""


@screen.command("list")
def screen_list():
    """List all screens"""
    cli.show(screenly.list_screens)


@screen.command("get")
@click.argument("uuid")
def screen_get(uuid: str):
    """Get a screen by UUID"""
    cli.show(screenly.get_screen, uuid)


# Assets


@main.group()
def asset():
    """Asset commands"""


@asset.command("list")
def asset_list():
    """List all assets"""
    cli.show(screenly.list_assets)


@asset.command("get")
@click.argument("uuid")
def asset_get(uuid: str):
    """Get an asset by UUID"""
    cli.show(screenly.get_asset, uuid)


@asset.command("create")
@click.argument("title")
@click.argument("source_url")
def asset_create(title: str, source_url: str):
    """Create an asset from a URL"""
    cli.show(screenly.create_asset, title, source_url)


@asset.command("update")
@click.argument("uuid")
@click.option("--title", help="New title")
@click.option("--js-injection", help="JavaScript code to inject into web assets")
@click.option("--headers", help="HTTP headers as a JSON object")
def asset_update(
    uuid: str, title: Optional[str], js_injection: Optional[str], headers: Optional[str]
):
    """Update an asset"""
    cli.show(
        screenly.update_asset,
        uuid,
        title=title,
        js_injection=js_injection,
        headers=headers,
    )


@asset.command("delete")
@click.argument("uuid")
def asset_delete(uuid: str):
    """Delete an asset"""
    cli.show(screenly.delete_asset, uuid)


# Asset groups


@main.group("asset-group")
def asset_group():
    """Asset group commands"""


@asset_group.command("list")
def asset_group_list():
    """List all asset groups"""
    cli.show(screenly.list_asset_groups)


@asset_group.command("create")
@click.argument("title")
def asset_group_create(title: str):
    """Create an asset group"""
    cli.show(screenly.create_asset_group, title)


@asset_group.command("update")
@click.argument("uuid")
@click.argument("title")
def asset_group_update(uuid: str, title: str):
    """Rename an asset group"""
    cli.show(screenly.update_asset_group, uuid, title)


@asset_group.command("delete")
@click.argument("uuid")
@click.confirmation_option(prompt="This also deletes every asset in the group. Continue?")
def asset_group_delete(uuid: str):
    """Delete an asset group and all of its assets"""
    cli.show(screenly.delete_asset_group, uuid)


# Playlists


@main.group()
def playlist():
    """Playlist commands"""


@playlist.command("list")
def playlist_list():
    """List all playlists"""
    cli.show(screenly.list_playlists)


@playlist.command("create")
@click.argument("title")
@click.option("--predicate", help="When the playlist is shown, e.g. '$WEEKDAY IN {1,2,3,4,5}'")
@click.option("--priority/--no-priority", default=None, help="Priority playlist")
@click.option("--enabled/--disabled", "is_enabled", default=None, help="Enable or disable")
def playlist_create(
    title: str,
    predicate: Optional[str],
    priority: Optional[bool],
    is_enabled: Optional[bool],
):
    """Create a playlist"""
    cli.show(
        screenly.create_playlist,
        title,
        predicate=predicate,
        priority=priority,
        is_enabled=is_enabled,
    )


@playlist.command("update")
@click.argument("uuid")
@click.option("--title", help="New title")
@click.option("--predicate", help="New predicate expression")
@click.option("--priority/--no-priority", default=None, help="Priority playlist")
@click.option("--enabled/--disabled", "is_enabled", default=None, help="Enable or disable")
def playlist_update(
    uuid: str,
    title: Optional[str],
    predicate: Optional[str],
    priority: Optional[bool],
    is_enabled: Optional[bool],
):
    """Update a playlist"""
    cli.show(
        screenly.update_playlist,
        uuid,
        title=title,
        predicate=predicate,
        priority=priority,
        is_enabled=is_enabled,
    )


@playlist.command("delete")
@click.argument("uuid")
def playlist_delete(uuid: str):
    """Delete a playlist"""
    cli.show(screenly.delete_playlist, uuid)


# Playlist items


@main.group("playlist-item")
def playlist_item():
    """Playlist item commands"""


@playlist_item.command("list")
@click.argument("playlist_uuid")
def playlist_item_list(playlist_uuid: str):
    """List the items of a playlist in order"""
    cli.show(screenly.list_playlist_items, playlist_uuid)


@playlist_item.command("add")
@click.argument("playlist_uuid")
@click.argument("asset_uuid")
@click.option("--duration", type=click.IntRange(min=0), required=True, help="Duration in seconds")
@click.option(
    "--position",
    type=click.IntRange(min=0),
    help="Position in the playlist; appended to the end when omitted",
)
def playlist_item_add(
    playlist_uuid: str, asset_uuid: str, duration: int, position: Optional[int]
):
    """Add an asset to a playlist"""
    cli.show(
        screenly.create_playlist_item,
        playlist_uuid,
        asset_uuid,
        duration,
        position=position,
    )


@playlist_item.command("update")
@click.argument("playlist_uuid")
@click.argument("item_uuid")
@click.option("--duration", type=click.IntRange(min=0), help="New duration in seconds")
@click.option("--position", type=click.IntRange(min=0), help="New position")
def playlist_item_update(
    playlist_uuid: str,
    item_uuid: str,
    duration: Optional[int],
    position: Optional[int],
):
    """Update a playlist item"""
    cli.show(
        screenly.update_playlist_item,
        playlist_uuid,
        item_uuid,
        duration=duration,
        position=position,
    )


@playlist_item.command("delete")
@click.argument("playlist_uuid")
@click.argument("item_uuid")
def playlist_item_delete(playlist_uuid: str, item_uuid: str):
    """Remove an item from a playlist"""
    cli.show(screenly.delete_playlist_item, playlist_uuid, item_uuid)


# Shared playlists


@main.group("shared-playlist")
def shared_playlist():
    """Shared playlist commands"""


@shared_playlist.command("list")
def shared_playlist_list():
    """List shared playlists"""
    cli.show(screenly.list_shared_playlists)


@shared_playlist.command("share")
@click.argument("playlist_uuid")
@click.argument("team_uuid")
def shared_playlist_share(playlist_uuid: str, team_uuid: str):
    """Share a playlist with a team"""
    cli.show(screenly.share_playlist, playlist_uuid, team_uuid)


@shared_playlist.command("unshare")
@click.argument("playlist_uuid")
@click.argument("team_uuid")
def shared_playlist_unshare(playlist_uuid: str, team_uuid: str):
    """Stop sharing a playlist with a team"""
    cli.show(screenly.unshare_playlist, playlist_uuid, team_uuid)


# Labels


@main.group()
def label():
    """Label commands"""


@label.command("list")
def label_list():
    """List all labels"""
    cli.show(screenly.list_labels)


@label.command("create")
@click.argument("name")
def label_create(name: str):
    """Create a label"""
    cli.show(screenly.create_label, name)


@label.command("update")
@click.argument("uuid")
@click.argument("name")
def label_update(uuid: str, name: str):
    """Rename a label"""
    cli.show(screenly.update_label, uuid, name)


@label.command("delete")
@click.argument("uuid")
def label_delete(uuid: str):
    """Delete a label"""
    cli.show(screenly.delete_label, uuid)


@label.command("link-screen")
@click.argument("label_uuid")
@click.argument("screen_uuid")
def label_link_screen(label_uuid: str, screen_uuid: str):
    """Attach a label to a screen"""
    cli.show(screenly.link_screen, label_uuid, screen_uuid)


@label.command("unlink-screen")
@click.argument("label_uuid")
@click.argument("screen_uuid")
def label_unlink_screen(label_uuid: str, screen_uuid: str):
    """Remove a label from a screen"""
    cli.show(screenly.unlink_screen, label_uuid, screen_uuid)


@label.command("link-playlist")
@click.argument("label_uuid")
@click.argument("playlist_uuid")
def label_link_playlist(label_uuid: str, playlist_uuid: str):
    """Attach a label to a playlist"""
    cli.show(screenly.link_playlist, label_uuid, playlist_uuid)


@label.command("unlink-playlist")
@click.argument("label_uuid")
@click.argument("playlist_uuid")
def label_unlink_playlist(label_uuid: str, playlist_uuid: str):
    """Remove a label from a playlist"""
    cli.show(screenly.unlink_playlist, label_uuid, playlist_uuid)


# Edge apps


@main.group("edge-app")
def edge_app():
    """Edge app commands"""


@edge_app.command("list")
def edge_app_list():
    """List edge apps"""
    cli.show(screenly.list_edge_apps)


@edge_app.command("settings")
@click.argument("app_uuid")
def edge_app_settings(app_uuid: str):
    """List the settings of an edge app"""
    cli.show(screenly.list_edge_app_settings, app_uuid)


@edge_app.command("instances")
@click.argument("app_uuid")
def edge_app_instances(app_uuid: str):
    """List the instances of an edge app"""
    cli.show(screenly.list_edge_app_instances, app_uuid)


@edge_app.command("init")
@click.option(
    "--path",
    type=click.Path(dir_okay=False),
    default=DEFAULT_MANIFEST_FILENAME,
    show_default=True,
    help="Manifest file to create",
)
def edge_app_init(path: str):
    """Write an empty edge app manifest"""
    try:
        screenly.init_manifest(path)
    except OSError as e:
        cli.fail(f"Could not write manifest: {e}")
    click.echo(f"✅ Manifest written to {path}")


@edge_app.command("publish")
@click.option(
    "--path",
    type=click.Path(exists=True, dir_okay=False),
    default=DEFAULT_MANIFEST_FILENAME,
    show_default=True,
    help="Manifest file to publish",
)
def edge_app_publish(path: str):
    """Create the edge app described by a manifest"""
    manifest = cli.run(screenly.publish_manifest, path)
    click.echo(f"✅ Edge app published with id {manifest.id}")


if __name__ == "__main__":
    main()
