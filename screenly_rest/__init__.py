"""
Screenly REST API Library

A Python library for managing Screenly digital signage through the
Screenly REST API.

Usage:
    import screenly_rest

    auth = screenly_rest.Authentication()
    screens = screenly_rest.list_screens(auth)

    # Or import specific modules
    from screenly_rest.core import get, post
    from screenly_rest.playlists import create_playlist_item
    from screenly_rest.edge_apps import publish_manifest

Modules:
    authentication: Token resolution, verification and signed sessions
    core: Basic request verbs (GET, POST, PATCH, DELETE)
    screens: Screen listing
    assets: Asset and asset group operations
    playlists: Playlist, playlist item and shared playlist operations
    labels: Label operations and label links
    edge_apps: Edge app manifests, publishing and listings
    utils: Output formatting
"""

from .config import VERSION

from .errors import (
    ScreenlyError,
    AuthenticationError,
    WrongCredentialsError,
    UnknownAuthenticationError,
    CredentialError,
    MissingHomeDirError,
    NoCredentialsError,
    InvalidHeaderError,
    RequestError,
    WrongResponseStatusError,
    SerializationError,
    ValidationError,
    NoFieldsToUpdateError,
    ManifestValidationError,
    InvalidManifestValueError,
)

from .authentication import Authentication, Config, CredentialStore

from .core import get, post, patch, delete

from .screens import list_screens, get_screen

from .assets import (
    list_assets,
    get_asset,
    create_asset,
    update_asset,
    delete_asset,
    list_asset_groups,
    create_asset_group,
    update_asset_group,
    delete_asset_group,
)

from .playlists import (
    list_playlists,
    create_playlist,
    update_playlist,
    delete_playlist,
    next_item_position,
    list_playlist_items,
    create_playlist_item,
    update_playlist_item,
    delete_playlist_item,
    list_shared_playlists,
    share_playlist,
    unshare_playlist,
)

from .labels import (
    list_labels,
    create_label,
    update_label,
    delete_label,
    link_screen,
    unlink_screen,
    link_playlist,
    unlink_playlist,
)

from .edge_apps import (
    EdgeAppManifest,
    init_manifest,
    read_manifest,
    publish_manifest,
    list_edge_apps,
    list_edge_app_settings,
    list_edge_app_instances,
)

# Version information
__version__ = VERSION


def get_version():
    """Return the package version"""
    return __version__


__all__ = [
    # Errors
    "ScreenlyError",
    "AuthenticationError",
    "WrongCredentialsError",
    "UnknownAuthenticationError",
    "CredentialError",
    "MissingHomeDirError",
    "NoCredentialsError",
    "InvalidHeaderError",
    "RequestError",
    "WrongResponseStatusError",
    "SerializationError",
    "ValidationError",
    "NoFieldsToUpdateError",
    "ManifestValidationError",
    "InvalidManifestValueError",
    # Authentication
    "Authentication",
    "Config",
    "CredentialStore",
    # Core operations
    "get",
    "post",
    "patch",
    "delete",
    # Screens
    "list_screens",
    "get_screen",
    # Assets
    "list_assets",
    "get_asset",
    "create_asset",
    "update_asset",
    "delete_asset",
    "list_asset_groups",
    "create_asset_group",
    "update_asset_group",
    "delete_asset_group",
    # Playlists
    "list_playlists",
    "create_playlist",
    "update_playlist",
    "delete_playlist",
    "next_item_position",
    "list_playlist_items",
    "create_playlist_item",
    "update_playlist_item",
    "delete_playlist_item",
    "list_shared_playlists",
    "share_playlist",
    "unshare_playlist",
    # Labels
    "list_labels",
    "create_label",
    "update_label",
    "delete_label",
    "link_screen",
    "unlink_screen",
    "link_playlist",
    "unlink_playlist",
    # Edge apps
    "EdgeAppManifest",
    "init_manifest",
    "read_manifest",
    "publish_manifest",
    "list_edge_apps",
    "list_edge_app_settings",
    "list_edge_app_instances",
    # Package functions
    "get_version",
]
