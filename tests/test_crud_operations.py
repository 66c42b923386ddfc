"""
Unit tests for CRUD operations on the Screenly resources

Tests Create, Read, Update, Delete operations for:
- Screens
- Assets and asset groups
- Labels and label links
- Edge app listings
"""

import unittest
from unittest.mock import patch

import pytest

from screenly_rest.authentication import Authentication, Config
from screenly_rest.errors import NoFieldsToUpdateError, ValidationError
from screenly_rest import assets, edge_apps, labels, screens


class TestScreenOperations(unittest.TestCase):

    def setUp(self):
        """Set up test fixtures"""
        self.auth = Authentication(config=Config("https://api.example.com"), token="t")

    @patch("screenly_rest.core.get")
    def test_list_screens(self, mock_get):
        mock_get.return_value = [{"id": "screen-1", "name": "Test Screen"}]

        result = screens.list_screens(self.auth)

        mock_get.assert_called_once_with(self.auth, "v4/screens")
        self.assertEqual(result[0]["id"], "screen-1")

    @patch("screenly_rest.core.get")
    def test_get_screen(self, mock_get):
        mock_get.return_value = [{"id": "screen-uuid"}]

        screens.get_screen(self.auth, "screen-uuid")

        mock_get.assert_called_once_with(self.auth, "v4/screens?id=eq.screen-uuid")


class TestAssetOperations(unittest.TestCase):
    """Test asset and asset group operations"""

    def setUp(self):
        """Set up test fixtures"""
        self.auth = Authentication(config=Config("https://api.example.com"), token="t")

    @patch("screenly_rest.core.get")
    def test_list_assets_excludes_edge_app_files(self, mock_get):
        mock_get.return_value = []

        assets.list_assets(self.auth)

        mock_get.assert_called_once_with(self.auth, "v4/assets?type=neq.edge-app-file")

    @patch("screenly_rest.core.get")
    def test_get_asset(self, mock_get):
        assets.get_asset(self.auth, "asset-uuid")

        mock_get.assert_called_once_with(self.auth, "v4/assets?id=eq.asset-uuid")

    @patch("screenly_rest.core.post")
    def test_create_asset(self, mock_post):
        """Test creating an asset from a URL"""
        mock_post.return_value = {"id": "new-asset-id", "title": "New Asset"}

        result = assets.create_asset(self.auth, "New Asset", "https://example.com")

        mock_post.assert_called_once_with(
            self.auth,
            "v4/assets",
            {"title": "New Asset", "source_url": "https://example.com"},
        )
        self.assertEqual(result["id"], "new-asset-id")

    @patch("screenly_rest.core.patch")
    def test_update_asset_parses_headers(self, mock_patch):
        """Test that headers are sent as a JSON object"""
        assets.update_asset(
            self.auth,
            "asset-uuid",
            title="Updated Title",
            headers='{"X-Token": "abc"}',
        )

        mock_patch.assert_called_once_with(
            self.auth,
            "v4/assets?id=eq.asset-uuid",
            {"title": "Updated Title", "headers": {"X-Token": "abc"}},
        )

    @patch("screenly_rest.core.patch")
    def test_update_asset_invalid_headers(self, mock_patch):
        with self.assertRaises(ValidationError):
            assets.update_asset(self.auth, "asset-uuid", headers="{not json")

        mock_patch.assert_not_called()

    @patch("screenly_rest.core.patch")
    def test_update_asset_no_fields(self, mock_patch):
        """Test that an update without fields never reaches the API"""
        with self.assertRaises(NoFieldsToUpdateError) as ctx:
            assets.update_asset(self.auth, "asset-uuid")

        self.assertIn("No fields to update", str(ctx.exception))
        mock_patch.assert_not_called()

    @patch("screenly_rest.core.delete")
    def test_delete_asset(self, mock_delete):
        result = assets.delete_asset(self.auth, "asset-uuid")

        mock_delete.assert_called_once_with(self.auth, "v4/assets?id=eq.asset-uuid")
        self.assertEqual(result, {"status": "deleted", "id": "asset-uuid"})

    @patch("screenly_rest.core.post")
    def test_create_asset_group(self, mock_post):
        assets.create_asset_group(self.auth, "New Group")

        mock_post.assert_called_once_with(
            self.auth, "v4/asset-groups", {"title": "New Group"}
        )

    @patch("screenly_rest.core.patch")
    def test_update_asset_group(self, mock_patch):
        assets.update_asset_group(self.auth, "group-1", "Renamed")

        mock_patch.assert_called_once_with(
            self.auth, "v4/asset-groups?id=eq.group-1", {"title": "Renamed"}
        )

    @patch("screenly_rest.core.delete")
    def test_delete_asset_group(self, mock_delete):
        result = assets.delete_asset_group(self.auth, "group-1")

        mock_delete.assert_called_once_with(self.auth, "v4/asset-groups?id=eq.group-1")
        self.assertEqual(result["status"], "deleted")


class TestLabelOperations(unittest.TestCase):
    """Test label operations and label links"""

    def setUp(self):
        """Set up test fixtures"""
        self.auth = Authentication(config=Config("https://api.example.com"), token="t")

    @patch("screenly_rest.core.post")
    def test_create_label(self, mock_post):
        mock_post.return_value = {"id": "label-1", "name": "Lobby"}

        result = labels.create_label(self.auth, "Lobby")

        mock_post.assert_called_once_with(self.auth, "v4/labels", {"name": "Lobby"})
        self.assertEqual(result["id"], "label-1")

    @patch("screenly_rest.core.patch")
    def test_update_label(self, mock_patch):
        labels.update_label(self.auth, "label-1", "Hall")

        mock_patch.assert_called_once_with(
            self.auth, "v4/labels?id=eq.label-1", {"name": "Hall"}
        )

    @patch("screenly_rest.core.post")
    def test_link_screen(self, mock_post):
        labels.link_screen(self.auth, "label-1", "screen-1")

        mock_post.assert_called_once_with(
            self.auth,
            "v4/labels/screens",
            {"label_id": "label-1", "screen_id": "screen-1"},
        )

    @patch("screenly_rest.core.delete")
    def test_unlink_screen(self, mock_delete):
        result = labels.unlink_screen(self.auth, "label-1", "screen-1")

        mock_delete.assert_called_once_with(
            self.auth, "v4/labels/screens?label_id=eq.label-1&screen_id=eq.screen-1"
        )
        self.assertEqual(
            result,
            {"status": "unlinked", "label_id": "label-1", "screen_id": "screen-1"},
        )

    @patch("screenly_rest.core.post")
    def test_link_playlist(self, mock_post):
        labels.link_playlist(self.auth, "label-1", "playlist-1")

        mock_post.assert_called_once_with(
            self.auth,
            "v4/labels/playlists",
            {"label_id": "label-1", "playlist_id": "playlist-1"},
        )

    @patch("screenly_rest.core.delete")
    def test_unlink_playlist(self, mock_delete):
        result = labels.unlink_playlist(self.auth, "label-1", "playlist-1")

        mock_delete.assert_called_once_with(
            self.auth,
            "v4/labels/playlists?label_id=eq.label-1&playlist_id=eq.playlist-1",
        )
        self.assertEqual(result["playlist_id"], "playlist-1")


@pytest.mark.parametrize(
    "operation,args,expected_endpoint",
    [
        (screens.list_screens, (), "v4/screens"),
        (assets.list_asset_groups, (), "v4/asset-groups"),
        (labels.list_labels, (), "v4/labels"),
        (edge_apps.list_edge_apps, (), "v4/edge-apps?select=id,name&deleted=eq.false"),
        (
            edge_apps.list_edge_app_settings,
            ("app-1",),
            "v4.1/edge-apps/settings?app_id=eq.app-1"
            "&select=name,type,default_value,optional,title,help_text&order=name.asc",
        ),
        (
            edge_apps.list_edge_app_instances,
            ("app-1",),
            "v4.1/edge-apps/installations?select=id,name&app_id=eq.app-1",
        ),
    ],
)
def test_list_endpoints(operation, args, expected_endpoint):
    """Test the endpoint each listing reads from"""
    auth = Authentication(token="t")

    with patch("screenly_rest.core.get", return_value=[]) as mock_get:
        assert operation(auth, *args) == []
        mock_get.assert_called_once_with(auth, expected_endpoint)


@pytest.mark.parametrize(
    "operation,uuid,expected_endpoint",
    [
        (assets.delete_asset, "a1", "v4/assets?id=eq.a1"),
        (assets.delete_asset_group, "g1", "v4/asset-groups?id=eq.g1"),
        (labels.delete_label, "l1", "v4/labels?id=eq.l1"),
    ],
)
def test_delete_endpoints(operation, uuid, expected_endpoint):
    auth = Authentication(token="t")

    with patch("screenly_rest.core.delete") as mock_delete:
        result = operation(auth, uuid)

    mock_delete.assert_called_once_with(auth, expected_endpoint)
    assert result == {"status": "deleted", "id": uuid}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
