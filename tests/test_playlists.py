"""
Unit tests for playlist operations

Tests playlist functionality including:
- Choosing positions for new playlist items
- Creating, updating and deleting playlist items
- Playlist CRUD
- Sharing playlists with teams
"""

import unittest
from unittest.mock import patch

import pytest

from screenly_rest.authentication import Authentication, Config
from screenly_rest.errors import (
    NoFieldsToUpdateError,
    ValidationError,
    WrongResponseStatusError,
)
from screenly_rest.playlists import (
    create_playlist,
    create_playlist_item,
    delete_playlist,
    delete_playlist_item,
    list_playlist_items,
    list_shared_playlists,
    next_item_position,
    share_playlist,
    unshare_playlist,
    update_playlist,
    update_playlist_item,
)

POSITION_QUERY = (
    "v4/playlist-items?select=position&playlist_id=eq.playlist-1"
    "&order=position.desc&limit=1"
)


class TestNextItemPosition(unittest.TestCase):
    """Test the position chosen for new playlist items"""

    def setUp(self):
        """Set up test fixtures"""
        self.auth = Authentication(config=Config("https://api.example.com"), token="t")

    @patch("screenly_rest.core.get")
    def test_empty_playlist_gets_base_position(self, mock_get):
        """Test that the first item lands at 100000"""
        mock_get.return_value = []

        position = next_item_position(self.auth, "playlist-1")

        mock_get.assert_called_once_with(self.auth, POSITION_QUERY)
        self.assertEqual(position, 100000)

    @patch("screenly_rest.core.get")
    def test_appends_after_highest_position(self, mock_get):
        """Test that the next item goes 100000 after the current maximum"""
        mock_get.return_value = [{"position": 250000}]

        self.assertEqual(next_item_position(self.auth, "playlist-1"), 350000)

    @patch("screenly_rest.core.get")
    def test_explicit_position_skips_lookup(self, mock_get):
        """Test that an explicit position is used verbatim"""
        self.assertEqual(next_item_position(self.auth, "playlist-1", 42), 42)
        self.assertEqual(next_item_position(self.auth, "playlist-1", 0), 0)

        mock_get.assert_not_called()

    @patch("screenly_rest.core.get")
    def test_unusable_position_falls_back_to_base(self, mock_get):
        """Test rows without a non-negative integer position"""
        for rows in (
            [{}],
            [{"position": None}],
            [{"position": "12"}],
            [{"position": -5}],
            {"position": 5},
        ):
            with self.subTest(rows=rows):
                mock_get.return_value = rows
                self.assertEqual(next_item_position(self.auth, "playlist-1"), 100000)

    @patch("screenly_rest.core.get")
    def test_lookup_failure_propagates(self, mock_get):
        mock_get.side_effect = WrongResponseStatusError(500)

        with self.assertRaises(WrongResponseStatusError):
            next_item_position(self.auth, "playlist-1")


class TestPlaylistItems(unittest.TestCase):
    """Test playlist item operations"""

    def setUp(self):
        """Set up test fixtures"""
        self.auth = Authentication(config=Config("https://api.example.com"), token="t")
        self.created_item = {
            "id": "item-1",
            "playlist_id": "playlist-1",
            "asset_id": "asset-1",
            "duration": 10,
            "position": 100000,
        }

    @patch("screenly_rest.core.post")
    @patch("screenly_rest.core.get")
    def test_create_item_in_empty_playlist(self, mock_get, mock_post):
        """Test one read then one write for a default-positioned item"""
        mock_get.return_value = []
        mock_post.return_value = self.created_item

        result = create_playlist_item(self.auth, "playlist-1", "asset-1", 10)

        mock_get.assert_called_once_with(self.auth, POSITION_QUERY)
        mock_post.assert_called_once_with(
            self.auth,
            "v4/playlist-items",
            [
                {
                    "playlist_id": "playlist-1",
                    "asset_id": "asset-1",
                    "duration": 10,
                    "position": 100000,
                }
            ],
        )
        self.assertEqual(result, self.created_item)

    @patch("screenly_rest.core.post")
    @patch("screenly_rest.core.get")
    def test_create_item_with_explicit_position(self, mock_get, mock_post):
        """Test that an explicit position is posted without a lookup"""
        mock_post.return_value = self.created_item

        create_playlist_item(self.auth, "playlist-1", "asset-1", 10, position=150000)

        mock_get.assert_not_called()
        payload = mock_post.call_args[0][2]
        self.assertEqual(payload[0]["position"], 150000)

    @patch("screenly_rest.core.post")
    @patch("screenly_rest.core.get")
    def test_consecutive_items_keep_gaps(self, mock_get, mock_post):
        """Test that successive appends stay POSITION_MULTIPLIER apart"""
        mock_get.side_effect = [[], [{"position": 100000}]]

        create_playlist_item(self.auth, "playlist-1", "asset-1", 10)
        create_playlist_item(self.auth, "playlist-1", "asset-2", 10)

        positions = [c[0][2][0]["position"] for c in mock_post.call_args_list]
        self.assertEqual(positions, [100000, 200000])

    @patch("screenly_rest.core.post")
    @patch("screenly_rest.core.get")
    def test_create_item_rejects_negative_values(self, mock_get, mock_post):
        """Test that negative positions and durations never reach the API"""
        with self.assertRaises(ValidationError):
            create_playlist_item(self.auth, "playlist-1", "asset-1", 10, position=-1)

        with self.assertRaises(ValidationError):
            create_playlist_item(self.auth, "playlist-1", "asset-1", -10)

        mock_get.assert_not_called()
        mock_post.assert_not_called()

    @patch("screenly_rest.core.patch")
    def test_update_item_rejects_negative_position(self, mock_patch):
        with self.assertRaises(ValidationError) as ctx:
            update_playlist_item(self.auth, "playlist-1", "item-1", position=-100)

        self.assertIn("position", str(ctx.exception))
        mock_patch.assert_not_called()

    @patch("screenly_rest.core.get")
    def test_list_items_in_order(self, mock_get):
        mock_get.return_value = []

        list_playlist_items(self.auth, "playlist-1")

        mock_get.assert_called_once_with(
            self.auth, "v4/playlist-items?playlist_id=eq.playlist-1&order=position.asc"
        )

    @patch("screenly_rest.core.patch")
    def test_update_item(self, mock_patch):
        """Test updating only the supplied fields"""
        mock_patch.return_value = [{"id": "item-1"}]

        update_playlist_item(self.auth, "playlist-1", "item-1", duration=20)

        mock_patch.assert_called_once_with(
            self.auth,
            "v4/playlist-items?playlist_id=eq.playlist-1&id=eq.item-1",
            {"duration": 20},
        )

    @patch("screenly_rest.core.patch")
    def test_update_item_without_fields(self, mock_patch):
        with self.assertRaises(NoFieldsToUpdateError):
            update_playlist_item(self.auth, "playlist-1", "item-1")

        mock_patch.assert_not_called()

    @patch("screenly_rest.core.delete")
    def test_delete_item(self, mock_delete):
        result = delete_playlist_item(self.auth, "playlist-1", "item-1")

        mock_delete.assert_called_once_with(
            self.auth, "v4/playlist-items?playlist_id=eq.playlist-1&id=eq.item-1"
        )
        self.assertEqual(
            result,
            {"status": "deleted", "playlist_id": "playlist-1", "item_id": "item-1"},
        )


class TestPlaylistOperations(unittest.TestCase):
    """Test playlist and shared playlist operations"""

    def setUp(self):
        """Set up test fixtures"""
        self.auth = Authentication(config=Config("https://api.example.com"), token="t")

    @patch("screenly_rest.core.post")
    def test_create_playlist_defaults(self, mock_post):
        """Test default predicate, priority, enabled and transitions"""
        create_playlist(self.auth, "Morning")

        mock_post.assert_called_once_with(
            self.auth,
            "v4/playlists",
            {
                "title": "Morning",
                "predicate": "TRUE",
                "priority": False,
                "is_enabled": True,
                "transitions": True,
            },
        )

    @patch("screenly_rest.core.post")
    def test_create_playlist_with_options(self, mock_post):
        create_playlist(
            self.auth,
            "Weekdays",
            predicate="$WEEKDAY IN {1, 2, 3, 4, 5}",
            priority=True,
            is_enabled=False,
        )

        payload = mock_post.call_args[0][2]
        self.assertEqual(payload["predicate"], "$WEEKDAY IN {1, 2, 3, 4, 5}")
        self.assertTrue(payload["priority"])
        self.assertFalse(payload["is_enabled"])

    @patch("screenly_rest.core.patch")
    def test_update_playlist_only_supplied_fields(self, mock_patch):
        update_playlist(self.auth, "playlist-1", title="Evening", is_enabled=False)

        mock_patch.assert_called_once_with(
            self.auth,
            "v4/playlists?id=eq.playlist-1",
            {"title": "Evening", "is_enabled": False},
        )

    def test_update_playlist_without_fields(self):
        with self.assertRaises(NoFieldsToUpdateError):
            update_playlist(self.auth, "playlist-1")

    @patch("screenly_rest.core.delete")
    def test_delete_playlist(self, mock_delete):
        result = delete_playlist(self.auth, "playlist-1")

        mock_delete.assert_called_once_with(self.auth, "v4/playlists?id=eq.playlist-1")
        self.assertEqual(result, {"status": "deleted", "id": "playlist-1"})

    @patch("screenly_rest.core.get")
    def test_list_shared_playlists(self, mock_get):
        mock_get.return_value = []

        self.assertEqual(list_shared_playlists(self.auth), [])
        mock_get.assert_called_once_with(self.auth, "v4/playlists/shared")

    @patch("screenly_rest.core.delete")
    @patch("screenly_rest.core.post")
    def test_share_and_unshare(self, mock_post, mock_delete):
        share_playlist(self.auth, "playlist-1", "team-1")
        result = unshare_playlist(self.auth, "playlist-1", "team-1")

        mock_post.assert_called_once_with(
            self.auth,
            "v4/playlists/shared",
            {"playlist_id": "playlist-1", "team_id": "team-1"},
        )
        mock_delete.assert_called_once_with(
            self.auth, "v4/playlists/shared?playlist_id=eq.playlist-1&team_id=eq.team-1"
        )
        self.assertEqual(result["status"], "unshared")


@pytest.mark.parametrize(
    "highest,expected",
    [
        (0, 100000),
        (100000, 200000),
        (150001, 250001),
        (9999999, 10099999),
    ],
)
def test_position_after_highest(highest, expected):
    """Test that the new position is always highest + 100000"""
    auth = Authentication(token="t")
    with patch("screenly_rest.core.get", return_value=[{"position": highest}]):
        assert next_item_position(auth, "playlist-1") == expected


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
