"""
Tests for the randomizing presenter.

Tests cover presented order assignment, track id generation,
and that repeated presentation re-randomizes.
"""

import random
from unittest.mock import Mock

from lofi_records.library.parser import group_keys
from lofi_records.models import Album, Track
from lofi_records.shuffle_algorithms.fisher_yates import FisherYatesShuffle
from lofi_records.shuffle_algorithms.presenter import present_albums


def _album(folder, count):
    return Album(
        folder=folder,
        album_name=folder,
        tracks=[
            Track(name=f"T{i}", url=f"u{i}", parsed_number=i + 1)
            for i in range(count)
        ],
    )


class TestPresentAlbums:
    """Tests for present_albums()."""

    def test_orders_form_a_permutation(self, seeded_rng):
        albums = [_album("A", 0), _album("B", 1), _album("C", 9)]

        result = present_albums(albums, rng=seeded_rng)

        for album in result:
            orders = [t.presented_order for t in album.tracks]
            assert sorted(orders) == list(range(album.track_count))

    def test_permutation_with_shared_numbers(self, seeded_rng):
        """Duplicate or default parsed numbers still get distinct slots."""
        album = Album(
            folder="A",
            album_name="A",
            tracks=[Track(name=f"T{i}", url="u", parsed_number=0) for i in range(5)],
        )

        present_albums([album], rng=seeded_rng)

        assert sorted(t.presented_order for t in album.tracks) == [0, 1, 2, 3, 4]

    def test_assigns_shuffler_positions_in_sequence(self):
        shuffler = Mock()
        shuffler.permutation.return_value = [2, 0, 1]
        album = _album("A", 3)

        present_albums([album], shuffler=shuffler)

        shuffler.permutation.assert_called_once_with(3)
        assert [t.presented_order for t in album.tracks] == [2, 0, 1]

    def test_keeps_canonical_track_sequence(self, seeded_rng):
        album = _album("A", 6)

        present_albums([album], rng=seeded_rng)

        assert [t.parsed_number for t in album.tracks] == [1, 2, 3, 4, 5, 6]

    def test_parsed_number_is_not_overwritten(self, seeded_rng):
        album = _album("A", 4)

        present_albums([album], rng=seeded_rng)

        assert [t.parsed_number for t in album.tracks] == [1, 2, 3, 4]

    def test_preserves_album_order(self, seeded_rng):
        albums = [_album("B", 1), _album("A", 1)]

        result = present_albums(albums, rng=seeded_rng)

        assert [a.folder for a in result] == ["B", "A"]

    def test_empty_input(self):
        assert present_albums([]) == []

    def test_assigns_track_ids(self):
        rng = random.Random(3)
        album = _album("Night Drive", 2)

        present_albums([album], rng=rng, clock=lambda: 1700000000000)

        for track in album.tracks:
            timestamp, rand, rest = track.track_id.split("-", 2)
            assert timestamp == "1700000000000"
            assert 0 <= int(rand) < 10000
            assert rest == f"Night-Drive-{track.parsed_number}"

    def test_presenting_twice_changes_result(self, prefix, resolve_url):
        """Parsing is stable; presentation is not."""
        keys = [f"{prefix}A/{i:02d} - Song {i}.mp3" for i in range(1, 21)]
        rng = random.Random(99)

        first = group_keys(prefix, keys, resolve_url)["A"]
        present_albums([first], rng=rng)
        first_orders = [t.presented_order for t in first.tracks]
        first_ids = [t.track_id for t in first.tracks]

        second = group_keys(prefix, keys, resolve_url)["A"]
        present_albums([second], rng=rng)
        second_orders = [t.presented_order for t in second.tracks]
        second_ids = [t.track_id for t in second.tracks]

        assert first_orders != second_orders
        assert first_ids != second_ids

    def test_uses_default_shuffler_with_rng(self):
        album = _album("A", 8)

        present_albums([album], rng=random.Random(5))
        first = [t.presented_order for t in album.tracks]
        present_albums([album], shuffler=FisherYatesShuffle(random.Random(5)))
        second = [t.presented_order for t in album.tracks]

        assert first == second
