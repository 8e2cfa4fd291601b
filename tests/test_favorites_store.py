"""Tests for :mod:`iFavorites.domain.services.favorites_store`."""

from __future__ import annotations

import random

import pytest

from iFavorites.domain.models import AssetRef, FavoritesCollection
from iFavorites.domain.services import FavoritesStore
from iFavorites.errors import IndexOutOfRangeError, InvalidOperationError

A = AssetRef("Assets/A.prefab")
B = AssetRef("Assets/B.prefab")
C = AssetRef("Assets/C")
X = AssetRef("Assets/X.mat")


def _store_with(*refs: AssetRef) -> FavoritesStore:
    store = FavoritesStore()
    for ref in refs:
        store.add_to_current_page(ref)
    store.clear_dirty()
    return store


def _store_with_pages(count: int) -> FavoritesStore:
    store = FavoritesStore()
    for _ in range(count - 1):
        store.next_page()
    store.clear_dirty()
    return store


class TestAdd:
    def test_add_then_duplicate(self):
        store = FavoritesStore()

        assert store.add_to_current_page(X) is True
        assert store.current_page() == (X,)
        assert store.add_to_current_page(X) is False
        assert store.current_page() == (X,)

    def test_dirty_only_on_insertion(self):
        store = FavoritesStore()
        assert store.is_dirty() is False

        store.add_to_current_page(A)
        assert store.is_dirty() is True

        store.clear_dirty()
        store.add_to_current_page(A)
        assert store.is_dirty() is False

    def test_add_targets_current_page_only(self):
        store = FavoritesStore()
        store.add_to_current_page(A)
        store.next_page()
        assert store.add_to_current_page(A) is True
        assert store.current_page() == (A,)

    def test_equal_paths_are_duplicates(self):
        store = FavoritesStore()
        store.add_to_current_page(AssetRef("Assets/Scenes"))
        assert store.add_to_current_page(AssetRef("Assets\\Scenes\\")) is False

    def test_parent_segments_are_duplicates(self):
        store = FavoritesStore()
        assert store.add_to_current_page(AssetRef("Assets/X")) is True
        assert store.add_to_current_page(AssetRef("Assets/../Assets/X")) is False
        assert store.current_page() == (AssetRef("Assets/X"),)

    @pytest.mark.parametrize("raw", ["", ".", "./", "/", "../secret.txt"])
    def test_invalid_refs_are_refused(self, raw):
        store = FavoritesStore()

        assert store.add_to_current_page(AssetRef(raw)) is False

        assert store.current_page() == ()
        assert store.is_dirty() is False


class TestRemove:
    def test_remove_returns_item(self):
        store = _store_with(A, B, C)

        removed = store.remove_from_current_page(1)

        assert removed == B
        assert store.current_page() == (A, C)
        assert store.is_dirty() is True

    @pytest.mark.parametrize("index", [5, 3, -1])
    def test_out_of_range_leaves_state(self, index):
        store = _store_with(A, B, C)

        with pytest.raises(IndexOutOfRangeError):
            store.remove_from_current_page(index)

        assert store.current_page() == (A, B, C)
        assert store.is_dirty() is False

    def test_remove_from_empty_page(self):
        store = FavoritesStore()
        with pytest.raises(IndexOutOfRangeError):
            store.remove_from_current_page(0)


class TestMove:
    def test_move_first_to_last(self):
        store = _store_with(A, B, C)

        store.move_within_current_page(0, 2)

        assert store.current_page() == (B, C, A)
        assert store.is_dirty() is True

    def test_move_last_to_first(self):
        store = _store_with(A, B, C)
        store.move_within_current_page(2, 0)
        assert store.current_page() == (C, A, B)

    def test_move_to_same_position(self):
        store = _store_with(A, B, C)
        store.move_within_current_page(1, 1)
        assert store.current_page() == (A, B, C)

    @pytest.mark.parametrize("source,target", [(0, 3), (3, 0), (-1, 1), (1, -1)])
    def test_invalid_indices(self, source, target):
        store = _store_with(A, B, C)

        with pytest.raises(IndexOutOfRangeError):
            store.move_within_current_page(source, target)

        assert store.current_page() == (A, B, C)
        assert store.is_dirty() is False


class TestPages:
    def test_next_page_grows_at_last_page(self):
        store = _store_with(A)
        before = store.page_count()

        store.next_page()

        assert store.page_count() == before + 1
        assert store.cursor == before
        assert store.current_page() == ()
        assert store.is_dirty() is True

    def test_next_page_advances_without_growth(self):
        store = _store_with_pages(3)
        store.go_to_page(0)

        store.next_page()

        assert store.cursor == 1
        assert store.page_count() == 3
        assert store.is_dirty() is False

    def test_previous_page_stops_at_first(self):
        store = _store_with_pages(2)
        store.previous_page()
        assert store.cursor == 0
        store.previous_page()
        assert store.cursor == 0
        assert store.is_dirty() is False

    def test_go_to_page(self):
        store = _store_with_pages(3)
        store.go_to_page(1)
        assert store.cursor == 1
        assert store.is_dirty() is False

    @pytest.mark.parametrize("index", [3, -1, 10])
    def test_go_to_page_out_of_range(self, index):
        store = _store_with_pages(3)
        with pytest.raises(IndexOutOfRangeError):
            store.go_to_page(index)
        assert store.cursor == 2

    def test_delete_last_remaining_page(self):
        store = _store_with(A)

        with pytest.raises(InvalidOperationError):
            store.delete_current_page()

        assert store.page_count() == 1
        assert store.current_page() == (A,)
        assert store.is_dirty() is False

    def test_delete_reclamps_cursor(self):
        store = _store_with_pages(2)
        assert store.cursor == 1

        store.delete_current_page()

        assert store.page_count() == 1
        assert store.cursor == 0
        assert store.is_dirty() is True

    def test_delete_middle_page_keeps_cursor(self):
        store = FavoritesStore()
        store.add_to_current_page(A)
        store.next_page()
        store.add_to_current_page(B)
        store.next_page()
        store.add_to_current_page(C)
        store.go_to_page(1)

        store.delete_current_page()

        assert store.cursor == 1
        assert store.current_page() == (C,)
        store.go_to_page(0)
        assert store.current_page() == (A,)


class TestQueries:
    def test_current_page_is_a_snapshot(self):
        store = _store_with(A)
        view = store.current_page()
        store.add_to_current_page(B)
        assert view == (A,)
        assert isinstance(view, tuple)

    def test_item_at(self):
        store = _store_with(A, B)
        assert store.item_at(1) == B
        with pytest.raises(IndexOutOfRangeError):
            store.item_at(2)

    def test_snapshot_is_independent(self):
        store = _store_with(A)
        snapshot = store.snapshot()
        store.add_to_current_page(B)
        store.next_page()
        assert snapshot.to_entries() == [["Assets/A.prefab"]]

    def test_wraps_loaded_collection(self):
        collection = FavoritesCollection.from_entries([[A, B], [C]])
        store = FavoritesStore(collection)
        assert store.page_count() == 2
        assert store.cursor == 0
        assert store.current_page() == (A, B)

    def test_index_error_compatibility(self):
        store = FavoritesStore()
        with pytest.raises(IndexError):
            store.go_to_page(4)


# ---------------------------------------------------------------------------
# Invariants over operation sequences
# ---------------------------------------------------------------------------

POOL = [AssetRef(f"Assets/item_{i}.asset") for i in range(6)]


def test_add_reports_each_distinct_item_once():
    rng = random.Random(7)
    items = [POOL[i % 4] for i in range(16)]
    rng.shuffle(items)
    store = FavoritesStore()

    results = [store.add_to_current_page(item) for item in items]

    assert sum(results) == 4
    assert set(store.current_page()) == set(POOL[:4])
    assert len(store.current_page()) == 4


def test_repeated_page_deletion_never_empties():
    store = _store_with_pages(5)
    failures = 0

    for _ in range(10):
        try:
            store.delete_current_page()
        except InvalidOperationError:
            failures += 1
        assert store.page_count() >= 1

    assert store.page_count() == 1
    assert failures == 6


@pytest.mark.parametrize("seed", range(25))
def test_random_operations_keep_invariants(seed):
    rng = random.Random(seed)
    store = FavoritesStore()

    for _ in range(150):
        op = rng.choice(["add", "add", "remove", "move", "next", "prev", "goto", "delete"])
        before_page = store.current_page()
        before_cursor = store.cursor
        before_count = store.page_count()
        try:
            if op == "add":
                store.add_to_current_page(rng.choice(POOL))
            elif op == "remove":
                store.remove_from_current_page(rng.randrange(-1, len(before_page) + 2))
            elif op == "move":
                store.move_within_current_page(
                    rng.randrange(-1, len(before_page) + 1),
                    rng.randrange(-1, len(before_page) + 1),
                )
                assert sorted(store.current_page()) == sorted(before_page)
            elif op == "next":
                store.next_page()
            elif op == "prev":
                store.previous_page()
            elif op == "goto":
                store.go_to_page(rng.randrange(-1, before_count + 1))
            else:
                store.delete_current_page()
        except (IndexOutOfRangeError, InvalidOperationError):
            assert store.current_page() == before_page
            assert store.cursor == before_cursor
            assert store.page_count() == before_count

        assert 0 <= store.cursor < store.page_count()
        page = store.current_page()
        assert len(page) == len(set(page))
