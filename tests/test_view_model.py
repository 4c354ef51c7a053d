"""Behavior tests for ``MenuViewModel`` selection, filter, and sort state."""

from __future__ import annotations

import unittest

from molemenu.model import build_items
from molemenu.view_model import MenuViewModel


def _model(labels: list[str], **kwargs) -> MenuViewModel:
    sizes = kwargs.pop("sizes", None)
    recency = kwargs.pop("recency", None)
    return MenuViewModel.from_items(build_items(labels, recency=recency, sizes=sizes), **kwargs)


class SelectionTests(unittest.TestCase):
    def test_toggle_twice_restores_previous_selection(self) -> None:
        model = _model(["a", "b", "c"], preselected=[1])
        before = list(model.selected)
        model.toggle_selection(2)
        model.toggle_selection(2)
        self.assertEqual(model.selected, before)

    def test_preselected_indices_seed_selection(self) -> None:
        model = _model(["a", "b", "c"], preselected=[0, 2])
        self.assertEqual(model.selected_indices(), [0, 2])
        self.assertEqual(model.selected_count, 2)

    def test_select_all_and_none_only_touch_visible_rows(self) -> None:
        model = _model(["apple", "banana", "cherry"], preselected=[2])
        model.begin_filter_edit()
        for ch in "an":
            model.append_filter_char(ch)
        model.apply_filter()
        self.assertEqual(model.view_indices, [1])

        model.select_all_visible()
        self.assertEqual(model.selected_indices(), [1, 2])
        model.deselect_all_visible()
        self.assertEqual(model.selected_indices(), [2])

    def test_toggle_cursor_selection_uses_original_index(self) -> None:
        model = _model(["b", "a", "c"], sort_key="name")
        self.assertEqual(model.view_indices, [1, 0, 2])
        model.move_cursor(1)
        self.assertTrue(model.toggle_cursor_selection())
        self.assertEqual(model.selected_indices(), [0])


class FilterTests(unittest.TestCase):
    def test_filter_then_clear_restores_order_and_keeps_hidden_selections(self) -> None:
        model = _model(["Alpha", "beta", "Gamma", "delta"], sort_key="name")
        original_view = list(model.view_indices)
        model.toggle_selection(2)

        model.begin_filter_edit()
        for ch in "'b":
            model.append_filter_char(ch)
        model.apply_filter()
        self.assertEqual(model.view_indices, [1])
        model.toggle_cursor_selection()

        model.begin_filter_edit()
        model.apply_filter()

        self.assertEqual(model.view_indices, original_view)
        self.assertEqual(model.selected_indices(), [1, 2])

    def test_editing_with_empty_query_shows_nothing(self) -> None:
        model = _model(["a", "b"])
        model.begin_filter_edit()
        self.assertTrue(model.filter_editing)
        self.assertEqual(model.view_indices, [])
        self.assertIsNone(model.cursor_index())

    def test_live_query_filters_while_typing(self) -> None:
        model = _model(["Safari", "Slack", "Xcode"])
        model.begin_filter_edit()
        model.append_filter_char("s")
        self.assertEqual(model.view_indices, [0, 1])
        model.append_filter_char("l")
        self.assertEqual(model.view_indices, [1])
        model.backspace_filter()
        self.assertEqual(model.filter_query, "s")
        self.assertEqual(model.view_indices, [0, 1])

    def test_leading_space_is_suppressed(self) -> None:
        model = _model(["a b"])
        model.begin_filter_edit()
        self.assertFalse(model.append_filter_char(" "))
        model.append_filter_char("a")
        model.append_filter_char(" ")
        self.assertEqual(model.filter_query, "a ")

    def test_query_edits_are_ignored_outside_editing(self) -> None:
        model = _model(["a"])
        self.assertFalse(model.append_filter_char("x"))
        self.assertFalse(model.backspace_filter())
        self.assertEqual(model.filter_query, "")

    def test_apply_filter_reports_searching_during_rebuild(self) -> None:
        model = _model(["one", "two"])
        model.begin_filter_edit()
        model.append_filter_char("o")
        seen: list[tuple[bool, bool, str]] = []
        model.apply_filter(on_searching=lambda: seen.append((model.searching, model.filter_editing, model.applied_query)))

        self.assertEqual(seen, [(True, False, "o")])
        self.assertFalse(model.searching)
        self.assertEqual(model.view_indices, [0, 1])

    def test_cancel_filter_edit_clears_applied_query(self) -> None:
        model = _model(["one", "two", "three"])
        model.begin_filter_edit()
        model.append_filter_char("w")
        model.apply_filter()
        self.assertEqual(model.view_indices, [1])

        model.begin_filter_edit()
        model.append_filter_char("t")
        model.cancel_filter_edit()

        self.assertFalse(model.filter_editing)
        self.assertEqual(model.applied_query, "")
        self.assertEqual(model.view_indices, [0, 1, 2])


class SortAndViewportTests(unittest.TestCase):
    def test_size_sort_then_reverse_is_exact_reverse(self) -> None:
        model = _model(["a", "b", "c", "d"], sizes=[5, 5, 1, 9], sort_key="size")
        ascending = list(model.view_indices)
        model.toggle_reverse()
        self.assertEqual(model.view_indices, list(reversed(ascending)))

    def test_cycle_sort_rebuilds_view(self) -> None:
        model = _model(["b", "a"], recency=[1, 2])
        self.assertEqual(model.view_indices, [0, 1])
        model.cycle_sort()
        self.assertEqual(model.sort_key, "name")
        self.assertEqual(model.view_indices, [1, 0])
        model.cycle_sort()
        self.assertEqual(model.sort_key, "size")
        model.cycle_sort()
        self.assertEqual(model.sort_key, "date")

    def test_rebuild_clamps_cursor_into_shorter_view(self) -> None:
        model = _model([f"item {i}" for i in range(30)], page_size=10)
        for _ in range(25):
            model.move_cursor(1)
        self.assertEqual((model.top_index, model.cursor_pos), (16, 9))

        model.begin_filter_edit()
        model.append_filter_char("2")
        model.apply_filter()

        self.assertEqual(model.top_index, 0)
        self.assertLess(model.cursor_pos, min(model.page_size, model.visible_total))

    def test_page_indices_follow_top_index(self) -> None:
        model = _model([str(i) for i in range(6)], page_size=4)
        for _ in range(5):
            model.move_cursor(1)
        self.assertEqual(model.page_indices(), [2, 3, 4, 5])
        self.assertEqual(model.cursor_index(), 5)


if __name__ == "__main__":
    unittest.main()
