"""Scripted-key tests for the menu event loop."""

from __future__ import annotations

import unittest

from molemenu.controller import Cancelled, Confirmed, MenuCallbacks, run_menu
from molemenu.input import KeyEvent, char_event
from molemenu.model import build_items
from molemenu.view_model import MenuViewModel


def _keys(*names: str) -> list[KeyEvent]:
    return [KeyEvent(name) for name in names]


class ScriptedMenu:
    """Feeds a fixed key sequence to ``run_menu`` and records frames."""

    def __init__(self, keys: list[KeyEvent]) -> None:
        self.keys = list(keys)
        self.frames: list[dict[str, object]] = []
        self.editing_flags: list[bool] = []
        self.help_shown = 0
        self.drained = 0

    def render(self, model: MenuViewModel) -> None:
        self.frames.append(
            {
                "view": list(model.view_indices),
                "searching": model.searching,
                "editing": model.filter_editing,
                "query": model.active_query,
            }
        )

    def read_key(self, editing: bool) -> KeyEvent:
        self.editing_flags.append(editing)
        if not self.keys:
            raise AssertionError("key script exhausted")
        return self.keys.pop(0)

    def show_help(self) -> None:
        self.help_shown += 1

    def drain(self) -> None:
        self.drained += 1

    def callbacks(self) -> MenuCallbacks:
        return MenuCallbacks(render=self.render, read_key=self.read_key, show_help=self.show_help, drain_input=self.drain)


def _model(labels: list[str], **kwargs) -> MenuViewModel:
    return MenuViewModel.from_items(build_items(labels), **kwargs)


class RunMenuTests(unittest.TestCase):
    def test_quit_while_browsing_cancels(self) -> None:
        script = ScriptedMenu(_keys("QUIT"))
        result = run_menu(_model(["a"]), script.callbacks())
        self.assertIsInstance(result, Cancelled)
        self.assertFalse(result.confirmed)

    def test_space_down_space_enter_confirms_both_rows(self) -> None:
        script = ScriptedMenu(_keys("SPACE", "DOWN", "SPACE", "ENTER"))
        result = run_menu(_model(["a", "b", "c"]), script.callbacks())
        self.assertEqual(result, Confirmed((0, 1)))
        self.assertEqual(result.as_csv(), "0,1")

    def test_empty_confirm_returns_empty_selection_by_default(self) -> None:
        script = ScriptedMenu(_keys("DOWN", "ENTER"))
        result = run_menu(_model(["a", "b"]), script.callbacks())
        self.assertEqual(result, Confirmed(()))
        self.assertTrue(result.confirmed)
        self.assertEqual(result.as_csv(), "")

    def test_empty_confirm_can_select_cursor_row(self) -> None:
        script = ScriptedMenu(_keys("DOWN", "ENTER"))
        result = run_menu(_model(["a", "b"]), script.callbacks(), auto_select_cursor_on_empty_confirm=True)
        self.assertEqual(result, Confirmed((1,)))

    def test_auto_select_does_not_override_explicit_selection(self) -> None:
        script = ScriptedMenu(_keys("DOWN", "ENTER"))
        result = run_menu(
            _model(["a", "b", "c"], preselected=[2]),
            script.callbacks(),
            auto_select_cursor_on_empty_confirm=True,
        )
        self.assertEqual(result, Confirmed((2,)))

    def test_confirmed_indices_are_original_order_after_sorting(self) -> None:
        script = ScriptedMenu(_keys("SORT", "SPACE", "DOWN", "SPACE", "ENTER"))
        result = run_menu(_model(["zeta", "alpha", "mid"]), script.callbacks())
        self.assertEqual(result, Confirmed((1, 2)))

    def test_quit_while_editing_leaves_filter_mode_but_keeps_menu_open(self) -> None:
        script = ScriptedMenu([KeyEvent("FILTER"), char_event("b"), KeyEvent("QUIT"), KeyEvent("ENTER")])
        model = _model(["a", "b"], preselected=[0])
        result = run_menu(model, script.callbacks())

        self.assertEqual(result, Confirmed((0,)))
        self.assertEqual(script.editing_flags, [False, True, True, False])
        self.assertEqual(model.applied_query, "")
        self.assertEqual(model.view_indices, [0, 1])

    def test_shortcut_letters_extend_query_while_editing(self) -> None:
        script = ScriptedMenu(
            [KeyEvent("FILTER"), char_event("q"), char_event("a"), KeyEvent("DELETE"), KeyEvent("ENTER"), KeyEvent("QUIT")]
        )
        model = _model(["quick", "slow"])
        result = run_menu(model, script.callbacks())

        self.assertIsInstance(result, Cancelled)
        self.assertEqual(model.applied_query, "q")
        self.assertEqual(model.view_indices, [0])

    def test_applying_filter_paints_searching_frame_and_drains_input(self) -> None:
        script = ScriptedMenu([KeyEvent("FILTER"), char_event("s"), KeyEvent("ENTER"), KeyEvent("QUIT")])
        run_menu(_model(["Safari", "Xcode"]), script.callbacks())

        searching_frames = [frame for frame in script.frames if frame["searching"]]
        self.assertEqual(len(searching_frames), 1)
        self.assertEqual(searching_frames[0]["query"], "s")
        self.assertFalse(searching_frames[0]["editing"])
        self.assertEqual(script.drained, 1)
        self.assertEqual(script.frames[-1]["view"], [0])

    def test_select_all_respects_applied_filter(self) -> None:
        script = ScriptedMenu(
            [KeyEvent("FILTER"), char_event("'"), char_event("s"), KeyEvent("ENTER"), KeyEvent("ALL"), KeyEvent("ENTER")]
        )
        result = run_menu(_model(["Safari", "Slack", "Xcode", "Music"]), script.callbacks())
        self.assertEqual(result, Confirmed((0, 1)))

    def test_none_clears_visible_selection(self) -> None:
        script = ScriptedMenu(_keys("ALL", "NONE", "ENTER"))
        result = run_menu(_model(["a", "b"], preselected=[0]), script.callbacks())
        self.assertEqual(result, Confirmed(()))

    def test_help_and_unbound_keys_keep_state(self) -> None:
        script = ScriptedMenu(_keys("HELP", "OTHER", "LEFT", "RIGHT", "SPACE", "ENTER"))
        result = run_menu(_model(["a", "b"]), script.callbacks())
        self.assertEqual(script.help_shown, 1)
        self.assertEqual(result, Confirmed((0,)))

    def test_reverse_reorders_rows_under_cursor(self) -> None:
        script = ScriptedMenu(_keys("REVERSE", "SPACE", "ENTER"))
        result = run_menu(_model(["a", "b", "c"]), script.callbacks())
        self.assertEqual(result, Confirmed((2,)))

    def test_cursor_movement_does_not_wrap(self) -> None:
        script = ScriptedMenu(_keys("UP", "SPACE", "DOWN", "DOWN", "DOWN", "SPACE", "ENTER"))
        result = run_menu(_model(["a", "b"]), script.callbacks())
        self.assertEqual(result, Confirmed((0, 1)))


if __name__ == "__main__":
    unittest.main()
