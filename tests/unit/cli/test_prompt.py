from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from git_quick_add.cli import RichMultiSelect, SelectionPrompt, apply_selection_input
from git_quick_add.exceptions import SelectionAbortedError

if TYPE_CHECKING:
    from pytest_mock import MockerFixture

    from tests.conftest import CapturedConsole

# =============================================================================
# apply_selection_input Tests
# =============================================================================


class TestApplySelectionInput:
    def test_toggles_single_row(self) -> None:
        assert apply_selection_input("2", [False, False, True]) == [
            False,
            True,
            True,
        ]

    def test_toggles_checked_row_off(self) -> None:
        assert apply_selection_input("3", [False, False, True]) == [
            False,
            False,
            False,
        ]

    def test_accepts_spaces_and_commas(self) -> None:
        result = apply_selection_input("1, 3 4", [False] * 4)
        assert result == [True, False, True, True]

    def test_accepts_ranges(self) -> None:
        assert apply_selection_input("2-4", [False] * 5) == [
            False,
            True,
            True,
            True,
            False,
        ]

    def test_row_named_twice_toggles_once(self) -> None:
        assert apply_selection_input("1 1-2", [False, False]) == [True, True]

    @pytest.mark.parametrize("command", ["a", "all", " ALL "])
    def test_all_checks_every_row(self, command: str) -> None:
        assert apply_selection_input(command, [False, True]) == [True, True]

    @pytest.mark.parametrize("command", ["n", "none"])
    def test_none_clears_every_row(self, command: str) -> None:
        assert apply_selection_input(command, [True, True]) == [False, False]

    @pytest.mark.parametrize("command", ["0", "4", "2-9", "x", "3-1", "1-", ","])
    def test_rejects_invalid_commands(self, command: str) -> None:
        with pytest.raises(ValueError):
            _ = apply_selection_input(command, [False, False, False])

    def test_does_not_mutate_input(self) -> None:
        checked = [False, False]
        _ = apply_selection_input("1", checked)
        assert checked == [False, False]


# =============================================================================
# RichMultiSelect Tests
# =============================================================================


class TestRichMultiSelect:
    def test_satisfies_prompt_protocol(self) -> None:
        assert isinstance(RichMultiSelect(), SelectionPrompt)

    def test_enter_returns_defaults(
        self, out: CapturedConsole, mocker: MockerFixture
    ) -> None:
        _ = mocker.patch.object(out.console, "input", return_value="")
        prompt = RichMultiSelect(out.console)

        chosen = prompt.select("Pick", ["a.txt", "b.txt", "c.txt"], [True, False, True])

        assert chosen == [0, 2]

    def test_applies_commands_until_confirmed(
        self, out: CapturedConsole, mocker: MockerFixture
    ) -> None:
        _ = mocker.patch.object(out.console, "input", side_effect=["2", "1", ""])
        prompt = RichMultiSelect(out.console)

        chosen = prompt.select("Pick", ["a.txt", "b.txt"], [True, False])

        assert chosen == [1]

    def test_invalid_command_reprompts(
        self, out: CapturedConsole, mocker: MockerFixture
    ) -> None:
        reader = mocker.patch.object(out.console, "input", side_effect=["9", "a", ""])
        prompt = RichMultiSelect(out.console)

        chosen = prompt.select("Pick", ["a.txt", "b.txt"], [False, False])

        assert chosen == [0, 1]
        assert reader.call_count == 3
        assert "Row out of range" in out.text

    def test_renders_message_labels_and_boxes(
        self, out: CapturedConsole, mocker: MockerFixture
    ) -> None:
        _ = mocker.patch.object(out.console, "input", return_value="")
        prompt = RichMultiSelect(out.console)

        _ = prompt.select("Choose files", ["A  [draft].txt", "?? b.txt"], [True, False])

        assert "Choose files" in out.text
        assert "[x]" in out.text
        assert "[ ]" in out.text
        assert "A  [draft].txt" in out.text

    def test_end_of_input_aborts(
        self, out: CapturedConsole, mocker: MockerFixture
    ) -> None:
        _ = mocker.patch.object(out.console, "input", side_effect=EOFError)
        prompt = RichMultiSelect(out.console)

        with pytest.raises(SelectionAbortedError, match="Error selecting files"):
            _ = prompt.select("Pick", ["a.txt"], [False])
