import pytest

from git_quick_add.repository import StatusFlag
from git_quick_add.staging import (
    ChangeItem,
    apply_selection,
    build_prompt_rows,
    display_text,
    item_label,
)


def _items() -> list[ChangeItem]:
    return [
        ChangeItem("a.txt", is_staged=True, status=StatusFlag.INDEX_NEW),
        ChangeItem("b.txt", is_staged=False, status=StatusFlag.WT_NEW),
        ChangeItem(
            "new.txt",
            is_staged=True,
            status=StatusFlag.INDEX_RENAMED,
            original_path="old.txt",
        ),
    ]


class TestItemLabel:
    def test_prefixes_status_code(self) -> None:
        item = ChangeItem(
            "src/app.py", is_staged=True, status=StatusFlag.INDEX_MODIFIED
        )
        assert item_label(item) == "M  src/app.py"

    def test_shows_rename_source(self) -> None:
        assert item_label(_items()[2]) == "R  old.txt -> new.txt"

    def test_without_status(self) -> None:
        assert item_label(_items()[1], show_status=False) == "b.txt"

    def test_undecodable_bytes_are_escaped(self) -> None:
        item = ChangeItem(
            "new\udcff.txt",
            is_staged=True,
            status=StatusFlag.INDEX_RENAMED,
            original_path="old\udcfe.txt",
        )
        assert item_label(item) == "R  old\\xfe.txt -> new\\xff.txt"


class TestDisplayText:
    def test_escapes_surrogate_bytes(self) -> None:
        assert display_text("bad\udcff.txt") == "bad\\xff.txt"

    @pytest.mark.parametrize("text", ["plain.txt", "notes \u00fc.txt", ""])
    def test_valid_text_is_unchanged(self, text: str) -> None:
        assert display_text(text) == text

    def test_result_encodes_as_utf8(self) -> None:
        _ = display_text("a\udc80b\udcff").encode("utf-8")


class TestBuildPromptRows:
    def test_defaults_follow_staged_state(self) -> None:
        labels, defaults = build_prompt_rows(_items())

        assert labels == ["A  a.txt", "?? b.txt", "R  old.txt -> new.txt"]
        assert defaults == [True, False, True]

    def test_empty_items(self) -> None:
        assert build_prompt_rows([]) == ([], [])


class TestApplySelection:
    def test_marks_chosen_and_clears_others(self) -> None:
        items = _items()
        items[0].is_selected = True

        apply_selection(items, [1])

        assert [i.is_selected for i in items] == [False, True, False]

    def test_empty_selection_clears_all(self) -> None:
        items = _items()

        apply_selection(items, [])

        assert not any(i.is_selected for i in items)

    def test_rejects_out_of_range_index(self) -> None:
        items = _items()

        with pytest.raises(ValueError, match="out of range: 3"):
            apply_selection(items, [0, 3])

        assert not any(i.is_selected for i in items)

    def test_rejects_negative_index(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            apply_selection(_items(), [-1])
