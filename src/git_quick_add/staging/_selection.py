"""Bridge between resolved items and the multi-select prompt."""

from collections.abc import Iterable, Sequence

from git_quick_add.staging._models import ChangeItem
from git_quick_add.staging._resolver import status_code


def display_text(text: str) -> str:
    """Make text printable on a UTF-8 console.

    Paths that are not valid UTF-8 arrive with surrogate escapes; those
    bytes are shown as ``\\xNN`` escapes. Other text is returned unchanged.

    Example:
        >>> display_text("bad\\udcff.txt")
        'bad\\\\xff.txt'
    """
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")


def item_label(item: ChangeItem, *, show_status: bool = True) -> str:
    """Render the prompt label for one item.

    Args:
        item: The item to label.
        show_status: Prefix the label with the two-letter status code.

    Returns:
        Labels such as ``"M  src/app.py"`` or ``"R  old.txt -> new.txt"``.
    """
    path = display_text(item.path)
    if item.original_path is not None:
        path = f"{display_text(item.original_path)} -> {path}"
    if show_status:
        return f"{status_code(item.status)} {path}"
    return path


def build_prompt_rows(
    items: Sequence[ChangeItem], *, show_status: bool = True
) -> tuple[list[str], list[bool]]:
    """Build the parallel label and default-checked lists for the prompt.

    Rows are pre-checked when the item is already staged.

    Args:
        items: Resolved items, in record order.
        show_status: Prefix labels with status codes.

    Returns:
        Tuple of (labels, defaults), both aligned with items.
    """
    labels = [item_label(item, show_status=show_status) for item in items]
    defaults = [item.is_staged for item in items]
    return labels, defaults


def apply_selection(items: Sequence[ChangeItem], chosen: Iterable[int]) -> None:
    """Mark chosen items selected and every other item deselected.

    Args:
        items: Resolved items, mutated in place.
        chosen: Indices returned by the prompt.

    Raises:
        ValueError: If an index is outside the item list.
    """
    selected = set(chosen)
    invalid = sorted(i for i in selected if not 0 <= i < len(items))
    if invalid:
        msg = f"Selection index out of range: {invalid[0]}"
        raise ValueError(msg)

    for index, item in enumerate(items):
        item.is_selected = index in selected
