"""Parsing of ``git status --porcelain=v1 -z`` output.

Each entry is ``XY PATH`` terminated by NUL, where ``X`` is the index
status and ``Y`` the working tree status. Renames and copies are followed
by a second NUL-terminated field holding the original path.
"""

from typing import Final

from git_quick_add.repository._models import ChangeRecord, DiffDelta, StatusFlag

_INDEX_CODES: Final = {
    "A": StatusFlag.INDEX_NEW,
    "M": StatusFlag.INDEX_MODIFIED,
    "D": StatusFlag.INDEX_DELETED,
    "R": StatusFlag.INDEX_RENAMED,
    "C": StatusFlag.INDEX_NEW,
    "T": StatusFlag.INDEX_TYPECHANGE,
}

_WORKTREE_CODES: Final = {
    "A": StatusFlag.WT_NEW,
    "M": StatusFlag.WT_MODIFIED,
    "D": StatusFlag.WT_DELETED,
    "R": StatusFlag.WT_RENAMED,
    "T": StatusFlag.WT_TYPECHANGE,
}

_UNMERGED_CODES: Final = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})

_UNTRACKED: Final = "??"
_IGNORED: Final = "!!"


def parse_status_entry(
    code: str, path: str, orig_path: str | None = None
) -> ChangeRecord:
    """Convert one porcelain entry into a change record.

    Args:
        code: The two-character ``XY`` status code.
        path: Repository-relative path of the entry.
        orig_path: Original path for renames and copies.

    Returns:
        The change record for the entry.

    Raises:
        ValueError: If the status code is not recognized.
    """
    if len(code) != 2:  # noqa: PLR2004
        msg = f"Invalid status code: {code!r}"
        raise ValueError(msg)

    if code == _UNTRACKED:
        return ChangeRecord(
            flags=StatusFlag.WT_NEW,
            index_to_workdir=DiffDelta(old_path=None, new_path=path),
        )
    if code == _IGNORED:
        return ChangeRecord(flags=StatusFlag.IGNORED)
    if code in _UNMERGED_CODES:
        return ChangeRecord(
            flags=StatusFlag.CONFLICTED,
            index_to_workdir=DiffDelta(old_path=path, new_path=path),
        )

    index_code, worktree_code = code
    if index_code not in _INDEX_CODES and index_code != " ":
        msg = f"Unknown index status {index_code!r} for {path}"
        raise ValueError(msg)
    if worktree_code not in _WORKTREE_CODES and worktree_code != " ":
        msg = f"Unknown worktree status {worktree_code!r} for {path}"
        raise ValueError(msg)

    flags = StatusFlag(0)
    head_to_index: DiffDelta | None = None
    index_to_workdir: DiffDelta | None = None

    renamed_in_index = index_code in "RC"

    if index_code in _INDEX_CODES:
        flags |= _INDEX_CODES[index_code]
        old_path = orig_path if renamed_in_index and orig_path else path
        head_to_index = DiffDelta(old_path=old_path, new_path=path)

    if worktree_code in _WORKTREE_CODES:
        flags |= _WORKTREE_CODES[worktree_code]
        # After an index rename the worktree side is relative to the new path
        old_path = path if renamed_in_index else orig_path or path
        index_to_workdir = DiffDelta(old_path=old_path, new_path=path)

    return ChangeRecord(
        flags=flags,
        head_to_index=head_to_index,
        index_to_workdir=index_to_workdir,
    )


def parse_porcelain_status(output: str) -> list[ChangeRecord]:
    """Parse NUL-separated porcelain v1 status output.

    Args:
        output: Raw output of ``git status --porcelain=v1 -z``.

    Returns:
        Change records in the order git reported them.

    Raises:
        ValueError: If the output is malformed.
    """
    fields = output.split("\0")
    records: list[ChangeRecord] = []

    i = 0
    while i < len(fields):
        entry = fields[i]
        i += 1
        if not entry:
            continue
        if len(entry) < 4 or entry[2] != " ":  # noqa: PLR2004
            msg = f"Malformed status entry: {entry!r}"
            raise ValueError(msg)

        code, path = entry[:2], entry[3:]
        orig_path: str | None = None
        if code[0] in "RC" or code[1] == "R":
            if i >= len(fields) or not fields[i]:
                msg = f"Missing original path for rename entry: {entry!r}"
                raise ValueError(msg)
            orig_path = fields[i]
            i += 1

        records.append(parse_status_entry(code, path, orig_path))

    return records
