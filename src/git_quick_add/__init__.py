"""Interactive checkbox staging for Git working trees.

git-quick-add lists every changed path in the working tree, pre-checks the
ones already staged, and after the user confirms a selection stages and
unstages paths so that the index matches it.

Example:
    >>> from git_quick_add.repository import FakeRepository
    >>> from git_quick_add.staging import apply_selection, reconcile, resolve_changes
    >>> repo = FakeRepository()
    >>> repo.add_untracked("notes.txt")
    >>> snapshot = resolve_changes(repo)
    >>> apply_selection(snapshot.items, [0])
    >>> [str(entry.label) for entry in reconcile(repo, snapshot.items).entries]
    ['Staged']
"""

__version__ = "0.1.0"
