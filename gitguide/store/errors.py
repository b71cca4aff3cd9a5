"""Exceptions raised by the repository store.

Handlers check preconditions before calling mutators, so these normally
indicate a programming error. The dispatcher still reports them as error
lines instead of letting them escape.
"""


class StoreError(Exception):
    """Base class for refused store operations."""


class InvalidTransition(StoreError):
    """Raised when a file or pull request status change is not allowed."""

    def __init__(self, subject: str, from_state: str, to_state: str):
        self.subject = subject
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(f"Invalid transition for {subject}: {from_state} -> {to_state}")


class UnknownFile(StoreError):
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"No such file: {filename}")


class UnknownBranch(StoreError):
    def __init__(self, branch: str):
        self.branch = branch
        super().__init__(f"No such branch: {branch}")


class BranchProtected(StoreError):
    """Raised when removing the main branch or the checked-out branch."""


class NothingToUndo(StoreError):
    """Raised by soft reset when there are no commits."""


class CommitProtected(StoreError):
    """Raised by soft reset when the newest commit has been pushed."""

    def __init__(self, commit_hash: str):
        self.commit_hash = commit_hash
        super().__init__(f"Commit {commit_hash} has already been pushed")


class CursorOutOfRange(StoreError):
    def __init__(self, count: int, total: int):
        super().__init__(f"Push cursor {count} outside 0..{total}")


class UnknownPullRequest(StoreError):
    def __init__(self, pr_id: int):
        self.pr_id = pr_id
        super().__init__(f"No such pull request: #{pr_id}")
