"""Repository state store for gitguide.

Return type conventions:
- Accessors return copies; mutating them never changes the store.
- Mutators persist and notify before returning. Refused operations raise
  a StoreError subclass and leave the state untouched.
"""

from gitguide.store.errors import (
    StoreError,
    InvalidTransition,
    UnknownFile,
    UnknownBranch,
    UnknownPullRequest,
    BranchProtected,
    NothingToUndo,
    CommitProtected,
    CursorOutOfRange,
)
from gitguide.store.models import (
    FileStatus,
    PullRequestStatus,
    Repository,
    Commit,
    PullRequest,
    Snapshot,
)
from gitguide.store.persistence import (
    StatePort,
    MemoryStatePort,
    JsonFileStatePort,
)
from gitguide.store.state import RepositoryStore, generate_hash

__all__ = [
    # errors
    "StoreError",
    "InvalidTransition",
    "UnknownFile",
    "UnknownBranch",
    "UnknownPullRequest",
    "BranchProtected",
    "NothingToUndo",
    "CommitProtected",
    "CursorOutOfRange",
    # models
    "FileStatus",
    "PullRequestStatus",
    "Repository",
    "Commit",
    "PullRequest",
    "Snapshot",
    # persistence
    "StatePort",
    "MemoryStatePort",
    "JsonFileStatePort",
    # store
    "RepositoryStore",
    "generate_hash",
]
