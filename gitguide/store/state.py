"""Repository state store.

Owns the canonical model of the simulated repository. Every mutator
persists the full snapshot through the StatePort and then notifies
subscribers synchronously, once per call, before returning.

Usage:
    from gitguide.store import RepositoryStore, MemoryStatePort

    store = RepositoryStore(MemoryStatePort())
    store.subscribe(lambda snap: print(snap.repo.current_branch))
    store.set_cloned(True)
"""

import copy
import dataclasses
import logging
import secrets
from datetime import datetime
from typing import Callable

from gitguide.lib import validate
from gitguide.lib.config import GuideConfig
from gitguide.lib.constants import HASH_ALPHABET, HASH_LENGTH, MAIN_BRANCH
from gitguide.lib.timefmt import to_iso, utc_now
from gitguide.store.errors import (
    BranchProtected,
    CommitProtected,
    CursorOutOfRange,
    NothingToUndo,
    UnknownBranch,
    UnknownFile,
    UnknownPullRequest,
)
from gitguide.store.fsm import FileStatusFSM, PullRequestFSM
from gitguide.store.models import (
    Commit,
    FileStatus,
    PullRequest,
    PullRequestStatus,
    Repository,
    Snapshot,
)
from gitguide.store.persistence import StatePort

logger = logging.getLogger(__name__)

Subscriber = Callable[[Snapshot], None]


def generate_hash() -> str:
    """Random 7-char lowercase hex id. Not derived from content."""
    return "".join(secrets.choice(HASH_ALPHABET) for _ in range(HASH_LENGTH))


class RepositoryStore:
    """Single owner of the repository snapshot."""

    def __init__(
        self,
        port: StatePort,
        config: GuideConfig | None = None,
        hash_factory: Callable[[], str] | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """
        Args:
            port: Where snapshots are loaded from and saved to
            config: Repository identity used for the initial state
            hash_factory: Commit id generator (random by default)
            clock: Source of "now" for commit and PR timestamps
        """
        self.port = port
        self.config = config or GuideConfig()
        self._hash_factory = hash_factory or generate_hash
        self._clock = clock or utc_now
        self._subscribers: list[Subscriber] = []
        self._state = self._load()

    # ------------------------------------------------------------------
    # Loading and notification
    # ------------------------------------------------------------------

    def _initial(self) -> Snapshot:
        return Snapshot.initial(
            name=self.config.repo_name,
            owner=self.config.repo_owner,
            remote_url=self.config.remote_url,
        )

    def _load(self) -> Snapshot:
        data = self.port.load()
        if data is None:
            return self._initial()
        try:
            return self._adopt(data)
        except (validate.ValidationError, KeyError, ValueError) as e:
            logger.warning(f"[STORE] Stored state rejected, using initial state: {e}")
            return self._initial()

    def _adopt(self, data: dict) -> Snapshot:
        """Validate a serialized snapshot and repair cross-field invariants."""
        validate.validate(data, "state")
        snap = Snapshot.from_dict(data)

        total = len(snap.commits)
        if snap.pushed_commit_count > total:
            logger.warning(f"[STORE] Push cursor {snap.pushed_commit_count} > {total} commits, clamping")
            snap.pushed_commit_count = total

        if snap.repo.current_branch not in snap.branches:
            logger.warning(f"[STORE] Current branch '{snap.repo.current_branch}' unknown, switching to {MAIN_BRANCH}")
            snap.repo.current_branch = MAIN_BRANCH

        return snap

    def _commit_change(self, what: str) -> None:
        """Persist the full snapshot, then notify every subscriber."""
        logger.debug(f"[STORE] {what}")
        self.port.save(self._state.to_dict())
        for callback in list(self._subscribers):
            callback(self.snapshot())

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register an observer. Returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def snapshot(self) -> Snapshot:
        """Deep copy of the current state."""
        return copy.deepcopy(self._state)

    @property
    def repo(self) -> Repository:
        return dataclasses.replace(self._state.repo)

    @property
    def is_cloned(self) -> bool:
        return self._state.repo.is_cloned

    @property
    def current_branch(self) -> str:
        return self._state.repo.current_branch

    @property
    def files(self) -> dict[str, FileStatus]:
        return dict(self._state.files)

    def get_file(self, filename: str) -> FileStatus | None:
        return self._state.files.get(filename)

    @property
    def commits(self) -> list[Commit]:
        return copy.deepcopy(self._state.commits)

    @property
    def pushed_commit_count(self) -> int:
        return self._state.pushed_commit_count

    @property
    def branches(self) -> list[str]:
        return list(self._state.branches)

    @property
    def pull_requests(self) -> list[PullRequest]:
        return copy.deepcopy(self._state.pull_requests)

    def get_pull_request(self, pr_id: int) -> PullRequest | None:
        for pr in self._state.pull_requests:
            if pr.id == pr_id:
                return copy.deepcopy(pr)
        return None

    def files_with_status(self, status: FileStatus) -> list[str]:
        """Filenames in insertion order whose status matches."""
        return [name for name, s in self._state.files.items() if s == status]

    @property
    def staged_files(self) -> list[str]:
        return self.files_with_status(FileStatus.STAGED)

    @property
    def modified_files(self) -> list[str]:
        return self.files_with_status(FileStatus.MODIFIED)

    @property
    def untracked_files(self) -> list[str]:
        return self.files_with_status(FileStatus.UNTRACKED)

    @property
    def committed_files(self) -> list[str]:
        return self.files_with_status(FileStatus.COMMITTED)

    def has_changes(self) -> bool:
        """True if any file is not committed."""
        return any(s != FileStatus.COMMITTED for s in self._state.files.values())

    def has_staged_changes(self) -> bool:
        return bool(self.staged_files)

    @property
    def unpushed_commits(self) -> list[Commit]:
        return copy.deepcopy(self._state.commits[self._state.pushed_commit_count:])

    @property
    def pushed_commits(self) -> list[Commit]:
        return copy.deepcopy(self._state.commits[:self._state.pushed_commit_count])

    def has_unpushed_commits(self) -> bool:
        return self._state.pushed_commit_count < len(self._state.commits)

    @property
    def latest_commit(self) -> Commit | None:
        if not self._state.commits:
            return None
        return copy.deepcopy(self._state.commits[-1])

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def set_cloned(self, value: bool) -> None:
        self._state.repo.is_cloned = value
        self._commit_change(f"cloned={value}")

    def add_file(self, filename: str, status: FileStatus = FileStatus.UNTRACKED) -> None:
        """Create (or overwrite) a file entry with the given status."""
        self._state.files[filename] = status
        self._commit_change(f"add file {filename} ({status.value})")

    def update_file_status(self, filename: str, status: FileStatus) -> None:
        """Move a file to a new status through the file state machine.

        A same-status update is a no-op and does not notify.

        Raises:
            UnknownFile: if the file doesn't exist
            InvalidTransition: if the status change isn't allowed
        """
        current = self._state.files.get(filename)
        if current is None:
            raise UnknownFile(filename)
        if current == status:
            logger.debug(f"[STORE] {filename}: already {status.value}, no-op")
            return

        fsm = FileStatusFSM(filename, current.value)
        trigger = fsm.move_to(status.value)
        self._state.files[filename] = FileStatus(fsm.state)
        self._commit_change(f"{filename}: {current.value} -> {status.value} ({trigger})")

    def remove_file(self, filename: str) -> None:
        if filename not in self._state.files:
            raise UnknownFile(filename)
        del self._state.files[filename]
        self._commit_change(f"remove file {filename}")

    def append_commit(self, message: str, files: list[str]) -> Commit:
        """Record a commit on the current branch. Returns the created commit."""
        existing = {c.hash for c in self._state.commits}
        commit_hash = self._hash_factory()
        while commit_hash in existing:
            commit_hash = self._hash_factory()

        commit = Commit(
            hash=commit_hash,
            message=message,
            timestamp=to_iso(self._clock()),
            files=list(files),
            branch=self._state.repo.current_branch,
        )
        self._state.commits.append(commit)
        self._commit_change(f"commit {commit.hash} ({len(files)} file(s))")
        return copy.deepcopy(commit)

    def set_push_cursor(self, count: int) -> None:
        total = len(self._state.commits)
        if count < 0 or count > total:
            raise CursorOutOfRange(count, total)
        self._state.pushed_commit_count = count
        self._commit_change(f"push cursor -> {count}")

    def reset_to_initial(self) -> None:
        self._state = self._initial()
        self._commit_change("reset to initial state")

    def replace_snapshot(self, data: dict) -> None:
        """Replace the whole state with a serialized snapshot (scenario seeding).

        Raises:
            ValidationError: if the snapshot doesn't match the schema
        """
        self._state = self._adopt(data)
        self._commit_change("snapshot replaced")

    def add_branch(self, name: str) -> None:
        """Add a branch. Adding an existing branch is a no-op."""
        if name in self._state.branches:
            logger.debug(f"[STORE] branch {name} already exists, no-op")
            return
        self._state.branches.append(name)
        self._commit_change(f"add branch {name}")

    def remove_branch(self, name: str) -> None:
        """
        Raises:
            BranchProtected: for main or the checked-out branch
            UnknownBranch: if the branch doesn't exist
        """
        if name == MAIN_BRANCH:
            raise BranchProtected(f"Cannot remove {MAIN_BRANCH}")
        if name == self._state.repo.current_branch:
            raise BranchProtected(f"Cannot remove checked-out branch {name}")
        if name not in self._state.branches:
            raise UnknownBranch(name)
        self._state.branches.remove(name)
        self._commit_change(f"remove branch {name}")

    def set_current_branch(self, name: str) -> None:
        if name not in self._state.branches:
            raise UnknownBranch(name)
        self._state.repo.current_branch = name
        self._commit_change(f"checkout {name}")

    def remove_last_commit(self) -> Commit:
        """Drop the newest commit if it hasn't been pushed.

        Raises:
            NothingToUndo: if there are no commits
            CommitProtected: if the newest commit is already pushed
        """
        commits = self._state.commits
        if not commits:
            raise NothingToUndo("No commits to undo")
        if len(commits) - 1 < self._state.pushed_commit_count:
            raise CommitProtected(commits[-1].hash)
        commit = commits.pop()
        self._commit_change(f"removed commit {commit.hash}")
        return commit

    def soft_reset(self) -> Commit:
        """Undo the newest unpushed commit and stage its files again.

        Files that no longer exist are skipped. Returns the removed commit.
        """
        commit = self.remove_last_commit()
        for filename in commit.files:
            if filename in self._state.files:
                self.update_file_status(filename, FileStatus.STAGED)
        return commit

    def add_pull_request(
        self,
        title: str,
        source_branch: str,
        target_branch: str = MAIN_BRANCH,
        description: str = "",
        commits: list[str] | None = None,
    ) -> PullRequest:
        """Open a pull request with the next sequential id."""
        next_id = max((pr.id for pr in self._state.pull_requests), default=0) + 1
        pr = PullRequest(
            id=next_id,
            title=title,
            description=description,
            source_branch=source_branch,
            target_branch=target_branch,
            created_at=to_iso(self._clock()),
            commits=list(commits or []),
        )
        self._state.pull_requests.append(pr)
        self._commit_change(f"open PR #{pr.id} {source_branch} -> {target_branch}")
        return copy.deepcopy(pr)

    def set_pull_request_status(self, pr_id: int, status: PullRequestStatus) -> None:
        """Change a PR's status. Merging stamps mergedAt.

        Only open PRs change; anything else is a no-op that neither persists
        nor notifies.

        Raises:
            UnknownPullRequest: if no PR has that id
        """
        pr = next((p for p in self._state.pull_requests if p.id == pr_id), None)
        if pr is None:
            raise UnknownPullRequest(pr_id)
        if not pr.is_open or status == pr.status:
            logger.info(f"[STORE] PR #{pr_id} is {pr.status.value}, ignoring -> {status.value}")
            return

        fsm = PullRequestFSM(f"PR #{pr_id}", pr.status.value)
        fsm.move_to(status.value)
        pr.status = PullRequestStatus(fsm.state)
        if pr.status == PullRequestStatus.MERGED:
            pr.merged_at = to_iso(self._clock())
        self._commit_change(f"PR #{pr_id} -> {pr.status.value}")
