"""
Data models for the simulated repository.

Serialization uses the camelCase keys of the persisted snapshot layout so
blobs written by earlier versions of the guide load unchanged.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from gitguide.lib.constants import MAIN_BRANCH


class FileStatus(Enum):
    """Working tree status of a single file.

    Values match the state names in store.fsm.
    """
    UNTRACKED = "untracked"
    MODIFIED = "modified"
    STAGED = "staged"
    COMMITTED = "committed"


class PullRequestStatus(Enum):
    """Pull request lifecycle. There is no closed state; PRs only merge."""
    OPEN = "open"
    MERGED = "merged"


@dataclass
class Repository:
    """Repository metadata. One per session."""
    name: str
    owner: str
    remote_url: str
    current_branch: str = MAIN_BRANCH
    is_cloned: bool = False

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "owner": self.owner,
            "isCloned": self.is_cloned,
            "currentBranch": self.current_branch,
            "remoteUrl": self.remote_url,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Repository":
        return cls(
            name=data["name"],
            owner=data["owner"],
            remote_url=data["remoteUrl"],
            current_branch=data.get("currentBranch", MAIN_BRANCH),
            is_cloned=bool(data.get("isCloned", False)),
        )


@dataclass
class Commit:
    """A recorded commit. Only names of files are captured, never content."""
    hash: str
    message: str
    timestamp: str  # ISO 8601
    files: list[str] = field(default_factory=list)
    branch: str = MAIN_BRANCH  # Branch checked out at commit time

    def to_dict(self) -> dict:
        return {
            "hash": self.hash,
            "message": self.message,
            "timestamp": self.timestamp,
            "files": list(self.files),
            "branch": self.branch,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Commit":
        return cls(
            hash=data["hash"],
            message=data["message"],
            timestamp=data["timestamp"],
            files=list(data.get("files", [])),
            branch=data.get("branch", MAIN_BRANCH),
        )


@dataclass
class PullRequest:
    id: int
    title: str
    source_branch: str
    target_branch: str
    created_at: str
    description: str = ""
    status: PullRequestStatus = PullRequestStatus.OPEN
    merged_at: Optional[str] = None
    commits: list[str] = field(default_factory=list)  # Commit hashes

    @property
    def is_open(self) -> bool:
        return self.status == PullRequestStatus.OPEN

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "sourceBranch": self.source_branch,
            "targetBranch": self.target_branch,
            "status": self.status.value,
            "createdAt": self.created_at,
            "mergedAt": self.merged_at,
            "commits": list(self.commits),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PullRequest":
        return cls(
            id=int(data["id"]),
            title=data["title"],
            description=data.get("description", ""),
            source_branch=data["sourceBranch"],
            target_branch=data.get("targetBranch", MAIN_BRANCH),
            status=PullRequestStatus(data.get("status", "open")),
            created_at=data["createdAt"],
            merged_at=data.get("mergedAt"),
            commits=list(data.get("commits", [])),
        )


@dataclass
class Snapshot:
    """The whole store as one serializable value."""
    repo: Repository
    files: dict[str, FileStatus] = field(default_factory=dict)
    commits: list[Commit] = field(default_factory=list)
    pushed_commit_count: int = 0
    branches: list[str] = field(default_factory=lambda: [MAIN_BRANCH])
    pull_requests: list[PullRequest] = field(default_factory=list)

    @classmethod
    def initial(cls, name: str, owner: str, remote_url: str) -> "Snapshot":
        """Fresh, uncloned state."""
        return cls(repo=Repository(name=name, owner=owner, remote_url=remote_url))

    def to_dict(self) -> dict:
        return {
            "repo": self.repo.to_dict(),
            "files": {name: {"status": status.value} for name, status in self.files.items()},
            "commits": [c.to_dict() for c in self.commits],
            "pushedCommitCount": self.pushed_commit_count,
            "branches": list(self.branches),
            "pullRequests": [pr.to_dict() for pr in self.pull_requests],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Snapshot":
        """Build a snapshot from its persisted form.

        Older blobs may lack `branches` or `pullRequests`; both default.
        Duplicate branch names collapse to their first occurrence.
        """
        branches = list(dict.fromkeys(data.get("branches") or [MAIN_BRANCH]))
        if MAIN_BRANCH not in branches:
            branches.insert(0, MAIN_BRANCH)
        return cls(
            repo=Repository.from_dict(data["repo"]),
            files={
                name: FileStatus(entry["status"])
                for name, entry in data.get("files", {}).items()
            },
            commits=[Commit.from_dict(c) for c in data.get("commits", [])],
            pushed_commit_count=int(data.get("pushedCommitCount", 0)),
            branches=branches,
            pull_requests=[PullRequest.from_dict(p) for p in data.get("pullRequests") or []],
        )
