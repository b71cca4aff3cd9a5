"""
Derived read-only views of the repository.

These are the text equivalents of the guide's status panel and the
remote repository page. Nothing here mutates the store.
"""

from dataclasses import dataclass, field
from datetime import datetime

from gitguide.lib.timefmt import format_time_ago
from gitguide.store import RepositoryStore


@dataclass
class StatusSummary:
    """Compact repository status, one line when rendered."""
    cloned: bool
    branch: str = ""
    label: str = ""
    staged: int = 0
    modified: int = 0
    untracked: int = 0
    unpushed: int = 0
    commits: int = 0

    def render(self) -> str:
        if not self.cloned:
            return "Not a git repository (run git clone to start)"
        parts = [f"[{self.branch}] {self.label}"]
        for count, name in (
            (self.staged, "staged"),
            (self.modified, "modified"),
            (self.untracked, "untracked"),
            (self.unpushed, "unpushed"),
        ):
            if count:
                parts.append(f"{count} {name}")
        parts.append(f"{self.commits} commit{'s' if self.commits != 1 else ''}")
        return " | ".join(parts)


def status_summary(store: RepositoryStore) -> StatusSummary:
    """Summarize the store. Unpushed commits take precedence over file state in the label."""
    if not store.is_cloned:
        return StatusSummary(cloned=False)

    summary = StatusSummary(
        cloned=True,
        branch=store.current_branch,
        staged=len(store.staged_files),
        modified=len(store.modified_files),
        untracked=len(store.untracked_files),
        unpushed=len(store.unpushed_commits),
        commits=len(store.commits),
    )

    if summary.unpushed:
        summary.label = f"{summary.unpushed} to push"
    elif summary.staged:
        summary.label = "Ready to commit"
    elif summary.modified or summary.untracked:
        summary.label = "Changes detected"
    else:
        summary.label = "Clean"
    return summary


@dataclass
class RemoteFile:
    name: str
    message: str
    when: str


@dataclass
class RemoteView:
    """What the hosted repository page would show."""
    title: str
    head_hash: str | None = None
    head_message: str = ""
    files: list[RemoteFile] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.head_hash is None


def remote_view(store: RepositoryStore, now: datetime | None = None) -> RemoteView:
    """Build the remote page from pushed commits only.

    Each file is listed once, with the newest pushed commit that touched it.
    """
    repo = store.repo
    view = RemoteView(title=f"{repo.owner} / {repo.name}")
    pushed = store.pushed_commits
    if not pushed:
        return view

    view.head_hash = pushed[-1].hash
    view.head_message = pushed[-1].message

    seen: dict[str, RemoteFile] = {}
    for commit in pushed:
        for filename in commit.files:
            seen[filename] = RemoteFile(
                name=filename,
                message=commit.message,
                when=format_time_ago(commit.timestamp, now),
            )
    view.files = list(seen.values())
    return view
