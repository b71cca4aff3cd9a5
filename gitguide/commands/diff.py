"""
git diff - Show a synthetic diff of working tree changes.

Contents are simulated, so the diff body is a template chosen by file
status: a new-file diff for untracked files, a changed-lines diff for
modified or staged files. Index ids are stable per filename.
"""

import hashlib

from gitguide.context import CommandContext
from gitguide.store import FileStatus

STAGED_FLAGS = ("--staged", "--cached")


def _short_id(*parts: str) -> str:
    return hashlib.sha1("\0".join(parts).encode()).hexdigest()[:7]


def new_file_diff(filename: str) -> list[str]:
    return [
        f"diff --git a/{filename} b/{filename}",
        "new file mode 100644",
        f"index 0000000..{_short_id(filename, 'new')}",
        "--- /dev/null",
        f"+++ b/{filename}",
        "@@ -0,0 +1,3 @@",
        f"+# {filename}",
        "+",
        "+New content",
    ]


def changed_file_diff(filename: str) -> list[str]:
    return [
        f"diff --git a/{filename} b/{filename}",
        f"index {_short_id(filename, 'old')}..{_short_id(filename, 'new')} 100644",
        f"--- a/{filename}",
        f"+++ b/{filename}",
        "@@ -1,3 +1,4 @@",
        f" # {filename}",
        "-Original content",
        "+Updated content",
        "+Added line",
    ]


def render_diff(filename: str, status: FileStatus) -> list[str]:
    if status == FileStatus.UNTRACKED:
        return new_file_diff(filename)
    return changed_file_diff(filename)


def cmd_diff(args: list[str], ctx: CommandContext) -> int:
    if not ctx.require_clone():
        return 1

    store = ctx.store
    out = ctx.out

    staged_only = any(a in STAGED_FLAGS for a in args)
    paths = [a for a in args if a not in STAGED_FLAGS]

    if paths:
        target = paths[0]
        status = store.get_file(target)
        if status is None:
            out.error(f"fatal: ambiguous argument '{target}': unknown revision or path not in the working tree.")
            return 1
        if status == FileStatus.COMMITTED or (staged_only and status != FileStatus.STAGED):
            out.output("No changes.")
            return 0
        targets = [target]
    elif staged_only:
        targets = store.staged_files
    else:
        targets = store.modified_files + store.untracked_files

    if not targets:
        out.output("No changes.")
        return 0

    for filename in targets:
        for line in render_diff(filename, store.get_file(filename)):
            out.output(line)
    return 0
