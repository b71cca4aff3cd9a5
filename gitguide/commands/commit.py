"""
git commit - Record the staged files as a new commit.
"""

from gitguide.context import CommandContext
from gitguide.store import FileStatus


def parse_message(args: list[str]) -> str | None:
    """Return the value following -m, or None if -m is missing or last."""
    if "-m" not in args:
        return None
    index = args.index("-m")
    if index == len(args) - 1:
        return None
    return args[index + 1]


def cmd_commit(args: list[str], ctx: CommandContext) -> int:
    if not ctx.require_clone():
        return 1

    store = ctx.store
    out = ctx.out

    message = parse_message(args)
    if message is None:
        out.error("error: switch `m' requires a value")
        out.output('usage: git commit -m "message"')
        return 2

    if not message.strip():
        out.error("Aborting commit due to empty commit message.")
        return 1

    staged = store.staged_files
    if not staged:
        out.error('nothing to commit (use "git add" to stage files)')
        return 1

    commit = store.append_commit(message, staged)
    for filename in staged:
        store.update_file_status(filename, FileStatus.COMMITTED)

    out.output(f"[{store.current_branch} {commit.hash}] {message}")
    out.output(f" {len(staged)} file(s) changed")
    out.success("Commit created successfully.")
    return 0
