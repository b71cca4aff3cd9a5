"""
git log - Show commit history, newest first.
"""

from gitguide.context import CommandContext
from gitguide.lib.timefmt import format_log_date


def cmd_log(args: list[str], ctx: CommandContext) -> int:
    if not ctx.require_clone():
        return 1

    out = ctx.out
    commits = ctx.store.commits

    if not commits:
        out.output("No commits yet.")
        return 0

    for commit in reversed(commits):
        out.output(f"commit {commit.hash}")
        out.output(f"Date:   {format_log_date(commit.timestamp)}")
        out.output("")
        out.output(f"    {commit.message}")
        out.output("")

    return 0
