"""
git pull - Fetch from the simulated remote.

The remote never diverges from local history, so there is never anything
to pull.
"""

from gitguide.context import CommandContext


def cmd_pull(args: list[str], ctx: CommandContext) -> int:
    if not ctx.require_clone():
        return 1
    ctx.out.output("Already up to date.")
    return 0
