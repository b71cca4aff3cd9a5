"""
gh repo view - Show what the remote repository page displays.

Only pushed commits are visible on the remote.
"""

from gitguide.context import CommandContext
from gitguide.views import remote_view


def cmd_repo_view(args: list[str], ctx: CommandContext) -> int:
    if not ctx.require_clone():
        return 1

    out = ctx.out
    view = remote_view(ctx.store)

    out.output(view.title)
    out.output("=" * 60)

    if view.is_empty:
        remote_url = ctx.store.repo.remote_url
        out.output("This repository is empty.")
        out.output("")
        out.output("Quick setup:")
        out.output(f"  git clone {remote_url}")
        out.output("  # create some files")
        out.output("  git add .")
        out.output('  git commit -m "first commit"')
        out.output("  git push")
        return 0

    out.output(f"{view.head_hash}  {view.head_message}")
    out.output("")
    width = max((len(f.name) for f in view.files), default=0)
    for f in view.files:
        out.output(f"  {f.name:<{width}}  {f.message}  ({f.when})")
    return 0
