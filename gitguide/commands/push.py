"""
git push - Publish local commits to the simulated remote.

Advances the push cursor to the full commit count. Nothing leaves the
process; the transcript is templated from the unpushed commits.
"""

from gitguide.context import CommandContext


def cmd_push(args: list[str], ctx: CommandContext) -> int:
    if not ctx.require_clone():
        return 1

    store = ctx.store
    out = ctx.out

    unpushed = store.unpushed_commits
    if not unpushed:
        out.output("Everything up-to-date")
        return 0

    branch = store.current_branch
    out.output(f"Enumerating objects: {len(unpushed) * 3}, done.")
    out.output("Counting objects: 100%, done.")
    out.output("Writing objects: 100%, done.")
    out.output(f"To {store.repo.remote_url}")
    out.output(f"   {unpushed[0].hash}..{unpushed[-1].hash}  {branch} -> {branch}")

    store.set_push_cursor(len(store.commits))

    out.success(f"Pushed {len(unpushed)} commit(s) to origin/{branch}")
    return 0
