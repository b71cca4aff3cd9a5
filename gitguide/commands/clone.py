"""
git clone - Clone the simulated remote.

Marks the repository as cloned and seeds it with the project's README.
No network access happens; the transcript is canned.
"""

from gitguide.context import CommandContext
from gitguide.lib.constants import README
from gitguide.store import FileStatus


def url_matches_remote(url: str, ctx: CommandContext) -> bool:
    """Accept any URL on the hosting domain, or the configured remote itself."""
    config = ctx.config
    return config.hosting_marker in url or config.remote_url in url


def cmd_clone(args: list[str], ctx: CommandContext) -> int:
    store = ctx.store
    out = ctx.out

    if store.is_cloned:
        out.error("fatal: destination path already exists")
        return 1

    if not args:
        out.error("usage: git clone <repository>")
        return 2

    url = args[0]
    if not url_matches_remote(url, ctx):
        out.error(f"fatal: repository '{url}' not found")
        return 1

    repo = store.repo
    out.output(f"Cloning into '{repo.name}'...")
    out.output("remote: Enumerating objects: 3, done.")
    out.output("remote: Counting objects: 100% (3/3), done.")
    out.output("remote: Total 3 (delta 0), reused 0 (delta 0)")

    store.set_cloned(True)
    store.add_file(README, FileStatus.COMMITTED)

    out.success(f"Successfully cloned {repo.name}")
    return 0
