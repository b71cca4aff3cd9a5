"""
gh pr - Create, merge, and list pull requests.

Pull requests are tracked alongside the commit list; merging one records
the merge but does not move commits between branches.
"""

import logging

from gitguide.context import CommandContext
from gitguide.lib.constants import MAIN_BRANCH
from gitguide.store import PullRequestStatus

logger = logging.getLogger(__name__)

CREATE_USAGE = 'usage: gh pr create --title "<title>" [--body "<text>"] [--base <branch>] [--head <branch>]'
MERGE_USAGE = "usage: gh pr merge <number>"

# Long flag -> short alias
CREATE_FLAGS = {
    "--title": "-t",
    "--body": "-b",
    "--base": "-B",
    "--head": "-H",
}


def parse_create_args(args: list[str]) -> dict[str, str] | None:
    """Parse `gh pr create` flags into {"title": ..., "body": ..., ...}.

    Returns None on an unknown flag or a flag without a value.
    """
    aliases = {}
    for long_flag, short_flag in CREATE_FLAGS.items():
        aliases[long_flag] = long_flag[2:]
        aliases[short_flag] = long_flag[2:]

    parsed: dict[str, str] = {}
    i = 0
    while i < len(args):
        key = aliases.get(args[i])
        if key is None or i + 1 >= len(args):
            return None
        parsed[key] = args[i + 1]
        i += 2
    return parsed


def cmd_pr_create(args: list[str], ctx: CommandContext) -> int:
    if not ctx.require_clone():
        return 1

    store = ctx.store
    out = ctx.out

    parsed = parse_create_args(args)
    if parsed is None:
        out.error(CREATE_USAGE)
        return 2

    title = parsed.get("title", "").strip()
    if not title:
        out.error("error: a pull request title is required")
        out.output(CREATE_USAGE)
        return 2

    source = parsed.get("head", store.current_branch)
    target = parsed.get("base", MAIN_BRANCH)

    if source == MAIN_BRANCH:
        out.error(f"error: cannot open a pull request from '{MAIN_BRANCH}'")
        out.output('hint: create a branch first with "git checkout -b <name>"')
        return 1

    for branch in (source, target):
        if branch not in store.branches:
            out.error(f"error: branch '{branch}' not found.")
            return 1

    if source == target:
        out.error("error: head and base branches must be different")
        return 1

    commits = [c.hash for c in store.commits if c.branch == source]
    pr = store.add_pull_request(
        title=title,
        source_branch=source,
        target_branch=target,
        description=parsed.get("body", ""),
        commits=commits,
    )

    out.output(f"Creating pull request for {source} into {target} in {store.repo.owner}/{store.repo.name}")
    out.output("")
    out.success(f"Opened pull request #{pr.id}: {pr.title}")
    return 0


def cmd_pr_merge(args: list[str], ctx: CommandContext) -> int:
    if not ctx.require_clone():
        return 1

    store = ctx.store
    out = ctx.out

    if not args:
        out.error(MERGE_USAGE)
        return 2

    try:
        pr_id = int(args[0].lstrip("#"))
    except ValueError:
        out.error(MERGE_USAGE)
        return 2

    pr = store.get_pull_request(pr_id)
    if pr is None:
        out.error(f"error: pull request #{pr_id} not found")
        return 1

    if not pr.is_open:
        logger.info(f"[PR] refused merge of #{pr_id}: status {pr.status.value}")
        out.error(f"error: pull request #{pr_id} is already {pr.status.value}")
        return 1

    store.set_pull_request_status(pr_id, PullRequestStatus.MERGED)
    out.success(f"Merged pull request #{pr_id} ({pr.source_branch} -> {pr.target_branch})")
    return 0


def cmd_pr_list(args: list[str], ctx: CommandContext) -> int:
    if not ctx.require_clone():
        return 1

    prs = ctx.store.pull_requests
    if not prs:
        ctx.out.output("No pull requests yet.")
        return 0

    for pr in prs:
        ctx.out.output(
            f"#{pr.id:<4} {pr.status.value:<7} {pr.source_branch} -> {pr.target_branch}  {pr.title}"
        )
    return 0
