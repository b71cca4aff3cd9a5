"""
git checkout - Discard file changes or switch branches.

Forms:
    git checkout -- <file>   discard: untracked files are deleted,
                             modified/staged files revert to committed
    git checkout -b <name>   create a branch and switch to it
    git checkout <name>      switch to an existing branch
"""

import logging

from gitguide.context import CommandContext
from gitguide.commands.branch import valid_branch_name
from gitguide.store import FileStatus

logger = logging.getLogger(__name__)

USAGE = "usage: git checkout <branch> | git checkout -b <new-branch> | git checkout -- <file>"


def discard_changes(target: str, ctx: CommandContext) -> int:
    store = ctx.store
    out = ctx.out

    status = store.get_file(target)
    if status is None:
        out.error(f"error: pathspec '{target}' did not match any file(s) known to git")
        return 1

    if status == FileStatus.COMMITTED:
        out.output(f"'{target}' has no changes to discard.")
        return 0

    if status == FileStatus.UNTRACKED:
        store.remove_file(target)
        out.output(f"Removed untracked file '{target}'")
        return 0

    store.update_file_status(target, FileStatus.COMMITTED)
    out.output("Updated 1 path from the index")
    out.success(f"Discarded changes in '{target}'")
    return 0


def create_and_switch(name: str, ctx: CommandContext) -> int:
    store = ctx.store
    out = ctx.out

    if not valid_branch_name(name):
        out.error(f"fatal: '{name}' is not a valid branch name.")
        return 1

    if name in store.branches:
        out.error(f"fatal: a branch named '{name}' already exists")
        return 1

    store.add_branch(name)
    store.set_current_branch(name)
    out.success(f"Switched to a new branch '{name}'")
    return 0


def switch_branch(name: str, ctx: CommandContext) -> int:
    store = ctx.store
    out = ctx.out

    if name not in store.branches:
        out.error(f"error: pathspec '{name}' did not match any file(s) known to git")
        out.output(f'hint: use "git checkout -b {name}" to create a new branch')
        return 1

    if name == store.current_branch:
        out.output(f"Already on '{name}'")
        return 0

    # Only uncommitted working tree changes block a switch; unpushed commits don't
    if store.has_changes():
        dirty = [f for f, s in store.files.items() if s != FileStatus.COMMITTED]
        logger.info(f"[CHECKOUT] refused switch to {name}: {len(dirty)} uncommitted file(s)")
        out.error("error: Your local changes to the following files would be overwritten by checkout:")
        for filename in dirty:
            out.error(f"        {filename}")
        out.error("Please commit your changes or stash them before you switch branches.")
        out.error("Aborting")
        return 1

    store.set_current_branch(name)
    out.success(f"Switched to branch '{name}'")
    return 0


def cmd_checkout(args: list[str], ctx: CommandContext) -> int:
    if not ctx.require_clone():
        return 1

    if not args:
        ctx.out.error(USAGE)
        return 2

    flag = args[0]
    if flag in ("--", "-b"):
        if len(args) < 2:
            ctx.out.error(USAGE)
            return 2
        if flag == "--":
            return discard_changes(args[1], ctx)
        return create_and_switch(args[1], ctx)

    return switch_branch(flag, ctx)
