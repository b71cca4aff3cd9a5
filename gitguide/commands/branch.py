"""
git branch - List, create, or delete branches.

The main branch can never be deleted, and neither can the branch that is
checked out.
"""

from gitguide.context import CommandContext
from gitguide.lib.constants import BRANCH_NAME_PATTERN, MAIN_BRANCH

DELETE_FLAGS = ("-d", "-D")


def valid_branch_name(name: str) -> bool:
    return not name.startswith("-") and bool(BRANCH_NAME_PATTERN.match(name))


def list_branches(ctx: CommandContext) -> int:
    current = ctx.store.current_branch
    for name in ctx.store.branches:
        marker = "*" if name == current else " "
        ctx.out.output(f"{marker} {name}")
    return 0


def delete_branch(name: str, ctx: CommandContext) -> int:
    store = ctx.store
    out = ctx.out

    if name == MAIN_BRANCH:
        out.error(f"error: Cannot delete branch '{MAIN_BRANCH}': it is the default branch.")
        return 1

    if name == store.current_branch:
        out.error(f"error: Cannot delete branch '{name}' checked out.")
        return 1

    if name not in store.branches:
        out.error(f"error: branch '{name}' not found.")
        return 1

    store.remove_branch(name)
    out.success(f"Deleted branch {name}.")
    return 0


def create_branch(name: str, ctx: CommandContext) -> int:
    store = ctx.store
    out = ctx.out

    if not valid_branch_name(name):
        out.error(f"fatal: '{name}' is not a valid branch name.")
        return 1

    if name in store.branches:
        out.error(f"fatal: A branch named '{name}' already exists.")
        return 1

    store.add_branch(name)
    out.success(f"Created branch '{name}'.")
    out.output(f'(use "git checkout {name}" to switch to it)')
    return 0


def cmd_branch(args: list[str], ctx: CommandContext) -> int:
    if not ctx.require_clone():
        return 1

    if not args:
        return list_branches(ctx)

    if args[0] in DELETE_FLAGS:
        if len(args) < 2:
            ctx.out.error("fatal: branch name required")
            return 2
        return delete_branch(args[1], ctx)

    return create_branch(args[0], ctx)
