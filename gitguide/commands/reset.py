"""
git reset - Unstage a file, or undo the newest unpushed commit.

Forms:
    git reset HEAD <file>     staged -> modified (never back to untracked)
    git reset --soft HEAD~1   drop the last commit, re-stage its files
"""

import logging

from gitguide.context import CommandContext
from gitguide.store import CommitProtected, FileStatus, NothingToUndo

logger = logging.getLogger(__name__)

USAGE = "usage: git reset HEAD <file> | git reset --soft HEAD~1"


def _unstage(target: str, ctx: CommandContext) -> int:
    store = ctx.store
    out = ctx.out

    status = store.get_file(target)
    if status is None:
        out.error(f"fatal: pathspec '{target}' did not match any files")
        return 1

    if status != FileStatus.STAGED:
        out.output(f"'{target}' is not staged.")
        return 0

    store.update_file_status(target, FileStatus.MODIFIED)
    out.output("Unstaged changes after reset:")
    out.output(f"M\t{target}")
    return 0


def _undo_last_commit(ctx: CommandContext) -> int:
    out = ctx.out
    try:
        commit = ctx.store.soft_reset()
    except NothingToUndo:
        out.error("fatal: ambiguous argument 'HEAD~1': unknown revision or path not in the working tree.")
        return 1
    except CommitProtected as e:
        logger.info(f"[RESET] refused soft reset of pushed commit {e.commit_hash}")
        out.error(f"error: commit {e.commit_hash} has already been pushed and cannot be undone.")
        out.output('hint: only commits that have not been pushed can be undone with "git reset --soft HEAD~1"')
        return 1

    out.output(f"Undid commit {commit.hash}: {commit.message}")
    if commit.files:
        out.output("Changes to be committed:")
        for filename in commit.files:
            out.output(f"        {filename}")
    out.success("Commit undone. Your changes are staged again.")
    return 0


def cmd_reset(args: list[str], ctx: CommandContext) -> int:
    if not ctx.require_clone():
        return 1

    if len(args) >= 2 and args[0] == "--soft" and args[1].upper() == "HEAD~1":
        return _undo_last_commit(ctx)

    if len(args) >= 2 and args[0].upper() == "HEAD":
        return _unstage(args[1], ctx)

    ctx.out.error(USAGE)
    return 2
