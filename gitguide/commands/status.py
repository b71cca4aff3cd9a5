"""
git status - Show the working tree status.
"""

from gitguide.context import CommandContext


def _bucket(out, title: str, hint: str, lines: list[str]) -> None:
    out.output(title)
    out.output(f"  ({hint})")
    out.output("")
    for line in lines:
        out.output(f"        {line}")
    out.output("")


def cmd_status(args: list[str], ctx: CommandContext) -> int:
    if not ctx.require_clone():
        return 1

    store = ctx.store
    out = ctx.out
    branch = store.current_branch

    out.output(f"On branch {branch}")

    unpushed = store.unpushed_commits
    if unpushed:
        out.output(f"Your branch is ahead of 'origin/{branch}' by {len(unpushed)} commit(s).")
        out.output('  (use "git push" to publish your local commits)')
        out.output("")

    staged = store.staged_files
    modified = store.modified_files
    untracked = store.untracked_files

    if staged:
        _bucket(out, "Changes to be committed:", 'use "git reset HEAD <file>..." to unstage',
                [f"new file:   {f}" for f in staged])

    if modified:
        _bucket(out, "Changes not staged for commit:",
                'use "git add <file>..." to update what will be committed',
                [f"modified:   {f}" for f in modified])

    if untracked:
        _bucket(out, "Untracked files:",
                'use "git add <file>..." to include in what will be committed',
                untracked)

    if not (staged or modified or untracked):
        out.output("nothing to commit, working tree clean")

    return 0
