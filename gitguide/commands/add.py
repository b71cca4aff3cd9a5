"""
git add - Stage files for the next commit.

`git add .` stages every modified and untracked file in one pass.
Adding a file that is already staged or committed is reported, not an
error.
"""

from gitguide.context import CommandContext
from gitguide.store import FileStatus


def cmd_add(args: list[str], ctx: CommandContext) -> int:
    if not ctx.require_clone():
        return 1

    store = ctx.store
    out = ctx.out

    if not args:
        out.error("Nothing specified, nothing added.")
        out.output('hint: Maybe you wanted to say "git add ."?')
        return 2

    target = args[0]

    if target == ".":
        to_stage = store.modified_files + store.untracked_files
        if not to_stage:
            out.output("Nothing to add.")
            return 0
        for filename in to_stage:
            store.update_file_status(filename, FileStatus.STAGED)
        out.success(f"Added {len(to_stage)} file(s) to staging.")
        return 0

    status = store.get_file(target)
    if status is None:
        out.error(f"fatal: pathspec '{target}' did not match any files")
        return 1

    if status == FileStatus.COMMITTED:
        out.output(f"'{target}' is already up to date.")
        return 0

    if status == FileStatus.STAGED:
        out.output(f"'{target}' is already staged.")
        return 0

    store.update_file_status(target, FileStatus.STAGED)
    out.success(f"Added '{target}' to staging.")
    return 0
