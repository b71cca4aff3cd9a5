"""
touch / edit - Working tree actions that happen outside git.

`touch` creates an untracked file; `edit` simulates changing a file in an
editor, which turns a committed or staged file into a modified one.
"""

from gitguide.context import CommandContext
from gitguide.lib.constants import FILENAME_PATTERN
from gitguide.store import FileStatus


def valid_filename(name: str) -> bool:
    return bool(FILENAME_PATTERN.match(name)) and not name.startswith(".")


def cmd_touch(args: list[str], ctx: CommandContext) -> int:
    store = ctx.store
    out = ctx.out

    if not store.is_cloned:
        out.error("Clone a repository first!")
        return 1

    if not args:
        out.error("usage: touch <file>")
        return 2

    filename = args[0]
    if not valid_filename(filename):
        out.error('Invalid filename. Avoid special characters: / \\ : * ? " < > | and leading dots')
        return 1

    if store.get_file(filename) is not None:
        out.error(f"File already exists: {filename}")
        return 1

    store.add_file(filename, FileStatus.UNTRACKED)
    out.output(f"Created: {filename}")
    out.output('(New file is untracked. Use "git add" to stage it)')
    return 0


def cmd_edit(args: list[str], ctx: CommandContext) -> int:
    store = ctx.store
    out = ctx.out

    if not store.is_cloned:
        out.error("Clone a repository first!")
        return 1

    if not args:
        out.error("usage: edit <file>")
        return 2

    filename = args[0]
    status = store.get_file(filename)
    if status is None:
        out.error(f"No such file: {filename}")
        return 1

    if status in (FileStatus.UNTRACKED, FileStatus.MODIFIED):
        out.output(f"Edited: {filename} (still {status.value})")
        return 0

    store.update_file_status(filename, FileStatus.MODIFIED)
    out.output(f"Modified: {filename}")
    out.output('(Use "git add" to stage your changes)')
    return 0
