"""Command parsing and dispatch.

Maps a raw input line to one Command variant and runs its handler:

    raw line -> tokenize -> parse -> handler(args, ctx) -> exit code

`execute()` never raises. Unknown commands, usage problems, refused store
operations and unexpected handler failures all end up as error lines in
the transcript.

Usage:
    from gitguide.dispatch import execute

    execute('git commit -m "first commit"', ctx)
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from gitguide.commands import (
    add,
    basics,
    branch,
    checkout,
    clone,
    commit,
    diff,
    files,
    log,
    pr,
    pull,
    push,
    repo,
    reset,
    status,
)
from gitguide.context import CommandContext
from gitguide.lib.tokenizer import tokenize
from gitguide.store import StoreError

logger = logging.getLogger(__name__)

HELP_HINT = 'Type "help" to see available commands.'


class Command(Enum):
    """Every command the interpreter understands.

    Values are the command words as typed.
    """
    HELP = "help"
    CLEAR = "clear"
    TOUCH = "touch"
    EDIT = "edit"

    GIT_CLONE = "git clone"
    GIT_STATUS = "git status"
    GIT_ADD = "git add"
    GIT_COMMIT = "git commit"
    GIT_PUSH = "git push"
    GIT_LOG = "git log"
    GIT_RESET = "git reset"
    GIT_DIFF = "git diff"
    GIT_CHECKOUT = "git checkout"
    GIT_BRANCH = "git branch"
    GIT_PULL = "git pull"

    PR_CREATE = "gh pr create"
    PR_MERGE = "gh pr merge"
    PR_LIST = "gh pr list"
    REPO_VIEW = "gh repo view"


Handler = Callable[[list[str], CommandContext], int]

HANDLERS: dict[Command, Handler] = {
    Command.HELP: basics.cmd_help,
    Command.CLEAR: basics.cmd_clear,
    Command.TOUCH: files.cmd_touch,
    Command.EDIT: files.cmd_edit,
    Command.GIT_CLONE: clone.cmd_clone,
    Command.GIT_STATUS: status.cmd_status,
    Command.GIT_ADD: add.cmd_add,
    Command.GIT_COMMIT: commit.cmd_commit,
    Command.GIT_PUSH: push.cmd_push,
    Command.GIT_LOG: log.cmd_log,
    Command.GIT_RESET: reset.cmd_reset,
    Command.GIT_DIFF: diff.cmd_diff,
    Command.GIT_CHECKOUT: checkout.cmd_checkout,
    Command.GIT_BRANCH: branch.cmd_branch,
    Command.GIT_PULL: pull.cmd_pull,
    Command.PR_CREATE: pr.cmd_pr_create,
    Command.PR_MERGE: pr.cmd_pr_merge,
    Command.PR_LIST: pr.cmd_pr_list,
    Command.REPO_VIEW: repo.cmd_repo_view,
}

# Command words -> variant, e.g. ("git", "status") -> GIT_STATUS
COMMAND_WORDS: dict[tuple[str, ...], Command] = {
    tuple(c.value.split()): c for c in Command
}

# Command families that take a subcommand, with their usage line
GROUPS = {
    ("git",): "usage: git <command> [<args>]",
    ("gh",): "usage: gh <pr|repo> <command> [<args>]",
    ("gh", "pr"): "usage: gh pr <create|merge|list> [<args>]",
    ("gh", "repo"): "usage: gh repo view",
}


@dataclass
class ParsedCommand:
    command: Command
    args: list[str] = field(default_factory=list)


class ParseError(Exception):
    """The line doesn't name a known command.

    `lines` holds (kind, text) pairs to print, kind being "error" or "output".
    """

    def __init__(self, lines: list[tuple[str, str]], exit_code: int = 2):
        self.lines = lines
        self.exit_code = exit_code
        super().__init__(lines[0][1] if lines else "parse error")


def _unknown(prefix: tuple[str, ...], word: str) -> ParseError:
    if not prefix:
        return ParseError([("error", f"command not found: {word}"), ("output", HELP_HINT)], exit_code=127)
    family = " ".join(prefix)
    return ParseError([("error", f"{family}: '{word}' is not a {family} command."), ("output", HELP_HINT)])


def parse(tokens: list[str]) -> ParsedCommand | None:
    """Resolve tokens to a command. Returns None for an empty line.

    Command words are matched case-insensitively; arguments are untouched.

    Raises:
        ParseError: unknown command, unknown subcommand, or missing subcommand
    """
    if not tokens:
        return None

    prefix: tuple[str, ...] = ()
    for i, token in enumerate(tokens):
        candidate = prefix + (token.lower(),)
        if candidate in COMMAND_WORDS:
            return ParsedCommand(COMMAND_WORDS[candidate], list(tokens[i + 1:]))
        if candidate not in GROUPS:
            raise _unknown(prefix, token.lower())
        prefix = candidate

    # Ran out of tokens inside a family, e.g. bare "git"
    raise ParseError([("error", GROUPS[prefix])])


def run_handler(parsed: ParsedCommand, ctx: CommandContext) -> int:
    """Run the handler for a parsed command, converting failures to error lines."""
    handler = HANDLERS[parsed.command]
    try:
        return handler(parsed.args, ctx)
    except StoreError as e:
        logger.warning(f"[DISPATCH] {parsed.command.value}: store refused operation: {e}")
        ctx.out.error(f"error: {e}")
        return 1
    except Exception as e:
        logger.exception(f"[DISPATCH] {parsed.command.value} failed")
        ctx.out.error(f"error: internal failure in '{parsed.command.value}': {e}")
        return 1


def execute(line: str, ctx: CommandContext, echo: bool = False) -> int:
    """Tokenize, parse and run one input line. Returns the handler's exit code.

    Args:
        line: Raw input line
        ctx: Store and output sink
        echo: Write the line to the sink's command channel first
    """
    line = line.strip()
    if not line:
        return 0

    if echo:
        ctx.out.command(line)

    try:
        parsed = parse(tokenize(line))
    except ParseError as e:
        logger.debug(f"[DISPATCH] rejected input: {line!r}")
        for kind, text in e.lines:
            if kind == "error":
                ctx.out.error(text)
            else:
                ctx.out.output(text)
        return e.exit_code

    if parsed is None:
        return 0

    logger.debug(f"[DISPATCH] {parsed.command.value} {parsed.args}")
    return run_handler(parsed, ctx)
