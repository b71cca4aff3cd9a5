"""Tests for gitguide.dispatch module."""

from unittest.mock import patch

import pytest

from gitguide.dispatch import (
    COMMAND_WORDS,
    HANDLERS,
    Command,
    ParseError,
    execute,
    parse,
)
from gitguide.output import LineKind
from gitguide.store import UnknownFile


class TestParse:

    def test_every_command_has_a_handler(self):
        assert set(HANDLERS) == set(Command)

    def test_every_command_reachable(self):
        assert set(COMMAND_WORDS.values()) == set(Command)

    def test_git_subcommand(self):
        parsed = parse(["git", "commit", "-m", "msg"])
        assert parsed.command == Command.GIT_COMMIT
        assert parsed.args == ["-m", "msg"]

    def test_case_insensitive_words(self):
        assert parse(["GIT", "Status"]).command == Command.GIT_STATUS

    def test_args_keep_case(self):
        assert parse(["touch", "README.md"]).args == ["README.md"]

    def test_gh_nested(self):
        assert parse(["gh", "pr", "merge", "1"]).command == Command.PR_MERGE
        assert parse(["gh", "repo", "view"]).command == Command.REPO_VIEW

    def test_empty(self):
        assert parse([]) is None

    def test_unknown_top_level(self):
        with pytest.raises(ParseError) as exc:
            parse(["ls"])
        assert exc.value.exit_code == 127
        assert exc.value.lines[0] == ("error", "command not found: ls")

    def test_unknown_git_subcommand(self):
        with pytest.raises(ParseError) as exc:
            parse(["git", "rebase"])
        assert exc.value.lines[0] == ("error", "git: 'rebase' is not a git command.")

    def test_bare_family(self):
        with pytest.raises(ParseError) as exc:
            parse(["git"])
        assert exc.value.lines == [("error", "usage: git <command> [<args>]")]


class TestExecute:

    def test_blank_line_is_noop(self, ctx):
        assert execute("   ", ctx) == 0
        assert len(ctx.out) == 0

    def test_echo(self, ctx):
        execute("help", ctx, echo=True)
        assert ctx.out.lines[0].kind == LineKind.COMMAND
        assert ctx.out.lines[0].text == "help"

    def test_unknown_command_reports_and_hints(self, ctx):
        assert execute("frobnicate now", ctx) == 127
        assert ctx.out.texts(LineKind.ERROR) == ["command not found: frobnicate"]
        assert ctx.out.texts(LineKind.OUTPUT) == ['Type "help" to see available commands.']

    def test_unknown_git_command(self, ctx):
        assert execute("git stash", ctx) == 2
        assert ctx.out.texts(LineKind.ERROR) == ["git: 'stash' is not a git command."]

    def test_store_error_becomes_error_line(self, ctx):
        with patch.dict(HANDLERS, {Command.GIT_PULL: _raise_unknown_file}):
            assert execute("git pull", ctx) == 1
        assert ctx.out.texts(LineKind.ERROR) == ["error: No such file: x.txt"]

    def test_unexpected_failure_contained(self, ctx, caplog):
        def boom(args, ctx):
            raise RuntimeError("kaput")

        with patch.dict(HANDLERS, {Command.GIT_PULL: boom}):
            assert execute("git pull", ctx) == 1
        assert "kaput" in ctx.out.texts(LineKind.ERROR)[0]
        assert "git pull failed" in caplog.text

    @pytest.mark.parametrize("line", [
        "git", "gh", "gh pr", 'git commit -m "', "git checkout", "git checkout -b",
        "git branch -d", "git reset", "git reset --soft", "gh pr merge abc",
        "gh pr create --title", "git add", "touch", "edit", "'", '"" ""',
    ])
    def test_never_raises(self, cloned, line):
        code = execute(line, cloned)
        assert isinstance(code, int)


def _raise_unknown_file(args, ctx):
    raise UnknownFile("x.txt")
