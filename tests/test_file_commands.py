"""Tests for touch, edit, help and clear."""

import pytest

from gitguide.commands.basics import COMMANDS
from gitguide.dispatch import execute
from gitguide.output import LineKind
from gitguide.store import FileStatus


class TestTouch:

    def test_creates_untracked(self, cloned, run):
        code, lines = run("touch notes.txt")
        assert code == 0
        assert cloned.store.get_file("notes.txt") == FileStatus.UNTRACKED
        assert lines[0] == "Created: notes.txt"

    def test_requires_clone(self, ctx, run):
        assert run("touch a.txt") == (1, ["Clone a repository first!"])

    def test_existing(self, cloned, run):
        assert run("touch README.md") == (1, ["File already exists: README.md"])

    @pytest.mark.parametrize("name", ["a/b.txt", "what?.txt", ".env", "x|y"])
    def test_invalid_names(self, cloned, name):
        assert execute(f"touch '{name}'", cloned) == 1
        assert cloned.store.get_file(name) is None

    def test_usage(self, cloned):
        assert execute("touch", cloned) == 2


class TestEdit:

    def test_committed_becomes_modified(self, cloned, run):
        assert run("edit README.md")[0] == 0
        assert cloned.store.get_file("README.md") == FileStatus.MODIFIED

    def test_staged_becomes_modified(self, cloned, run):
        cloned.store.add_file("a.txt", FileStatus.STAGED)
        run("edit a.txt")
        assert cloned.store.get_file("a.txt") == FileStatus.MODIFIED

    @pytest.mark.parametrize("status", [FileStatus.UNTRACKED, FileStatus.MODIFIED])
    def test_status_kept(self, cloned, run, status):
        cloned.store.add_file("a.txt", status)
        assert run("edit a.txt") == (0, [f"Edited: a.txt (still {status.value})"])

    def test_missing(self, cloned, run):
        assert run("edit ghost.txt") == (1, ["No such file: ghost.txt"])


class TestBuiltins:

    def test_help_lists_every_command(self, ctx, run):
        code, lines = run("help")
        assert code == 0
        text = "\n".join(lines)
        for usage, description in COMMANDS:
            assert usage in text
            assert description in text
        assert lines[-1] == "Try: git clone https://github.com/octo/demo.git"

    def test_help_works_before_clone(self, ctx):
        assert execute("help", ctx) == 0
        assert ctx.out.texts(LineKind.ERROR) == []

    def test_clear(self, ctx):
        execute("help", ctx)
        assert execute("clear", ctx) == 0
        assert len(ctx.out) == 0
