"""Tests for git branch and git checkout."""

import pytest

from gitguide.dispatch import execute
from gitguide.output import LineKind
from gitguide.store import FileStatus


class TestBranch:

    def test_list_marks_current(self, cloned, run):
        cloned.store.add_branch("feature")
        assert run("git branch") == (0, ["* main", "  feature"])

    def test_create(self, cloned, run):
        code, lines = run("git branch feature/login")
        assert code == 0
        assert "feature/login" in cloned.store.branches
        assert cloned.store.current_branch == "main"
        assert lines[0] == "Created branch 'feature/login'."

    def test_create_existing(self, cloned, run):
        run("git branch feature")
        code, lines = run("git branch feature")
        assert code == 1
        assert lines == ["fatal: A branch named 'feature' already exists."]

    @pytest.mark.parametrize("name", ["bad name!", "what?", "-x"])
    def test_invalid_name(self, cloned, name):
        assert execute(f"git branch '{name}'", cloned) == 1
        assert cloned.out.texts(LineKind.ERROR) == [f"fatal: '{name}' is not a valid branch name."]
        assert cloned.store.branches == ["main"]

    def test_delete(self, cloned, run):
        run("git branch feature")
        code, lines = run("git branch -d feature")
        assert code == 0
        assert cloned.store.branches == ["main"]
        assert lines == ["Deleted branch feature."]

    def test_delete_unknown(self, cloned, run):
        assert run("git branch -D nope") == (1, ["error: branch 'nope' not found."])

    def test_delete_current(self, cloned, run):
        run("git checkout -b feature")
        code, lines = run("git branch -d feature")
        assert code == 1
        assert lines == ["error: Cannot delete branch 'feature' checked out."]

    @pytest.mark.parametrize("setup", [[], ["git checkout -b feature"]])
    def test_main_always_protected(self, cloned, run, setup):
        for line in setup:
            run(line)
        code, lines = run("git branch -d main")
        assert code == 1
        assert lines == ["error: Cannot delete branch 'main': it is the default branch."]
        assert "main" in cloned.store.branches

    def test_delete_needs_name(self, cloned, run):
        assert run("git branch -d") == (2, ["fatal: branch name required"])


class TestCheckoutBranches:

    def test_create_and_switch(self, cloned, run):
        code, lines = run("git checkout -b feature")
        assert code == 0
        assert cloned.store.current_branch == "feature"
        assert lines == ["Switched to a new branch 'feature'"]

    def test_create_existing(self, cloned, run):
        assert run("git checkout -b main") == (1, ["fatal: a branch named 'main' already exists"])

    def test_switch(self, cloned, run):
        run("git branch feature")
        assert run("git checkout feature") == (0, ["Switched to branch 'feature'"])
        assert cloned.store.current_branch == "feature"

    def test_already_on(self, cloned, run):
        assert run("git checkout main") == (0, ["Already on 'main'"])

    def test_unknown_branch_hints_create(self, cloned, run):
        code, lines = run("git checkout feature")
        assert code == 1
        assert lines[1] == 'hint: use "git checkout -b feature" to create a new branch'

    def test_usage(self, cloned, run):
        assert run("git checkout")[0] == 2
        assert run("git checkout -b")[0] == 2

    def test_uncommitted_changes_block_switch(self, cloned, run):
        run("git branch feature")
        run("git checkout feature")
        run("touch work.txt")
        run("git add work.txt")

        code, lines = run("git checkout main")
        assert code == 1
        assert cloned.store.current_branch == "feature"
        assert "        work.txt" in lines
        assert lines[-1] == "Aborting"

        run('git commit -m "work"')
        assert run("git checkout main") == (0, ["Switched to branch 'main'"])
        assert cloned.store.has_unpushed_commits()


class TestCheckoutDiscard:

    def test_untracked_deleted(self, cloned, run):
        cloned.store.add_file("tmp.txt")
        assert run("git checkout -- tmp.txt") == (0, ["Removed untracked file 'tmp.txt'"])
        assert cloned.store.get_file("tmp.txt") is None

    @pytest.mark.parametrize("status", [FileStatus.MODIFIED, FileStatus.STAGED])
    def test_reverts_to_committed(self, cloned, run, status):
        cloned.store.update_file_status("README.md", status)
        code, lines = run("git checkout -- README.md")
        assert code == 0
        assert cloned.store.get_file("README.md") == FileStatus.COMMITTED
        assert lines == ["Updated 1 path from the index", "Discarded changes in 'README.md'"]

    def test_committed_has_nothing(self, cloned, run):
        assert run("git checkout -- README.md") == (0, ["'README.md' has no changes to discard."])

    def test_unknown_file(self, cloned, run):
        code, lines = run("git checkout -- ghost.txt")
        assert code == 1
        assert lines == ["error: pathspec 'ghost.txt' did not match any file(s) known to git"]
