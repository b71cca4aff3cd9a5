"""Tests for gitguide.cli module."""

import json

import pytest

from gitguide.cli import join_line, main


@pytest.fixture
def guide_env(tmp_path):
    path = tmp_path / "guide.env"
    path.write_text(
        "REPO_NAME=demo\n"
        "REPO_OWNER=octo\n"
        f"STATE_PATH={tmp_path / 'state.json'}\n"
    )
    return path


def state(guide_env):
    return json.loads((guide_env.parent / "state.json").read_text())


class TestJoinLine:

    def test_requotes_words_with_spaces(self):
        assert join_line(["git", "commit", "-m", "two words"]) == 'git commit -m "two words"'


class TestMain:

    def test_run_persists_between_invocations(self, guide_env, capsys):
        assert main(["--config", str(guide_env), "run", "git", "clone", "https://github.com/octo/demo.git"]) == 0
        assert main(["--config", str(guide_env), "run", "touch", "x.txt"]) == 0
        assert main(["--config", str(guide_env), "run", "git", "add", "x.txt"]) == 0
        assert main(["--config", str(guide_env), "run", "git", "commit", "-m", "add x"]) == 0

        data = state(guide_env)
        assert data["commits"][0]["message"] == "add x"
        assert data["files"]["x.txt"] == {"status": "committed"}
        assert "Commit created successfully." in capsys.readouterr().out

    def test_run_returns_handler_code(self, guide_env):
        assert main(["--config", str(guide_env), "run", "git", "status"]) == 1

    def test_scenario_use(self, guide_env, capsys):
        assert main(["--config", str(guide_env), "scenario", "use", "edit_flow"]) == 0
        assert state(guide_env)["repo"]["isCloned"] is True
        assert "Scenario: Edit & Update" in capsys.readouterr().out

    def test_unknown_scenario(self, guide_env):
        assert main(["--config", str(guide_env), "scenario", "use", "nope"]) == 1

    def test_scenario_list(self, guide_env, capsys):
        assert main(["--config", str(guide_env), "scenario", "list"]) == 0
        assert "branch_basics" in capsys.readouterr().out

    def test_reset(self, guide_env):
        main(["--config", str(guide_env), "run", "git", "clone", "https://github.com/octo/demo.git"])
        assert main(["--config", str(guide_env), "reset"]) == 0
        assert state(guide_env)["repo"]["isCloned"] is False

    def test_summary(self, guide_env, capsys):
        assert main(["--config", str(guide_env), "summary"]) == 0
        assert "Not a git repository" in capsys.readouterr().out

    def test_bad_config_exits(self, tmp_path):
        path = tmp_path / "guide.env"
        path.write_text("REPO_NAME=`id`\n")
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(path), "summary"])
        assert exc.value.code == 2
