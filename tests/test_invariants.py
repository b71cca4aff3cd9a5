"""Repository invariants hold after arbitrary command sequences."""

import random

import pytest

from gitguide.dispatch import execute
from gitguide.store import Snapshot

LINES = [
    "touch a.txt", "touch b.txt", "edit a.txt", "edit README.md",
    "git add .", "git add a.txt", 'git commit -m "work"', "git push",
    "git reset HEAD a.txt", "git reset --soft HEAD~1", "git checkout -- a.txt",
    "git branch feature", "git checkout feature", "git checkout main",
    "git checkout -b topic", "git branch -d feature", "git branch -d main",
    'gh pr create -t "pr"', "gh pr merge 1", "git status", "git diff", "bogus",
]


@pytest.mark.parametrize("seed", range(10))
def test_random_sessions_keep_invariants(cloned, seed):
    rng = random.Random(seed)
    store = cloned.store
    for _ in range(60):
        execute(rng.choice(LINES), cloned)
        assert 0 <= store.pushed_commit_count <= len(store.commits)
        assert store.current_branch in store.branches
        assert "main" in store.branches


@pytest.mark.parametrize("seed", range(3))
def test_snapshot_round_trip(cloned, seed):
    rng = random.Random(seed)
    for _ in range(40):
        execute(rng.choice(LINES), cloned)
    snap = cloned.store.snapshot()
    assert Snapshot.from_dict(snap.to_dict()) == snap


def test_commit_never_empty(cloned):
    for line in LINES * 2:
        execute(line, cloned)
    assert all(c.files for c in cloned.store.commits)
