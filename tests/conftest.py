"""Shared fixtures: an in-memory store with deterministic hashes and clock."""

from datetime import datetime, timezone
from itertools import count

import pytest

from gitguide.context import CommandContext
from gitguide.dispatch import execute
from gitguide.lib.config import GuideConfig
from gitguide.output import TranscriptBuffer
from gitguide.store import MemoryStatePort, RepositoryStore

FIXED_NOW = datetime(2026, 10, 18, 9, 30, 0, tzinfo=timezone.utc)


def sequential_hashes():
    """c000001, c000002, ... in call order."""
    counter = count(1)
    return lambda: f"c{next(counter):06d}"


@pytest.fixture
def config():
    return GuideConfig(repo_name="demo", repo_owner="octo")


@pytest.fixture
def port():
    return MemoryStatePort()


@pytest.fixture
def store(port, config):
    return RepositoryStore(port, config=config, hash_factory=sequential_hashes(), clock=lambda: FIXED_NOW)


@pytest.fixture
def sink():
    return TranscriptBuffer()


@pytest.fixture
def ctx(store, sink):
    return CommandContext(store=store, out=sink)


@pytest.fixture
def cloned(ctx):
    """Context whose repository has been cloned; transcript cleared."""
    execute("git clone https://github.com/octo/demo.git", ctx)
    ctx.out.clear()
    return ctx


@pytest.fixture
def run(ctx):
    """Run a line and return (exit_code, new transcript lines since the call)."""
    def _run(line: str):
        start = len(ctx.out.lines)
        code = execute(line, ctx)
        return code, [l.text for l in ctx.out.lines[start:]]
    return _run
