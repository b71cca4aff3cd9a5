"""
Practice scenarios.

A scenario selects a starting snapshot for the store. Definitions live in
data/scenarios.yaml; applying one replaces the persisted state wholesale.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from pathlib import Path

import yaml

from gitguide.lib.constants import MAIN_BRANCH
from gitguide.lib.timefmt import to_iso, utc_now
from gitguide.store import RepositoryStore

logger = logging.getLogger(__name__)

DEFAULT_SCENARIO = "first_push"
SCENARIOS_PATH = Path(__file__).parent / "data" / "scenarios.yaml"


@dataclass
class Scenario:
    id: str
    title: str
    description: str
    difficulty: str
    steps: list[str] = field(default_factory=list)
    seed: dict | None = None  # None means the default initial state


class UnknownScenario(KeyError):
    pass


def load_scenarios(path: Path = SCENARIOS_PATH) -> dict[str, Scenario]:
    """Load scenario definitions, keyed by id, in file order."""
    data = yaml.safe_load(path.read_text()) or {}
    scenarios = {}
    for scenario_id, entry in data.items():
        scenarios[scenario_id] = Scenario(
            id=scenario_id,
            title=entry["title"],
            description=entry.get("description", ""),
            difficulty=entry.get("difficulty", ""),
            steps=list(entry.get("steps") or []),
            seed=entry.get("seed"),
        )
    return scenarios


def get_scenario(scenario_id: str, path: Path = SCENARIOS_PATH) -> Scenario:
    scenarios = load_scenarios(path)
    if scenario_id not in scenarios:
        raise UnknownScenario(scenario_id)
    return scenarios[scenario_id]


def build_snapshot(seed: dict, store: RepositoryStore, now: datetime | None = None) -> dict:
    """Expand a YAML seed into a full serialized snapshot for the store."""
    now = now or utc_now()
    repo = store.repo
    commits = []
    for c in seed.get("commits", []):
        commits.append({
            "hash": c["hash"],
            "message": c["message"],
            "timestamp": to_iso(now - timedelta(days=c.get("days_ago", 0))),
            "files": list(c.get("files", [])),
            "branch": c.get("branch", MAIN_BRANCH),
        })

    return {
        "repo": {
            "name": repo.name,
            "owner": repo.owner,
            "isCloned": seed.get("cloned", True),
            "currentBranch": seed.get("current_branch", MAIN_BRANCH),
            "remoteUrl": repo.remote_url,
        },
        "files": {name: {"status": status} for name, status in (seed.get("files") or {}).items()},
        "commits": commits,
        "pushedCommitCount": seed.get("pushed", 0),
        "branches": list(seed.get("branches", [MAIN_BRANCH])),
        "pullRequests": [],
    }


def apply_scenario(scenario: Scenario, store: RepositoryStore, now: datetime | None = None) -> None:
    """Clear persisted state and start the store from the scenario's seed."""
    logger.info(f"[SCENARIO] applying {scenario.id}")
    store.port.clear()
    if scenario.seed is None:
        store.reset_to_initial()
    else:
        store.replace_snapshot(build_snapshot(scenario.seed, store, now))


def describe(scenario: Scenario) -> list[str]:
    """Intro text shown after a scenario is applied."""
    lines = [f"Scenario: {scenario.title}", scenario.description, "", "Steps to complete:"]
    lines += [f"  {i}. {step}" for i, step in enumerate(scenario.steps, 1)]
    lines += ["", 'Type "help" to see available commands.']
    return lines
