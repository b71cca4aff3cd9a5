"""
Command context passed to every handler.
"""

from dataclasses import dataclass

from gitguide.lib.config import GuideConfig
from gitguide.output import OutputSink
from gitguide.store import RepositoryStore

NOT_A_REPO = "fatal: not a git repository"


@dataclass
class CommandContext:
    """Everything a handler may touch: the store and the sink."""
    store: RepositoryStore
    out: OutputSink

    @property
    def config(self) -> GuideConfig:
        return self.store.config

    def require_clone(self) -> bool:
        """Report and return False if the repository hasn't been cloned yet."""
        if self.store.is_cloned:
            return True
        self.out.error(NOT_A_REPO)
        return False
