"""File status and pull request state machines using the transitions library.

Each trigger becomes a method on the model. The store builds a short-lived
machine per status change so the allowed transitions live in one table.

Usage:
    from gitguide.store.fsm import FileStatusFSM

    fsm = FileStatusFSM("notes.txt", "untracked")
    fsm.stage()       # untracked -> staged
    fsm.commit()      # staged -> committed
"""

import logging

from transitions import Machine, MachineError

from gitguide.store.errors import InvalidTransition

logger = logging.getLogger(__name__)


# State values must match FileStatus enum
FILE_STATES = ["untracked", "modified", "staged", "committed"]

FILE_TRANSITIONS = [
    # git add
    {"trigger": "stage", "source": "untracked", "dest": "staged"},
    {"trigger": "stage", "source": "modified", "dest": "staged"},

    # git commit
    {"trigger": "commit", "source": "staged", "dest": "committed"},

    # git reset HEAD <file>; never goes back to untracked
    {"trigger": "unstage", "source": "staged", "dest": "modified"},

    # Edited outside git
    {"trigger": "edit", "source": "committed", "dest": "modified"},
    {"trigger": "edit", "source": "staged", "dest": "modified"},

    # git checkout -- <file> (untracked files are deleted instead)
    {"trigger": "discard", "source": "modified", "dest": "committed"},
    {"trigger": "discard", "source": "staged", "dest": "committed"},

    # git reset --soft HEAD~1
    {"trigger": "uncommit", "source": "committed", "dest": "staged"},
]

# State values must match PullRequestStatus enum
PR_STATES = ["open", "merged"]

PR_TRANSITIONS = [
    {"trigger": "merge", "source": "open", "dest": "merged"},
]


def _build_trigger_lookup(transitions: list[dict]) -> dict[tuple[str, str], str]:
    """Build lookup from (source, dest) -> trigger name."""
    lookup: dict[tuple[str, str], str] = {}
    for t in transitions:
        key = (t["source"], t["dest"])
        if key not in lookup:  # First trigger wins for a given source->dest
            lookup[key] = t["trigger"]
    return lookup


FILE_TRIGGER_FOR = _build_trigger_lookup(FILE_TRANSITIONS)
PR_TRIGGER_FOR = _build_trigger_lookup(PR_TRANSITIONS)


class _StatusFSM:
    """Shared wiring for the status machines."""

    STATES: list[str] = []
    TRANSITIONS: list[dict] = []
    TRIGGER_FOR: dict[tuple[str, str], str] = {}

    def __init__(self, subject: str, status: str):
        """
        Args:
            subject: Name used in logs and errors (filename or "PR #n")
            status: Current status value
        """
        if status not in self.STATES:
            raise InvalidTransition(subject, status, "?")
        self.subject = subject
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial=status,
            auto_transitions=False,
            send_event=True,
            after_state_change="on_state_change",
        )

    def on_state_change(self, event) -> None:
        from_state = event.transition.source
        to_state = event.transition.dest
        trigger = event.event.name
        logger.debug(f"[FSM] {self.subject}: {from_state} -> {to_state} ({trigger})")

    def move_to(self, dest: str) -> str:
        """Move to dest through whichever trigger connects the two states.

        Returns the trigger used.

        Raises:
            InvalidTransition: if no trigger leads from the current state to dest
        """
        source = self.state
        trigger = self.TRIGGER_FOR.get((source, dest))
        if trigger is None:
            raise InvalidTransition(self.subject, source, dest)
        try:
            getattr(self, trigger)()
        except MachineError as e:
            raise InvalidTransition(self.subject, source, dest) from e
        return trigger


class FileStatusFSM(_StatusFSM):
    """Status machine for one working tree file."""
    STATES = FILE_STATES
    TRANSITIONS = FILE_TRANSITIONS
    TRIGGER_FOR = FILE_TRIGGER_FOR


class PullRequestFSM(_StatusFSM):
    """Status machine for one pull request."""
    STATES = PR_STATES
    TRANSITIONS = PR_TRANSITIONS
    TRIGGER_FOR = PR_TRIGGER_FOR

