"""Scan lifecycle states and the transitions allowed between them."""

from enum import Enum


class ScanStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATES


TERMINAL_STATES = frozenset({ScanStatus.COMPLETED, ScanStatus.FAILED})

TRANSITIONS: dict[ScanStatus, frozenset[ScanStatus]] = {
    ScanStatus.PENDING: frozenset({ScanStatus.RUNNING}),
    ScanStatus.RUNNING: frozenset({ScanStatus.COMPLETED, ScanStatus.FAILED}),
    ScanStatus.COMPLETED: frozenset(),
    ScanStatus.FAILED: frozenset(),
}


class IllegalTransitionError(Exception):
    """Raised when a scan status change is not an allowed transition."""

    def __init__(self, scan_id: str, current: str | None, target: str):
        self.scan_id = scan_id
        self.current = current
        self.target = target
        super().__init__(f"Scan {scan_id}: cannot move from {current!r} to {target!r}")


def sources_for(target: ScanStatus) -> list[ScanStatus]:
    """States from which ``target`` may be entered."""
    return [source for source, targets in TRANSITIONS.items() if target in targets]


def can_transition(current: str | ScanStatus, target: str | ScanStatus) -> bool:
    try:
        current, target = ScanStatus(current), ScanStatus(target)
    except ValueError:
        return False
    return target in TRANSITIONS[current]
