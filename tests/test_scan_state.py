"""Tests for scan status transitions."""

import asyncio
import itertools
from datetime import datetime

import pytest

from clearance_scout.scan.state import (
    TRANSITIONS,
    IllegalTransitionError,
    ScanStatus,
    can_transition,
    sources_for,
)

ALLOWED = {
    (ScanStatus.PENDING, ScanStatus.RUNNING),
    (ScanStatus.RUNNING, ScanStatus.COMPLETED),
    (ScanStatus.RUNNING, ScanStatus.FAILED),
}


def test_transition_table():
    pairs = {(source, target) for source, targets in TRANSITIONS.items() for target in targets}
    assert pairs == ALLOWED


@pytest.mark.parametrize("current,target", list(itertools.product(ScanStatus, ScanStatus)))
def test_can_transition(current, target):
    assert can_transition(current.value, target.value) == ((current, target) in ALLOWED)


def test_can_transition_unknown_state():
    assert not can_transition("cancelled", "running")


def test_sources_for():
    assert sources_for(ScanStatus.RUNNING) == [ScanStatus.PENDING]
    assert sources_for(ScanStatus.FAILED) == [ScanStatus.RUNNING]
    assert sources_for(ScanStatus.PENDING) == []


async def _pending_scan(storage):
    await storage.upsert_user("state-user")
    reservation = await storage.create_scan_with_quota(
        "state-user", 100, *_forever(), retailer="home-depot", zip_code="90017"
    )
    return reservation.scan


def _forever():
    return datetime(2000, 1, 1), datetime(2100, 1, 1)


@pytest.mark.asyncio
async def test_happy_path_sets_timestamps(storage):
    scan = await _pending_scan(storage)
    assert scan.started_at is None and scan.completed_at is None

    running = await storage.transition_scan(scan.id, ScanStatus.RUNNING)
    assert running.status == "running"
    assert running.started_at is not None

    done = await storage.transition_scan(scan.id, ScanStatus.COMPLETED, result_count=3, clearance_count=2)
    assert done.status == "completed"
    assert done.completed_at is not None
    assert done.result_count == 3
    assert done.clearance_count == 2


@pytest.mark.asyncio
async def test_pending_cannot_complete(storage):
    scan = await _pending_scan(storage)
    with pytest.raises(IllegalTransitionError) as exc:
        await storage.transition_scan(scan.id, ScanStatus.COMPLETED)
    assert exc.value.current == "pending"
    assert (await storage.get_scan(scan.id)).completed_at is None


@pytest.mark.asyncio
async def test_completed_at_set_exactly_once(storage):
    scan = await _pending_scan(storage)
    await storage.transition_scan(scan.id, ScanStatus.RUNNING)
    done = await storage.transition_scan(scan.id, ScanStatus.COMPLETED)

    for target in (ScanStatus.FAILED, ScanStatus.COMPLETED, ScanStatus.RUNNING):
        with pytest.raises(IllegalTransitionError):
            await storage.transition_scan(scan.id, target)

    again = await storage.get_scan(scan.id)
    assert again.status == "completed"
    assert again.completed_at == done.completed_at


@pytest.mark.asyncio
async def test_racing_terminal_writers_only_one_wins(storage):
    scan = await _pending_scan(storage)
    await storage.transition_scan(scan.id, ScanStatus.RUNNING)

    outcomes = await asyncio.gather(
        storage.transition_scan(scan.id, ScanStatus.COMPLETED),
        storage.transition_scan(scan.id, ScanStatus.FAILED),
        return_exceptions=True,
    )

    errors = [o for o in outcomes if isinstance(o, IllegalTransitionError)]
    assert len(errors) == 1


@pytest.mark.asyncio
async def test_missing_scan(storage):
    with pytest.raises(IllegalTransitionError) as exc:
        await storage.transition_scan("does-not-exist", ScanStatus.RUNNING)
    assert exc.value.current is None
