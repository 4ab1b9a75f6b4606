"""Tests for the periodic refresh snapshot."""

from datetime import datetime

from models.life import InvalidBirthdate, LifeGrid, MissingLifespanSelection
from services.refresh import refresh


def test_schedule_only(sample_events):
    now = datetime(2025, 3, 10, 9, 30)
    snapshot = refresh(now, events=sample_events)
    assert snapshot.now == now
    assert snapshot.layout.peak_overlap == 2
    assert [s.is_current for s in snapshot.statuses] == [True, False]
    assert snapshot.life is None
    assert snapshot.progress is None
    assert snapshot.scroll_offset is None


def test_lock_to_now(sample_events):
    snapshot = refresh(
        datetime(2025, 3, 10, 12), events=sample_events, viewport_height=600, lock_to_now=True
    )
    assert snapshot.scroll_offset == 4900 / 2 - 300


def test_lock_to_now_uses_the_shared_offset_helper(sample_events, monkeypatch):
    from services import refresh as refresh_module

    calls = []

    def offset(now, events, viewport_height):
        calls.append((now, tuple(events), viewport_height))
        return 123.0

    monkeypatch.setattr(refresh_module, "lock_to_now_offset", offset)
    now = datetime(2025, 3, 10, 12)
    snapshot = refresh(now, events=sample_events, viewport_height=600, lock_to_now=True)
    assert snapshot.scroll_offset == 123.0
    assert calls == [(now, tuple(sample_events), 600)]


def test_viewport_without_lock_leaves_scroll_alone():
    snapshot = refresh(datetime(2025, 3, 10, 12), viewport_height=600)
    assert snapshot.scroll_offset is None


def test_life_grid_and_progress():
    snapshot = refresh(datetime(2020, 1, 1), birthdate="2000-01-01", lifespan="healthy")
    assert isinstance(snapshot.life, LifeGrid)
    assert snapshot.progress.elapsed_units == 1043


def test_life_prompt_states():
    snapshot = refresh(datetime(2020, 1, 1), birthdate="2000-01-01")
    assert isinstance(snapshot.life, MissingLifespanSelection)
    assert snapshot.progress is None

    snapshot = refresh(datetime(2020, 1, 1), birthdate="2030-01-01", lifespan="healthy")
    assert isinstance(snapshot.life, InvalidBirthdate)
    assert snapshot.progress is None


def test_refresh_is_idempotent(sample_events):
    now = datetime(2025, 3, 10, 9, 30)
    kwargs = dict(events=sample_events, birthdate="1990-05-17", lifespan="extreme", unit="day")
    assert refresh(now, **kwargs) == refresh(now, **kwargs)
