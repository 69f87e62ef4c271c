"""CountdownTickerのテスト."""
import logging
from datetime import datetime, timedelta, timezone

import pytest

from src.application import CountdownTicker
from src.domain.entities import DeletionRequest
from src.domain.identifiers import DeletionRequestId, UserId
from src.domain.ports import ScheduledTask, Scheduler
from src.domain.value_objects import Email


class FakeTask(ScheduledTask):
    """手動で発火させるタスク."""

    def __init__(self, interval_seconds, callback):
        self.interval_seconds = interval_seconds
        self.callback = callback
        self._cancelled = False

    def cancel(self):
        self._cancelled = True

    @property
    def cancelled(self):
        return self._cancelled

    def fire(self):
        if not self._cancelled:
            self.callback()


class FakeScheduler(Scheduler):
    """登録されたタスクを保持するだけのスケジューラ."""

    def __init__(self):
        self.tasks = []

    def schedule_repeating(self, interval_seconds, callback):
        task = FakeTask(interval_seconds, callback)
        self.tasks.append(task)
        return task

    def active_tasks(self):
        return [task for task in self.tasks if not task.cancelled]


class FakeClock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


def _make_request(requested_at: datetime) -> DeletionRequest:
    return DeletionRequest.create(
        UserId("user-123"), Email("test@example.com"), requested_at
    ).with_id(DeletionRequestId("req-1"))


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 1, tzinfo=timezone.utc))


class TestCountdownTicker:
    """カウントダウンティッカーのテスト."""

    def test_開始時に即時1回導出する(self, clock):
        scheduler = FakeScheduler()
        ticks = []
        ticker = CountdownTicker(scheduler, ticks.append, clock=clock)
        ticker.start(_make_request(clock.now))
        assert len(ticks) == 1
        assert ticks[0].days_remaining == 10
        assert ticker.is_running is True

    def test_既定の間隔は60秒(self, clock):
        scheduler = FakeScheduler()
        ticker = CountdownTicker(scheduler, lambda vm: None, clock=clock)
        ticker.start(_make_request(clock.now))
        assert scheduler.tasks[0].interval_seconds == 60

    def test_定期実行で保持済みの予定日から再計算する(self, clock):
        scheduler = FakeScheduler()
        ticks = []
        ticker = CountdownTicker(scheduler, ticks.append, clock=clock)
        ticker.start(_make_request(clock.now))

        clock.now = datetime(2024, 1, 9, tzinfo=timezone.utc)
        scheduler.tasks[0].fire()
        assert ticks[-1].days_remaining == 2

        clock.now = datetime(2024, 1, 10, 23, 0, tzinfo=timezone.utc)
        scheduler.tasks[0].fire()
        assert ticks[-1].days_remaining == 0
        assert ticks[-1].show_cancel is False

    def test_再開始すると前のタスクを停止する(self, clock):
        scheduler = FakeScheduler()
        ticker = CountdownTicker(scheduler, lambda vm: None, clock=clock)
        ticker.start(_make_request(clock.now))
        ticker.start(_make_request(clock.now + timedelta(hours=1)))
        assert len(scheduler.tasks) == 2
        assert scheduler.tasks[0].cancelled is True
        assert len(scheduler.active_tasks()) == 1

    def test_停止後は導出しない(self, clock):
        scheduler = FakeScheduler()
        ticks = []
        ticker = CountdownTicker(scheduler, ticks.append, clock=clock)
        ticker.start(_make_request(clock.now))
        ticker.stop()
        ticker.tick()
        assert len(ticks) == 1
        assert ticker.is_running is False
        assert scheduler.active_tasks() == []

    def test_停止は冪等(self, clock):
        ticker = CountdownTicker(FakeScheduler(), lambda vm: None, clock=clock)
        ticker.stop()
        ticker.stop()
        assert ticker.is_running is False

    def test_描画の例外は外に出さずタスクも止めない(self, clock, caplog):
        scheduler = FakeScheduler()
        calls = []

        def failing_render(view_model):
            calls.append(view_model)
            raise RuntimeError("render failed")

        ticker = CountdownTicker(scheduler, failing_render, clock=clock)
        with caplog.at_level(logging.ERROR):
            ticker.start(_make_request(clock.now))
            scheduler.tasks[0].fire()
        assert len(calls) == 2
        assert ticker.is_running is True
        assert "Countdown tick failed" in caplog.text

    def test_間隔が0以下はエラー(self, clock):
        with pytest.raises(ValueError):
            CountdownTicker(FakeScheduler(), lambda vm: None, interval_seconds=0, clock=clock)
