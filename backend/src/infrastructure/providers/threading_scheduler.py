"""スレッドによる定期実行スケジューラ実装."""
from __future__ import annotations

import logging
import threading
from typing import Callable

from src.domain.ports import ScheduledTask, Scheduler

logger = logging.getLogger(__name__)


class _ThreadTask(ScheduledTask):
    """デーモンスレッドで callback を繰り返し実行するタスク."""

    def __init__(self, interval_seconds: float, callback: Callable[[], None]) -> None:
        self._interval_seconds = interval_seconds
        self._callback = callback
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, name="countdown-ticker", daemon=True)

    def start(self) -> None:
        self._thread.start()

    @property
    def cancelled(self) -> bool:
        return self._stop_event.is_set()

    def cancel(self) -> None:
        self._stop_event.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join(timeout=1.0)

    def _run(self) -> None:
        # wait() は停止指示で即座に True を返す
        while not self._stop_event.wait(self._interval_seconds):
            try:
                self._callback()
            except Exception:
                logger.exception("Scheduled task failed")


class ThreadingScheduler(Scheduler):
    """タスクごとにデーモンスレッドを起動するスケジューラ."""

    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> ScheduledTask:
        """interval_seconds ごとに callback を実行するタスクを登録する."""
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        task = _ThreadTask(interval_seconds, callback)
        task.start()
        return task
