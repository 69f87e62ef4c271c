"""削除予定日までのカウントダウンを定期的に再計算するティッカー."""
from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import Callable

from src.domain.entities import DeletionRequest
from src.domain.ports import ScheduledTask, Scheduler
from src.domain.services import DeletionLifecycleService
from src.domain.value_objects import DeletionViewModel

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CountdownTicker:
    """保持済みの削除リクエストから表示内容を再導出し続けるティッカー.

    ストレージへの再取得は行わない。開始時に即時1回導出し、以降は
    interval_seconds ごとに導出する。自分からは停止しない。
    """

    DEFAULT_INTERVAL_SECONDS = 60

    def __init__(
        self,
        scheduler: Scheduler,
        on_tick: Callable[[DeletionViewModel], None],
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        clock: Callable[[], datetime] = _utc_now,
        display_tz: tzinfo = timezone.utc,
    ) -> None:
        """初期化."""
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._scheduler = scheduler
        self._on_tick = on_tick
        self._interval_seconds = interval_seconds
        self._clock = clock
        self._display_tz = display_tz
        self._request: DeletionRequest | None = None
        self._task: ScheduledTask | None = None

    @property
    def interval_seconds(self) -> float:
        """更新間隔（秒）."""
        return self._interval_seconds

    @property
    def is_running(self) -> bool:
        """実行中かどうか."""
        return self._task is not None and not self._task.cancelled

    def start(self, request: DeletionRequest) -> None:
        """カウントダウンを開始する。実行中のものがあれば先に停止する."""
        self.stop()
        self._request = request
        self.tick()
        self._task = self._scheduler.schedule_repeating(self._interval_seconds, self.tick)
        logger.info("Countdown started for deletion date %s", request.deletion_date.isoformat())

    def stop(self) -> None:
        """カウントダウンを停止する（冪等）."""
        if self._task is not None:
            self._task.cancel()
            self._task = None
            logger.info("Countdown stopped")
        self._request = None

    def tick(self) -> None:
        """表示内容を1回再導出する。描画側の例外はここで止める."""
        request = self._request
        if request is None:
            return
        try:
            view_model = DeletionLifecycleService.build_view_model(
                request, self._clock(), self._display_tz
            )
            self._on_tick(view_model)
        except Exception:
            logger.exception("Countdown tick failed")
