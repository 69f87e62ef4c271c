"""定期実行スケジューラインターフェース."""
from abc import ABC, abstractmethod
from typing import Callable


class ScheduledTask(ABC):
    """キャンセル可能な定期実行タスク."""

    @abstractmethod
    def cancel(self) -> None:
        """タスクを停止する（冪等）."""
        pass

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        """停止済みかどうか."""
        pass


class Scheduler(ABC):
    """定期実行スケジューラのインターフェース."""

    @abstractmethod
    def schedule_repeating(self, interval_seconds: float, callback: Callable[[], None]) -> ScheduledTask:
        """interval_seconds ごとに callback を実行するタスクを登録する.

        初回実行は interval_seconds 経過後。
        """
        pass
