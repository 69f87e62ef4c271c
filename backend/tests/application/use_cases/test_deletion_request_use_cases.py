"""削除リクエスト関連ユースケースのテスト."""
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest

from src.application.use_cases import (
    CancelAccountDeletionUseCase,
    GetDeletionRequestUseCase,
    RequestAccountDeletionUseCase,
)
from src.domain.entities import DeletionRequest, Session
from src.domain.enums import DeletionRequestStatus
from src.domain.identifiers import UserId
from src.domain.ports import (
    DeletionRequestAlreadyExistsError,
    DeletionRequestRepository,
    DeletionRequestRepositoryError,
)
from src.domain.value_objects import Email
from src.infrastructure.repositories import InMemoryDeletionRequestRepository


def _make_session() -> Session:
    return Session(user_id=UserId("user-123"), email=Email("test@example.com"), access_token="token")


class TestRequestAccountDeletionUseCase:
    """アカウント削除リクエストのテスト."""

    def test_削除リクエストできる(self):
        repo = InMemoryDeletionRequestRepository()
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        result = RequestAccountDeletionUseCase(repo).execute(_make_session(), now)

        assert result.request.request_id is not None
        assert result.request.user_id == UserId("user-123")
        assert result.request.email == Email("test@example.com")
        assert result.request.status == DeletionRequestStatus.PENDING
        assert result.request.requested_at == now
        assert result.request.deletion_date == now + timedelta(days=10)
        assert result.days_remaining == 10

    def test_登録内容がリポジトリに保存される(self):
        repo = InMemoryDeletionRequestRepository()
        result = RequestAccountDeletionUseCase(repo).execute(_make_session())
        assert repo.find_by_user_id(UserId("user-123")) == result.request

    def test_同じユーザーの2件目はエラーで1件のまま(self):
        repo = InMemoryDeletionRequestRepository()
        use_case = RequestAccountDeletionUseCase(repo)
        use_case.execute(_make_session())
        with pytest.raises(DeletionRequestAlreadyExistsError):
            use_case.execute(_make_session())
        assert repo.count() == 1

    def test_保存失敗はリポジトリエラー(self):
        repo = MagicMock(spec=DeletionRequestRepository)
        repo.insert.side_effect = DeletionRequestRepositoryError("connection lost")
        with pytest.raises(DeletionRequestRepositoryError, match="connection lost"):
            RequestAccountDeletionUseCase(repo).execute(_make_session())


class TestCancelAccountDeletionUseCase:
    """アカウント削除キャンセルのテスト."""

    def test_キャンセルするとレコードが消える(self):
        repo = InMemoryDeletionRequestRepository()
        result = RequestAccountDeletionUseCase(repo).execute(_make_session())
        CancelAccountDeletionUseCase(repo).execute(result.request)
        assert repo.find_by_user_id(UserId("user-123")) is None

    def test_キャンセル後に再申請すると新しいリクエストになる(self):
        repo = InMemoryDeletionRequestRepository()
        request_use_case = RequestAccountDeletionUseCase(repo)
        first = request_use_case.execute(_make_session(), datetime(2024, 1, 1, tzinfo=timezone.utc))
        CancelAccountDeletionUseCase(repo).execute(first.request)
        second = request_use_case.execute(_make_session(), datetime(2024, 1, 3, tzinfo=timezone.utc))

        assert second.request.request_id != first.request.request_id
        assert second.request.requested_at == datetime(2024, 1, 3, tzinfo=timezone.utc)
        assert second.request.deletion_date == datetime(2024, 1, 13, tzinfo=timezone.utc)

    def test_未登録のリクエストはエラー(self):
        repo = InMemoryDeletionRequestRepository()
        session = _make_session()
        request = DeletionRequest.create(session.user_id, session.email)
        with pytest.raises(ValueError):
            CancelAccountDeletionUseCase(repo).execute(request)


class TestGetDeletionRequestUseCase:
    """削除リクエスト取得のテスト."""

    def test_未申請はNone(self):
        repo = InMemoryDeletionRequestRepository()
        assert GetDeletionRequestUseCase(repo).execute(UserId("user-123")) is None

    def test_申請済みはリクエストを返す(self):
        repo = InMemoryDeletionRequestRepository()
        result = RequestAccountDeletionUseCase(repo).execute(_make_session())
        assert GetDeletionRequestUseCase(repo).execute(UserId("user-123")) == result.request

    def test_取得失敗はリポジトリエラー(self):
        repo = MagicMock(spec=DeletionRequestRepository)
        repo.find_by_user_id.side_effect = DeletionRequestRepositoryError("timeout")
        with pytest.raises(DeletionRequestRepositoryError):
            GetDeletionRequestUseCase(repo).execute(UserId("user-123"))
