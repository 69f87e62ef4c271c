"""Supabase 削除リクエストリポジトリ実装."""
import logging
from datetime import datetime

import requests

from src.domain.entities import DeletionRequest
from src.domain.enums import DeletionRequestStatus
from src.domain.identifiers import DeletionRequestId, UserId
from src.domain.ports import (
    DeletionRequestAlreadyExistsError,
    DeletionRequestRepository,
    DeletionRequestRepositoryError,
)
from src.domain.value_objects import Email
from src.infrastructure.clients import SupabaseApiError, SupabaseClient

logger = logging.getLogger(__name__)

# PostgREST: 単一オブジェクト指定で0件だった場合のエラーコード
NO_ROWS_CODE = "PGRST116"
# PostgreSQL: 一意制約違反
UNIQUE_VIOLATION_CODE = "23505"


class SupabaseDeletionRequestRepository(DeletionRequestRepository):
    """Supabase の account_deletion_requests テーブルを使うリポジトリ.

    user_id の一意制約と RLS はテーブル側で設定されている前提。
    """

    TABLE_NAME = "account_deletion_requests"
    _SINGLE_OBJECT = {"Accept": "application/vnd.pgrst.object+json"}

    def __init__(self, client: SupabaseClient) -> None:
        """初期化."""
        self._client = client
        self._path = f"/rest/v1/{self.TABLE_NAME}"

    def find_by_user_id(self, user_id: UserId) -> DeletionRequest | None:
        """ユーザーIDで検索する."""
        try:
            response = self._client.request(
                "GET",
                self._path,
                params={"select": "*", "user_id": f"eq.{user_id.value}"},
                headers=self._SINGLE_OBJECT,
            )
        except SupabaseApiError as e:
            if e.code == NO_ROWS_CODE:
                return None
            logger.error(f"Failed to fetch deletion request for {user_id}: {e}")
            raise DeletionRequestRepositoryError(e.message) from e
        return self._decode(response)

    def insert(self, request: DeletionRequest) -> DeletionRequest:
        """削除リクエストを登録する."""
        try:
            response = self._client.request(
                "POST",
                self._path,
                json=self._to_row(request),
                headers={"Prefer": "return=representation", **self._SINGLE_OBJECT},
            )
        except SupabaseApiError as e:
            if e.code == UNIQUE_VIOLATION_CODE:
                raise DeletionRequestAlreadyExistsError(e.message) from e
            logger.error(f"Failed to insert deletion request for {request.user_id}: {e}")
            raise DeletionRequestRepositoryError(e.message) from e
        return self._decode(response)

    def delete(self, request: DeletionRequest) -> None:
        """削除リクエストをIDで削除する."""
        if request.request_id is None:
            raise DeletionRequestRepositoryError("Deletion request has no id")
        try:
            self._client.request(
                "DELETE",
                self._path,
                params={"id": f"eq.{request.request_id.value}"},
            )
        except SupabaseApiError as e:
            logger.error(f"Failed to delete deletion request {request.request_id}: {e}")
            raise DeletionRequestRepositoryError(e.message) from e

    def _decode(self, response: requests.Response) -> DeletionRequest:
        """レスポンスの行を復元する。不正な行はリポジトリエラーにする."""
        try:
            return self._from_row(response.json())
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed deletion request row: {e!r}")
            raise DeletionRequestRepositoryError(f"Malformed deletion request row: {e}") from e

    @staticmethod
    def _to_row(request: DeletionRequest) -> dict:
        """DeletionRequest をテーブル行に変換する（id はDB側で採番）."""
        return {
            "user_id": request.user_id.value,
            "email": request.email.value,
            "requested_at": request.requested_at.isoformat(),
            "deletion_date": request.deletion_date.isoformat(),
            "status": request.status.value,
        }

    @staticmethod
    def _from_row(row: dict) -> DeletionRequest:
        """テーブル行から DeletionRequest を復元する."""
        return DeletionRequest(
            user_id=UserId(row["user_id"]),
            email=Email(row["email"]),
            requested_at=_parse_timestamp(row["requested_at"]),
            deletion_date=_parse_timestamp(row["deletion_date"]),
            status=DeletionRequestStatus(row.get("status") or DeletionRequestStatus.PENDING.value),
            request_id=DeletionRequestId(str(row["id"])),
        )


def _parse_timestamp(value: str) -> datetime:
    """PostgREST の timestamptz 文字列を datetime に変換する."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
