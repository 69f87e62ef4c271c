"""DynamoDB 削除リクエストリポジトリ実装."""
import logging
import os
from datetime import datetime

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from src.domain.entities import DeletionRequest
from src.domain.enums import DeletionRequestStatus
from src.domain.identifiers import DeletionRequestId, UserId
from src.domain.ports import (
    DeletionRequestAlreadyExistsError,
    DeletionRequestRepository,
    DeletionRequestRepositoryError,
)
from src.domain.value_objects import Email

logger = logging.getLogger(__name__)


class DynamoDBDeletionRequestRepository(DeletionRequestRepository):
    """DynamoDB 削除リクエストリポジトリ.

    パーティションキーを user_id にすることで1ユーザー1件を保証する。
    """

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "DELETION_REQUEST_TABLE_NAME", "account-deletion-requests"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def find_by_user_id(self, user_id: UserId) -> DeletionRequest | None:
        """ユーザーIDで検索する."""
        try:
            response = self._table.get_item(Key={"user_id": user_id.value})
        except ClientError as e:
            logger.error(f"Failed to get deletion request for {user_id}: {e}")
            raise DeletionRequestRepositoryError(_error_message(e)) from e
        item = response.get("Item")
        if item is None:
            return None
        try:
            return self._from_dynamodb_item(item)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Malformed deletion request item for {user_id}: {e!r}")
            raise DeletionRequestRepositoryError(f"Malformed deletion request item: {e}") from e

    def insert(self, request: DeletionRequest) -> DeletionRequest:
        """削除リクエストを登録する."""
        stored = request.with_id(DeletionRequestId.generate())
        try:
            self._table.put_item(
                Item=self._to_dynamodb_item(stored),
                ConditionExpression="attribute_not_exists(user_id)",
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DeletionRequestAlreadyExistsError(
                    f"Deletion request already exists for user: {request.user_id}"
                ) from e
            logger.error(f"Failed to save deletion request for {request.user_id}: {e}")
            raise DeletionRequestRepositoryError(_error_message(e)) from e
        return stored

    def delete(self, request: DeletionRequest) -> None:
        """削除リクエストをIDで削除する."""
        if request.request_id is None:
            raise DeletionRequestRepositoryError("Deletion request has no id")
        try:
            self._table.delete_item(
                Key={"user_id": request.user_id.value},
                ConditionExpression=Attr("request_id").eq(request.request_id.value),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                logger.info("Deletion request already removed: %s", request.request_id)
                return
            logger.error(f"Failed to delete deletion request {request.request_id}: {e}")
            raise DeletionRequestRepositoryError(_error_message(e)) from e

    @staticmethod
    def _to_dynamodb_item(request: DeletionRequest) -> dict:
        """DeletionRequest を DynamoDB アイテムに変換する."""
        return {
            "user_id": request.user_id.value,
            "request_id": request.request_id.value if request.request_id else "",
            "email": request.email.value,
            "requested_at": request.requested_at.isoformat(),
            "deletion_date": request.deletion_date.isoformat(),
            "status": request.status.value,
        }

    @staticmethod
    def _from_dynamodb_item(item: dict) -> DeletionRequest:
        """DynamoDB アイテムから DeletionRequest を復元する."""
        return DeletionRequest(
            user_id=UserId(item["user_id"]),
            email=Email(item["email"]),
            requested_at=datetime.fromisoformat(item["requested_at"]),
            deletion_date=datetime.fromisoformat(item["deletion_date"]),
            status=DeletionRequestStatus(item.get("status", DeletionRequestStatus.PENDING.value)),
            request_id=DeletionRequestId(item["request_id"]),
        )


def _error_message(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Message") or str(error)
