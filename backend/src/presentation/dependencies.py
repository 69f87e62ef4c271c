"""依存性注入コンテナ."""
import logging

from src.config import Settings, load_settings
from src.domain.ports import DeletionRequestRepository, IdentityProvider, Scheduler
from src.infrastructure import (
    InMemoryDeletionRequestRepository,
    InMemoryIdentityProvider,
    SupabaseClient,
    ThreadingScheduler,
)

from .portal import DeletionPortal
from .view import DeletionPageView

logger = logging.getLogger(__name__)


class Dependencies:
    """依存性を管理するコンテナ.

    IDENTITY_PROVIDER / DELETION_REQUEST_STORE 環境変数で実装を切り替える。
    未設定の場合はインメモリ実装を使用（ローカル開発・テスト用）。
    """

    _settings: Settings | None = None
    _supabase_client: SupabaseClient | None = None
    _identity_provider: IdentityProvider | None = None
    _deletion_request_repository: DeletionRequestRepository | None = None
    _scheduler: Scheduler | None = None

    @classmethod
    def get_settings(cls) -> Settings:
        """設定を取得する."""
        if cls._settings is None:
            cls._settings = load_settings()
        return cls._settings

    @classmethod
    def set_settings(cls, settings: Settings) -> None:
        """設定を差し替える（テスト用）."""
        cls._settings = settings

    @classmethod
    def get_supabase_client(cls) -> SupabaseClient:
        """認証とテーブル操作で共有する Supabase クライアントを取得する."""
        if cls._supabase_client is None:
            url, anon_key = cls.get_settings().require_supabase()
            cls._supabase_client = SupabaseClient(url, anon_key)
        return cls._supabase_client

    @classmethod
    def get_identity_provider(cls) -> IdentityProvider:
        """認証基盤を取得する."""
        if cls._identity_provider is None:
            settings = cls.get_settings()
            provider_type = settings.identity_provider
            if provider_type == "supabase":
                from src.infrastructure.providers import SupabaseIdentityProvider

                cls._identity_provider = SupabaseIdentityProvider(cls.get_supabase_client())
            elif provider_type == "cognito":
                from src.infrastructure.providers import CognitoIdentityProvider

                cls._identity_provider = CognitoIdentityProvider(settings.cognito_client_id)
            else:
                if provider_type != "in_memory":
                    logger.warning("Unknown IDENTITY_PROVIDER=%s, falling back to in-memory", provider_type)
                cls._identity_provider = InMemoryIdentityProvider()
        return cls._identity_provider

    @classmethod
    def set_identity_provider(cls, provider: IdentityProvider) -> None:
        """認証基盤を設定する（テスト用）."""
        cls._identity_provider = provider

    @classmethod
    def get_deletion_request_repository(cls) -> DeletionRequestRepository:
        """削除リクエストリポジトリを取得する."""
        if cls._deletion_request_repository is None:
            settings = cls.get_settings()
            store_type = settings.deletion_request_store
            if store_type == "supabase":
                from src.infrastructure.repositories import SupabaseDeletionRequestRepository

                cls._deletion_request_repository = SupabaseDeletionRequestRepository(
                    cls.get_supabase_client()
                )
            elif store_type == "dynamodb":
                from src.infrastructure.repositories import DynamoDBDeletionRequestRepository

                cls._deletion_request_repository = DynamoDBDeletionRequestRepository(
                    settings.deletion_request_table_name
                )
            else:
                if store_type != "in_memory":
                    logger.warning("Unknown DELETION_REQUEST_STORE=%s, falling back to in-memory", store_type)
                cls._deletion_request_repository = InMemoryDeletionRequestRepository()
        return cls._deletion_request_repository

    @classmethod
    def set_deletion_request_repository(cls, repository: DeletionRequestRepository) -> None:
        """削除リクエストリポジトリを設定する（テスト用）."""
        cls._deletion_request_repository = repository

    @classmethod
    def get_scheduler(cls) -> Scheduler:
        """定期実行スケジューラを取得する."""
        if cls._scheduler is None:
            cls._scheduler = ThreadingScheduler()
        return cls._scheduler

    @classmethod
    def set_scheduler(cls, scheduler: Scheduler) -> None:
        """定期実行スケジューラを設定する（テスト用）."""
        cls._scheduler = scheduler

    @classmethod
    def create_portal(cls, view: DeletionPageView) -> DeletionPortal:
        """設定に従って組み立てたポータルを返す."""
        settings = cls.get_settings()
        return DeletionPortal(
            identity_provider=cls.get_identity_provider(),
            repository=cls.get_deletion_request_repository(),
            view=view,
            scheduler=cls.get_scheduler(),
            display_tz=settings.display_tz(),
            countdown_interval_seconds=settings.countdown_interval_seconds,
        )

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._settings = None
        cls._supabase_client = None
        cls._identity_provider = None
        cls._deletion_request_repository = None
        cls._scheduler = None
