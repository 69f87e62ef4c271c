"""アカウント削除ポータルの画面イベントハンドラー."""
from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import Callable

from src.application import (
    CancelAccountDeletionUseCase,
    CountdownTicker,
    GetDeletionRequestUseCase,
    RequestAccountDeletionUseCase,
    SessionContext,
    SignInUseCase,
    SignOutUseCase,
)
from src.domain.entities import Session
from src.domain.enums import SessionEventType, ViewState
from src.domain.ports import (
    AuthenticationError,
    DeletionRequestRepository,
    DeletionRequestRepositoryError,
    IdentityProvider,
    Scheduler,
    SessionEvent,
)
from src.domain.services import DeletionLifecycleService
from src.domain.value_objects import CredentialsValidationError, LoginCredentials

from .page_element import PageElement
from .view import DeletionPageView
from .view_controller import DeletionPageController, resolve_view_state

logger = logging.getLogger(__name__)

SIGN_IN = "sign_in"
CONFIRM_DELETION = "confirm_deletion"
CANCEL_DELETION = "cancel_deletion"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DeletionPortal:
    """ログイン・削除確定・削除キャンセルの画面イベントを処理する.

    認証基盤の SIGNED_IN / SIGNED_OUT イベントを起点に画面を切り替え、
    削除リクエストの登録・削除後は取得し直さずに再描画する。
    各ハンドラーは受け付けて成功した場合に True を返す。
    """

    LOGIN_FAILED_MESSAGE = "An error occurred during login. Please try again."
    CANCEL_PROMPT_MESSAGE = "Cancel deletion request?"

    def __init__(
        self,
        identity_provider: IdentityProvider,
        repository: DeletionRequestRepository,
        view: DeletionPageView,
        scheduler: Scheduler,
        context: SessionContext | None = None,
        clock: Callable[[], datetime] = _utc_now,
        display_tz: tzinfo = timezone.utc,
        countdown_interval_seconds: float = CountdownTicker.DEFAULT_INTERVAL_SECONDS,
    ) -> None:
        """初期化."""
        self._identity_provider = identity_provider
        self._context = context or SessionContext()
        self._clock = clock
        self._display_tz = display_tz
        self._controller = DeletionPageController(view)
        self._ticker = CountdownTicker(
            scheduler,
            self._controller.render_countdown,
            interval_seconds=countdown_interval_seconds,
            clock=clock,
            display_tz=display_tz,
        )
        self._sign_in = SignInUseCase(identity_provider)
        self._sign_out = SignOutUseCase(identity_provider)
        self._get_request = GetDeletionRequestUseCase(repository)
        self._request_deletion = RequestAccountDeletionUseCase(repository)
        self._cancel_deletion = CancelAccountDeletionUseCase(repository)
        self._cancel_intent = False
        self._started = False

    @property
    def context(self) -> SessionContext:
        """セッションコンテキスト."""
        return self._context

    @property
    def ticker(self) -> CountdownTicker:
        """カウントダウンティッカー."""
        return self._ticker

    @property
    def view_state(self) -> ViewState:
        """現在の画面状態."""
        return resolve_view_state(self._context.current_session, self._context.current_request)

    # ---- 起動・終了 ----

    def start(self) -> None:
        """保存済みセッションを確認して初期画面を表示する（二重起動は無視）."""
        if self._started:
            logger.warning("Portal already started, skipping")
            return
        self._started = True
        self._context.init()

        try:
            session = self._current_session()
            self._identity_provider.on_session_change(self._handle_session_event)
            if session is not None:
                logger.info("Session found: %s", session.email.masked())
                self._enter_session(session)
            else:
                self._show_login()
        except Exception:
            logger.exception("Fatal init error")

    def shutdown(self) -> None:
        """カウントダウンを停止する."""
        self._ticker.stop()

    def _current_session(self) -> Session | None:
        try:
            return self._identity_provider.get_current_session()
        except AuthenticationError as e:
            logger.error(f"Session error: {e}")
            return None

    # ---- 認証イベント ----

    def _handle_session_event(self, event: SessionEvent) -> None:
        logger.info("Auth event: %s", event.event_type.value)
        if event.event_type == SessionEventType.SIGNED_IN and event.session is not None:
            self._enter_session(event.session)
        elif event.event_type == SessionEventType.SIGNED_OUT:
            self._show_login()

    def _enter_session(self, session: Session) -> None:
        self._context.authenticate(session)
        self.load()

    def _show_login(self) -> None:
        # ログイン画面を描画する前にカウントダウンと保持状態を破棄する
        self._ticker.stop()
        self._cancel_intent = False
        self._context.reset()
        self._controller.render_logged_out()

    # ---- 画面イベント ----

    def submit_login(self, email: str, password: str) -> bool:
        """ログインフォームの送信."""
        try:
            credentials = LoginCredentials(email=email, password=password)
        except CredentialsValidationError as e:
            self._controller.show_login_error(str(e))
            return False

        if not self._context.try_begin(SIGN_IN):
            logger.warning("Sign-in already in progress, ignoring submission")
            return False

        self._controller.hide_login_error()
        self._controller.set_login_busy(True)
        try:
            self._sign_in.execute(credentials.email, credentials.password)
        except AuthenticationError as e:
            logger.error(f"Login failed: {e}")
            self._controller.show_login_error(str(e))
            return False
        except Exception:
            logger.exception("Login error")
            self._controller.show_login_error(self.LOGIN_FAILED_MESSAGE)
            return False
        finally:
            self._controller.set_login_busy(False)
            self._context.finish(SIGN_IN)
        return True

    def click_logout(self) -> bool:
        """ログアウトボタン。画面遷移は SIGNED_OUT イベントで行う."""
        try:
            self._sign_out.execute()
        except AuthenticationError as e:
            logger.error(f"Logout failed: {e}")
            self._controller.show_error(str(e))
            return False
        return True

    def load(self) -> bool:
        """削除リクエストを取得して削除管理画面を表示する."""
        session = self._context.current_session
        if session is None:
            return False
        try:
            request = self._get_request.execute(session.user_id)
        except DeletionRequestRepositoryError as e:
            logger.error(f"Fetch error: {e}")
            # 保持状態は変更せず、保持中のリクエストがあればそのまま表示する
            if self._context.current_request is not None:
                self._render_current()
            else:
                self._ticker.stop()
                view_model = DeletionLifecycleService.build_view_model(None, self._clock(), self._display_tz)
                self._controller.render_deletion_page(session, view_model)
            self._controller.show_error(str(e))
            return False

        self._context.replace_request(request)
        self._render_current()
        return True

    def retry(self) -> bool:
        """削除リクエストを再取得する."""
        return self.load()

    def click_confirm(self) -> bool:
        """削除確定ボタン."""
        session = self._context.current_session
        if session is None:
            return False
        if self._context.current_request is not None:
            logger.warning("Deletion already requested for %s, ignoring confirmation", session.user_id)
            return False
        if not self._context.try_begin(CONFIRM_DELETION):
            logger.warning("Deletion request already in progress, ignoring confirmation")
            return False

        self._controller.set_operation_busy(PageElement.CONFIRM_BUTTON, True)
        try:
            result = self._request_deletion.execute(session, self._clock())
        except DeletionRequestRepositoryError as e:
            logger.error(f"Failed to request deletion: {e}")
            self._controller.show_error(str(e))
            return False
        finally:
            self._controller.set_operation_busy(PageElement.CONFIRM_BUTTON, False)
            self._context.finish(CONFIRM_DELETION)

        logger.info("Deletion scheduled for %s: %d days remaining", session.email.masked(), result.days_remaining)
        self._context.replace_request(result.request)
        self._render_current()
        return True

    def click_cancel(self) -> bool:
        """キャンセルボタン。確認を表示するだけで削除はしない."""
        if self._context.current_request is None:
            return False
        if self._context.is_in_flight(CANCEL_DELETION):
            logger.warning("Cancellation already in progress, ignoring click")
            return False
        self._cancel_intent = True
        self._controller.show_cancel_prompt(self.CANCEL_PROMPT_MESSAGE)
        return True

    def dismiss_cancel(self) -> None:
        """キャンセル確認で「いいえ」を選んだ."""
        self._cancel_intent = False
        self._controller.hide_cancel_prompt()

    def confirm_cancel(self) -> bool:
        """キャンセル確認で「はい」を選んだ."""
        request = self._context.current_request
        if not self._cancel_intent or request is None:
            return False
        self._cancel_intent = False
        self._controller.hide_cancel_prompt()
        if not self._context.try_begin(CANCEL_DELETION):
            logger.warning("Cancellation already in progress, ignoring confirmation")
            return False

        self._controller.set_operation_busy(PageElement.CANCEL_BUTTON, True)
        try:
            self._cancel_deletion.execute(request)
        except DeletionRequestRepositoryError as e:
            logger.error(f"Failed to cancel deletion: {e}")
            self._controller.show_error(str(e))
            return False
        finally:
            self._controller.set_operation_busy(PageElement.CANCEL_BUTTON, False)
            self._context.finish(CANCEL_DELETION)

        self._context.replace_request(None)
        self._render_current()
        return True

    # ---- 描画 ----

    def _render_current(self) -> None:
        session = self._context.current_session
        request = self._context.current_request
        # 描画中に前のリクエストのカウントダウンが上書きしないよう先に止める
        self._ticker.stop()
        view_model = DeletionLifecycleService.build_view_model(request, self._clock(), self._display_tz)
        state = self._controller.render(session, request, view_model)
        if state == ViewState.PENDING and request is not None:
            self._ticker.start(request)
