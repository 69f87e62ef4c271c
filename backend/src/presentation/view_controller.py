"""ログイン状態と削除リクエストから画面を切り替えるビューコントローラー."""
from src.domain.entities import DeletionRequest, Session
from src.domain.enums import ViewState
from src.domain.value_objects import DeletionViewModel

from .page_element import PageElement
from .view import DeletionPageView

LOGIN_BUTTON_LABEL = "Sign in to Continue"
LOGIN_BUTTON_BUSY_LABEL = "Signing in..."


def resolve_view_state(session: Session | None, request: DeletionRequest | None) -> ViewState:
    """表示すべき画面状態を返す."""
    if session is None:
        return ViewState.LOGGED_OUT
    if request is not None:
        return ViewState.PENDING
    return ViewState.NO_REQUEST_YET


class DeletionPageController:
    """渡された表示内容を描画するだけのコントローラー.

    リポジトリや認証基盤には触れない。
    """

    def __init__(self, view: DeletionPageView) -> None:
        """初期化."""
        self._view = view

    def render_logged_out(self) -> None:
        """ログイン画面を表示し、入力とエラー表示をリセットする."""
        view = self._view
        view.show(PageElement.LOGIN_PAGE)
        view.hide(PageElement.DELETION_PAGE)
        view.reset_login_form()
        view.hide(PageElement.LOGIN_ERROR)
        view.hide(PageElement.CANCEL_PROMPT)
        view.hide(PageElement.LOADING)
        view.hide(PageElement.ERROR_STATE)
        view.hide(PageElement.SUCCESS_MESSAGE)

    def render_deletion_page(self, session: Session, view_model: DeletionViewModel) -> None:
        """削除管理画面を表示する."""
        view = self._view
        view.hide(PageElement.LOGIN_PAGE)
        view.show(PageElement.DELETION_PAGE)
        view.hide(PageElement.ERROR_STATE)
        view.hide(PageElement.SUCCESS_MESSAGE)
        view.hide(PageElement.CANCEL_PROMPT)

        view.set_text(PageElement.USER_EMAIL, str(session.email))
        view.set_text(PageElement.REQUEST_DATE, view_model.requested_at_display)
        view.set_text(PageElement.DELETION_DATE, view_model.deletion_date_display)
        self.render_countdown(view_model)

        if view_model.has_pending_request:
            view.show(PageElement.SUCCESS_MESSAGE)

    def render_countdown(self, view_model: DeletionViewModel) -> None:
        """残り日数・メッセージ・ボタン表示を更新する."""
        view = self._view
        view.set_text(PageElement.DAYS_REMAINING, str(view_model.days_remaining))
        view.set_text(PageElement.COUNTDOWN_TEXT, view_model.message)
        self._toggle(PageElement.CONFIRM_BUTTON, view_model.show_confirm)
        self._toggle(PageElement.CANCEL_BUTTON, view_model.show_cancel)

    def render(
        self,
        session: Session | None,
        request: DeletionRequest | None,
        view_model: DeletionViewModel | None,
    ) -> ViewState:
        """状態に応じて画面を切り替え、描画した状態を返す."""
        state = resolve_view_state(session, request)
        if state == ViewState.LOGGED_OUT or session is None or view_model is None:
            self.render_logged_out()
            return ViewState.LOGGED_OUT
        self.render_deletion_page(session, view_model)
        return state

    def set_login_busy(self, busy: bool) -> None:
        """ログイン処理中の表示を切り替える."""
        view = self._view
        view.set_text(PageElement.LOGIN_BUTTON_TEXT, LOGIN_BUTTON_BUSY_LABEL if busy else LOGIN_BUTTON_LABEL)
        view.set_enabled(PageElement.LOGIN_BUTTON, not busy)
        if busy:
            view.show(PageElement.LOGIN_SPINNER)
        else:
            view.hide(PageElement.LOGIN_SPINNER)

    def show_login_error(self, message: str) -> None:
        """ログインエラーを表示する."""
        self._view.set_text(PageElement.LOGIN_ERROR, message)
        self._view.show(PageElement.LOGIN_ERROR)

    def hide_login_error(self) -> None:
        """ログインエラーを非表示にする."""
        self._view.hide(PageElement.LOGIN_ERROR)

    def set_operation_busy(self, button: PageElement, busy: bool) -> None:
        """確定・キャンセル処理中の表示を切り替える."""
        self._view.set_enabled(button, not busy)
        if busy:
            self._view.show(PageElement.LOADING)
            self._view.hide(PageElement.ERROR_STATE)
        else:
            self._view.hide(PageElement.LOADING)

    def show_error(self, message: str) -> None:
        """エラーバナーを表示する."""
        self._view.set_text(PageElement.ERROR_MESSAGE, message)
        self._view.show(PageElement.ERROR_STATE)

    def show_cancel_prompt(self, message: str) -> None:
        """キャンセル確認を表示する."""
        self._view.set_text(PageElement.CANCEL_PROMPT, message)
        self._view.show(PageElement.CANCEL_PROMPT)

    def hide_cancel_prompt(self) -> None:
        """キャンセル確認を閉じる."""
        self._view.hide(PageElement.CANCEL_PROMPT)

    def _toggle(self, element: PageElement, visible: bool) -> None:
        if visible:
            self._view.show(element)
        else:
            self._view.hide(element)
