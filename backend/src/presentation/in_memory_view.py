"""画面状態をメモリ上に保持する表示層実装."""
from .page_element import PageElement
from .view import DeletionPageView


class InMemoryView(DeletionPageView):
    """画面状態をメモリ上に保持する表示層（ヘッドレス実行・テスト用）."""

    def __init__(self) -> None:
        """初期化."""
        self._visible: set[PageElement] = set()
        self._texts: dict[PageElement, str] = {}
        self._disabled: set[PageElement] = set()
        self.login_form_resets = 0

    def show(self, element: PageElement) -> None:
        """要素を表示する."""
        self._visible.add(element)

    def hide(self, element: PageElement) -> None:
        """要素を非表示にする."""
        self._visible.discard(element)

    def set_text(self, element: PageElement, text: str) -> None:
        """要素の文言を設定する."""
        self._texts[element] = text

    def set_enabled(self, element: PageElement, enabled: bool) -> None:
        """操作要素の有効・無効を切り替える."""
        if enabled:
            self._disabled.discard(element)
        else:
            self._disabled.add(element)

    def reset_login_form(self) -> None:
        """ログインフォームの入力をクリアする."""
        self.login_form_resets += 1

    def is_visible(self, element: PageElement) -> bool:
        """要素が表示中かどうか."""
        return element in self._visible

    def is_enabled(self, element: PageElement) -> bool:
        """操作要素が有効かどうか."""
        return element not in self._disabled

    def text_of(self, element: PageElement) -> str:
        """要素の文言を返す."""
        return self._texts.get(element, "")
