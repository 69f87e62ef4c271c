"""画面描画のインターフェース."""
from abc import ABC, abstractmethod

from .page_element import PageElement


class DeletionPageView(ABC):
    """ログイン画面と削除管理画面を描画する表示層のインターフェース."""

    @abstractmethod
    def show(self, element: PageElement) -> None:
        """要素を表示する."""
        pass

    @abstractmethod
    def hide(self, element: PageElement) -> None:
        """要素を非表示にする."""
        pass

    @abstractmethod
    def set_text(self, element: PageElement, text: str) -> None:
        """要素の文言を設定する."""
        pass

    @abstractmethod
    def set_enabled(self, element: PageElement, enabled: bool) -> None:
        """操作要素の有効・無効を切り替える."""
        pass

    @abstractmethod
    def reset_login_form(self) -> None:
        """ログインフォームの入力をクリアする."""
        pass
