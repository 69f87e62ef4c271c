"""プレゼンテーション層モジュール."""
from .dependencies import Dependencies
from .in_memory_view import InMemoryView
from .page_element import PageElement
from .portal import DeletionPortal
from .view import DeletionPageView
from .view_controller import DeletionPageController, resolve_view_state

__all__ = [
    "DeletionPageController",
    "DeletionPageView",
    "DeletionPortal",
    "Dependencies",
    "InMemoryView",
    "PageElement",
    "resolve_view_state",
]
