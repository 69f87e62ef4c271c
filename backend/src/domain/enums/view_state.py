"""画面状態の列挙型."""
from enum import Enum


class ViewState(str, Enum):
    """画面状態."""

    LOGGED_OUT = "logged_out"
    PENDING = "pending"
    NO_REQUEST_YET = "no_request_yet"
