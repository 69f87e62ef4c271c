"""画面要素の列挙型."""
from enum import Enum


class PageElement(str, Enum):
    """表示・非表示や文言を切り替える画面要素."""

    LOGIN_PAGE = "loginPage"
    LOGIN_ERROR = "loginError"
    LOGIN_BUTTON = "loginButton"
    LOGIN_BUTTON_TEXT = "loginBtnText"
    LOGIN_SPINNER = "loginSpinner"
    DELETION_PAGE = "deletionPage"
    USER_EMAIL = "userEmailDisplay"
    REQUEST_DATE = "requestDate"
    DELETION_DATE = "deletionDate"
    DAYS_REMAINING = "daysRemaining"
    COUNTDOWN_TEXT = "countdownText"
    CONFIRM_BUTTON = "confirmDeletionBtn"
    CANCEL_BUTTON = "cancelDeletionBtn"
    CANCEL_PROMPT = "cancelPrompt"
    LOADING = "loadingState"
    ERROR_STATE = "errorState"
    ERROR_MESSAGE = "errorMessage"
    SUCCESS_MESSAGE = "successMessage"
