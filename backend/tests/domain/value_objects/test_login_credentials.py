"""LoginCredentials・Email・UserIdのテスト."""
import pytest

from src.domain.identifiers import UserId
from src.domain.value_objects import CredentialsValidationError, Email, LoginCredentials


class TestLoginCredentials:
    """ログイン入力のテスト."""

    def test_両方入力されていれば生成できる(self):
        credentials = LoginCredentials(email="test@example.com", password="secret")
        assert credentials.email == "test@example.com"

    @pytest.mark.parametrize(
        "email,password",
        [("", "secret"), ("test@example.com", ""), ("", "")],
    )
    def test_未入力があればエラー(self, email, password):
        with pytest.raises(CredentialsValidationError, match="Please enter both email and password"):
            LoginCredentials(email=email, password=password)

    def test_検証エラーはValueError(self):
        assert issubclass(CredentialsValidationError, ValueError)

    def test_パスワードはreprに含めない(self):
        credentials = LoginCredentials(email="test@example.com", password="secret")
        assert "secret" not in repr(credentials)


class TestEmail:
    """メールアドレスのテスト."""

    def test_前後の空白を除いて生成する(self):
        assert Email.parse("  test@example.com ").value == "test@example.com"

    def test_不正な形式はエラー(self):
        with pytest.raises(ValueError):
            Email("not-an-email")

    def test_ログ用にローカル部を伏せる(self):
        assert Email("test@example.com").masked() == "t***@example.com"


class TestUserId:
    """ユーザーIDのテスト."""

    def test_空はエラー(self):
        with pytest.raises(ValueError):
            UserId("  ")

    def test_前後の空白はエラー(self):
        with pytest.raises(ValueError):
            UserId(" user-123")
