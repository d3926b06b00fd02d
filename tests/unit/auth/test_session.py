import pytest

from intake.auth.session import (
    LOGIN_FAILED_MESSAGE,
    LOGIN_SUCCESS_MESSAGE,
    Authenticator,
    Session,
    validate_login,
)
from intake.config import AuthConfig
from intake.notifications import NotificationLevel, Notifier


@pytest.fixture
def authenticator(notifier: Notifier) -> Authenticator:
    return Authenticator(AuthConfig(username="admin", password="admin", login_latency=0), notifier)


class TestSession:
    def test_starts_empty(self) -> None:
        assert Session().is_authenticated is False

    def test_start_and_clear(self) -> None:
        session = Session()

        session.start("admin")
        assert session.is_authenticated
        assert session.username == "admin"

        session.clear()
        assert not session.is_authenticated

    def test_sessions_are_independent(self) -> None:
        first, second = Session(), Session()

        first.start("admin")

        assert not second.is_authenticated


class TestValidateLogin:
    def test_both_missing(self) -> None:
        errors = validate_login("", "")

        assert [(e.field, e.message) for e in errors] == [
            ("username", "Username is required"),
            ("password", "Password is required"),
        ]

    def test_filled(self) -> None:
        assert validate_login("admin", "secret") == []


class TestAuthenticator:
    @pytest.mark.asyncio
    async def test_valid_credentials_start_session(
        self, authenticator: Authenticator, notifier: Notifier
    ) -> None:
        session = Session()

        assert await authenticator.login(session, "admin", "admin") is True
        assert session.username == "admin"
        assert notifier.latest is not None
        assert notifier.latest.message == LOGIN_SUCCESS_MESSAGE

    @pytest.mark.asyncio
    async def test_wrong_password_leaves_session_empty(
        self, authenticator: Authenticator, notifier: Notifier
    ) -> None:
        session = Session()

        assert await authenticator.login(session, "admin", "wrong") is False
        assert not session.is_authenticated
        assert notifier.latest is not None
        assert notifier.latest.level is NotificationLevel.ERROR
        assert notifier.latest.message == LOGIN_FAILED_MESSAGE

    @pytest.mark.asyncio
    async def test_missing_fields_skip_check(
        self, authenticator: Authenticator, notifier: Notifier
    ) -> None:
        session = Session()

        assert await authenticator.login(session, "", "admin") is False
        assert notifier.history == []

    @pytest.mark.asyncio
    async def test_configured_credentials(self, notifier: Notifier) -> None:
        authenticator = Authenticator(
            AuthConfig(username="front-desk", password="s3cret", login_latency=0), notifier
        )
        session = Session()

        assert await authenticator.login(session, "admin", "admin") is False
        assert await authenticator.login(session, "front-desk", "s3cret") is True
