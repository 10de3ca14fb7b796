"""Tests for UserService: profile edits, password change and deactivation."""

import pytest

from src.checkinn.core.exceptions import AuthenticationError, ValidationError
from src.checkinn.core.security import hash_token, verify_password
from src.checkinn.models import AccountStatus
from src.checkinn.schemas.auth import PasswordUpdateRequest, ProfileUpdate
from src.checkinn.services import AuthService, UserService
from src.checkinn.services.user_service import PASSWORD_NOT_ALLOWED, WRONG_CURRENT_PASSWORD
from tests.factories import DEFAULT_TEST_PASSWORD
from tests.helpers import STRONG_PASSWORD, add_user

pytestmark = pytest.mark.unit


@pytest.fixture
def auth_service(user_repo, token_repo, session) -> AuthService:
    return AuthService(user_repo, token_repo, session)


@pytest.fixture
def service(session, auth_service) -> UserService:
    return UserService(session, auth_service)


class TestUpdate:
    async def test_updates_name_and_phone(self, service, store):
        user = add_user(store, name="Before", phone="0900000000")

        await service.update(user, ProfileUpdate(name="After"))

        assert user.name == "After"
        assert user.phone == "0900000000"

    async def test_password_fields_refused(self, service, store):
        user = add_user(store, name="Before")

        with pytest.raises(ValidationError) as exc_info:
            await service.update(user, ProfileUpdate(name="After", password=STRONG_PASSWORD))

        assert exc_info.value.message == PASSWORD_NOT_ALLOWED
        assert user.name == "Before"


class TestChangePassword:
    async def test_wrong_current_password(self, service, store):
        user = add_user(store)
        old_hash = user.hashed_password

        with pytest.raises(AuthenticationError, match=WRONG_CURRENT_PASSWORD):
            await service.change_password(
                user,
                PasswordUpdateRequest(
                    password_current="Not-The-Password-1!", password=STRONG_PASSWORD
                ),
            )

        assert user.hashed_password == old_hash

    async def test_revokes_sessions_and_issues_new_pair(
        self, service, auth_service, store, mock_redis
    ):
        user = add_user(store)
        old_tokens = await auth_service.issue_tokens(user)

        new_tokens = await service.change_password(
            user,
            PasswordUpdateRequest(password_current=DEFAULT_TEST_PASSWORD, password=STRONG_PASSWORD),
        )

        assert verify_password(STRONG_PASSWORD, user.hashed_password)
        assert store.tokens[hash_token(old_tokens.refresh_token)].revoked is True
        assert store.tokens[hash_token(new_tokens.refresh_token)].revoked is False


class TestDeactivate:
    async def test_marks_inactive_and_signs_out(self, service, auth_service, store, mock_redis):
        user = add_user(store)
        tokens = await auth_service.issue_tokens(user)

        await service.deactivate(user)

        assert user.status == AccountStatus.INACTIVE
        assert user.status_updated_at is not None
        assert store.tokens[hash_token(tokens.refresh_token)].revoked is True
