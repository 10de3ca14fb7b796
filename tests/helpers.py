"""Test helper functions for common data creation patterns."""

from src.checkinn.core.security import create_access_token
from src.checkinn.models import PartnerInfo, PartnerStatus, User
from tests.factories import PartnerInfoFactory, UserFactory
from tests.fakes import InMemoryStore

# Scores 4 with zxcvbn
STRONG_PASSWORD = "Velvet-Compass-Orchard-91!"


def auth_headers(user: User) -> dict[str, str]:
    """Bearer header carrying a fresh access token for the user."""
    return {"Authorization": f"Bearer {create_access_token(user.id, user.role)}"}


def add_admin(store: InMemoryStore, **user_kwargs) -> User:
    admin = UserFactory.admin(**user_kwargs)
    store.users[admin.id] = admin
    return admin


def add_user(store: InMemoryStore, **user_kwargs) -> User:
    user = UserFactory.build(**user_kwargs)
    store.users[user.id] = user
    return user


def add_partner(
    store: InMemoryStore,
    status: PartnerStatus = PartnerStatus.PENDING,
    onboarded: bool = False,
    user_kwargs: dict | None = None,
    **partner_kwargs,
) -> tuple[User, PartnerInfo]:
    """Create a HotelPartner account with its partner record.

    Args:
        store: In-memory store to add both records to
        status: Verification status of the record
        onboarded: Fill in every onboarding step
        user_kwargs: Additional args passed to UserFactory
        **partner_kwargs: Additional args passed to PartnerInfoFactory

    Returns:
        Tuple of (user, partner)
    """
    user = UserFactory.partner(**(user_kwargs or {}))
    build = PartnerInfoFactory.onboarded if onboarded else PartnerInfoFactory.build
    partner = build(user_id=user.id, verification_status=status.value, **partner_kwargs)
    store.users[user.id] = user
    store.partners[user.id] = partner
    return user, partner
