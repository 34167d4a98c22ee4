from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import (
    optional_text,
    require_min_length,
    require_non_empty,
    require_non_negative_number,
    require_rate,
)
from ..core.constants import DEFAULT_TAX_RATE, MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from ..worklogs.model import Actor
from .model import Profile
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    user_id: str
    name: str
    role: Role


def _parse_role(value: Any) -> Role:
    try:
        return Role(str(value).strip())
    except ValueError:
        raise ValidationError("Role must be one of admin/manager/staff")


class AuthService:
    """Use case: authenticate an account (login)."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def authenticate(self, email: str, password: str) -> SessionUser:
        profile = self._profiles.get_by_email((email or "").strip())
        if not profile or not profile.is_active:
            logger.warning("[auth] rejected login for %s", email)
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(profile.password_hash, password or "")
        except (TypeError, ValueError):
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            logger.warning("[auth] rejected login for %s", email)
            raise AuthenticationError("Invalid email or password")

        logger.info("[auth] login user_id=%s role=%s", profile.id, profile.role.value)
        return SessionUser(user_id=profile.id, name=profile.display_name, role=profile.role)


class ProfileService:
    """Use case: profile lookup and admin management of roles and pay settings."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def get_profile(self, user_id: str) -> Profile:
        profile = self._profiles.get_by_id(str(user_id))
        if not profile:
            raise NotFoundError("Profile not found")
        return profile

    def get_actor(self, user_id: str) -> Actor:
        """Build the caller capability from the stored role, not from the session copy."""
        profile = self.get_profile(user_id)
        if not profile.is_active:
            raise AuthorizationError("This account is deactivated")
        return Actor(user_id=profile.id, role=profile.role)

    def list_admin_view(self, actor: Actor) -> Sequence[Profile]:
        if not actor.is_reviewer:
            raise AuthorizationError("Only an admin or manager can view employees")
        return self._profiles.list_all()

    def create_account(
        self,
        actor: Actor,
        *,
        email: str,
        name: Optional[str],
        password: str,
        role: Any = Role.STAFF,
    ) -> Profile:
        if actor.role != Role.ADMIN:
            raise AuthorizationError("Only an admin can create accounts")

        email = require_non_empty(email, "Email").lower()
        if "@" not in email:
            raise ValidationError("Email is not valid")
        require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        role = _parse_role(role.value if isinstance(role, Role) else role)

        if self._profiles.get_by_email(email):
            raise ValidationError("Email is already registered")

        user_id = str(uuid.uuid4())
        self._profiles.create(
            user_id=user_id,
            email=email,
            name=optional_text(name),
            role=role,
            password_hash=generate_password_hash(password),
            tax_rate=DEFAULT_TAX_RATE,
        )
        logger.info("[profile] created user_id=%s role=%s by=%s", user_id, role.value, actor.user_id)
        return self.get_profile(user_id)

    def update_profile(
        self,
        actor: Actor,
        user_id: str,
        *,
        name: Any = None,
        hourly_rate: Any = None,
        tax_rate: Any = None,
        role: Any = None,
    ) -> Profile:
        """Patch name/pay/role. ``None`` leaves a field unchanged."""

        if actor.role != Role.ADMIN:
            raise AuthorizationError("Only an admin can edit employees")

        target = self.get_profile(user_id)

        fields: dict[str, Any] = {}
        if name is not None:
            fields["name"] = optional_text(name)
        if hourly_rate is not None:
            fields["hourly_rate"] = require_non_negative_number(hourly_rate, "Hourly rate")
        if tax_rate is not None:
            fields["tax_rate"] = require_rate(tax_rate, "Tax rate")
        if role is not None:
            new_role = _parse_role(role)
            if target.id == actor.user_id and new_role != Role.ADMIN:
                raise ValidationError("You cannot remove your own admin role")
            fields["role"] = new_role

        if not self._profiles.update(target.id, fields):
            raise NotFoundError("Profile not found")
        logger.info("[profile] updated user_id=%s fields=%s by=%s", target.id, sorted(fields), actor.user_id)
        return self.get_profile(target.id)

    def set_active(self, actor: Actor, user_id: str, *, is_active: bool) -> Profile:
        if actor.role != Role.ADMIN:
            raise AuthorizationError("Only an admin can activate or deactivate employees")

        target = self.get_profile(user_id)
        if target.id == actor.user_id and not is_active:
            raise ValidationError("You cannot deactivate your own account")

        if not self._profiles.update(target.id, {"is_active": bool(is_active)}):
            raise NotFoundError("Profile not found")
        logger.info("[profile] user_id=%s is_active=%s by=%s", target.id, bool(is_active), actor.user_id)
        return self.get_profile(target.id)
