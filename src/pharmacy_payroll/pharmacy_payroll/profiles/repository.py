from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Profile


class ProfileRepository(Protocol):
    """Repository interface for Profile.

    Note: services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Profile]:
        raise NotImplementedError

    def get_many(self, user_ids: Iterable[str]) -> Sequence[Profile]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Profile]:
        """Ordered by role, then email."""

        raise NotImplementedError

    def create(
        self,
        *,
        user_id: str,
        email: str,
        name: Optional[str],
        role: Role,
        password_hash: str,
        hourly_rate: float = 0.0,
        tax_rate: float = 0.0,
    ) -> None:
        raise NotImplementedError

    def update(self, user_id: str, fields: Mapping[str, Any]) -> bool:
        raise NotImplementedError
