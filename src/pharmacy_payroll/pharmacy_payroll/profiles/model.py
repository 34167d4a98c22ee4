from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role
from ..payroll.model import PayConfig


@dataclass(frozen=True)
class Profile:
    """Domain entity: an employee account and its pay settings.

    Note: Plain data object, no DB access code here.
    """

    id: str
    email: str
    name: Optional[str]
    role: Role
    is_active: bool = True
    hourly_rate: float = 0.0
    tax_rate: float = 0.0
    password_hash: str = ""

    @property
    def display_name(self) -> str:
        return self.name or self.email or self.id

    @property
    def pay_config(self) -> PayConfig:
        return PayConfig(hourly_rate=float(self.hourly_rate or 0), tax_rate=float(self.tax_rate or 0))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role.value,
            "is_active": self.is_active,
            "hourly_rate": self.hourly_rate,
            "tax_rate": self.tax_rate,
        }
