"""Domain entity for service users (administrators, staff, clients)."""

from dataclasses import dataclass, field
from enum import Enum
from uuid import uuid4


class Role(str, Enum):
    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"
    CLIENT = "CLIENT"


@dataclass
class User:
    email: str
    password_hash: str
    first_name: str | None = None
    last_name: str | None = None
    role: Role = Role.CLIENT
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def role_with_prefix(self) -> str:
        """Authority name in the ``ROLE_<name>`` form used by access checks."""
        return f"ROLE_{self.role.value}"
