"""
models/lookup.py
----------------
Domain model for the outcome of a public address lookup.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LookupResult:
    """
    Outcome of a public IP lookup.

    Attributes:
        address: The address literal when a service answered.
        reason: Human-readable failure message when no address was obtained.
    """
    address: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def success(cls, address: str) -> "LookupResult":
        return cls(address=address)

    @classmethod
    def degraded(cls, reason: str) -> "LookupResult":
        return cls(reason=reason)

    @property
    def ok(self) -> bool:
        return self.address is not None

    @property
    def text(self) -> str:
        """The string shown to the user, address or failure message."""
        return self.address if self.address is not None else (self.reason or "")
