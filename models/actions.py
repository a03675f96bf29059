"""
models/actions.py
-----------------
Callback payloads carried by the inline keyboard buttons.
"""

from enum import Enum
from typing import Optional


class CallbackAction(str, Enum):
    """Known button payloads. Anything else is an unknown command."""
    GET_IP = "get_ip"
    GET_RANDOM = "get_random"

    @classmethod
    def parse(cls, payload: str) -> Optional["CallbackAction"]:
        try:
            return cls(payload)
        except ValueError:
            return None
