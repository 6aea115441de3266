# The fixed set of assistant personas a query can be routed to.

from __future__ import annotations
from enum import Enum
from typing import Optional


class Role(str, Enum):
    """Closed set of personas; each member carries its persona text."""

    CUSTOMER_SUPPORT = ("customer_support", "You are a helpful and empathetic customer support agent.")
    SALES_AGENT = ("sales_agent", "You are a persuasive and friendly sales representative.")
    MARKETING_AGENT = ("marketing_agent", "You are a creative and data-driven marketing strategist.")
    TECHNICAL_EXPERT = ("technical_expert", "You are a precise and experienced technical expert.")
    GENERAL_INFO = ("general_info", "You are a polite and intelligent assistant helping with general queries.")

    def __new__(cls, value: str, persona: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.persona = persona
        return obj

    @property
    def label(self) -> str:
        """Human-readable form, e.g. 'sales agent'."""
        return self.value.replace("_", " ")

    @property
    def forward_message(self) -> str:
        return f"will forward this to our {self.label}"

    @property
    def instruction(self) -> str:
        return (
            f"{self.persona} ONLY answer from the given context. "
            f"If the answer is not found, say: '{self.forward_message}'."
        )

    @classmethod
    def from_label(cls, label: str) -> Optional["Role"]:
        try:
            return cls(label)
        except ValueError:
            return None


DEFAULT_ROLE = Role.GENERAL_INFO
