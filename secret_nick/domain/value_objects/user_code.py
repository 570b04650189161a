"""
UserCode Value Object - Opaque access code identifying a participant.

The code is the only credential a participant presents; it also identifies
the participant's room transitively.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserCode:
    value: str  # users.user_code

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("User code cannot be empty")

    def __str__(self) -> str:
        return self.value
