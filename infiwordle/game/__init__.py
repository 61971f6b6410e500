from .round import (
    RoundStateMachine, GuessRecord, RoundStatus, IN_PROGRESS, WON, LOST,
)
from .session import SessionController

__all__ = [
    "RoundStateMachine", "GuessRecord", "RoundStatus", "IN_PROGRESS", "WON", "LOST",
    "SessionController",
]
