from .state import GameStatus, SessionState
from .machine import GameSession

__all__ = ["GameStatus", "SessionState", "GameSession"]
