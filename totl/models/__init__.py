from .user import User
from .fixture import Fixture
from .pick import Pick
from .result import GwResult
from .submission import GwSubmission
from .league import League, LeagueMember

__all__ = [
    "User",
    "Fixture",
    "Pick",
    "GwResult",
    "GwSubmission",
    "League",
    "LeagueMember",
]
