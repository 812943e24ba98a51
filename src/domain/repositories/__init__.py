"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in src/infrastructure/persistence/ and are
wired at the application boundary via dependency injection.
"""

from .base import Repository
from .books import BookRepository

__all__ = [
    "Repository",
    "BookRepository",
]
