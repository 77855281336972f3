from .logging import StructLoggingMiddleware
from .session import SessionMiddleware

__all__ = [
    "SessionMiddleware",
    "StructLoggingMiddleware",
]
