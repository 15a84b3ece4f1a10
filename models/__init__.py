# models/__init__.py
from .base import Base
from .call_history import CallHistory
from .contact import Contact


__all__ = [
    "Base",
    "CallHistory",
    "Contact",
]
