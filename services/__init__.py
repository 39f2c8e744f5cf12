# services/__init__.py
from .lease_service import LeaseService

__all__ = [
     "LeaseService",
]
