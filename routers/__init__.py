# routers/__init__.py
from .contracts import router as contracts_router
from .rooms import router as rooms_router
from .tenants import router as tenants_router

__all__ = [
     "contracts_router",
     "rooms_router",
     "tenants_router",
]
