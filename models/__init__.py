# models/__init__.py
from .base import Base
from .tenant import Tenant, Gender, TenantStatus
from .room import Room, RoomType, Direction, RoomStatus
from .contract import Contract, ContractStatus

__all__ = [
     "Base",
     "Tenant",
     "Gender",
     "TenantStatus",
     "Room",
     "RoomType",
     "Direction",
     "RoomStatus",
     "Contract",
     "ContractStatus",
]
