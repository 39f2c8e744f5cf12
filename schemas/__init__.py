# schemas/__init__.py
from .tenant import TenantCreate, TenantResponse
from .room import RoomCreate, RoomResponse
from .contract import (
     ContractCreate,
     ContractFilter,
     ContractResponse,
     ContractDetailResponse,
     ContractEnvelope,
     ContractDetailEnvelope,
)

__all__ = [
     "TenantCreate",
     "TenantResponse",
     "RoomCreate",
     "RoomResponse",
     "ContractCreate",
     "ContractFilter",
     "ContractResponse",
     "ContractDetailResponse",
     "ContractEnvelope",
     "ContractDetailEnvelope",
]
