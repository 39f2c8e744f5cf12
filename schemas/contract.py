# schemas/contract.py
"""
Pydantic schemas for Contract API request/response validation.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models.contract import ContractStatus
from models.room import RoomType, RoomStatus
from models.tenant import Gender
from .base import CamelModel, MAX_ID


class ContractCreate(CamelModel):
     """Schema for signing a new lease contract."""
     tenant_id: int = Field(..., gt=0, le=MAX_ID, description="Tenant ID (must exist)")
     room_id: int = Field(..., gt=0, le=MAX_ID, description="Room ID (must exist and be VACANT)")
     start_date: date = Field(..., description="Lease start date")
     end_date: date = Field(..., description="Lease end date")
     rent_amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Monthly rent")
     deposit: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Deposit")

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "tenantId": 1,
                    "roomId": 1,
                    "startDate": "2024-01-01",
                    "endDate": "2024-12-31",
                    "rentAmount": 2000,
                    "deposit": 2000
               }
          }
     )


class ContractFilter(BaseModel):
     """Optional filters for listing contracts."""
     room_number: Optional[str] = None
     tenant_name: Optional[str] = None
     status: Optional[ContractStatus] = None
     start_date: Optional[date] = None  # contract starts on or after
     end_date: Optional[date] = None  # contract ends on or before


class ContractTenant(CamelModel):
     name: str
     phone: str


class ContractRoom(CamelModel):
     number: str
     building: str
     status: RoomStatus


class ContractResponse(CamelModel):
     """Schema for contract response."""
     id: int
     tenant_id: int
     room_id: int
     start_date: date
     end_date: date
     rent_amount: Decimal
     deposit: Decimal
     status: ContractStatus
     is_past_end_date: bool = False
     created_at: datetime

     # Related data
     tenant: Optional[ContractTenant] = None
     room: Optional[ContractRoom] = None


class ContractTenantDetail(CamelModel):
     id: int
     name: str
     phone: str
     id_card: str
     gender: Optional[Gender] = None


class ContractRoomDetail(CamelModel):
     id: int
     number: str
     building: str
     floor: int
     type: RoomType
     area: Decimal
     price: Decimal
     deposit: Decimal
     status: RoomStatus


class ContractDetailResponse(ContractResponse):
     """Contract with full tenant and room details."""
     tenant: Optional[ContractTenantDetail] = None
     room: Optional[ContractRoomDetail] = None


class ContractEnvelope(BaseModel):
     data: ContractResponse


class ContractDetailEnvelope(BaseModel):
     data: ContractDetailResponse
