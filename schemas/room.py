# schemas/room.py
"""
Pydantic schemas for Room API request/response validation.
"""
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Union

from pydantic import ConfigDict, Field, field_validator

from models.room import RoomType, Direction, RoomStatus
from .base import CamelModel


class RoomCreate(CamelModel):
     """Schema for creating a new room. New rooms always start VACANT."""
     number: str = Field(..., min_length=1, max_length=50, description="Room number")
     floor: int = Field(..., ge=1, description="Floor, starting at 1")
     building: str = Field(..., min_length=1, max_length=50, description="Building name")
     type: RoomType
     area: Decimal = Field(..., ge=1, max_digits=10, decimal_places=2, description="Area in square metres")
     direction: Direction
     facilities: Union[Dict[str, bool], List[str]] = Field(default_factory=dict)
     price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Monthly rent")
     deposit: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2, description="Deposit")

     @field_validator("facilities")
     @classmethod
     def facilities_as_mapping(cls, value):
          """A list of facility names is stored as {name: True}."""
          if isinstance(value, list):
               return {name: True for name in value}
          return value

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "number": "101",
                    "floor": 1,
                    "building": "A",
                    "type": "SINGLE",
                    "area": 20,
                    "direction": "SOUTH",
                    "facilities": {"aircon": True, "internet": True},
                    "price": 2000,
                    "deposit": 2000
               }
          }
     )


class RoomResponse(CamelModel):
     """Schema for room response."""
     id: int
     number: str
     building: str
     floor: int
     type: RoomType
     area: Decimal
     direction: Direction
     facilities: Dict[str, bool]
     price: Decimal
     deposit: Decimal
     status: RoomStatus
     created_at: datetime
