# schemas/tenant.py
"""
Pydantic schemas for Tenant API request/response validation.
"""
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, EmailStr, Field, field_validator

from models.tenant import Gender, TenantStatus
from .base import CamelModel


class TenantCreate(CamelModel):
     """Schema for registering a new tenant."""
     name: str = Field(..., min_length=2, max_length=100, description="Full name")
     phone: str = Field(..., min_length=11, max_length=50, description="Mobile number")
     id_card: str = Field(..., min_length=18, max_length=50, description="National id number (unique)")
     gender: Optional[Gender] = None
     email: Optional[EmailStr] = None
     emergency_contact: Optional[str] = Field(None, max_length=100)
     emergency_phone: Optional[str] = Field(None, max_length=50)

     @field_validator("email", "emergency_contact", "emergency_phone", "gender", mode="before")
     @classmethod
     def blank_to_none(cls, value):
          # Forms submit empty strings for untouched optional inputs
          if isinstance(value, str) and not value.strip():
               return None
          return value

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Li Wei",
                    "phone": "13800000000",
                    "idCard": "110101199001010011",
                    "gender": "MALE",
                    "email": "li.wei@example.com",
                    "emergencyContact": "Li Na",
                    "emergencyPhone": "13900000000"
               }
          }
     )


class TenantResponse(CamelModel):
     """Schema for tenant response."""
     id: int
     name: str
     phone: str
     id_card: str
     gender: Optional[Gender] = None
     email: Optional[str] = None
     emergency_contact: Optional[str] = None
     emergency_phone: Optional[str] = None
     status: TenantStatus
     created_at: datetime
