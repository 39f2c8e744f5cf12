# models/tenant.py
import enum

from sqlalchemy import Column, Integer, String, DateTime, Enum, UniqueConstraint, func
from sqlalchemy.orm import relationship
from .base import Base


class Gender(str, enum.Enum):
     MALE = "MALE"
     FEMALE = "FEMALE"


class TenantStatus(str, enum.Enum):
     ACTIVE = "ACTIVE"
     INACTIVE = "INACTIVE"


class Tenant(Base):
     """
     Tenant model - identity and contact record of a person renting a room.
     The national id (id_card) is unique across tenants.
     """
     __tablename__ = "tenants"
     __table_args__ = (
          UniqueConstraint("id_card", name="uq_tenants_id_card"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)

     # Personal info
     name = Column(String(100), nullable=False, index=True)
     phone = Column(String(50), nullable=False)
     id_card = Column(String(50), nullable=False)
     gender = Column(Enum(Gender, name="gender", create_constraint=True), nullable=True)
     email = Column(String(255), nullable=True)

     # Emergency contact
     emergency_contact = Column(String(100), nullable=True)
     emergency_phone = Column(String(50), nullable=True)

     # Status
     status = Column(
          Enum(TenantStatus, name="tenant_status", create_constraint=True),
          default=TenantStatus.ACTIVE,
          nullable=False
     )

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)

     # Relationships
     contracts = relationship("Contract", back_populates="tenant")

     def __repr__(self):
          return f"<Tenant(id={self.id}, name='{self.name}')>"
