# models/contract.py
import enum
from datetime import date

from sqlalchemy import Column, Integer, Numeric, Date, ForeignKey, Enum, Index, text
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class ContractStatus(str, enum.Enum):
     """Lease lifecycle status. Transitions only leave ACTIVE."""
     ACTIVE = "ACTIVE"
     TERMINATED = "TERMINATED"
     EXPIRED = "EXPIRED"


class Contract(TimestampMixin, Base):
     """
     Contract model - a lease binding one tenant to one room for a date range.

     This is the only authoritative link between Tenant and Room. Contracts
     are never deleted; only their status changes.
     """
     __tablename__ = "contracts"
     __table_args__ = (
          Index("ix_contracts_room_id_status", "room_id", "status"),
          # At most one ACTIVE contract per room
          Index(
               "uq_contracts_room_id_active",
               "room_id",
               unique=True,
               sqlite_where=text("status = 'ACTIVE'"),
               postgresql_where=text("status = 'ACTIVE'"),
               mssql_where=text("status = 'ACTIVE'"),
          ),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)

     # Foreign keys
     tenant_id = Column(
          Integer,
          ForeignKey("tenants.id", ondelete="RESTRICT"),
          nullable=False,
          index=True
     )
     room_id = Column(
          Integer,
          ForeignKey("rooms.id", ondelete="RESTRICT"),
          nullable=False,
          index=True
     )

     # Lease period
     start_date = Column(Date, nullable=False)
     end_date = Column(Date, nullable=False)

     # Pricing
     rent_amount = Column(Numeric(12, 2), nullable=False)
     deposit = Column(Numeric(12, 2), nullable=False)

     status = Column(
          Enum(ContractStatus, name="contract_status", create_constraint=True),
          default=ContractStatus.ACTIVE,
          nullable=False,
          index=True
     )

     # Relationships
     tenant = relationship("Tenant", back_populates="contracts")
     room = relationship("Room", back_populates="contracts")

     def __repr__(self):
          return f"<Contract(id={self.id}, tenant_id={self.tenant_id}, room_id={self.room_id}, status='{self.status.value}')>"

     @property
     def is_active(self) -> bool:
          return self.status == ContractStatus.ACTIVE

     @property
     def is_past_end_date(self) -> bool:
          """Check if an active lease has run past its end date (nothing marks it EXPIRED)."""
          return self.status == ContractStatus.ACTIVE and self.end_date < date.today()
