# models/room.py
import enum

from sqlalchemy import Column, Integer, String, Numeric, JSON, Enum
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin


class RoomType(str, enum.Enum):
     SINGLE = "SINGLE"
     DOUBLE = "DOUBLE"
     TRIPLE = "TRIPLE"
     SUITE = "SUITE"


class Direction(str, enum.Enum):
     EAST = "EAST"
     SOUTH = "SOUTH"
     WEST = "WEST"
     NORTH = "NORTH"
     SOUTHEAST = "SOUTHEAST"
     SOUTHWEST = "SOUTHWEST"
     NORTHEAST = "NORTHEAST"
     NORTHWEST = "NORTHWEST"


class RoomStatus(str, enum.Enum):
     """Occupancy status. Only VACANT and OCCUPIED are reachable through contracts."""
     VACANT = "VACANT"
     OCCUPIED = "OCCUPIED"
     RESERVED = "RESERVED"
     MAINTAINING = "MAINTAINING"


class Room(TimestampMixin, Base):
     """
     Room model - a rentable unit.

     status is a cached occupancy flag; it is only changed by the lease
     lifecycle (contract creation and termination).
     """
     __tablename__ = "rooms"

     id = Column(Integer, primary_key=True, autoincrement=True)
     number = Column(String(50), nullable=False, index=True)
     building = Column(String(50), nullable=False)
     floor = Column(Integer, nullable=False)
     type = Column(Enum(RoomType, name="room_type", create_constraint=True), nullable=False)
     area = Column(Numeric(10, 2), nullable=False)
     direction = Column(Enum(Direction, name="room_direction", create_constraint=True), nullable=False)
     facilities = Column(JSON, nullable=False, default=dict)  # {"aircon": true, ...}

     # Pricing
     price = Column(Numeric(12, 2), nullable=False)
     deposit = Column(Numeric(12, 2), nullable=False)

     status = Column(
          Enum(RoomStatus, name="room_status", create_constraint=True),
          default=RoomStatus.VACANT,
          nullable=False,
          index=True
     )

     # Relationships
     contracts = relationship("Contract", back_populates="room")

     def __repr__(self):
          return f"<Room(id={self.id}, number='{self.number}', status='{self.status.value}')>"

     @property
     def is_vacant(self) -> bool:
          return self.status == RoomStatus.VACANT
