# services/lease_service.py
"""
Lease Service - contract lifecycle and room occupancy.

A contract and the occupancy status of its room change together:
- creating a contract inserts an ACTIVE contract and flips the room
  VACANT -> OCCUPIED
- terminating a contract flips it ACTIVE -> TERMINATED and the room
  back to VACANT

Both writes of each transition happen in one transaction. Status updates
are conditioned on the expected current status, so a request that loses a
race against a concurrent writer gets a ConflictError instead of
overwriting state.
"""
import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from exceptions import ConflictError, NotFoundError, RentalException, TransactionError
from models import Contract, ContractStatus, Room, RoomStatus, Tenant
from schemas.contract import ContractFilter

logger = logging.getLogger(__name__)


class LeaseService:
     """Service class for lease contract business logic."""

     @staticmethod
     def create_contract(
          db: Session,
          tenant_id: int,
          room_id: int,
          start_date: date,
          end_date: date,
          rent_amount: Decimal,
          deposit: Decimal
     ) -> Contract:
          """
          Sign a new lease and mark the room as occupied.

          Args:
               db: SQLAlchemy database session
               tenant_id: ID of the tenant
               room_id: ID of the room being rented
               start_date: Lease start date
               end_date: Lease end date
               rent_amount: Monthly rent
               deposit: Deposit amount

          Returns:
               The new ACTIVE Contract

          Raises:
               ConflictError: Tenant already rents this room, or the room is not VACANT
               NotFoundError: Tenant or room doesn't exist
               TransactionError: The writes failed and were rolled back
          """
          try:
               existing = db.query(Contract).filter(
                    Contract.tenant_id == tenant_id,
                    Contract.room_id == room_id,
                    Contract.status == ContractStatus.ACTIVE
               ).first()
               if existing:
                    raise ConflictError("该租客已经租用了这个房间")

               tenant = db.query(Tenant).filter(Tenant.id == tenant_id).first()
               if not tenant:
                    raise NotFoundError("租客不存在")

               room = (
                    db.query(Room)
                    .filter(Room.id == room_id)
                    .with_for_update()
                    .populate_existing()
                    .first()
               )
               if not room:
                    raise NotFoundError("房间不存在")
               if not room.is_vacant:
                    raise ConflictError("该房间已被租用")

               contract = Contract(
                    tenant_id=tenant_id,
                    room_id=room_id,
                    start_date=start_date,
                    end_date=end_date,
                    rent_amount=rent_amount,
                    deposit=deposit,
                    status=ContractStatus.ACTIVE
               )
               db.add(contract)
               db.flush()

               LeaseService._occupy_room(db, room_id)
               db.commit()
          except RentalException:
               db.rollback()
               logger.warning("Contract rejected for tenant_id=%s room_id=%s", tenant_id, room_id)
               raise
          except IntegrityError as e:
               # Another ACTIVE contract for this room was committed first
               db.rollback()
               logger.warning("Contract for room_id=%s lost to a concurrent lease: %s", room_id, e.orig)
               raise ConflictError("该房间已被租用") from e
          except SQLAlchemyError as e:
               db.rollback()
               logger.exception("Contract creation rolled back for room_id=%s", room_id)
               raise TransactionError(str(e)) from e

          db.refresh(contract)
          logger.info(
               "Contract %s created: tenant_id=%s room_id=%s %s..%s",
               contract.id, tenant_id, room_id, start_date, end_date
          )
          return contract

     @staticmethod
     def terminate_contract(db: Session, contract_id: int) -> Contract:
          """
          Terminate an ACTIVE contract and release its room.

          Raises:
               NotFoundError: Contract doesn't exist
               ConflictError: Contract is not ACTIVE
               TransactionError: The writes failed and were rolled back
          """
          try:
               contract = (
                    db.query(Contract)
                    .filter(Contract.id == contract_id)
                    .with_for_update()
                    .populate_existing()
                    .first()
               )
               if not contract:
                    raise NotFoundError("合同不存在")
               if not contract.is_active:
                    raise ConflictError("只能终止生效中的合同")

               result = db.execute(
                    update(Contract)
                    .where(Contract.id == contract_id, Contract.status == ContractStatus.ACTIVE)
                    .values(status=ContractStatus.TERMINATED)
               )
               if result.rowcount != 1:
                    raise ConflictError("只能终止生效中的合同")

               LeaseService._release_room(db, contract.room_id)
               db.commit()
          except RentalException:
               db.rollback()
               logger.warning("Termination rejected for contract_id=%s", contract_id)
               raise
          except SQLAlchemyError as e:
               db.rollback()
               logger.exception("Termination rolled back for contract_id=%s", contract_id)
               raise TransactionError(str(e)) from e

          db.refresh(contract)
          if contract.room is not None:
               db.refresh(contract.room)
          logger.info("Contract %s terminated, room_id=%s released", contract.id, contract.room_id)
          return contract

     @staticmethod
     def get_contract(db: Session, contract_id: int) -> Contract:
          """
          Fetch one contract with its tenant and room.

          Raises:
               NotFoundError: Contract doesn't exist
          """
          contract = (
               db.query(Contract)
               .options(joinedload(Contract.tenant), joinedload(Contract.room))
               .filter(Contract.id == contract_id)
               .first()
          )
          if not contract:
               raise NotFoundError("合同不存在")
          return contract

     @staticmethod
     def query_contracts(db: Session, filters: Optional[ContractFilter] = None) -> list[Contract]:
          """
          List contracts, newest first.

          Room number and tenant name match as substrings, status exactly.
          start_date keeps contracts starting on or after it; end_date keeps
          contracts ending on or before it.
          """
          filters = filters or ContractFilter()
          query = db.query(Contract).options(joinedload(Contract.tenant), joinedload(Contract.room))

          if filters.room_number:
               query = query.filter(
                    Contract.room.has(Room.number.contains(filters.room_number, autoescape=True))
               )

          if filters.tenant_name:
               query = query.filter(
                    Contract.tenant.has(Tenant.name.contains(filters.tenant_name, autoescape=True))
               )

          if filters.status:
               query = query.filter(Contract.status == filters.status)

          if filters.start_date:
               query = query.filter(Contract.start_date >= filters.start_date)

          if filters.end_date:
               query = query.filter(Contract.end_date <= filters.end_date)

          return query.order_by(Contract.created_at.desc(), Contract.id.desc()).all()

     @staticmethod
     def _occupy_room(db: Session, room_id: int) -> None:
          """Flip a VACANT room to OCCUPIED, or raise ConflictError if it is no longer vacant."""
          result = db.execute(
               update(Room)
               .where(Room.id == room_id, Room.status == RoomStatus.VACANT)
               .values(status=RoomStatus.OCCUPIED)
          )
          if result.rowcount != 1:
               raise ConflictError("该房间已被租用")

     @staticmethod
     def _release_room(db: Session, room_id: int) -> None:
          """Mark a room VACANT again."""
          result = db.execute(
               update(Room)
               .where(Room.id == room_id)
               .values(status=RoomStatus.VACANT)
          )
          if result.rowcount != 1:
               raise NotFoundError("房间不存在")
