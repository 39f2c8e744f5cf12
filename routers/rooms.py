# routers/rooms.py
"""
Room API routes.

Rooms are created VACANT; their status afterwards is driven by the
contract lifecycle only, so there is no update route here.
"""
import logging
from typing import Optional, List
from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session

from database import get_session
from models import Room, RoomStatus
from schemas.base import MAX_ID
from schemas.room import RoomCreate, RoomResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/rooms", tags=["rooms"])


@router.get(
     "",
     response_model=List[RoomResponse],
     summary="List rooms"
)
def list_rooms(
     status: Optional[RoomStatus] = Query(None, description="Filter by status, e.g. VACANT"),
     db: Session = Depends(get_session)
):
     """
     Retrieve all rooms, newest first.
     """
     query = db.query(Room)
     if status:
          query = query.filter(Room.status == status)

     rooms = query.order_by(Room.created_at.desc(), Room.id.desc()).all()
     return [RoomResponse.model_validate(room) for room in rooms]


@router.get(
     "/{room_id}",
     response_model=RoomResponse,
     summary="Get room by ID"
)
def get_room(
     room_id: int = Path(..., ge=1, le=MAX_ID),
     db: Session = Depends(get_session)
):
     room = db.query(Room).filter(Room.id == room_id).first()

     if not room:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="房间不存在"
          )

     return RoomResponse.model_validate(room)


@router.post(
     "",
     response_model=RoomResponse,
     summary="Create a new room"
)
def create_room(
     room_data: RoomCreate,
     db: Session = Depends(get_session)
):
     """
     Create a new VACANT room.

     - **facilities**: either {"aircon": true, ...} or ["aircon", ...]
     """
     room = Room(
          number=room_data.number,
          building=room_data.building,
          floor=room_data.floor,
          type=room_data.type,
          area=room_data.area,
          direction=room_data.direction,
          facilities=room_data.facilities,
          price=room_data.price,
          deposit=room_data.deposit,
          status=RoomStatus.VACANT,
     )

     db.add(room)
     db.commit()
     db.refresh(room)

     logger.info("Room %s created: %s-%s", room.id, room.building, room.number)
     return RoomResponse.model_validate(room)
