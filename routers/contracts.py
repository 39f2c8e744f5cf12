# routers/contracts.py
"""
Contract API routes.

Provides listing, lookup, signing and termination of lease contracts.
Signing and termination go through LeaseService, which keeps the room's
occupancy status in step with the contract.
"""
from datetime import date
from typing import Optional, List
from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session

from database import get_session
from exceptions import ConflictError, NotFoundError, TransactionError
from models import ContractStatus
from services.lease_service import LeaseService
from schemas.base import MAX_ID
from schemas.contract import (
     ContractCreate,
     ContractFilter,
     ContractResponse,
     ContractDetailResponse,
     ContractEnvelope,
     ContractDetailEnvelope,
)

router = APIRouter(prefix="/api/contracts", tags=["contracts"])


@router.get(
     "",
     response_model=List[ContractResponse],
     summary="List contracts with filters"
)
def list_contracts(
     room_number: Optional[str] = Query(None, alias="roomNumber", description="Room number contains"),
     tenant_name: Optional[str] = Query(None, alias="tenantName", description="Tenant name contains"),
     status: Optional[ContractStatus] = Query(None, description="Filter by status"),
     start_date: Optional[date] = Query(None, alias="startDate", description="Starts on or after"),
     end_date: Optional[date] = Query(None, alias="endDate", description="Ends on or before"),
     db: Session = Depends(get_session)
):
     """
     Retrieve contracts, newest first.

     Filters:
     - **roomNumber**: substring of the room number
     - **tenantName**: substring of the tenant name
     - **status**: ACTIVE, TERMINATED or EXPIRED
     - **startDate** / **endDate**: lease period bounds
     """
     filters = ContractFilter(
          room_number=room_number,
          tenant_name=tenant_name,
          status=status,
          start_date=start_date,
          end_date=end_date,
     )
     contracts = LeaseService.query_contracts(db, filters)
     return [ContractResponse.model_validate(contract) for contract in contracts]


@router.get(
     "/{contract_id}",
     response_model=ContractDetailEnvelope,
     summary="Get contract by ID"
)
def get_contract(
     contract_id: int = Path(..., ge=1, le=MAX_ID),
     db: Session = Depends(get_session)
):
     """
     Retrieve a contract with tenant and room details.
     """
     try:
          contract = LeaseService.get_contract(db, contract_id)
     except NotFoundError as e:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=str(e)
          )

     return ContractDetailEnvelope(data=ContractDetailResponse.model_validate(contract))


@router.post(
     "",
     response_model=ContractEnvelope,
     summary="Sign a new contract"
)
def create_contract(
     contract_data: ContractCreate,
     db: Session = Depends(get_session)
):
     """
     Create an ACTIVE contract and mark the room OCCUPIED in one transaction.

     - **tenantId**: ID of the tenant
     - **roomId**: ID of a VACANT room
     - **startDate** / **endDate**: lease period
     - **rentAmount** / **deposit**: non-negative amounts
     """
     try:
          contract = LeaseService.create_contract(
               db,
               tenant_id=contract_data.tenant_id,
               room_id=contract_data.room_id,
               start_date=contract_data.start_date,
               end_date=contract_data.end_date,
               rent_amount=contract_data.rent_amount,
               deposit=contract_data.deposit,
          )
     except (ConflictError, NotFoundError) as e:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail=str(e)
          )
     except TransactionError as e:
          raise HTTPException(
               status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
               detail={"error": "添加合同失败", "message": str(e)}
          )

     return ContractEnvelope(data=ContractResponse.model_validate(contract))


@router.post(
     "/{contract_id}/terminate",
     response_model=ContractEnvelope,
     summary="Terminate contract"
)
def terminate_contract(
     contract_id: int = Path(..., ge=1, le=MAX_ID),
     db: Session = Depends(get_session)
):
     """
     Terminate an ACTIVE contract and mark its room VACANT in one transaction.
     """
     try:
          contract = LeaseService.terminate_contract(db, contract_id)
     except NotFoundError as e:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail=str(e)
          )
     except ConflictError as e:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail=str(e)
          )
     except TransactionError as e:
          raise HTTPException(
               status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
               detail={"error": "终止合同失败", "message": str(e)}
          )

     return ContractEnvelope(data=ContractResponse.model_validate(contract))
