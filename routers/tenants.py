# routers/tenants.py
"""
Tenant API routes.

The national id (idCard) is unique; a duplicate is rejected up front and,
if two registrations race, by the database unique constraint.
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database import get_session
from models import Tenant, TenantStatus
from schemas.base import MAX_ID
from schemas.tenant import TenantCreate, TenantResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tenants", tags=["tenants"])

DUPLICATE_ID_CARD = "该身份证号已登记"


@router.get(
     "",
     response_model=List[TenantResponse],
     summary="List tenants"
)
def list_tenants(db: Session = Depends(get_session)):
     """
     Retrieve all tenants, newest first.
     """
     tenants = db.query(Tenant).order_by(Tenant.created_at.desc(), Tenant.id.desc()).all()
     return [TenantResponse.model_validate(tenant) for tenant in tenants]


@router.get(
     "/{tenant_id}",
     response_model=TenantResponse,
     summary="Get tenant by ID"
)
def get_tenant(
     tenant_id: int = Path(..., ge=1, le=MAX_ID),
     db: Session = Depends(get_session)
):
     tenant = db.query(Tenant).filter(Tenant.id == tenant_id).first()

     if not tenant:
          raise HTTPException(
               status_code=status.HTTP_404_NOT_FOUND,
               detail="租客不存在"
          )

     return TenantResponse.model_validate(tenant)


@router.post(
     "",
     response_model=TenantResponse,
     summary="Register a new tenant"
)
def create_tenant(
     tenant_data: TenantCreate,
     db: Session = Depends(get_session)
):
     """
     Register a tenant.

     - **idCard**: national id, must not already be registered
     - **email**, **gender**, **emergencyContact**, **emergencyPhone**: optional
     """
     existing = db.query(Tenant).filter(Tenant.id_card == tenant_data.id_card).first()
     if existing:
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail=DUPLICATE_ID_CARD
          )

     tenant = Tenant(
          name=tenant_data.name,
          phone=tenant_data.phone,
          id_card=tenant_data.id_card,
          gender=tenant_data.gender,
          email=tenant_data.email,
          emergency_contact=tenant_data.emergency_contact,
          emergency_phone=tenant_data.emergency_phone,
          status=TenantStatus.ACTIVE,
     )

     db.add(tenant)
     try:
          db.commit()
     except IntegrityError:
          db.rollback()
          logger.warning("Duplicate id card rejected on commit")
          raise HTTPException(
               status_code=status.HTTP_400_BAD_REQUEST,
               detail=DUPLICATE_ID_CARD
          )
     db.refresh(tenant)

     logger.info("Tenant %s registered", tenant.id)
     return TenantResponse.model_validate(tenant)
