"""Shared test fixtures for pytest"""
import os
from datetime import date
from decimal import Decimal

# Keep the application engine off the local SQLite file
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import get_session
from main import app
from models import Base, Direction, Room, RoomStatus, RoomType, Tenant
from services.lease_service import LeaseService


@pytest.fixture
def test_engine():
    """In-memory SQLite engine shared by every session of a test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(
        bind=test_engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture
def file_session_factory(tmp_path):
    """Sessions on a SQLite file, each with its own connection"""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'rental.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)

    yield sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )

    engine.dispose()


@pytest.fixture
def test_db(session_factory):
    """Database session for service-level tests"""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """HTTP client for API testing"""

    def override_get_session():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_session] = override_get_session

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def make_room(test_db):
    """Create a room directly in the database"""

    def _make_room(number="101", building="A", status=RoomStatus.VACANT, price=Decimal("2000")):
        room = Room(
            number=number,
            building=building,
            floor=1,
            type=RoomType.SINGLE,
            area=Decimal("20"),
            direction=Direction.SOUTH,
            facilities={"aircon": True},
            price=price,
            deposit=price,
            status=status,
        )
        test_db.add(room)
        test_db.commit()
        test_db.refresh(room)
        return room

    return _make_room


@pytest.fixture
def make_tenant(test_db):
    """Create a tenant directly in the database"""

    def _make_tenant(name="Li Wei", id_card="110101199001010011", phone="13800000000"):
        tenant = Tenant(name=name, phone=phone, id_card=id_card)
        test_db.add(tenant)
        test_db.commit()
        test_db.refresh(tenant)
        return tenant

    return _make_tenant


@pytest.fixture
def sign_contract(test_db):
    """Sign a 2024 lease through the service"""

    def _sign_contract(tenant, room, start_date=date(2024, 1, 1), end_date=date(2024, 12, 31)):
        return LeaseService.create_contract(
            test_db,
            tenant_id=tenant.id,
            room_id=room.id,
            start_date=start_date,
            end_date=end_date,
            rent_amount=Decimal("2000"),
            deposit=Decimal("2000"),
        )

    return _sign_contract


@pytest.fixture
def room_payload():
    return {
        "number": "101",
        "floor": 1,
        "building": "A",
        "type": "SINGLE",
        "area": 20,
        "direction": "SOUTH",
        "facilities": ["aircon", "internet"],
        "price": 2000,
        "deposit": 2000,
    }


@pytest.fixture
def tenant_payload():
    return {
        "name": "Li Wei",
        "phone": "13800000000",
        "idCard": "110101199001010011",
    }
