"""Tests for the table definitions the migrations mirror"""
from sqlalchemy import UniqueConstraint

from models import Base


def test_table_names():
    assert set(Base.metadata.tables) == {"tenants", "rooms", "contracts"}


def test_id_card_unique_constraint_is_named():
    tenants = Base.metadata.tables["tenants"]
    unique = [c for c in tenants.constraints if isinstance(c, UniqueConstraint)]

    assert [(c.name, [col.name for col in c.columns]) for c in unique] == [
        ("uq_tenants_id_card", ["id_card"])
    ]


def test_one_active_contract_per_room_index():
    contracts = Base.metadata.tables["contracts"]
    index = next(i for i in contracts.indexes if i.name == "uq_contracts_room_id_active")

    assert index.unique
    assert [col.name for col in index.columns] == ["room_id"]
