"""Create tenants, rooms and contracts tables

Revision ID: 20261019_000001
Revises: None
Create Date: 2026-10-19

Initial schema for tenants, rooms and lease contracts.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261019_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the tenants, rooms and contracts tables."""
    op.create_table(
        'tenants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(50), nullable=False),
        sa.Column('id_card', sa.String(50), nullable=False),
        sa.Column('gender', sa.Enum('MALE', 'FEMALE', name='gender', create_constraint=True), nullable=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('emergency_contact', sa.String(100), nullable=True),
        sa.Column('emergency_phone', sa.String(50), nullable=True),
        sa.Column(
            'status',
            sa.Enum('ACTIVE', 'INACTIVE', name='tenant_status', create_constraint=True),
            nullable=False,
            server_default='ACTIVE'
        ),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('id_card', name='uq_tenants_id_card'),
    )
    op.create_index('ix_tenants_name', 'tenants', ['name'])
    op.create_index('ix_tenants_created_at', 'tenants', ['created_at'])

    op.create_table(
        'rooms',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('number', sa.String(50), nullable=False),
        sa.Column('building', sa.String(50), nullable=False),
        sa.Column('floor', sa.Integer(), nullable=False),
        sa.Column(
            'type',
            sa.Enum('SINGLE', 'DOUBLE', 'TRIPLE', 'SUITE', name='room_type', create_constraint=True),
            nullable=False
        ),
        sa.Column('area', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column(
            'direction',
            sa.Enum(
                'EAST', 'SOUTH', 'WEST', 'NORTH',
                'SOUTHEAST', 'SOUTHWEST', 'NORTHEAST', 'NORTHWEST',
                name='room_direction',
                create_constraint=True
            ),
            nullable=False
        ),
        sa.Column('facilities', sa.JSON(), nullable=False),
        sa.Column('price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('deposit', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column(
            'status',
            sa.Enum('VACANT', 'OCCUPIED', 'RESERVED', 'MAINTAINING', name='room_status', create_constraint=True),
            nullable=False,
            server_default='VACANT'
        ),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_rooms_number', 'rooms', ['number'])
    op.create_index('ix_rooms_status', 'rooms', ['status'])
    op.create_index('ix_rooms_created_at', 'rooms', ['created_at'])

    op.create_table(
        'contracts',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('tenant_id', sa.Integer(), nullable=False),
        sa.Column('room_id', sa.Integer(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('rent_amount', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('deposit', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column(
            'status',
            sa.Enum('ACTIVE', 'TERMINATED', 'EXPIRED', name='contract_status', create_constraint=True),
            nullable=False,
            server_default='ACTIVE'
        ),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['tenant_id'],
            ['tenants.id'],
            name='fk_contracts_tenant_id',
            ondelete='RESTRICT'
        ),
        sa.ForeignKeyConstraint(
            ['room_id'],
            ['rooms.id'],
            name='fk_contracts_room_id',
            ondelete='RESTRICT'
        ),
    )

    # Create indexes for common queries
    op.create_index('ix_contracts_tenant_id', 'contracts', ['tenant_id'])
    op.create_index('ix_contracts_room_id', 'contracts', ['room_id'])
    op.create_index('ix_contracts_status', 'contracts', ['status'])
    op.create_index('ix_contracts_created_at', 'contracts', ['created_at'])
    op.create_index('ix_contracts_room_id_status', 'contracts', ['room_id', 'status'])

    # At most one ACTIVE contract per room
    op.create_index(
        'uq_contracts_room_id_active',
        'contracts',
        ['room_id'],
        unique=True,
        sqlite_where=sa.text("status = 'ACTIVE'"),
        postgresql_where=sa.text("status = 'ACTIVE'"),
        mssql_where=sa.text("status = 'ACTIVE'"),
    )


def downgrade() -> None:
    """Drop the contracts, rooms and tenants tables."""
    op.drop_index('uq_contracts_room_id_active', table_name='contracts')
    op.drop_index('ix_contracts_room_id_status', table_name='contracts')
    op.drop_index('ix_contracts_created_at', table_name='contracts')
    op.drop_index('ix_contracts_status', table_name='contracts')
    op.drop_index('ix_contracts_room_id', table_name='contracts')
    op.drop_index('ix_contracts_tenant_id', table_name='contracts')
    op.drop_table('contracts')

    op.drop_index('ix_rooms_created_at', table_name='rooms')
    op.drop_index('ix_rooms_status', table_name='rooms')
    op.drop_index('ix_rooms_number', table_name='rooms')
    op.drop_table('rooms')

    op.drop_index('ix_tenants_created_at', table_name='tenants')
    op.drop_index('ix_tenants_name', table_name='tenants')
    op.drop_table('tenants')
