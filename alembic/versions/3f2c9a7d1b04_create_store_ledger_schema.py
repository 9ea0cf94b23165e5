"""create_store_ledger_schema

Revision ID: 3f2c9a7d1b04
Revises:
Create Date: 2026-10-19 10:12:41.508213

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f2c9a7d1b04'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create the store ledger schema.

    Creates:
    - users table (id = identity provider subject)
    - stores table owned by a user
    - store_users table granting non-owners access to a store
    - transactions table with NUMERIC(12, 2) amounts
    """
    # 1. Users
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('first_name', sa.String(length=255), nullable=True),
        sa.Column('last_name', sa.String(length=255), nullable=True),
        sa.Column('profile_image_url', sa.String(length=1024), nullable=True),
        sa.Column('role', sa.String(length=10), nullable=False, server_default='StoreOwner'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )

    # 2. Stores
    op.create_table(
        'stores',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('owner_id', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['owner_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )

    # 3. Store access grants
    op.create_table(
        'store_users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('store_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('role_in_store', sa.String(length=5), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['store_id'], ['stores.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('store_id', 'user_id', name='uq_store_user'),
    )

    # 4. Transactions
    op.create_table(
        'transactions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('store_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('amount_supplied', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0.00'),
        sa.Column('amount_remaining', sa.Numeric(precision=12, scale=2), nullable=False, server_default='0.00'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_by', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['store_id'], ['stores.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['created_by'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )

    # 5. Indexes for visibility and listing queries
    op.create_index('ix_stores_owner_id', 'stores', ['owner_id'])
    op.create_index('ix_store_users_store_id', 'store_users', ['store_id'])
    op.create_index('ix_store_users_user_id', 'store_users', ['user_id'])
    op.create_index('ix_transactions_store_id', 'transactions', ['store_id'])
    op.create_index('ix_transactions_store_date', 'transactions', ['store_id', 'date'])


def downgrade() -> None:
    """
    Drop the store ledger schema.

    WARNING: This deletes all stores, grants and transactions.
    """
    op.drop_index('ix_transactions_store_date', table_name='transactions')
    op.drop_index('ix_transactions_store_id', table_name='transactions')
    op.drop_index('ix_store_users_user_id', table_name='store_users')
    op.drop_index('ix_store_users_store_id', table_name='store_users')
    op.drop_index('ix_stores_owner_id', table_name='stores')

    op.drop_table('transactions')
    op.drop_table('store_users')
    op.drop_table('stores')
    op.drop_table('users')
