"""create customer, bank_account and account_operation tables

Revision ID: 5d1c0a7e9b21
Revises:
Create Date: 2026-10-19 10:12:44.518305

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5d1c0a7e9b21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema: create the three banking tables."""
    op.create_table(
        'customer',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
    )
    op.create_index('ix_customer_name', 'customer', ['name'])

    # Current and saving accounts share one table, told apart by type
    op.create_table(
        'bank_account',
        sa.Column('id', sa.String(length=36), primary_key=True, nullable=False),
        sa.Column('type', sa.Enum('current', 'saving', name='accounttype'), nullable=False),
        sa.Column('balance', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.Enum('created', 'activated', 'suspended', name='accountstatus'), nullable=False),
        sa.Column('customer_id', sa.Integer(), sa.ForeignKey('customer.id'), nullable=False),
        sa.Column('overdraft', sa.Float(), nullable=True),
        sa.Column('interest_rate', sa.Float(), nullable=True),
    )
    op.create_index('ix_bank_account_type', 'bank_account', ['type'])
    op.create_index('ix_bank_account_customer_id', 'bank_account', ['customer_id'])

    op.create_table(
        'account_operation',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('operation_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('type', sa.Enum('debit', 'credit', name='operationtype'), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('bank_account_id', sa.String(length=36), sa.ForeignKey('bank_account.id'), nullable=False),
    )
    op.create_index('ix_account_operation_operation_date', 'account_operation', ['operation_date'])
    op.create_index('ix_account_operation_bank_account_id', 'account_operation', ['bank_account_id'])


def downgrade() -> None:
    """Downgrade schema: drop the banking tables."""
    op.drop_index('ix_account_operation_bank_account_id', table_name='account_operation')
    op.drop_index('ix_account_operation_operation_date', table_name='account_operation')
    op.drop_table('account_operation')
    op.drop_index('ix_bank_account_customer_id', table_name='bank_account')
    op.drop_index('ix_bank_account_type', table_name='bank_account')
    op.drop_table('bank_account')
    op.drop_index('ix_customer_name', table_name='customer')
    op.drop_table('customer')
    sa.Enum(name='operationtype').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='accountstatus').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='accounttype').drop(op.get_bind(), checkfirst=True)
