"""initial schema: lawyers, clients, estate_data, email_invitations

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'lawyers',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('bar_number', sa.String(), nullable=True),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
    )
    op.create_index('ix_lawyers_email', 'lawyers', ['email'], unique=True)

    op.create_table(
        'clients',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('access_code', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('address', sa.String(), nullable=True),
        sa.Column('invitation_sent_at', sa.DateTime(), nullable=True),
        sa.Column('profile_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('assigned_lawyer_id', sa.Uuid(), sa.ForeignKey('lawyers.id'), nullable=True),
    )
    op.create_index('ix_clients_email', 'clients', ['email'], unique=True)
    op.create_index('ix_clients_assigned_lawyer_id', 'clients', ['assigned_lawyer_id'])

    op.create_table(
        'estate_data',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.Column('client_id', sa.Uuid(), sa.ForeignKey('clients.id'), nullable=False, unique=True),
        sa.Column('marital_status', sa.String(), nullable=True),
        sa.Column('spouse_name', sa.String(), nullable=True),
        sa.Column('children', sa.JSON(), nullable=True),
        sa.Column('assets', sa.JSON(), nullable=True),
        sa.Column('beneficiaries', sa.JSON(), nullable=True),
        sa.Column('healthcare_preferences', sa.Text(), nullable=True),
        sa.Column('executor_preferences', sa.Text(), nullable=True),
        sa.Column('special_instructions', sa.Text(), nullable=True),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
    )

    op.create_table(
        'email_invitations',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('client_email', sa.String(), nullable=False),
        sa.Column('invitation_code', sa.String(), nullable=False),
        sa.Column('sent_by_lawyer_id', sa.Uuid(), sa.ForeignKey('lawyers.id'), nullable=True),
        sa.Column('sent_at', sa.DateTime(), nullable=False),
        sa.Column('opened_at', sa.DateTime(), nullable=True),
        sa.Column('app_downloaded', sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index('ix_email_invitations_client_email', 'email_invitations', ['client_email'])
    op.create_index('ix_email_invitations_invitation_code', 'email_invitations', ['invitation_code'], unique=True)
    op.create_index('ix_email_invitations_sent_by_lawyer_id', 'email_invitations', ['sent_by_lawyer_id'])


def downgrade() -> None:
    op.drop_index('ix_email_invitations_sent_by_lawyer_id', table_name='email_invitations')
    op.drop_index('ix_email_invitations_invitation_code', table_name='email_invitations')
    op.drop_index('ix_email_invitations_client_email', table_name='email_invitations')
    op.drop_table('email_invitations')
    op.drop_table('estate_data')
    op.drop_index('ix_clients_assigned_lawyer_id', table_name='clients')
    op.drop_index('ix_clients_email', table_name='clients')
    op.drop_table('clients')
    op.drop_index('ix_lawyers_email', table_name='lawyers')
    op.drop_table('lawyers')
