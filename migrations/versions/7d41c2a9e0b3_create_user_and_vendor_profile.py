"""create user and vendor_profile tables

Revision ID: 7d41c2a9e0b3
Revises:
Create Date: 2025-09-02 10:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '7d41c2a9e0b3'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False, unique=True),
        sa.Column('first_name', sa.String(length=100), nullable=True),
        sa.Column('last_name', sa.String(length=100), nullable=True),
        sa.Column('role', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_table(
        'vendor_profile',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('user.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('vendor_type', sa.String(length=20), nullable=True),
        sa.Column('business_name', sa.String(length=100), nullable=True),
        sa.Column('business_address1', sa.String(length=200), nullable=True),
        sa.Column('business_address2', sa.String(length=200), nullable=True),
        sa.Column('city', sa.String(length=50), nullable=True),
        sa.Column('state', sa.String(length=50), nullable=True),
        sa.Column('postal_code', sa.String(length=6), nullable=True),
        sa.Column('business_logo', sa.String(length=500), nullable=True),
        sa.Column('verification_type', sa.String(length=10), nullable=True),
        sa.Column('gst_number', sa.String(length=15), nullable=True),
        sa.Column('gst_document', sa.String(length=500), nullable=True),
        sa.Column('id_type', sa.String(length=10), nullable=True),
        sa.Column('id_number', sa.String(length=12), nullable=True),
        sa.Column('other_documents', sa.JSON(), nullable=True),
        sa.Column('profile_step', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('verification_status', sa.String(length=10), nullable=True),
        sa.Column('rejection_reason', sa.String(length=500), nullable=True),
        sa.Column('rejected_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_vendor_profile_verification_status', 'vendor_profile', ['verification_status'])


def downgrade():
    op.drop_index('ix_vendor_profile_verification_status', table_name='vendor_profile')
    op.drop_table('vendor_profile')
    op.drop_table('user')
