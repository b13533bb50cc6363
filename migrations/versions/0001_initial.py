"""users, teams and team_user membership

Revision ID: 0001_initial
Revises: 
Create Date: 2026-10-19
"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'teams',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.String(500), nullable=True),
        sa.Column('personal_team', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('show_boarding', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('smtp_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('smtp_from_address', sa.String(255), nullable=True),
        sa.Column('smtp_from_name', sa.String(255), nullable=True),
        sa.Column('smtp_recipients', sa.Text(), nullable=True),
        sa.Column('smtp_host', sa.String(255), nullable=True),
        sa.Column('smtp_port', sa.Integer(), nullable=True),
        sa.Column('smtp_encryption', sa.String(20), nullable=True),
        sa.Column('smtp_username', sa.String(255), nullable=True),
        sa.Column('smtp_password', sa.String(255), nullable=True),
        sa.Column('smtp_timeout', sa.Integer(), nullable=True),
        sa.Column('resend_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('resend_api_key', sa.String(255), nullable=True),
        sa.Column('discord_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('discord_webhook_url', sa.String(500), nullable=True),
        sa.Column('telegram_enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('telegram_token', sa.String(255), nullable=True),
        sa.Column('telegram_chat_id', sa.String(255), nullable=True),
        sa.Column('custom_server_limit', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('email_verified_at', sa.DateTime(), nullable=True),
        sa.Column('password_hash', sa.String(255), nullable=True),
        sa.Column('remember_token', sa.String(100), nullable=True),
        sa.Column('two_factor_secret', sa.String(255), nullable=True),
        sa.Column('two_factor_confirmed_at', sa.DateTime(), nullable=True),
        sa.Column('force_password_reset', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('marketing_emails', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('current_team_id', sa.Integer(), sa.ForeignKey('teams.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_users_id', 'users', ['id'], unique=False)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_table(
        'team_user',
        sa.Column('team_id', sa.Integer(), sa.ForeignKey('teams.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('role', sa.String(20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    # membership lookups go user -> teams
    op.create_index('ix_team_user_user_id', 'team_user', ['user_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_team_user_user_id', table_name='team_user')
    op.drop_table('team_user')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')
    op.drop_table('teams')
