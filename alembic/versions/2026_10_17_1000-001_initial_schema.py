"""Initial driving school schema

Revision ID: 001
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create instructors, trainees, sessions, enrollment, exams, payments and cars."""
    op.create_table('instructors', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('last_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('phone', sqlmodel.sql.sqltypes.AutoString(length=30), nullable=True),
        sa.Column('hire_date', sa.Date(), nullable=True),
        sa.PrimaryKeyConstraint('id'))

    op.create_table('trainees', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('last_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('phone', sqlmodel.sql.sqltypes.AutoString(length=30), nullable=True),
        sa.Column('enrollment_date', sa.Date(), nullable=False),
        sa.Column('license_category', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False),
        sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('assigned_instructor_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['assigned_instructor_id'], ['instructors.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_trainees_enrollment_date'), 'trainees', ['enrollment_date'], unique=False)
    op.create_index(op.f('ix_trainees_assigned_instructor_id'), 'trainees', ['assigned_instructor_id'],
                    unique=False)

    op.create_table('sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('session_type', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('start_datetime', sa.DateTime(), nullable=False),
        sa.Column('end_datetime', sa.DateTime(), nullable=False),
        sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('instructor_feedback', sqlmodel.sql.sqltypes.AutoString(length=2000), nullable=True),
        sa.Column('instructor_id', sa.Integer(), nullable=False),
        sa.Column('trainee_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['instructor_id'], ['instructors.id']),
        sa.ForeignKeyConstraint(['trainee_id'], ['trainees.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_sessions_session_type'), 'sessions', ['session_type'], unique=False)
    op.create_index(op.f('ix_sessions_start_datetime'), 'sessions', ['start_datetime'], unique=False)
    op.create_index(op.f('ix_sessions_status'), 'sessions', ['status'], unique=False)
    op.create_index(op.f('ix_sessions_instructor_id'), 'sessions', ['instructor_id'], unique=False)
    op.create_index(op.f('ix_sessions_trainee_id'), 'sessions', ['trainee_id'], unique=False)

    op.create_table('trainee_sessions', sa.Column('trainee_id', sa.Integer(), nullable=False),
        sa.Column('session_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['trainee_id'], ['trainees.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['session_id'], ['sessions.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('trainee_id', 'session_id'))

    op.create_table('exams', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('exam_type', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('scheduled_date', sa.Date(), nullable=False),
        sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('trainee_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['trainee_id'], ['trainees.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_exams_scheduled_date'), 'exams', ['scheduled_date'], unique=False)
    op.create_index(op.f('ix_exams_trainee_id'), 'exams', ['trainee_id'], unique=False)

    op.create_table('payments', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('payment_date', sa.Date(), nullable=False),
        sa.Column('payment_method', sqlmodel.sql.sqltypes.AutoString(length=30), nullable=False),
        sa.Column('details', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('trainee_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['trainee_id'], ['trainees.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_payments_payment_date'), 'payments', ['payment_date'], unique=False)
    op.create_index(op.f('ix_payments_trainee_id'), 'payments', ['trainee_id'], unique=False)

    op.create_table('cars', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('license_plate', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('brand', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('model', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('transmission_type', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('assigned_instructor_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['assigned_instructor_id'], ['instructors.id']),
        sa.PrimaryKeyConstraint('id'), sa.UniqueConstraint('license_plate'))


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table('cars')
    op.drop_index(op.f('ix_payments_trainee_id'), table_name='payments')
    op.drop_index(op.f('ix_payments_payment_date'), table_name='payments')
    op.drop_table('payments')
    op.drop_index(op.f('ix_exams_trainee_id'), table_name='exams')
    op.drop_index(op.f('ix_exams_scheduled_date'), table_name='exams')
    op.drop_table('exams')
    op.drop_table('trainee_sessions')
    for column in ('trainee_id', 'instructor_id', 'status', 'start_datetime', 'session_type'):
        op.drop_index(op.f(f'ix_sessions_{column}'), table_name='sessions')
    op.drop_table('sessions')
    op.drop_index(op.f('ix_trainees_assigned_instructor_id'), table_name='trainees')
    op.drop_index(op.f('ix_trainees_enrollment_date'), table_name='trainees')
    op.drop_table('trainees')
    op.drop_table('instructors')
