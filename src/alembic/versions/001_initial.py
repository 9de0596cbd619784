"""Initial migration

Revision ID: 001
Revises:
Create Date: 2024-01-01 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _text(length: int | None = None) -> sqlmodel.sql.sqltypes.AutoString:
    return sqlmodel.sql.sqltypes.AutoString(length=length)


def upgrade() -> None:
    # 1. Clients
    op.create_table(
        "clients",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("full_name", _text(200), nullable=False),
        sa.Column("company_name", _text(200), nullable=True),
        sa.Column("tax_code", _text(16), nullable=False),
        sa.Column("email", _text(255), nullable=False),
        sa.Column("phone", _text(50), nullable=False),
        sa.Column("role", _text(100), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_clients_full_name", "clients", ["full_name"], unique=False)
    op.create_index("ix_clients_tax_code", "clients", ["tax_code"], unique=True)
    op.create_index("ix_clients_email", "clients", ["email"], unique=True)

    # 2. Projects
    op.create_table(
        "projects",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("client_id", sa.Uuid(), nullable=False),
        sa.Column("name", _text(200), nullable=False),
        sa.Column("description", _text(2000), nullable=True),
        sa.Column(
            "status", _text(30), nullable=False, server_default="awaiting_briefing"
        ),
        sa.Column(
            "briefing_completed", sa.Boolean(), nullable=False, server_default=sa.text("false")
        ),
        sa.Column("briefing_url", _text(500), nullable=False, server_default=""),
        sa.Column("internal_notes", _text(), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("budget", _text(100), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_client_id", "projects", ["client_id"], unique=False)
    op.create_index("ix_projects_status", "projects", ["status"], unique=False)
    op.create_index("ix_projects_created_at", "projects", ["created_at"], unique=False)

    # 3. Briefings
    op.create_table(
        "briefings",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("project_id", sa.Uuid(), nullable=True),
        sa.Column("client_id", sa.Uuid(), nullable=True),
        sa.Column("full_name", _text(200), nullable=False),
        sa.Column("company_name", _text(200), nullable=True),
        sa.Column("tax_code", _text(16), nullable=False),
        sa.Column("email", _text(255), nullable=False),
        sa.Column("phone", _text(50), nullable=False),
        sa.Column("role", _text(100), nullable=False),
        sa.Column("project_goal", _text(), nullable=False),
        sa.Column("already_existing", _text(), nullable=False),
        sa.Column("specific_deadline", _text(), nullable=True),
        sa.Column("project_type", _text(100), nullable=False),
        sa.Column("project_type_other", _text(), nullable=True),
        sa.Column("scope", _text(100), nullable=False),
        sa.Column("required_features", _text(), nullable=False),
        sa.Column("main_features", _text(), nullable=False),
        sa.Column("secondary_features", _text(), nullable=True),
        sa.Column("user_levels", _text(), nullable=True),
        sa.Column("reserved_areas", _text(), nullable=True),
        sa.Column("existing_design", _text(100), nullable=False),
        sa.Column("reference_sites", _text(), nullable=True),
        sa.Column("color_palette", _text(), nullable=True),
        sa.Column("logo_ready", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("external_services", _text(), nullable=True),
        sa.Column("platforms", sa.JSON(), nullable=False),
        sa.Column("technical_preferences", _text(), nullable=True),
        sa.Column("content_ready", _text(), nullable=True),
        sa.Column("content_delivery", _text(), nullable=True),
        sa.Column("import_from_other_system", _text(), nullable=True),
        sa.Column("has_domain", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("has_hosting", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column(
            "needs_assistance", sa.Boolean(), nullable=False, server_default=sa.text("false")
        ),
        sa.Column("support_type", _text(100), nullable=False),
        sa.Column("estimated_budget", _text(), nullable=True),
        sa.Column("payment_method", _text(100), nullable=False),
        sa.Column("final_deadline", _text(), nullable=True),
        sa.Column("urgent_parts", _text(), nullable=True),
        sa.Column("launch_date", _text(), nullable=True),
        sa.Column("additional_info", _text(), nullable=True),
        sa.Column("regulatory_constraints", _text(), nullable=True),
        sa.Column("status", _text(20), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_briefings_project_id", "briefings", ["project_id"], unique=False)
    op.create_index("ix_briefings_client_id", "briefings", ["client_id"], unique=False)
    op.create_index("ix_briefings_created_at", "briefings", ["created_at"], unique=False)

    # 4. Temporary briefing credentials (no FK to projects)
    op.create_table(
        "temp_users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", _text(255), nullable=False),
        sa.Column("project_id", sa.Uuid(), nullable=False),
        sa.Column("email", _text(255), nullable=False),
        sa.Column("password", _text(255), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_temp_users_user_id", "temp_users", ["user_id"], unique=False)
    op.create_index("ix_temp_users_project_id", "temp_users", ["project_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_temp_users_project_id", table_name="temp_users")
    op.drop_index("ix_temp_users_user_id", table_name="temp_users")
    op.drop_table("temp_users")

    op.drop_index("ix_briefings_created_at", table_name="briefings")
    op.drop_index("ix_briefings_client_id", table_name="briefings")
    op.drop_index("ix_briefings_project_id", table_name="briefings")
    op.drop_table("briefings")

    op.drop_index("ix_projects_created_at", table_name="projects")
    op.drop_index("ix_projects_status", table_name="projects")
    op.drop_index("ix_projects_client_id", table_name="projects")
    op.drop_table("projects")

    op.drop_index("ix_clients_email", table_name="clients")
    op.drop_index("ix_clients_tax_code", table_name="clients")
    op.drop_index("ix_clients_full_name", table_name="clients")
    op.drop_table("clients")
