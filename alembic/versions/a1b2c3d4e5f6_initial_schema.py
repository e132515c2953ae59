"""initial schema: users, customers, invoices, teams, billing_accounts

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-17

invoices.customer_id has no foreign key: deleting a customer
keeps its invoices.
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "a1b2c3d4e5f6"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.execute("CREATE TYPE plan_type AS ENUM ('Basic', 'Standard', 'Premium')")
    op.execute("CREATE TYPE invoice_status AS ENUM ('Pending', 'Paid', 'Overdue')")
    op.execute(
        "CREATE TYPE payment_method AS ENUM "
        "('Cash', 'Bank Transfer', 'Online Payment', 'Other')"
    )

    op.create_table(
        "users",
        sa.Column("username", sa.String(150), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("admin_name", sa.String(255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_created_at"), "users", ["created_at"], unique=False)
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "customers",
        sa.Column("full_name", sa.String(255), nullable=False),
        sa.Column("address_street", sa.String(255), nullable=False),
        sa.Column("address_city", sa.String(120), nullable=False),
        sa.Column("address_zip", sa.String(20), nullable=False),
        sa.Column("landmark", sa.String(255), nullable=True),
        sa.Column("contact_number", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("plan_type", postgresql.ENUM("Basic", "Standard", "Premium",
                  name="plan_type", create_type=False), nullable=False),
        sa.Column("bandwidth_mbps", sa.Integer(), nullable=False),
        sa.Column("monthly_fee", sa.Numeric(10, 2), nullable=False),
        sa.Column("subscription_start_date", sa.Date(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_customers_id"), "customers", ["id"], unique=False)
    op.create_index(op.f("ix_customers_created_at"), "customers", ["created_at"], unique=False)
    op.create_index(op.f("ix_customers_email"), "customers", ["email"], unique=False)
    op.create_index(op.f("ix_customers_plan_type"), "customers", ["plan_type"], unique=False)

    op.create_table(
        "invoices",
        sa.Column("customer_id", sa.UUID(), nullable=False),
        sa.Column("invoice_number", sa.String(32), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("billing_period", sa.String(32), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column("status", postgresql.ENUM("Pending", "Paid", "Overdue",
                  name="invoice_status", create_type=False), nullable=False),
        sa.Column("payment_date", sa.DateTime(), nullable=True),
        sa.Column("payment_method", postgresql.ENUM("Cash", "Bank Transfer", "Online Payment", "Other",
                  name="payment_method", create_type=False), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_invoices_id"), "invoices", ["id"], unique=False)
    op.create_index(op.f("ix_invoices_created_at"), "invoices", ["created_at"], unique=False)
    op.create_index(op.f("ix_invoices_customer_id"), "invoices", ["customer_id"], unique=False)
    op.create_index(op.f("ix_invoices_invoice_number"), "invoices", ["invoice_number"], unique=True)
    op.create_index(op.f("ix_invoices_billing_period"), "invoices", ["billing_period"], unique=False)
    op.create_index(op.f("ix_invoices_status"), "invoices", ["status"], unique=False)

    op.create_table(
        "teams",
        sa.Column("name", sa.String(255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_teams_id"), "teams", ["id"], unique=False)
    op.create_index(op.f("ix_teams_created_at"), "teams", ["created_at"], unique=False)

    op.create_table(
        "billing_accounts",
        sa.Column("plan", sa.String(50), nullable=False),
        sa.Column("next_invoice_date", sa.Date(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_billing_accounts_id"), "billing_accounts", ["id"], unique=False)
    op.create_index(
        op.f("ix_billing_accounts_created_at"), "billing_accounts", ["created_at"], unique=False
    )


def downgrade() -> None:
    op.drop_table("billing_accounts")
    op.drop_table("teams")
    op.drop_table("invoices")
    op.drop_table("customers")
    op.drop_table("users")
    op.execute("DROP TYPE payment_method")
    op.execute("DROP TYPE invoice_status")
    op.execute("DROP TYPE plan_type")
