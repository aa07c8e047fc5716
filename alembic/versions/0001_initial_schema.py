"""Initial marketplace schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("username", sa.String(128), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("name", sa.String(256), nullable=True),
        sa.Column("email", sa.String(256), nullable=True),
        sa.Column("phone_number", sa.String(64), nullable=True),
        sa.Column("profile_picture", sa.String(1024), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("username", name="uq_users_username"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    op.create_table(
        "hosts",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("username", sa.String(128), nullable=False),
        sa.Column("name", sa.String(256), nullable=False),
        sa.Column("email", sa.String(256), nullable=True),
        sa.Column("phone_number", sa.String(64), nullable=True),
        sa.Column("profile_picture", sa.String(1024), nullable=True),
        sa.Column("about_me", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("username", name="uq_hosts_username"),
    )

    op.create_table(
        "amenities",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(128), nullable=False),
    )
    op.create_index("ix_amenities_name", "amenities", ["name"])

    # Property ids are allocated from the title, hence the wider key.
    op.create_table(
        "properties",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("host_id", sa.String(36), sa.ForeignKey("hosts.id"), nullable=False),
        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("location", sa.String(256), nullable=True),
        sa.Column("price_per_night", sa.Float(), nullable=False),
        sa.Column("bedroom_count", sa.Integer(), nullable=False),
        sa.Column("bathroom_count", sa.Integer(), nullable=False),
        sa.Column("max_guest_count", sa.Integer(), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_properties_host_id", "properties", ["host_id"])
    op.create_index("ix_properties_location", "properties", ["location"])

    op.create_table(
        "property_amenities",
        sa.Column(
            "property_id",
            sa.String(255),
            sa.ForeignKey("properties.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "amenity_id",
            sa.String(36),
            sa.ForeignKey("amenities.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "bookings",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("property_id", sa.String(255), sa.ForeignKey("properties.id"), nullable=False),
        sa.Column("check_in_date", sa.DateTime(), nullable=False),
        sa.Column("check_out_date", sa.DateTime(), nullable=False),
        sa.Column("number_of_guests", sa.Integer(), nullable=False),
        sa.Column("total_price", sa.Float(), nullable=True),
        sa.Column("booking_status", sa.String(32), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_bookings_user_id", "bookings", ["user_id"])
    op.create_index("ix_bookings_property_id", "bookings", ["property_id"])
    op.create_index("ix_bookings_property_dates", "bookings", ["property_id", "check_in_date"])

    op.create_table(
        "reviews",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("property_id", sa.String(255), sa.ForeignKey("properties.id"), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_reviews_user_id", "reviews", ["user_id"])
    op.create_index("ix_reviews_property_id", "reviews", ["property_id"])


def downgrade():
    op.drop_index("ix_reviews_property_id", table_name="reviews")
    op.drop_index("ix_reviews_user_id", table_name="reviews")
    op.drop_table("reviews")

    op.drop_index("ix_bookings_property_dates", table_name="bookings")
    op.drop_index("ix_bookings_property_id", table_name="bookings")
    op.drop_index("ix_bookings_user_id", table_name="bookings")
    op.drop_table("bookings")

    op.drop_table("property_amenities")

    op.drop_index("ix_properties_location", table_name="properties")
    op.drop_index("ix_properties_host_id", table_name="properties")
    op.drop_table("properties")

    op.drop_index("ix_amenities_name", table_name="amenities")
    op.drop_table("amenities")
    op.drop_table("hosts")
    op.drop_table("users")
