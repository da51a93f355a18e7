from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _id():
    return sa.Column("id", sa.String(36), primary_key=True)


def _created_at():
    return sa.Column("created_at", sa.DateTime(timezone=True), nullable=False)


def _is_active():
    return sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true())


def upgrade():
    op.create_table(
        "admin_users",
        _id(),
        sa.Column("username", sa.String(), nullable=False, unique=True),
        sa.Column("password", sa.String(), nullable=False),
        _created_at(),
    )

    op.create_table(
        "staff_users",
        _id(),
        sa.Column("username", sa.String(), nullable=False, unique=True),
        sa.Column("password", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False),
        _created_at(),
    )

    op.create_table(
        "services",
        _id(),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("image_url", sa.String(), nullable=False),
        sa.Column("image_urls", sa.JSON(), nullable=False),
        sa.Column("category", sa.String(), nullable=False),
        _is_active(),
        _created_at(),
    )
    op.create_index("ix_services_is_active", "services", ["is_active"])

    op.create_table(
        "packages",
        _id(),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("original_price", sa.Integer(), nullable=False),
        sa.Column("discounted_price", sa.Integer(), nullable=False),
        sa.Column("features", sa.JSON(), nullable=False),
        sa.Column("is_popular", sa.Boolean(), nullable=False, server_default=sa.false()),
        _is_active(),
        _created_at(),
    )
    op.create_index("ix_packages_is_active", "packages", ["is_active"])

    op.create_table(
        "staff",
        _id(),
        sa.Column("employee_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("role", sa.String(), nullable=False),
        sa.Column("bio", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(), nullable=False),
        sa.Column("expertise", sa.JSON(), nullable=False),
        _is_active(),
        _created_at(),
    )
    op.create_index("ix_staff_employee_id", "staff", ["employee_id"], unique=True)
    op.create_index("ix_staff_is_active", "staff", ["is_active"])

    op.create_table(
        "gallery",
        _id(),
        sa.Column("before_image_url", sa.String(), nullable=True),
        sa.Column("after_image_url", sa.String(), nullable=True),
        sa.Column("video_url", sa.String(), nullable=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        _is_active(),
        _created_at(),
    )
    op.create_index("ix_gallery_is_active", "gallery", ["is_active"])

    op.create_table(
        "testimonials",
        _id(),
        sa.Column("customer_name", sa.String(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=False),
        sa.Column("service_type", sa.String(), nullable=False),
        _is_active(),
        _created_at(),
    )
    op.create_index("ix_testimonials_is_active", "testimonials", ["is_active"])

    op.create_table(
        "bookings",
        _id(),
        sa.Column("customer_name", sa.String(), nullable=False),
        sa.Column("customer_phone", sa.String(), nullable=False),
        sa.Column("customer_email", sa.String(), nullable=True),
        sa.Column("customer_address", sa.Text(), nullable=False),
        sa.Column("latitude", sa.String(), nullable=True),
        sa.Column("longitude", sa.String(), nullable=True),
        sa.Column("service_type", sa.String(), nullable=False),
        sa.Column("preferred_date", sa.String(), nullable=False),
        sa.Column("preferred_time", sa.String(), nullable=False),
        sa.Column("details", sa.Text(), nullable=True),
        sa.Column("status", sa.String(), nullable=False, server_default="pending"),
        _created_at(),
    )
    op.create_index("ix_bookings_customer_phone", "bookings", ["customer_phone"])

    op.create_table(
        "contact_info",
        _id(),
        sa.Column("phone", sa.String(), nullable=False),
        sa.Column("whatsapp", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("facebook", sa.String(), nullable=False),
        sa.Column("instagram", sa.String(), nullable=False),
        sa.Column("tiktok", sa.String(), nullable=True, server_default=""),
        sa.Column("linkedin", sa.String(), nullable=True, server_default=""),
        sa.Column("twitter", sa.String(), nullable=True, server_default=""),
        sa.Column("youtube", sa.String(), nullable=True, server_default=""),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        "branding",
        _id(),
        sa.Column("brand_name", sa.String(), nullable=False, server_default="Quickfixx"),
        sa.Column("logo_url", sa.String(), nullable=True, server_default=""),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )


def downgrade():
    for table in (
        "branding",
        "contact_info",
        "bookings",
        "testimonials",
        "gallery",
        "staff",
        "packages",
        "services",
        "staff_users",
        "admin_users",
    ):
        op.drop_table(table)
