"""initial menu schema

Revision ID: 20261019_initial
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261019_initial"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _localized(*fields, text_type=sa.Text):
    columns = []
    for field in fields:
        for lang in ("en", "it", "es"):
            columns.append(sa.Column(f"{field}_{lang}", text_type(), nullable=True))
    return columns


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
    ]


def upgrade():
    # 1) Accounts
    op.create_table(
        "users",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "admin_roles",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("user_id", sa.String(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("role", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.UniqueConstraint("user_id", "role", name="uq_admin_role_user_role"),
    )

    # 2) Tenants
    op.create_table(
        "restaurants",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("slug", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), server_default="", nullable=False),
        sa.Column("owner_id", sa.String(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("logo_url", sa.String(), nullable=True),
        sa.Column("primary_color", sa.String(), server_default="#000000", nullable=False),
        sa.Column("accent_color", sa.String(), nullable=True),
        sa.Column("background_color", sa.String(), nullable=True),
        sa.Column("text_color", sa.String(), nullable=True),
        sa.Column("font_family", sa.String(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False),
        sa.Column("template", sa.String(), server_default="template1", nullable=False),
        sa.Column("has_completed_onboarding", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_restaurants_slug", "restaurants", ["slug"], unique=True)

    # 3) Menu tree
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("restaurant_id", sa.String(), sa.ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("text", sa.Text(), nullable=True),
        *_localized("title", text_type=sa.String),
        *_localized("text"),
        sa.Column("order", sa.Integer(), server_default="0", nullable=False),
        sa.Column("status", sa.String(), server_default="active", nullable=False),
        *_timestamps(),
    )
    op.create_index("idx_categories_restaurant", "categories", ["restaurant_id"])

    op.create_table(
        "subcategories",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("restaurant_id", sa.String(), sa.ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("categories.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("text", sa.Text(), nullable=True),
        *_localized("title", text_type=sa.String),
        *_localized("text"),
        sa.Column("order", sa.Integer(), server_default="0", nullable=False),
        sa.Column("status", sa.String(), server_default="active", nullable=False),
        *_timestamps(),
    )
    op.create_index("idx_subcategories_category", "subcategories", ["category_id"])

    op.create_table(
        "menu_items",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("restaurant_id", sa.String(), sa.ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False),
        sa.Column("subcategory_id", sa.Integer(), sa.ForeignKey("subcategories.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("text", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), server_default="", nullable=False),
        *_localized("title", text_type=sa.String),
        *_localized("text", "description"),
        sa.Column("price", sa.Float(), server_default="0", nullable=False),
        sa.Column("is_special", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column("image_path", sa.String(), nullable=True),
        sa.Column("additional_image_url", sa.String(), nullable=True),
        sa.Column("model_3d_url", sa.String(), nullable=True),
        sa.Column("redirect_3d_url", sa.String(), nullable=True),
        sa.Column("order", sa.Integer(), server_default="0", nullable=False),
        sa.Column("status", sa.String(), server_default="active", nullable=False),
        *_timestamps(),
    )
    op.create_index("idx_menu_items_restaurant", "menu_items", ["restaurant_id"])
    op.create_index("idx_menu_items_subcategory", "menu_items", ["subcategory_id"])

    op.create_table(
        "addons",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("restaurant_id", sa.String(), sa.ForeignKey("restaurants.id", ondelete="CASCADE"), nullable=False),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("categories.id", ondelete="SET NULL"), nullable=True),
        sa.Column("subcategory_id", sa.Integer(), sa.ForeignKey("subcategories.id", ondelete="SET NULL"), nullable=True),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        *_localized("title", text_type=sa.String),
        *_localized("description"),
        sa.Column("image_path", sa.String(), nullable=True),
        sa.Column("price", sa.Float(), server_default="0", nullable=False),
        sa.Column("order", sa.Integer(), server_default="0", nullable=False),
        sa.Column("status", sa.String(), server_default="active", nullable=False),
        *_timestamps(),
    )
    op.create_index("idx_addons_restaurant", "addons", ["restaurant_id"])


def downgrade():
    op.drop_index("idx_addons_restaurant", table_name="addons")
    op.drop_table("addons")
    op.drop_index("idx_menu_items_subcategory", table_name="menu_items")
    op.drop_index("idx_menu_items_restaurant", table_name="menu_items")
    op.drop_table("menu_items")
    op.drop_index("idx_subcategories_category", table_name="subcategories")
    op.drop_table("subcategories")
    op.drop_index("idx_categories_restaurant", table_name="categories")
    op.drop_table("categories")
    op.drop_index("ix_restaurants_slug", table_name="restaurants")
    op.drop_table("restaurants")
    op.drop_table("admin_roles")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
