# scripts/manage_users.py

import argparse
import asyncio
import getpass

from sqlalchemy.future import select

from menupub.auth.passwords import hash_password
from menupub.core.constants import SUPER_ADMIN_ROLE
from menupub.crud import user as user_crud
from menupub.db import async_session
from menupub.models.user import AdminRole, User


async def create_super_admin(email: str, password: str):
    async with async_session() as session:
        user = await user_crud.get_user_by_email(session, email)
        if user:
            print(f"⚠️  User '{user.email}' already exists. Granting role only.")
        else:
            user = User(email=email.strip().lower(), password_hash=hash_password(password))
            session.add(user)
            await session.commit()
            print(f"✅ Created: {user.email}")

        await user_crud.grant_role(session, user.id, SUPER_ADMIN_ROLE)
        print(f"🔐 {user.email} is now a super admin.\n")


async def revoke_super_admin(email: str):
    async with async_session() as session:
        user = await user_crud.get_user_by_email(session, email)
        if not user:
            print(f"⚠️  No user found with email: {email}")
            return

        result = await session.execute(
            select(AdminRole).where(AdminRole.user_id == user.id, AdminRole.role == SUPER_ADMIN_ROLE)
        )
        role = result.scalar_one_or_none()
        if not role:
            print(f"⚠️  {user.email} is not a super admin.")
            return

        await session.delete(role)
        await session.commit()
        print(f"🗑️  Revoked super admin: {user.email}")


async def list_super_admins():
    async with async_session() as session:
        result = await session.execute(
            select(User.email).join(AdminRole, AdminRole.user_id == User.id).where(AdminRole.role == SUPER_ADMIN_ROLE)
        )
        emails = result.scalars().all()
        if not emails:
            print("⚠️  No super admins.")
        for email in emails:
            print(f"🔐 {email}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Manage menu platform super admins")
    parser.add_argument("--grant", action="store_true", help="Create (if needed) and promote a user")
    parser.add_argument("--revoke", action="store_true", help="Remove the super admin role")
    parser.add_argument("--list", action="store_true", help="List super admins")
    parser.add_argument("--email", type=str, help="Account email")

    args = parser.parse_args()

    if args.grant and args.email:
        password = getpass.getpass("Password (used only when the account is created): ")
        asyncio.run(create_super_admin(args.email, password))
    elif args.revoke and args.email:
        asyncio.run(revoke_super_admin(args.email))
    elif args.list:
        asyncio.run(list_super_admins())
    else:
        print("❗ Usage:")
        print("  python -m scripts.manage_users --grant --email admin@example.com")
        print("  python -m scripts.manage_users --revoke --email admin@example.com")
        print("  python -m scripts.manage_users --list")
