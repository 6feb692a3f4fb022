from __future__ import annotations

import logging
from typing import Iterable, Optional

from sqlalchemy import inspect

from ..core.constants import DEFAULT_PACKAGES
from ..core.enums import Role
from .extensions import db, transaction
from .tables import PackageRow, UserRow

logger = logging.getLogger(__name__)


def init_schema() -> None:
    db.create_all()


def list_tables() -> list[str]:
    return sorted(inspect(db.engine).get_table_names())


def seed_default_packages(packages: Iterable[tuple] = DEFAULT_PACKAGES) -> int:
    """Insert the default packages that are missing (matched by name)."""
    existing = set(db.session.execute(db.select(PackageRow.name)).scalars().all())
    created = 0
    with transaction() as session:
        for name, price in packages:
            if name in existing:
                continue
            session.add(PackageRow(name=name, price=price, is_active=True))
            created += 1
    return created


def ensure_superadmin(*, username: str, email: str, password_hash: Optional[str]) -> bool:
    """Create the super-admin account once; an existing email or username is left untouched."""
    if not password_hash:
        logger.warning("SUPERADMIN_PASSWORD is not set; super-admin account not seeded")
        return False

    found = db.session.execute(
        db.select(UserRow).where((UserRow.email == email) | (UserRow.username == username))
    ).scalar_one_or_none()
    if found:
        return False

    with transaction() as session:
        session.add(
            UserRow(
                username=username,
                email=email,
                password_hash=password_hash,
                role=Role.SUPER_ADMIN.value,
                is_active=True,
            )
        )
    return True


def reset_database() -> None:
    db.drop_all()
    db.create_all()
    seed_default_packages()
