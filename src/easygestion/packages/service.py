from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.validators import parse_bool, parse_money, require_text
from ..core.exceptions import NotFoundError
from .model import Package
from .repository import PackageRepository


class PackageService:
    def __init__(self, packages: PackageRepository):
        self._packages = packages

    def list_active(self) -> Sequence[Package]:
        return self._packages.list_active()

    def create(self, data: Mapping[str, Any]) -> Package:
        name = require_text(data.get("name"), "name")
        price = parse_money(data.get("price"), "price")
        return self._packages.create(name=name, price=price)

    def update(self, package_id: int, data: Mapping[str, Any]) -> Package:
        if not self._packages.get_by_id(package_id):
            raise NotFoundError("Package not found")

        fields: dict[str, Any] = {}
        if data.get("name") is not None:
            fields["name"] = require_text(data["name"], "name")
        if data.get("price") is not None:
            fields["price"] = parse_money(data["price"], "price")
        if data.get("isActive") is not None:
            fields["is_active"] = parse_bool(data["isActive"], "isActive")

        updated = self._packages.update(package_id, **fields) if fields else self._packages.get_by_id(package_id)
        if not updated:
            raise NotFoundError("Package not found")
        return updated

    def deactivate(self, package_id: int) -> Package:
        """Soft delete: past sales keep pointing at the package."""
        updated = self._packages.update(package_id, is_active=False)
        if not updated:
            raise NotFoundError("Package not found")
        return updated
