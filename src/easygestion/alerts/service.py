from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.datetime_utils import now_local
from ..common.validators import parse_int_in_range, require_text
from ..core.enums import AlertType
from ..core.exceptions import NotFoundError, ValidationError
from ..security.principal import Principal
from ..users.repository import EmployeeRepository
from .model import Alert
from .repository import AlertRepository


class AlertService:
    def __init__(self, alerts: AlertRepository, employees: EmployeeRepository):
        self._alerts = alerts
        self._employees = employees

    def list_for_employee(self, principal: Principal, employee_id: int, *, unread_only: bool = False) -> Sequence[Alert]:
        principal.ensure_can_access_employee(employee_id)
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")
        return self._alerts.list_for_employee(int(employee_id), unread_only=unread_only)

    def create(self, data: Mapping[str, Any]) -> Alert:
        employee_id = parse_int_in_range(data.get("employeeId"), "employeeId", min_value=1)
        message = require_text(data.get("message"), "message")
        try:
            alert_type = AlertType(str(data.get("type") or AlertType.DAILY.value))
        except ValueError:
            raise ValidationError(
                "type must be one of daily, monthly, warning",
                errors=[{"field": "type", "message": "type must be one of daily, monthly, warning"}],
            )
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")
        return self._alerts.create(employee_id=employee_id, message=message, type=alert_type, date=now_local())

    def notify(self, employee_id: int, message: str, alert_type: AlertType) -> Alert:
        """System-generated alert (goal completion)."""
        return self._alerts.create(employee_id=int(employee_id), message=message, type=alert_type, date=now_local())

    def mark_read(self, principal: Principal, alert_id: int) -> Alert:
        alert = self._alerts.get_by_id(int(alert_id))
        if not alert:
            raise NotFoundError("Alert not found")
        principal.ensure_can_access_employee(alert.employee_id)
        updated = self._alerts.mark_read(alert.alert_id)
        if not updated:
            raise NotFoundError("Alert not found")
        return updated

    def delete(self, alert_id: int) -> None:
        if not self._alerts.delete_by_id(int(alert_id)):
            raise NotFoundError("Alert not found")
