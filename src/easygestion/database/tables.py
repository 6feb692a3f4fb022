"""ORM tables.

Repositories map these rows to the frozen domain dataclasses of each feature
module; nothing above the repository layer touches these classes.
"""
from __future__ import annotations

from datetime import datetime

from .extensions import db


class TimestampMixin:
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)


class UserRow(TimestampMixin, db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(100), unique=True, nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default="user")
    avatar = db.Column(db.String(255))
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    employee = db.relationship("EmployeeRow", back_populates="user", uselist=False, cascade="all, delete-orphan")
    expenses = db.relationship("ExpenseRow", back_populates="creator")


class EmployeeRow(TimestampMixin, db.Model):
    __tablename__ = "employees"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    name = db.Column(db.String(255), nullable=False)
    position = db.Column(db.String(255), nullable=False)
    hire_date = db.Column(db.Date, nullable=False)
    deduction_percentage = db.Column(db.Numeric(5, 2), nullable=False, default=0)
    contract = db.Column(db.String(255))
    employment_declaration = db.Column(db.String(255))
    certification = db.Column(db.String(255))

    user = db.relationship("UserRow", back_populates="employee")
    sales = db.relationship("SaleRow", back_populates="employee", cascade="all, delete-orphan")
    receipts = db.relationship("ReceiptRow", back_populates="employee", cascade="all, delete-orphan")
    salaries = db.relationship("SalaryRow", back_populates="employee", cascade="all, delete-orphan")
    goals = db.relationship("GoalRow", back_populates="employee", cascade="all, delete-orphan")
    alerts = db.relationship("AlertRow", back_populates="employee", cascade="all, delete-orphan")


class PackageRow(TimestampMixin, db.Model):
    __tablename__ = "packages"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    sales = db.relationship("SaleRow", back_populates="package")


class SaleRow(TimestampMixin, db.Model):
    __tablename__ = "sales"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    package_id = db.Column(db.Integer, db.ForeignKey("packages.id"), nullable=False, index=True)
    client_name = db.Column(db.String(255), nullable=False)
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    date = db.Column(db.DateTime, nullable=False, default=datetime.now, index=True)
    description = db.Column(db.Text)

    employee = db.relationship("EmployeeRow", back_populates="sales")
    package = db.relationship("PackageRow", back_populates="sales")


class ReceiptRow(TimestampMixin, db.Model):
    __tablename__ = "receipts"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    client_name = db.Column(db.String(255), nullable=False)
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    date = db.Column(db.DateTime, nullable=False, default=datetime.now, index=True)
    description = db.Column(db.Text)

    employee = db.relationship("EmployeeRow", back_populates="receipts")


class ExpenseRow(TimestampMixin, db.Model):
    __tablename__ = "expenses"

    id = db.Column(db.Integer, primary_key=True)
    category = db.Column(db.String(255), nullable=False)
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    description = db.Column(db.Text)
    date = db.Column(db.DateTime, nullable=False, default=datetime.now, index=True)
    created_by = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    creator = db.relationship("UserRow", back_populates="expenses")


class SalaryRow(TimestampMixin, db.Model):
    __tablename__ = "salaries"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    base_salary = db.Column(db.Numeric(10, 2), nullable=False)
    commission_percentage = db.Column(db.Numeric(5, 2), nullable=False, default=0)
    total_salary = db.Column(db.Numeric(10, 2), nullable=False)
    period_start = db.Column(db.Date, nullable=False)
    period_end = db.Column(db.Date, nullable=False)

    employee = db.relationship("EmployeeRow", back_populates="salaries")


class AdminChargeRow(TimestampMixin, db.Model):
    __tablename__ = "admin_charges"
    __table_args__ = (db.UniqueConstraint("month", "year", name="uq_admin_charges_month_year"),)

    id = db.Column(db.Integer, primary_key=True)
    rent = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    charges = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    operating_costs = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    electricity = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    salaries = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    total_charges = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    month = db.Column(db.Integer, nullable=False)
    year = db.Column(db.Integer, nullable=False)


class GoalRow(TimestampMixin, db.Model):
    __tablename__ = "goals"
    __table_args__ = (db.UniqueConstraint("employee_id", "month", "year", name="uq_goals_employee_month_year"),)

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False)
    monthly_objective = db.Column(db.Numeric(10, 2), nullable=False)
    daily_objective = db.Column(db.Numeric(10, 2), nullable=False)
    month = db.Column(db.Integer, nullable=False)
    year = db.Column(db.Integer, nullable=False)
    remaining_amount = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    is_completed = db.Column(db.Boolean, nullable=False, default=False)

    employee = db.relationship("EmployeeRow", back_populates="goals")


class AlertRow(TimestampMixin, db.Model):
    __tablename__ = "alerts"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    message = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(20), nullable=False, default="daily")
    is_read = db.Column(db.Boolean, nullable=False, default=False)
    date = db.Column(db.DateTime, nullable=False, default=datetime.now)

    employee = db.relationship("EmployeeRow", back_populates="alerts")
