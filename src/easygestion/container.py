from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .admin_charges.service import AdminChargeService
from .admin_charges.sqlalchemy_admin_charge_repository import SQLAlchemyAdminChargeRepository
from .alerts.service import AlertService
from .alerts.sqlalchemy_alert_repository import SQLAlchemyAlertRepository
from .analytics.service import AnalyticsService
from .analytics.sqlalchemy_analytics_repository import SQLAlchemyAnalyticsRepository
from .expenses.service import ExpenseService
from .expenses.sqlalchemy_expense_repository import SQLAlchemyExpenseRepository
from .goals.service import GoalService
from .goals.sqlalchemy_goal_repository import SQLAlchemyGoalRepository
from .packages.service import PackageService
from .packages.sqlalchemy_package_repository import SQLAlchemyPackageRepository
from .payroll.service import SalaryService
from .payroll.sqlalchemy_salary_repository import SQLAlchemySalaryRepository
from .receipts.service import ReceiptService
from .receipts.sqlalchemy_receipt_repository import SQLAlchemyReceiptRepository
from .sales.service import SaleService
from .sales.sqlalchemy_sale_repository import SQLAlchemySaleRepository
from .security.passwords import PasswordHasher
from .security.tokens import TokenIssuer
from .users.service import AuthService, UserService
from .users.sqlalchemy_user_repository import SQLAlchemyEmployeeRepository, SQLAlchemyUserRepository
from .users.storage import DocumentStorage


@dataclass(frozen=True)
class Container:
    users_repo: SQLAlchemyUserRepository
    employees_repo: SQLAlchemyEmployeeRepository
    packages_repo: SQLAlchemyPackageRepository
    sales_repo: SQLAlchemySaleRepository
    receipts_repo: SQLAlchemyReceiptRepository
    expenses_repo: SQLAlchemyExpenseRepository
    salaries_repo: SQLAlchemySalaryRepository
    admin_charges_repo: SQLAlchemyAdminChargeRepository
    analytics_repo: SQLAlchemyAnalyticsRepository
    goals_repo: SQLAlchemyGoalRepository
    alerts_repo: SQLAlchemyAlertRepository

    password_hasher: PasswordHasher
    token_issuer: TokenIssuer
    document_storage: DocumentStorage

    auth_service: AuthService
    user_service: UserService
    package_service: PackageService
    sale_service: SaleService
    receipt_service: ReceiptService
    expense_service: ExpenseService
    salary_service: SalaryService
    admin_charge_service: AdminChargeService
    analytics_service: AnalyticsService
    goal_service: GoalService
    alert_service: AlertService


def build_container(*, config: Mapping) -> Container:
    users_repo = SQLAlchemyUserRepository()
    employees_repo = SQLAlchemyEmployeeRepository()
    packages_repo = SQLAlchemyPackageRepository()
    sales_repo = SQLAlchemySaleRepository()
    receipts_repo = SQLAlchemyReceiptRepository()
    expenses_repo = SQLAlchemyExpenseRepository()
    salaries_repo = SQLAlchemySalaryRepository()
    admin_charges_repo = SQLAlchemyAdminChargeRepository()
    analytics_repo = SQLAlchemyAnalyticsRepository()
    goals_repo = SQLAlchemyGoalRepository()
    alerts_repo = SQLAlchemyAlertRepository()

    password_hasher = PasswordHasher(method=str(config["PASSWORD_HASH_METHOD"]))
    token_issuer = TokenIssuer()
    document_storage = DocumentStorage(
        str(config["UPLOAD_FOLDER"]),
        max_file_size=int(config["MAX_UPLOAD_FILE_SIZE"]),
    )

    alert_service = AlertService(alerts_repo, employees_repo)

    return Container(
        users_repo=users_repo,
        employees_repo=employees_repo,
        packages_repo=packages_repo,
        sales_repo=sales_repo,
        receipts_repo=receipts_repo,
        expenses_repo=expenses_repo,
        salaries_repo=salaries_repo,
        admin_charges_repo=admin_charges_repo,
        analytics_repo=analytics_repo,
        goals_repo=goals_repo,
        alerts_repo=alerts_repo,
        password_hasher=password_hasher,
        token_issuer=token_issuer,
        document_storage=document_storage,
        auth_service=AuthService(users_repo, password_hasher, token_issuer),
        user_service=UserService(
            users_repo,
            employees_repo,
            password_hasher,
            document_storage,
            password_min_length=int(config.get("PASSWORD_MIN_LENGTH", 14)),
        ),
        package_service=PackageService(packages_repo),
        sale_service=SaleService(sales_repo, employees_repo, packages_repo),
        receipt_service=ReceiptService(receipts_repo, employees_repo),
        expense_service=ExpenseService(expenses_repo),
        salary_service=SalaryService(salaries_repo, employees_repo, sales_repo, receipts_repo),
        admin_charge_service=AdminChargeService(admin_charges_repo),
        analytics_service=AnalyticsService(analytics_repo),
        goal_service=GoalService(goals_repo, employees_repo, sales_repo, receipts_repo, alert_service),
        alert_service=alert_service,
    )
