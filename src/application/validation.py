"""
Request validation rules.

Each validator returns every violated constraint as a list of
``FieldError`` instead of stopping at the first one, so a client can fix
a request in a single round trip. Field names are the ones used on the
wire.
"""

import calendar
import re
from datetime import date
from typing import List, Optional

from src.core.config import Settings, settings as default_settings
from src.domain.exceptions import FieldError
from src.application.dto import CreditRequest, CustomerRequest, CustomerUpdateRequest

CPF_PATTERN = re.compile(r"^\d{11}$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def add_months(day: date, months: int) -> date:
    """
    Shift a date by whole calendar months.

    The day is clamped to the length of the target month, so
    January 31st plus one month is the last day of February.
    """
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def validate_credit_request(
    request: CreditRequest,
    today: Optional[date] = None,
    rules: Optional[Settings] = None,
) -> List[FieldError]:
    """
    Check a create-credit request against the credit rules.

    Args:
        request: The request to check
        today: Reference date, defaults to the current date
        rules: Settings carrying the installment and date bounds

    Returns:
        Every violation found, empty when the request is acceptable
    """
    rules = rules or default_settings
    today = today or date.today()
    errors: List[FieldError] = []

    if request.credit_value is None or request.credit_value <= 0:
        errors.append(FieldError("creditValue", "must be greater than 0"))

    if request.number_of_installments < rules.credit_min_installments:
        errors.append(
            FieldError(
                "numberOfInstallments",
                f"must be greater than or equal to {rules.credit_min_installments}",
            )
        )
    elif request.number_of_installments > rules.credit_max_installments:
        errors.append(
            FieldError(
                "numberOfInstallments",
                f"must be less than or equal to {rules.credit_max_installments}",
            )
        )

    latest = add_months(today, rules.credit_first_installment_max_months)
    if request.day_first_installment <= today:
        errors.append(FieldError("dayFirstOfInstallment", "must be a future date"))
    elif request.day_first_installment > latest:
        errors.append(
            FieldError(
                "dayFirstOfInstallment",
                f"must be at most {rules.credit_first_installment_max_months} "
                f"months from today ({latest.isoformat()})",
            )
        )

    return errors


def _require_text(errors: List[FieldError], field: str, value: Optional[str]) -> None:
    if value is None or not value.strip():
        errors.append(FieldError(field, "must not be empty"))


def _check_income(errors: List[FieldError], income) -> None:
    if income is None or income < 0:
        errors.append(FieldError("income", "must be greater than or equal to 0"))


def validate_customer_request(request: CustomerRequest) -> List[FieldError]:
    """Check a customer registration request."""
    errors: List[FieldError] = []

    _require_text(errors, "firstName", request.first_name)
    _require_text(errors, "lastName", request.last_name)

    if not CPF_PATTERN.match((request.cpf or "").strip()):
        errors.append(FieldError("cpf", "must contain exactly 11 digits"))

    if not EMAIL_PATTERN.match((request.email or "").strip()):
        errors.append(FieldError("email", "must be a well-formed email address"))

    _check_income(errors, request.income)
    _require_text(errors, "password", request.password)
    _require_text(errors, "zipCode", request.zip_code)
    _require_text(errors, "street", request.street)

    return errors


def validate_customer_update(request: CustomerUpdateRequest) -> List[FieldError]:
    """Check a customer update request."""
    errors: List[FieldError] = []

    _require_text(errors, "firstName", request.first_name)
    _require_text(errors, "lastName", request.last_name)
    _check_income(errors, request.income)
    _require_text(errors, "zipCode", request.zip_code)
    _require_text(errors, "street", request.street)

    return errors
