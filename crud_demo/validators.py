"""
Field constraints per entity.

Each validate_* function takes a body already loaded by its schema (so values
have the right primitive types) and returns the messages of every violated
constraint, in field order. An empty list means the body is acceptable.
Range/format checks skip null values; only the "must not be blank" rules
reject a missing field.
"""
from typing import Any, Callable, Dict, List

from marshmallow import ValidationError, validate

POSITIVE = validate.Range(min=0, min_inclusive=False)
ZERO_OR_POSITIVE = validate.Range(min=0)
FIRST_NAME_LENGTH = validate.Length(min=2, max=50)
EMAIL = validate.Email()


def is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def violates(check: Callable[[Any], Any], value: Any) -> bool:
    """True when a marshmallow validator rejects value."""
    try:
        check(value)
    except ValidationError:
        return True
    return False


def validate_user(data: Dict[str, Any]) -> List[str]:
    errors = []
    if is_blank(data.get("username")):
        errors.append("username must not be blank")
    if is_blank(data.get("password")):
        errors.append("password must not be blank")
    return errors


def validate_course(data: Dict[str, Any]) -> List[str]:
    errors = []
    if is_blank(data.get("code")):
        errors.append("code must not be blank")
    if is_blank(data.get("title")):
        errors.append("title must not be blank")
    credit = data.get("credit")
    if credit is not None and violates(POSITIVE, credit):
        errors.append("credit must be positive")
    return errors


def validate_order(data: Dict[str, Any]) -> List[str]:
    errors = []
    if is_blank(data.get("order_number")):
        errors.append("orderNumber must not be blank")
    if is_blank(data.get("customer_name")):
        errors.append("customerName must not be blank")
    total = data.get("total_amount")
    if total is not None and violates(ZERO_OR_POSITIVE, total):
        errors.append("totalAmount must be zero or positive")
    return errors


def validate_product(data: Dict[str, Any]) -> List[str]:
    # price carries no range rule here; negative prices are accepted as-is
    errors = []
    if is_blank(data.get("name")):
        errors.append("name must not be blank")
    return errors


def validate_student(data: Dict[str, Any]) -> List[str]:
    errors = []
    first_name = data.get("first_name")
    if is_blank(first_name):
        errors.append("firstName must not be blank")
    if first_name is not None and violates(FIRST_NAME_LENGTH, first_name):
        errors.append("firstName length must be between 2 and 50")
    if is_blank(data.get("last_name")):
        errors.append("lastName must not be blank")
    email = data.get("email")
    if is_blank(email):
        errors.append("email must not be blank")
    if email and violates(EMAIL, email):
        errors.append("email must be a valid email address")
    return errors
