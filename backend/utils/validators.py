from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from models.cart import CartUpdate, SavedUpdate
from models.catalog import CategoryCreate, DeleteRequest, OfferCreate
from models.order import OrderCreate, OrderUpdate
from models.product import ProductCreate, ProductUpdate
from models.user import (
    AccountUpdate,
    AuthRequest,
    ForgotPasswordRequest,
    ResetPasswordRequest,
    account_schema_for,
)
from utils.errors import ValidationError

# =====================================================
# SCHEMA TABLE
# =====================================================

SCHEMAS: dict[str, type[BaseModel]] = {
    "user_update": AccountUpdate,
    "auth": AuthRequest,
    "forgot": ForgotPasswordRequest,
    "reset": ResetPasswordRequest,
    "product": ProductCreate,
    "product_update": ProductUpdate,
    "category": CategoryCreate,
    "offer": OfferCreate,
    "order": OrderCreate,
    "order_update": OrderUpdate,
    "cart_update": CartUpdate,
    "saved_update": SavedUpdate,
    "delete": DeleteRequest,
}

NUMBER_ERRORS = {"float_type", "float_parsing", "int_type", "int_parsing", "int_from_float", "finite_number"}
DATE_ERRORS = {"datetime_type", "datetime_parsing", "datetime_from_date_parsing", "datetime_object_invalid"}
OBJECT_ERRORS = {"model_type", "model_attributes_type", "dict_type"}


def schema_for(kind: str, body: dict) -> type[BaseModel]:
    if kind == "user":
        return account_schema_for(body.get("role"))
    try:
        return SCHEMAS[kind]
    except KeyError:
        raise ValueError(f"Unknown schema kind: {kind}")


def validate(kind: str, body):
    """
    Validate an untyped request body against the schema registered for `kind`.
    Returns the parsed model; raises ValidationError naming the first failing field.
    """
    if not isinstance(body, dict):
        raise ValidationError('"value" must be an object')

    schema = schema_for(kind, body)
    try:
        return schema.model_validate(body)
    except SchemaError as e:
        raise first_error(e.errors())


# =====================================================
# ERROR FORMATTING
# =====================================================

def _is_field_name(part) -> bool:
    # union members show up in locations as "Location" / "list[Location]"
    return isinstance(part, str) and part != "body" and "[" not in part and not part[:1].isupper()


def field_label(loc) -> str | None:
    names = [part for part in loc if _is_field_name(part)]
    return names[-1] if names else None


def describe(error: dict) -> str:
    label = field_label(error.get("loc", ())) or "value"
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}

    if kind == "missing":
        return f'"{label}" is required'
    if kind == "extra_forbidden":
        return f'"{label}" is not allowed'
    if kind == "string_type":
        return f'"{label}" must be a string'
    if kind in NUMBER_ERRORS:
        return f'"{label}" must be a number'
    if kind in ("bool_type", "bool_parsing"):
        return f'"{label}" must be a boolean'
    if kind in DATE_ERRORS:
        return f'"{label}" must be a valid date'
    if kind == "list_type":
        return f'"{label}" must be an array'
    if kind in OBJECT_ERRORS:
        return f'"{label}" must be an object'
    if kind == "string_too_short" and ctx.get("min_length") == 1:
        return f'"{label}" is not allowed to be empty'
    if kind == "string_too_short":
        return f'"{label}" length must be at least {ctx.get("min_length")} characters long'
    if kind == "string_too_long":
        return f'"{label}" length must be less than or equal to {ctx.get("max_length")} characters long'
    if kind == "value_error" and "email" in error.get("msg", ""):
        return f'"{label}" must be a valid email'
    if kind == "json_invalid":
        return '"value" must be valid JSON'

    return f'"{label}" {error.get("msg", "is invalid")}'


def first_error(errors: list[dict]) -> ValidationError:
    if not errors:
        return ValidationError('"value" is invalid')
    error = errors[0]
    return ValidationError(describe(error), field=field_label(error.get("loc", ())))
