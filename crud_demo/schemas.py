"""
JSON shapes for request and response bodies.

These schemas only check primitive types (a string where a string is
expected, a number where a number is expected). Field constraints such as
"must not be blank" live in validators.py and run after a body has loaded.
Every declared field is optional and loads as None when absent; id and
server-assigned fields are dump-only so client values are dropped on load.
"""
from dataclasses import dataclass
from typing import Optional

from marshmallow import EXCLUDE, Schema, fields, post_load, pre_load, validate


class ShapeSchema(Schema):
    class Meta:
        unknown = EXCLUDE


def _str(key=None):
    return fields.String(data_key=key, load_default=None, allow_none=True)


# storage columns are 32-bit signed integers
INT_RANGE = validate.Range(min=-2**31, max=2**31 - 1)


def _int(key=None):
    return fields.Integer(
        data_key=key, load_default=None, allow_none=True, strict=True, validate=INT_RANGE,
    )


def _float(key=None):
    return fields.Float(data_key=key, load_default=None, allow_none=True)


class UserSchema(ShapeSchema):
    id = fields.Integer(dump_only=True)
    username = _str()
    password = fields.String(load_only=True, load_default=None, allow_none=True)
    full_name = _str("fullName")


class CourseSchema(ShapeSchema):
    id = fields.Integer(dump_only=True)
    code = _str()
    title = _str()
    description = _str()
    credit = _int()


class OrderSchema(ShapeSchema):
    id = fields.Integer(dump_only=True)
    order_number = _str("orderNumber")
    customer_name = _str("customerName")
    total_amount = _float("totalAmount")
    status = _str()
    created_at = fields.DateTime(data_key="createdAt", dump_only=True)


class ProductSchema(ShapeSchema):
    id = fields.Integer(dump_only=True)
    name = _str()
    category = _str()
    price = _float()
    stock = _int()


class StudentSchema(ShapeSchema):
    id = fields.Integer(dump_only=True)
    first_name = _str("firstName")
    last_name = _str("lastName")
    email = _str()


@dataclass
class LoginRequest:
    username: Optional[str] = None
    password: Optional[str] = None


@dataclass
class LoginResponse:
    message: str
    token: str
    username: str
    full_name: Optional[str]


@dataclass
class RegisterResponse:
    id: int
    username: str
    full_name: Optional[str]
    message: str


class LoginRequestSchema(ShapeSchema):
    username = _str()
    password = _str()

    @pre_load
    def stringify_scalars(self, data, **kwargs):
        # login takes a plain string map: numbers and booleans arrive as their text
        if not isinstance(data, dict):
            return data
        out = {}
        for k, v in data.items():
            if isinstance(v, bool):
                v = "true" if v else "false"
            elif isinstance(v, (int, float)):
                v = str(v)
            out[k] = v
        return out

    @post_load
    def make_request(self, data, **kwargs):
        return LoginRequest(**data)


class LoginResponseSchema(ShapeSchema):
    message = fields.String()
    token = fields.String()
    username = fields.String()
    full_name = fields.String(data_key="fullName", allow_none=True)


class RegisterResponseSchema(ShapeSchema):
    id = fields.Integer()
    username = fields.String()
    full_name = fields.String(data_key="fullName", allow_none=True)
    message = fields.String()
