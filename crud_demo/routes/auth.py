# crud_demo/routes/auth.py
import logging
from flask import Blueprint, jsonify, current_app
from ..errors import error_response, read_body
from ..models import User
from ..schemas import (
    LoginRequestSchema, LoginResponse, LoginResponseSchema,
    RegisterResponse, RegisterResponseSchema, UserSchema,
)
from ..services.auth import authenticate, issue_token
from ..validators import validate_user

logger = logging.getLogger(__name__)


def create_blueprint(users):
    bp = Blueprint("auth", __name__)
    user_schema = UserSchema()
    login_schema = LoginRequestSchema()

    @bp.post("/register")
    def register():
        data, failure = read_body(user_schema, validate_user)
        if failure:
            return error_response(failure)

        # conflict and login failures answer with a bare {"message"} body
        if users.exists_by_username(data["username"]):
            logger.warning("Registration refused, username %r taken", data["username"])
            return jsonify({"message": "Username already exists"}), 409

        user = users.save(User(**data))
        logger.info("Registered user %s", user.id)
        resp = RegisterResponse(
            id=user.id, username=user.username, full_name=user.full_name,
            message="User registered",
        )
        return jsonify(RegisterResponseSchema().dump(resp)), 201

    @bp.post("/login")
    def login():
        credentials, failure = read_body(login_schema)
        if failure:
            return error_response(failure)

        user = authenticate(users, credentials)
        if user is None:
            logger.warning("Failed login for %r", credentials.username)
            return jsonify({"message": "Invalid username or password"}), 401

        resp = LoginResponse(
            message="Login successful",
            token=issue_token(user, current_app.config["TOKEN_PREFIX"]),
            username=user.username,
            full_name=user.full_name,
        )
        return jsonify(LoginResponseSchema().dump(resp))

    return bp
