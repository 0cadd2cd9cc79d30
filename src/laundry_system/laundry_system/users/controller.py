from __future__ import annotations

from functools import wraps

from flask import Flask, session

from ..common.responses import error_response, request_payload, respond
from ..container import Container
from ..core.enums import Role
from ..core.result import Result


def current_user_id() -> int:
    return int(session["user_id"])


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return error_response("authentication", "Please log in to continue.")
        return view(*args, **kwargs)

    return wrapper


def role_required(*roles: Role):
    allowed = {r.value for r in roles}

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return error_response("authentication", "Please log in to continue.")
            if session.get("role") not in allowed:
                return error_response("authorization", "You do not have permission to access this page.")
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request_payload()
        result = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        if result.ok:
            s_user = result.value
            session.clear()
            session["user_id"] = s_user.user_id
            session["username"] = s_user.username
            session["role"] = s_user.role.value
        return respond(result, key="user")

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return respond(Result.success(None))

    @app.route("/register", methods=["POST"], endpoint="register")
    def register_customer():
        data = request_payload()
        result = container.user_service.register_customer(
            username=data.get("username", ""),
            email=data.get("email", ""),
            password=data.get("password", ""),
            confirm_password=data.get("confirm_password", ""),
            gender=data.get("gender"),
            date_of_birth=data.get("date_of_birth"),
        )
        return respond(result, key="user_id", status=201)

    @app.route("/admin/employees", methods=["GET"], endpoint="admin_employees")
    @role_required(Role.ADMIN)
    def admin_employees():
        return respond(container.user_service.list_employees(), key="employees")

    @app.route("/admin/employees", methods=["POST"], endpoint="add_employee")
    @role_required(Role.ADMIN)
    def add_employee():
        data = request_payload()
        result = container.user_service.add_employee(
            username=data.get("username", ""),
            email=data.get("email", ""),
            password=data.get("password", ""),
            confirm_password=data.get("confirm_password", ""),
            gender=data.get("gender"),
            date_of_birth=data.get("date_of_birth"),
            role=data.get("role"),
        )
        return respond(result, key="user_id", status=201)

    @app.route("/receptionist/staff", methods=["GET"], endpoint="laundry_staff")
    @role_required(Role.RECEPTIONIST)
    def laundry_staff():
        return respond(container.user_service.list_laundry_staff(), key="staff")
