from __future__ import annotations

from flask import Flask, g, request

from ..common.web import api_view, hr_required, login_required, request_data, respond, session_store
from ..container import Container
from ..core.result import OperationResult


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service
    employees = container.employee_service

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    @api_view
    def login():
        data = request_data()
        employee_id = str(data.get("employee_id", "")).strip()
        password = str(data.get("password", ""))
        role = str(data.get("role", ""))

        user = auth.login(employee_id, password, role, session=session_store())
        if user:
            return respond(OperationResult.ok("Login successful.", user=user.to_dict()))

        if not employees.does_id_exist_with_role(employee_id, role):
            return respond(OperationResult.fail(f"No {role or 'matching'} account found with ID {employee_id}."), 401)
        return respond(OperationResult.fail("Invalid password."), 401)

    @app.route("/api/auth/signup", methods=["POST"], endpoint="hr_signup")
    @api_view
    def hr_signup():
        data = request_data()
        employee = employees.sign_up_hr(
            employee_id=data.get("employee_id", ""),
            name=data.get("name", ""),
            password=data.get("password", ""),
            confirm_password=data.get("confirm_password", ""),
            email=data.get("email") or None,
            phone=data.get("phone") or None,
        )
        return respond(
            OperationResult.ok("Your HR account has been created. Please log in.", employee=employee.public_dict()),
            201,
        )

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    @api_view
    def logout():
        auth.logout(session=session_store())
        return respond(OperationResult.ok("Logged out."))

    @app.route("/api/auth/me", methods=["GET"], endpoint="current_user")
    @login_required
    @api_view
    def current_user():
        return respond(OperationResult.ok(user=g.current_user.to_dict()))

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @hr_required
    @api_view
    def list_employees():
        rows = employees.search(request.args.get("q", ""))
        return respond(OperationResult.ok(employees=[e.public_dict() for e in rows]))

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @hr_required
    @api_view
    def add_employee():
        data = request_data()
        employee = employees.add_employee(
            employee_id=data.get("id", ""),
            name=data.get("name", ""),
            role=data.get("role", ""),
            password=data.get("password", ""),
            email=data.get("email"),
            phone=data.get("phone"),
        )
        return respond(OperationResult.ok("Employee added successfully.", employee=employee.public_dict()), 201)

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @hr_required
    @api_view
    def get_employee(employee_id: str):
        employee = employees.get_by_id(employee_id)
        if not employee:
            return respond(OperationResult.fail("Employee not found."), 404)
        return respond(OperationResult.ok(employee=employee.public_dict()))

    @app.route("/api/employees/<employee_id>", methods=["PATCH"], endpoint="update_employee")
    @hr_required
    @api_view
    def update_employee(employee_id: str):
        employee = employees.update_employee(employee_id, request_data())
        return respond(OperationResult.ok("Employee details updated.", employee=employee.public_dict()))

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="remove_employee")
    @hr_required
    @api_view
    def remove_employee(employee_id: str):
        employees.remove_employee(employee_id)
        return respond(OperationResult.ok("Employee removed."))
