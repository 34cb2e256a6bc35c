from __future__ import annotations

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..common.validators import optional_int, optional_str, parse_emp_id, require_json_object
from ..core.exceptions import StoreError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"error": message}), status

    def _json_body() -> dict:
        payload = request.get_json(force=True, silent=True)
        if payload is None:
            raise ValidationError("invalid input: malformed JSON body")
        return require_json_object(payload)

    @app.after_request
    def add_cors_headers(response):
        if request.method == "OPTIONS":
            response.mimetype = "application/json"
        response.headers["Access-Control-Allow-Origin"] = "*"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return response

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return _error(str(e), 400)

    @app.errorhandler(StoreError)
    def handle_store_error(e: StoreError):
        app.logger.error("Store failure on %s %s: %s", request.method, request.path, e)
        return _error(str(e), 500)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        body, status = _error(e.description or e.name, e.code or 500)
        allow = e.get_response().headers.get("Allow")
        if allow:
            body.headers["Allow"] = allow
        return body, status

    @app.errorhandler(Exception)
    def handle_unexpected_error(e: Exception):
        app.logger.exception("Unhandled error on %s %s", request.method, request.path)
        return _error(str(e), 500)

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        rows = container.query_service.list_employees()
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/employees/last-id", methods=["GET"], endpoint="last_employee_id")
    def last_employee_id():
        return jsonify({"last_emp_id": container.query_service.last_employee_id()})

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @app.route("/api/employees/create", methods=["POST"], endpoint="create_employee_alias")
    def create_employee():
        payload = _json_body()
        emp_id = optional_int(payload, "emp_id")
        emp_name = optional_str(payload, "emp_name") or ""
        department = optional_str(payload, "department") or ""
        language = optional_str(payload, "language") or ""

        emp_id = container.write_service.create(
            emp_id=emp_id,
            emp_name=emp_name,
            department=department,
            language=language,
        )
        app.logger.info("Created employee %d", emp_id)
        return jsonify({"message": "Employee created successfully", "emp_id": emp_id}), 201

    @app.route("/api/employees/<emp_id>", methods=["PUT"], endpoint="update_employee")
    def update_employee(emp_id: str):
        emp_id_i = parse_emp_id(emp_id)
        payload = _json_body()

        container.write_service.update(
            emp_id_i,
            emp_name=optional_str(payload, "emp_name"),
            department=optional_str(payload, "department"),
            language=optional_str(payload, "language"),
        )
        return jsonify({"message": "Employee updated successfully"})

    @app.route("/api/employees/<emp_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(emp_id: str):
        emp_id_i = parse_emp_id(emp_id)
        deleted = container.write_service.delete(emp_id_i)
        return jsonify({"message": "Employee deleted successfully", "deleted_count": deleted})
