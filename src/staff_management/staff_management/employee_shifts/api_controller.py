from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serialization import to_json
from ..common.validators import integer
from ..common.web import api_admin_required, error_response, json_body, register_crud_api
from ..container import Container
from .forms import employee_shift_from_mapping


def register(app: Flask, container: Container) -> None:
    service = container.employee_shift_service

    register_crud_api(
        app,
        prefix="/api/employee-shifts",
        name="employee_shifts",
        service=service,
        from_mapping=employee_shift_from_mapping,
        key_field="employee_shift_id",
    )

    @app.post("/api/employee-shifts/link", endpoint="api_employee_shifts_link")
    @api_admin_required
    def link():
        data = json_body()
        result = service.link(integer(data, "employee_id"), integer(data, "shift_id"))
        if not result:
            return error_response(result)
        return jsonify(to_json(result.value)), 200

    @app.delete("/api/employee-shifts/unlink", endpoint="api_employee_shifts_unlink")
    @api_admin_required
    def unlink():
        result = service.unlink(integer(request.args, "employee_id"), integer(request.args, "shift_id"))
        if not result:
            return error_response(result)
        return "", 204

    @app.get("/api/employee-shifts/employees-in-shift/<int:shift_id>", endpoint="api_employees_in_shift")
    @api_admin_required
    def employees_in_shift(shift_id: int):
        return jsonify(to_json(service.employees_in_shift(shift_id)))

    @app.get("/api/employee-shifts/shifts-for-employee/<int:employee_id>", endpoint="api_shifts_for_employee")
    @api_admin_required
    def shifts_for_employee(employee_id: int):
        return jsonify(to_json(service.shifts_for_employee(employee_id)))
