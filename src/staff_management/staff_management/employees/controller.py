from __future__ import annotations

from flask import Flask, flash, redirect, request, url_for

from ..common.pages import register_crud_pages
from ..common.validators import integer
from ..common.web import admin_required
from ..container import Container
from .forms import employee_from_mapping


def register(app: Flask, container: Container) -> None:
    links = container.employee_shift_service

    def details_context(employee):
        return {
            "shifts": links.shifts_for_employee(employee.employee_id),
            "available_shifts": links.available_shifts_for_employee(employee.employee_id),
        }

    register_crud_pages(
        app,
        prefix="/employees",
        name="employees",
        service=container.employee_service,
        from_mapping=employee_from_mapping,
        key_field="employee_id",
        files=container.file_service,
        image_directory="employees",
        list_view=container.employee_service.list_summaries,
        details_context=details_context,
    )

    @app.route("/employees/<int:employee_id>/assign-shift", methods=["POST"], endpoint="employees_assign_shift")
    @admin_required
    def assign_shift(employee_id: int):
        result = links.link(employee_id, integer(request.form, "shift_id"))
        if result:
            flash("Shift assigned.", "success")
        else:
            flash(result.message, "danger")
        return redirect(url_for("employees_details", entity_id=employee_id))

    @app.route("/employees/<int:employee_id>/unassign-shift", methods=["POST"], endpoint="employees_unassign_shift")
    @admin_required
    def unassign_shift(employee_id: int):
        result = links.unlink(employee_id, integer(request.form, "shift_id"))
        if result:
            flash("Shift unassigned.", "success")
        else:
            flash(result.message, "warning")
        return redirect(url_for("employees_details", entity_id=employee_id))
