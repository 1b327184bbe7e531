from __future__ import annotations

from flask import Flask, flash, redirect, request, url_for

from ..common.pages import register_crud_pages
from ..common.validators import integer
from ..common.web import admin_required
from ..container import Container
from .forms import shift_from_mapping


def register(app: Flask, container: Container) -> None:
    links = container.employee_shift_service

    def details_context(shift):
        return {
            "employees": links.employees_in_shift(shift.shift_id),
            "available_employees": links.available_employees_for_shift(shift.shift_id),
        }

    register_crud_pages(
        app,
        prefix="/shifts",
        name="shifts",
        service=container.shift_service,
        from_mapping=shift_from_mapping,
        key_field="shift_id",
        details_context=details_context,
    )

    @app.route("/shifts/<int:shift_id>/assign-employee", methods=["POST"], endpoint="shifts_assign_employee")
    @admin_required
    def assign_employee(shift_id: int):
        result = links.link(integer(request.form, "employee_id"), shift_id)
        if result:
            flash("Employee assigned.", "success")
        else:
            flash(result.message, "danger")
        return redirect(url_for("shifts_details", entity_id=shift_id))

    @app.route("/shifts/<int:shift_id>/unassign-employee", methods=["POST"], endpoint="shifts_unassign_employee")
    @admin_required
    def unassign_employee(shift_id: int):
        result = links.unlink(integer(request.form, "employee_id"), shift_id)
        if result:
            flash("Employee unassigned.", "success")
        else:
            flash(result.message, "warning")
        return redirect(url_for("shifts_details", entity_id=shift_id))
