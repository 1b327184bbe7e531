from __future__ import annotations

import logging

from flask import Flask, abort, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import now_local
from ..common.pages import register_crud_pages
from ..common.validators import optional_integer
from ..common.web import admin_required
from ..container import Container
from ..core.enums import Outcome
from ..core.exceptions import ValidationError
from .forms import borrowed_book_from_mapping
from .model import BorrowedBook

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    loans = container.borrowing_service

    def current_shift_context():
        shift = container.shift_service.get_current_shift(now_local())
        staff = container.employee_service.get_employees_for_shift(shift.shift_id) if shift else []
        return {"current_shift": shift, "current_shift_employees": staff}

    def form_context():
        return {
            "books": container.book_service.get_all(),
            "members": container.member_service.get_all(),
            "employees": container.employee_service.list_summaries(),
            **current_shift_context(),
        }

    def back_to_member(loan: BorrowedBook) -> str:
        if loan.member_id > 0:
            return url_for("members_details", entity_id=loan.member_id)
        return url_for("borrowed_books_index")

    register_crud_pages(
        app,
        prefix="/borrowed-books",
        name="borrowed_books",
        service=loans,
        from_mapping=borrowed_book_from_mapping,
        key_field="borrow_id",
        form_context=form_context,
        after_delete=back_to_member,
        pages=("index", "details", "edit", "delete"),
    )

    @app.route("/borrowed-books/create", methods=["GET", "POST"], endpoint="borrowed_books_create")
    @admin_required
    def create():
        if request.method == "GET":
            # Prefilled from a member's or book's details page.
            draft = loans.with_defaults(
                BorrowedBook(
                    borrow_id=0,
                    member_id=optional_integer(request.args, "member_id") or 0,
                    book_id=optional_integer(request.args, "book_id") or 0,
                    borrow_date=None,
                    due_date=None,
                )
            )
            return render_template("borrowed_books/form.html", item=draft, editing=False, **form_context())

        loan = None
        try:
            loan = borrowed_book_from_mapping(request.form)
        except ValidationError as e:
            flash(str(e), "danger")
            return render_template("borrowed_books/form.html", item=loan, editing=False, **form_context())

        result = loans.create(loan)
        if not result:
            flash(result.message, "danger")
            return render_template("borrowed_books/form.html", item=loan, editing=False, **form_context())

        flash("Loan recorded.", "success")
        if loan.member_id > 0:
            return redirect(url_for("members_details", entity_id=loan.member_id))
        if loan.book_id > 0:
            return redirect(url_for("books_details", entity_id=loan.book_id))
        return redirect(url_for("borrowed_books_index"))

    @app.route("/borrowed-books/<int:borrow_id>/return", methods=["GET", "POST"], endpoint="borrowed_books_return")
    @admin_required
    def return_book(borrow_id: int):
        found = loans.get_by_id(borrow_id)
        if not found:
            abort(404, description=found.message)
        loan = found.value

        if request.method == "GET":
            return render_template(
                "borrowed_books/return.html",
                item=loan,
                employees=container.employee_service.list_summaries(),
                **current_shift_context(),
            )

        result = loans.return_book(
            borrow_id,
            received_by_employee_id=optional_integer(request.form, "received_by_employee_id"),
        )
        if result.outcome == Outcome.NOT_FOUND:
            abort(404, description=result.message)
        if result:
            flash("Book returned.", "success")
        else:
            flash(result.message, "warning")
        return redirect(back_to_member(loan))
