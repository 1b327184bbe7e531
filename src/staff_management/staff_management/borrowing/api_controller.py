from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serialization import to_json
from ..common.validators import optional_integer
from ..common.web import api_admin_required, error_response, register_crud_api
from ..container import Container
from .forms import borrowed_book_from_mapping


def register(app: Flask, container: Container) -> None:
    loans = container.borrowing_service

    register_crud_api(
        app,
        prefix="/api/borrowed-books",
        name="borrowed_books",
        service=loans,
        from_mapping=borrowed_book_from_mapping,
        key_field="borrow_id",
    )

    @app.get("/api/borrowed-books/member/<int:member_id>", endpoint="api_borrowed_books_by_member")
    @api_admin_required
    def by_member(member_id: int):
        return jsonify(to_json(loans.by_member(member_id)))

    @app.get("/api/borrowed-books/book/<int:book_id>", endpoint="api_borrowed_books_by_book")
    @api_admin_required
    def by_book(book_id: int):
        return jsonify(to_json(loans.by_book(book_id)))

    @app.post("/api/borrowed-books/<int:borrow_id>/return", endpoint="api_borrowed_books_return")
    @api_admin_required
    def return_book(borrow_id: int):
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        result = loans.return_book(
            borrow_id,
            received_by_employee_id=optional_integer(data, "received_by_employee_id"),
            returned_during_shift_id=optional_integer(data, "returned_during_shift_id"),
        )
        if not result:
            return error_response(result)
        return "", 204
