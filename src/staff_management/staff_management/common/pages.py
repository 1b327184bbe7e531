from __future__ import annotations

import dataclasses
from typing import Any, Callable, Dict, Iterable, Optional

from flask import Flask, abort, flash, redirect, render_template, request, url_for

from ..core.enums import Outcome
from ..core.exceptions import ValidationError
from ..files.service import FileService
from .uploads import image_for_create, image_for_update, settle_replaced_image
from .web import admin_required

ALL_PAGES = ("index", "details", "create", "edit", "delete")


def register_crud_pages(
    app: Flask,
    *,
    prefix: str,
    name: str,
    service,
    from_mapping: Callable[..., Any],
    key_field: str,
    files: Optional[FileService] = None,
    image_directory: Optional[str] = None,
    list_view: Optional[Callable[[], Iterable[Any]]] = None,
    details_context: Optional[Callable[[Any], Dict[str, Any]]] = None,
    form_context: Optional[Callable[[], Dict[str, Any]]] = None,
    after_delete: Optional[Callable[[Any], str]] = None,
    pages: Iterable[str] = ALL_PAGES,
) -> None:
    """Admin pages for one entity service.

    Endpoints are ``<name>_index``, ``<name>_details``, ``<name>_create``,
    ``<name>_edit`` and ``<name>_delete``; templates live in ``<name>/``.
    With ``image_directory`` set, forms accept an ``image_file`` upload and
    the stored file follows the record through edit and delete.
    """

    pages = set(pages)
    title = service.entity_name

    def load(entity_id: int):
        result = service.get_by_id(entity_id)
        if not result:
            abort(404, description=result.message)
        return result.value

    def render_form(item, *, editing: bool):
        ctx = form_context() if form_context else {}
        return render_template(f"{name}/form.html", item=item, editing=editing, **ctx)

    if "index" in pages:

        @app.route(prefix, endpoint=f"{name}_index")
        @admin_required
        def index():
            items = list_view() if list_view else service.get_all()
            return render_template(f"{name}/index.html", items=items)

    if "details" in pages:

        @app.route(f"{prefix}/<int:entity_id>", endpoint=f"{name}_details")
        @admin_required
        def details(entity_id: int):
            item = load(entity_id)
            ctx = details_context(item) if details_context else {}
            return render_template(f"{name}/details.html", item=item, **ctx)

    if "create" in pages:

        @app.route(f"{prefix}/create", methods=["GET", "POST"], endpoint=f"{name}_create")
        @admin_required
        def create():
            if request.method == "GET":
                return render_form(None, editing=False)

            item = None
            image_path = None
            try:
                item = from_mapping(request.form)
                if image_directory:
                    image_path = image_for_create(request.files.get("image_file"), files, image_directory)
                    item = dataclasses.replace(item, image_path=image_path)
            except ValidationError as e:
                flash(str(e), "danger")
                return render_form(item, editing=False)

            result = service.create(item)
            if not result:
                if image_path:
                    files.delete(image_path)
                flash(result.message, "danger")
                return render_form(item, editing=False)

            flash(f"{title} created.", "success")
            return redirect(url_for(f"{name}_index"))

    if "edit" in pages:

        @app.route(f"{prefix}/<int:entity_id>/edit", methods=["GET", "POST"], endpoint=f"{name}_edit")
        @admin_required
        def edit(entity_id: int):
            current = load(entity_id)
            if request.method == "GET":
                return render_form(current, editing=True)

            item = current
            try:
                item = from_mapping(request.form, **{key_field: entity_id})
                if image_directory:
                    item = dataclasses.replace(
                        item,
                        image_path=image_for_update(
                            request.files.get("image_file"),
                            files,
                            image_directory,
                            current_path=current.image_path,
                            entity_id=entity_id,
                        ),
                    )
            except ValidationError as e:
                flash(str(e), "danger")
                return render_form(item, editing=True)

            result = service.update(entity_id, item)
            if image_directory:
                settle_replaced_image(files, old_path=current.image_path, new_path=item.image_path, saved=bool(result))
            if result.outcome == Outcome.NOT_FOUND:
                abort(404, description=result.message)
            if not result:
                flash(result.message, "danger")
                return render_form(item, editing=True)

            flash(f"{title} updated.", "success")
            return redirect(url_for(f"{name}_index"))

    if "delete" in pages:

        @app.route(f"{prefix}/<int:entity_id>/delete", methods=["GET", "POST"], endpoint=f"{name}_delete")
        @admin_required
        def delete(entity_id: int):
            item = load(entity_id)
            if request.method == "GET":
                return render_template(f"{name}/delete.html", item=item)

            result = service.delete(entity_id)
            if not result:
                abort(404, description=result.message)
            if image_directory and item.image_path:
                files.delete(item.image_path)

            flash(f"{title} deleted.", "success")
            return redirect(after_delete(item) if after_delete else url_for(f"{name}_index"))
