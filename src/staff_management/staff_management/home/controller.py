from __future__ import annotations

from flask import Flask, render_template, request

from ..common.web import current_user
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="home")
    def home():
        return render_template("index.html", current_user=current_user())

    @app.route("/privacy", endpoint="privacy")
    def privacy():
        return render_template("privacy.html")

    @app.route("/error", endpoint="error_page")
    def error_page():
        message = request.args.get("message") or "An error occurred while processing your request."
        return render_template("error.html", message=message, status=500)
