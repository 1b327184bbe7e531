from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def _safe_next(target: str | None) -> str | None:
    # Only same-site relative paths.
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return None


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: ""

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        next_url = _safe_next(request.args.get("next") or request.form.get("next"))
        if "user_id" in session:
            return redirect(next_url or url_for("home"))

        if request.method == "POST":
            email = request.form.get("email", "")
            password = request.form.get("password", "")
            remember = request.form.get("remember_me")

            try:
                s_user = container.auth_service.authenticate(email, password)
            except AuthenticationError as e:
                logger.info("Failed login for %s", email)
                flash(str(e), "danger")
            else:
                session.permanent = bool(remember)
                app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

                session["user_id"] = s_user.user_id
                session["name"] = s_user.email
                session["role"] = s_user.role.value

                flash("Signed in successfully.", "success")
                return redirect(next_url or url_for("home"))

        return render_template("login.html", next=next_url)

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("You have been signed out.", "info")
        return redirect(url_for("home"))
