# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import (Blueprint, Response, current_app, redirect,
                   render_template, request)
from markupsafe import Markup

from authgate.domain.users.repositories import SessionStore
from authgate.shared.config.settings import SecurityConfig, WelcomeConfig


class PagesController:
    """Entry pages and the personalised welcome page."""

    def __init__(
        self,
        *,
        sessions: SessionStore,
        welcome: WelcomeConfig,
        security: SecurityConfig,
    ) -> None:
        self._sessions = sessions
        self._welcome = welcome
        self._security = security

    def index(self) -> Response:
        return current_app.send_static_file("login.html")

    def register_page(self) -> Response:
        return current_app.send_static_file("register.html")

    def _resolve_identity(self) -> tuple[str, str] | None:
        session_id = request.cookies.get(self._security.session_cookie_name, "")
        session = self._sessions.get(session_id)
        if session is not None:
            return session.username, session.email

        if self._welcome.require_session:
            return None

        username = request.args.get("username", "")
        email = request.args.get("email", "")
        if not username or not email:
            return None
        return username, email

    def welcome(self) -> Response | str:
        identity = self._resolve_identity()
        if identity is None:
            return redirect("/")

        username, email = identity
        if self._welcome.raw_html:
            username, email = Markup(username), Markup(email)
        return render_template("welcome.html", username=username, email=email)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("pages", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/register", view_func=self.register_page, methods=["GET"])
        bp.add_url_rule("/welcome", view_func=self.welcome, methods=["GET"])
        return bp
