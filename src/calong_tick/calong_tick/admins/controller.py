from __future__ import annotations

from flask import Flask, g

from ..common.http import ok, parse_body
from ..container import Container
from .guards import admin_required
from .schemas import SigninRequest, SignupRequest


def register(app: Flask, container: Container) -> None:
    admin_only = admin_required(container.admin_service)

    @app.route("/api/admin/exists", methods=["GET"], endpoint="admin_exists")
    def admin_exists():
        return ok(exists=container.admin_service.exists())

    @app.route("/api/admin/signup", methods=["POST"], endpoint="admin_signup")
    def admin_signup():
        body = parse_body(SignupRequest)
        session = container.admin_service.signup(
            username=body.username or "",
            email=body.email or "",
            password=body.password or "",
        )
        return ok(session.to_dict(), message="Admin registered successfully.", status=201)

    @app.route("/api/admin/signin", methods=["POST"], endpoint="admin_signin")
    def admin_signin():
        body = parse_body(SigninRequest)
        session = container.admin_service.signin(login=body.username or "", password=body.password or "")
        return ok(session.to_dict(), message="Login successful.")

    @app.route("/api/admin/profile", methods=["GET"], endpoint="admin_profile")
    @admin_only
    def admin_profile():
        return ok(container.admin_service.profile(g.admin_id).to_dict())
