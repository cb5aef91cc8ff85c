from __future__ import annotations

from flask import Flask, jsonify

from ..common.responses import json_body, store_error
from ..core.exceptions import AuthenticationError, StoreError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/auth/signup", methods=["POST"], endpoint="signup")
    def signup():
        data = json_body()
        try:
            container.auth_service.signup(
                name=data.get("name"),
                email=data.get("email"),
                password=data.get("password"),
                role=data.get("role"),
            )
        except ValidationError as e:
            return str(e), 400
        except StoreError as e:
            return store_error(e, 400)
        return "User registered successfully", 201

    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        try:
            token = container.auth_service.login(email=data.get("email"), password=data.get("password"))
        except AuthenticationError as e:
            return str(e), 401
        except StoreError as e:
            return store_error(e, 500)
        return jsonify({"token": token}), 200
