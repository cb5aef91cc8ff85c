from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.responses import json_body, store_error
from ..common.validators import parse_id
from ..core.enums import Role
from ..core.exceptions import NotFoundError, StoreError, ValidationError
from ..container import Container
from .service import SESSION_NOT_FOUND


def register(app: Flask, container: Container) -> None:
    trainer_required = container.guard.role_required(Role.TRAINER)

    @app.route("/sessions", methods=["POST"], endpoint="create_session")
    @trainer_required
    def create_session():
        data = json_body()
        try:
            container.session_service.create(g.identity, title=data.get("title"), date=data.get("date"))
        except ValidationError as e:
            return str(e), 400
        except StoreError as e:
            return store_error(e, 400)
        return "Session created successfully", 201

    @app.route("/sessions", methods=["GET"], endpoint="list_sessions")
    def list_sessions():
        try:
            sessions = container.session_service.list_all()
        except NotFoundError as e:
            return str(e), 404
        except StoreError as e:
            return store_error(e, 500)
        return jsonify([s.to_dict() for s in sessions]), 200

    @app.route("/sessions/<session_id>", methods=["GET"], endpoint="get_session")
    def get_session(session_id: str):
        try:
            session = container.session_service.get(parse_id(session_id, "session id"))
        except ValidationError:
            # A non-numeric id cannot match a row.
            return SESSION_NOT_FOUND, 404
        except NotFoundError as e:
            return str(e), 404
        except StoreError as e:
            return store_error(e, 500)
        return jsonify(session.to_dict()), 200

    @app.route("/sessions/<session_id>", methods=["PUT"], endpoint="update_session")
    @trainer_required
    def update_session(session_id: str):
        data = json_body()
        try:
            container.session_service.update(
                g.identity, parse_id(session_id, "session id"), title=data.get("title"), date=data.get("date")
            )
        except ValidationError as e:
            return str(e), 400
        except StoreError as e:
            return store_error(e, 400)
        return "Session updated successfully", 200

    @app.route("/sessions/<session_id>", methods=["DELETE"], endpoint="delete_session")
    @trainer_required
    def delete_session(session_id: str):
        try:
            container.session_service.delete(g.identity, parse_id(session_id, "session id"))
        except ValidationError as e:
            return str(e), 400
        except StoreError as e:
            return store_error(e, 400)
        return "Session deleted successfully", 200
