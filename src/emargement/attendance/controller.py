from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.responses import json_body, store_error
from ..common.validators import parse_id, parse_present_flag
from ..core.enums import Role
from ..core.exceptions import StoreError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    student_required = container.guard.role_required(Role.STUDENT)
    trainer_required = container.guard.role_required(Role.TRAINER)

    @app.route("/sessions/<session_id>/emargement", methods=["POST"], endpoint="mark_attendance")
    @student_required
    def mark_attendance(session_id: str):
        data = json_body()
        try:
            session_id = parse_id(session_id, "session id")
            present = parse_present_flag(data.get("status"))
            container.attendance_service.mark_attendance(g.identity, session_id, present=present)
        except ValidationError as e:
            return str(e), 400
        except StoreError as e:
            return store_error(e, 400)
        return "Attendance marked successfully", 201

    @app.route("/sessions/<session_id>/emargement", methods=["GET"], endpoint="list_attendance")
    @trainer_required
    def list_attendance(session_id: str):
        try:
            records = container.attendance_service.list_for_session(g.identity, parse_id(session_id, "session id"))
        except ValidationError as e:
            return str(e), 400
        except StoreError as e:
            return store_error(e, 500)
        return jsonify([r.to_dict() for r in records]), 200
