from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import require_json_object
from ..core.exceptions import SubmissionInProgressError, UnconfiguredError, ValidationError
from ..container import Container
from .geolocation import PayloadLocationSource

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/<action>", methods=["POST"], endpoint="api_attendance_submit")
    def api_attendance_submit(action: str):
        try:
            data = require_json_object(request.get_json(silent=True))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        employee_id = str(data.get("employee_id") or "").strip()
        employee_name = str(data.get("employee_name") or "").strip()

        try:
            with container.submission_guard.hold(employee_id):
                result = container.attendance_service.record_attendance(
                    employee_id,
                    employee_name,
                    action,
                    location_source=PayloadLocationSource(data.get("location")),
                )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except SubmissionInProgressError as e:
            return jsonify({"success": False, "message": str(e)}), 409
        except UnconfiguredError as e:
            return jsonify({"success": False, "message": str(e)}), 503
        except Exception:
            logger.exception("Attendance submission failed")
            return jsonify({"success": False, "message": "System error while recording attendance"}), 500

        action_label = result.event.action.value
        if result.success:
            message = f"{action_label} recorded for Employee ID: {employee_id}"
        else:
            message = f"Failed to record {action_label} for Employee ID: {employee_id}"
        return jsonify({"success": result.success, "message": message, **result.flags.to_dict()}), 200

    @app.route("/api/attendance/state", methods=["GET"], endpoint="api_attendance_state")
    def api_attendance_state():
        employee_id = (request.args.get("employee_id") or "").strip()
        flags = container.attendance_service.derive_state(employee_id)
        return jsonify({"employee_id": employee_id, **flags.to_dict()}), 200
