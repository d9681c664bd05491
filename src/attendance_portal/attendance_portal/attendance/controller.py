from __future__ import annotations

from flask import Flask, jsonify, render_template, request, send_file

from ..core.constants import XLSX_MIMETYPE
from ..core.exceptions import AttendanceLogError, ParticipantNotFoundError, ValidationError
from ..container import Container
from .service import key_from_payload


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "error": str(e)}), 400

    @app.errorhandler(ParticipantNotFoundError)
    def handle_not_found(e: ParticipantNotFoundError):
        return jsonify({"success": False, "error": str(e)}), 404

    @app.errorhandler(AttendanceLogError)
    def handle_log_error(e: AttendanceLogError):
        # Already logged with details by the gateway.
        return jsonify({"success": False, "error": "Attendance log unavailable"}), 502

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return render_template("index.html", title=app.config.get("PORTAL_TITLE", "Attendance Portal"))

    @app.route("/participants", methods=["GET"], endpoint="participants")
    def participants():
        records = service.list_participants(request.args.get("search"))
        return jsonify([r.to_dict() for r in records])

    @app.route("/mark-attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        key = key_from_payload(request.get_json(silent=True))
        service.mark_present(key)
        return jsonify({"success": True})

    @app.route("/remove-attendance", methods=["POST"], endpoint="remove_attendance")
    def remove_attendance():
        key = key_from_payload(request.get_json(silent=True))
        service.remove_present(key)
        return jsonify({"success": True})

    @app.route("/export", methods=["GET"], endpoint="export")
    def export():
        out = service.export_workbook()
        return send_file(
            out,
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=app.config.get("EXPORT_FILENAME", "Attendance.xlsx"),
        )

    @app.route("/test-sheets", methods=["GET"], endpoint="test_sheets")
    def test_sheets():
        try:
            headers = service.check_log_connection()
        except AttendanceLogError as e:
            return jsonify({
                "success": False,
                "error": str(e),
                "details": e.details or "No additional details",
            }), 500

        return jsonify({
            "success": True,
            "headers": headers,
            "auth": "Successfully authenticated",
        })
