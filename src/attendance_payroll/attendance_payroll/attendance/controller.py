from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import optional_flag
from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from ..core.logging import get_logger
from .service import DayCorrection

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/hr/monthly-attendance", methods=["GET"], endpoint="monthly_attendance")
    def monthly_attendance():
        now = container.clock()
        month = (request.args.get("month") or "").strip() or now.strftime("%Y-%m")
        emp_code = (request.args.get("empCode") or "").strip() or None
        try:
            report = container.monthly_attendance_service.build_month(month, now=now, emp_code=emp_code)
            return jsonify(report.to_dict()), 200
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception("Failed to build monthly attendance for %s", month)
            return jsonify({"error": "Internal server error"}), 500

    @app.route("/api/hr/monthly-attendance", methods=["POST"], endpoint="update_attendance_day")
    def update_attendance_day():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "JSON object expected"}), 400
        try:
            correction = DayCorrection(
                emp_code=str(data.get("empCode") or ""),
                date=str(data.get("date") or ""),
                status=data.get("status"),
                reason=data.get("reason"),
                check_in_time=data.get("checkInTime"),
                check_out_time=data.get("checkOutTime"),
                late_excused=optional_flag(data.get("lateExcused")),
                early_excused=optional_flag(data.get("earlyExcused")),
                violation_excused=optional_flag(data.get("violationExcused")),
            )
            container.attendance_service.update_day(correction)
            return jsonify({"success": True}), 200
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception("Failed to update attendance for %s on %s", data.get("empCode"), data.get("date"))
            return jsonify({"error": "Internal server error"}), 500
