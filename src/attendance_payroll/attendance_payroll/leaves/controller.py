from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError
from ..core.logging import get_logger

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/hr/leaves", methods=["GET"], endpoint="paid_leaves")
    def paid_leaves():
        raw_year = (request.args.get("year") or "").strip()
        emp_code = (request.args.get("empCode") or "").strip() or None
        try:
            if raw_year:
                if not raw_year.isdigit():
                    raise ValidationError('Invalid "year". Use YYYY.')
                year = int(raw_year)
            else:
                year = container.clock().year
            summaries = container.paid_leave_service.list_year(year, emp_code=emp_code)
            return jsonify({"year": year, "paidLeaves": [s.to_dict() for s in summaries]}), 200
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception("Failed to load paid leaves for %s", raw_year or "current year")
            return jsonify({"error": "Internal server error"}), 500
