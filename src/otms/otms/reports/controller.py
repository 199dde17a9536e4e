from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import parse_month
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)

REPORT_ROLES = frozenset({Role.HR.value, Role.BOD.value, Role.ADMIN.value})


def register(app: Flask, container: Container) -> None:
    def report_access_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"success": False, "message": "Authentication required"}), 401
            if session.get("role") not in REPORT_ROLES:
                return jsonify({"success": False, "message": "Access restricted to HR and management"}), 403
            return view(*args, **kwargs)

        return wrapper

    def _error_response(e: Exception):
        if isinstance(e, ValidationError):
            return jsonify({"success": False, "message": str(e)}), 400
        if isinstance(e, AuthorizationError):
            return jsonify({"success": False, "message": str(e)}), 403
        logger.exception("Company OT report failed", extra={"user_id": session.get("user_id")})
        return jsonify({"success": False, "message": "Internal error while building the report"}), 500

    @app.route("/api/hr/reports/companies", methods=["GET"], endpoint="company_ot_report")
    @report_access_required
    def company_ot_report():
        try:
            month = parse_month(request.args.get("month", ""))
            report = container.report_service.build_company_report(month=month)
            return jsonify({"success": True, "report": report.to_dict()}), 200
        except Exception as e:
            return _error_response(e)

    @app.route("/hr/reports/companies.csv", methods=["GET"], endpoint="company_ot_report_csv")
    @report_access_required
    def company_ot_report_csv():
        try:
            month = parse_month(request.args.get("month", ""))
            csv_file = container.report_service.export_company_report_csv(month=month)
        except Exception as e:
            return _error_response(e)

        return app.response_class(
            csv_file.to_bytes(),
            content_type=csv_file.mimetype,
            headers={"Content-Disposition": f"attachment; filename={csv_file.filename}"},
        )

    @app.route("/hr/reports/companies.pdf", methods=["GET"], endpoint="company_ot_report_pdf")
    @report_access_required
    def company_ot_report_pdf():
        try:
            month = parse_month(request.args.get("month", ""))
            pdf_file = container.report_service.export_company_report_pdf(month=month)
        except Exception as e:
            return _error_response(e)

        return app.response_class(
            pdf_file.to_bytes(),
            content_type=pdf_file.mimetype,
            headers={"Content-Disposition": f"attachment; filename={pdf_file.filename}"},
        )
