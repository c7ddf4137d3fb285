from __future__ import annotations

from flask import Flask, g, request, send_file

from ..common.datetime_utils import parse_iso_date
from ..common.web import api_view, hr_required, login_required, request_data, respond
from ..container import Container
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.exceptions import ValidationError
from ..core.result import OperationResult
from ..reports.exporters import XLSX_MIMETYPE, export_csv, export_excel, export_pdf


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service
    reports = container.report_service

    def _date_filter() -> str | None:
        value = request.args.get("date") or None
        if value:
            try:
                parse_iso_date(value)
            except ValueError:
                raise ValidationError("date must be YYYY-MM-DD")
        return value

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="check_in")
    @login_required
    @api_view
    def check_in():
        user = g.current_user
        record = attendance.check_in(user.employee_id, user.name)
        return respond(OperationResult.ok(f"Checked in at {record.check_in_time}.", record=record.to_dict()))

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="check_out")
    @login_required
    @api_view
    def check_out():
        record = attendance.check_out(g.current_user.employee_id)
        if not record:
            return respond(OperationResult.fail("No check-in found for today."), 404)
        return respond(OperationResult.ok(f"Checked out at {record.check_out_time}.", record=record.to_dict()))

    @app.route("/api/attendance/today", methods=["GET"], endpoint="today_record")
    @login_required
    @api_view
    def today_record():
        record = attendance.get_today_record(g.current_user.employee_id)
        return respond(OperationResult.ok(record=record.to_dict() if record else None))

    @app.route("/api/attendance/me", methods=["GET"], endpoint="my_history")
    @login_required
    @api_view
    def my_history():
        limit = request.args.get("limit", default=DEFAULT_HISTORY_LIMIT, type=int)
        rows = attendance.get_history(g.current_user.employee_id, limit=limit)
        return respond(OperationResult.ok(records=[r.to_dict() for r in rows]))

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @hr_required
    @api_view
    def list_attendance():
        rows = attendance.list_view(search=request.args.get("q", ""), work_date=_date_filter())
        return respond(OperationResult.ok(records=[r.to_dict() for r in rows]))

    @app.route("/api/attendance/<record_id>", methods=["PUT"], endpoint="upsert_attendance")
    @hr_required
    @api_view
    def upsert_attendance(record_id: str):
        record = attendance.upsert_record(request_data(), record_id=record_id)
        return respond(OperationResult.ok("Record saved.", record=record.to_dict()))

    @app.route("/api/attendance/<record_id>", methods=["PATCH"], endpoint="edit_attendance")
    @hr_required
    @api_view
    def edit_attendance(record_id: str):
        data = request_data()
        field = str(data.get("field", ""))
        value = data.get("value")
        record = attendance.apply_manual_edit(record_id, field, None if value is None else str(value))
        return respond(OperationResult.ok("Record updated successfully.", record=record.to_dict()))

    @app.route("/api/attendance/export.<fmt>", methods=["GET"], endpoint="export_attendance")
    @hr_required
    @api_view
    def export_attendance(fmt: str):
        data = reports.build_attendance_report(search=request.args.get("q", ""), work_date=_date_filter())

        if fmt == "csv":
            return app.response_class(
                export_csv(data),
                mimetype="text/csv",
                headers={"Content-Disposition": "attachment; filename=attendance_records.csv"},
            )
        if fmt == "xlsx":
            return send_file(
                export_excel(data),
                mimetype=XLSX_MIMETYPE,
                as_attachment=True,
                download_name="attendance_records.xlsx",
            )
        if fmt == "pdf":
            return send_file(
                export_pdf(data),
                mimetype="application/pdf",
                as_attachment=True,
                download_name="attendance_records.pdf",
            )
        return respond(OperationResult.fail(f"Unsupported export format: {fmt}"), 404)
