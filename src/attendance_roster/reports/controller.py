from __future__ import annotations

import io

from flask import Flask, request, send_file

from ..common.validators import optional_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _download(day: str, exporter):
        class_id = optional_int(request.args.get("class_id"), "Class id must be a number")
        if class_id is None:
            class_id = container.session.snapshot.selected_class_id
        filename, payload = container.report_service.export(class_id=class_id, day=day, exporter=exporter)
        return send_file(io.BytesIO(payload), mimetype=exporter.mimetype, as_attachment=True, download_name=filename)

    @app.route("/api/export/<day>.pdf", methods=["GET"], endpoint="export_pdf")
    def export_pdf(day: str):
        return _download(day, container.pdf_exporter)

    @app.route("/api/export/<day>.xlsx", methods=["GET"], endpoint="export_excel")
    def export_excel(day: str):
        return _download(day, container.excel_exporter)
