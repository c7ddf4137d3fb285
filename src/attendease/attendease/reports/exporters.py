from __future__ import annotations

import csv
import io

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .service import EXPORT_COLUMNS, SUMMARY_COLUMNS, ReportData

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def export_csv(data: ReportData) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=EXPORT_COLUMNS)
    writer.writeheader()
    for row in data.rows:
        writer.writerow(row)
    # BOM so Excel opens non-ASCII names correctly.
    return out.getvalue().encode("utf-8-sig")


def export_excel(data: ReportData) -> io.BytesIO:
    df = pd.DataFrame(data.rows, columns=EXPORT_COLUMNS)
    summary = pd.DataFrame(
        [
            {
                "Employee ID": s["employee_id"],
                "Employee Name": s["employee_name"],
                "Days": s["days"],
                "Total Hours": s["total_hours"],
            }
            for s in data.summary
        ],
        columns=SUMMARY_COLUMNS,
    )

    # Build the workbook in memory, nothing touches the disk.
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Attendance Records")
        summary.to_excel(writer, index=False, sheet_name="Summary")

    output.seek(0)
    return output


def export_pdf(data: ReportData, *, title: str = "Attendance Records") -> io.BytesIO:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=landscape(A4), leftMargin=0.5 * inch, rightMargin=0.5 * inch)
    styles = getSampleStyleSheet()
    story = [Paragraph(title, styles["Title"]), Spacer(1, 12)]

    table_data = [EXPORT_COLUMNS] + [[str(row[c]) for c in EXPORT_COLUMNS] for row in data.rows]
    if not data.rows:
        story.append(Paragraph("No records found.", styles["Normal"]))
    else:
        table = Table(table_data, repeatRows=1)
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.darkblue),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 8),
                    ("ALIGN", (0, 0), (-1, -1), "CENTER"),
                    ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.lightgrey]),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                ]
            )
        )
        story.append(table)

    doc.build(story)
    buffer.seek(0)
    return buffer
