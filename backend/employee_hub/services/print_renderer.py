"""Printable HTML for a single employee sheet or an employee list."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from html import escape

from employee_hub.models.employee import Employee

_SHEET_STYLE = """
      body { font-family: Arial, sans-serif; padding: 20px; }
      .header { text-align: center; margin-bottom: 30px; }
      .photo { width: 100px; height: 100px; border-radius: 50%; object-fit: cover; }
      .placeholder { width: 100px; height: 100px; border-radius: 50%; background: #ddd; margin: 0 auto; }
      .details { margin: 20px 0; }
      .row { display: flex; margin: 10px 0; }
      .label { width: 150px; font-weight: bold; }
"""

_LIST_STYLE = """
      body { font-family: Arial, sans-serif; padding: 20px; }
      h1 { text-align: center; }
      table { width: 100%; border-collapse: collapse; margin-top: 20px; }
      th, td { border: 1px solid #ddd; padding: 10px; text-align: left; }
      th { background: #f5f5f5; }
      .active { color: green; }
      .inactive { color: red; }
"""


def format_birth_date(value: date) -> str:
    return value.strftime("%d %b %Y")


def status_label(employee: Employee) -> str:
    return "Active" if employee.is_active else "Inactive"


def _document(title: str, style: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        f"  <head>\n    <title>{escape(title)}</title>\n    <style>{style}    </style>\n  </head>\n"
        f"  <body>\n{body}  </body>\n"
        "</html>\n"
    )


def render_employee_sheet(employee: Employee) -> str:
    if employee.profile_image:
        photo = f'<img src="{escape(employee.profile_image, quote=True)}" class="photo" />'
    else:
        photo = '<div class="placeholder"></div>'

    rows = [
        ("Employee ID", f"#{employee.id}"),
        ("Full Name", employee.full_name),
        ("Gender", employee.gender),
        ("Date of Birth", format_birth_date(employee.date_of_birth)),
        ("State", employee.state),
        ("Status", status_label(employee)),
    ]
    details = "".join(
        f'      <div class="row"><span class="label">{label}:</span> {escape(value)}</div>\n'
        for label, value in rows
    )
    body = (
        '    <div class="header"><h1>Employee Details</h1></div>\n'
        f'    <div style="text-align: center; margin-bottom: 20px;">{photo}</div>\n'
        f'    <div class="details">\n{details}    </div>\n'
    )
    return _document(f"Employee Details - {employee.full_name}", _SHEET_STYLE, body)


def render_employee_list(employees: Sequence[Employee]) -> str:
    rows = []
    for employee in employees:
        status = status_label(employee)
        rows.append(
            "        <tr>"
            f"<td>#{employee.id}</td>"
            f"<td>{escape(employee.full_name)}</td>"
            f"<td>{escape(employee.gender)}</td>"
            f"<td>{format_birth_date(employee.date_of_birth)}</td>"
            f"<td>{escape(employee.state)}</td>"
            f'<td class="{status.lower()}">{status}</td>'
            "</tr>\n"
        )

    body = (
        "    <h1>Employee List</h1>\n"
        f"    <p>Total: {len(employees)} employees</p>\n"
        "    <table>\n"
        "      <thead>\n"
        "        <tr><th>ID</th><th>Full Name</th><th>Gender</th><th>DOB</th><th>State</th><th>Status</th></tr>\n"
        "      </thead>\n"
        f"      <tbody>\n{''.join(rows)}      </tbody>\n"
        "    </table>\n"
    )
    return _document("Employee List", _LIST_STYLE, body)
