from __future__ import annotations

from datetime import date

from employee_hub.services.print_renderer import (
    format_birth_date,
    render_employee_list,
    render_employee_sheet,
)
from tests.conftest import make_employee


def test_format_birth_date():
    assert format_birth_date(date(1990, 5, 15)) == "15 May 1990"


def test_sheet_contains_details_and_placeholder():
    employee = make_employee(7, "Rahul Sharma", state="Maharashtra", is_active=False)

    html = render_employee_sheet(employee)

    assert "<title>Employee Details - Rahul Sharma</title>" in html
    assert "#7" in html
    assert "15 May 1990" in html
    assert "Maharashtra" in html
    assert "Inactive" in html
    assert 'class="placeholder"' in html
    assert "<img" not in html


def test_sheet_embeds_profile_image():
    image = "data:image/png;base64,iVBORw0KGgo="
    html = render_employee_sheet(make_employee(1, "Priya Patel", profile_image=image))
    assert f'<img src="{image}" class="photo" />' in html


def test_values_are_escaped():
    html = render_employee_sheet(make_employee(1, "<script>alert(1)</script>"))
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_list_has_row_per_employee_and_total(sample_employees):
    html = render_employee_list(sample_employees)

    assert "<p>Total: 5 employees</p>" in html
    assert html.count("<tr><td>#") == 5
    assert '<td class="active">Active</td>' in html
    assert '<td class="inactive">Inactive</td>' in html


def test_empty_list():
    html = render_employee_list([])
    assert "Total: 0 employees" in html
    assert "<tbody>\n      </tbody>" in html
