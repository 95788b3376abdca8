"""
Shared fixtures: an in-memory spreadsheet standing in for GoogleSheetsClient.

The fake mirrors what the Sheets API returns: trailing empty rows are
omitted from reads, interior empty rows come back as [].
"""

import pytest
from fastapi.testclient import TestClient

from timesheet_gateway.activities.gateway import ActivityGateway
from timesheet_gateway.api.dependencies import get_gateway
from timesheet_gateway.api.main import app
from timesheet_gateway.sheets.client import SheetNotFoundError


EMPLOYEE_SHEET = "Employees"
HEADER = ["Date", "Worksite", "Task", "Start", "End", "Hours", "Km", "Notes", "Extra"]


class FakeSheetsClient:
    def __init__(self, sheets=None):
        self.sheets = {name: [list(row) for row in rows] for name, rows in (sheets or {}).items()}
        self.sheet_ids = {name: index for index, name in enumerate(self.sheets)}
        self.calls = []

    def _rows(self, sheet_name):
        if sheet_name not in self.sheets:
            raise SheetNotFoundError(f"Sheet {sheet_name} does not exist")
        return self.sheets[sheet_name]

    def _trimmed(self, rows):
        end = len(rows)
        while end and not any(cell != "" for cell in rows[end - 1]):
            end -= 1
        return rows[:end]

    def get_values(self, sheet_name, range_spec):
        self.calls.append(("get_values", sheet_name, range_spec))
        return [list(row) for row in self._trimmed(self._rows(sheet_name))]

    def append_row(self, sheet_name, values):
        self.calls.append(("append_row", sheet_name, list(values)))
        rows = self._rows(sheet_name)
        del rows[len(self._trimmed(rows)):]
        rows.append(list(values))

    def update_row(self, sheet_name, row_index, values):
        self.calls.append(("update_row", sheet_name, row_index, list(values)))
        rows = self._rows(sheet_name)
        while len(rows) < row_index:
            rows.append([])
        existing = rows[row_index - 1]
        rows[row_index - 1] = list(values) + existing[len(values):]

    def get_sheet_id(self, sheet_name):
        self.calls.append(("get_sheet_id", sheet_name))
        return self.sheet_ids.get(sheet_name)

    def delete_row(self, sheet_id, row_index):
        self.calls.append(("delete_row", sheet_id, row_index))
        name = next(name for name, known_id in self.sheet_ids.items() if known_id == sheet_id)
        rows = self.sheets[name]
        if row_index <= len(rows):
            del rows[row_index - 1]


def activity_row(date, task="Install", notes=""):
    return [date, "Site A", task, "08:00", "12:00", "4", "10", notes]


@pytest.fixture
def sheets():
    return FakeSheetsClient(
        {
            EMPLOYEE_SHEET: [["Name", "ID"], ["Mario Rossi", "101"], ["Giulia Bianchi", "102"]],
            "Activity-101": [
                HEADER,
                activity_row("2024-05-01", "Install"),
                activity_row("2024-05-02", "Repair"),
                activity_row("2024-05-03", "Survey"),
                activity_row("2024-05-04", "Cleanup"),
            ],
        }
    )


@pytest.fixture
def gateway(sheets):
    return ActivityGateway(sheets, employee_sheet_name=EMPLOYEE_SHEET, activity_sheet_prefix="Activity")


@pytest.fixture
def client(gateway):
    app.dependency_overrides[get_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()
