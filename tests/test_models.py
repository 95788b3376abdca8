from timesheet_gateway.sheets.models import (
    ActivityFields,
    ActivityRecord,
    activity_sheet_name,
    fields_to_row,
    is_blank_row,
    row_to_employee,
    row_to_record,
)


def test_row_to_record_maps_columns_in_order():
    row = ["2024-05-01", "Site A", "Install", "08:00", "12:00", "4", "10", "notes", "ignored"]

    record = row_to_record(row, 0)

    assert record == ActivityRecord(
        date="2024-05-01",
        worksite="Site A",
        task="Install",
        start_time="08:00",
        end_time="12:00",
        total_hours="4",
        km="10",
        notes="notes",
        row_number=2,
    )


def test_row_to_record_pads_missing_cells():
    record = row_to_record(["2024-05-01"], 5)

    assert record.row_number == 7
    assert record.worksite == ""
    assert record.notes == ""


def test_fields_to_row_is_positional():
    fields = ActivityFields(date="d", worksite="w", task="t", start_time="s", end_time="e", total_hours="h", km="k", notes="n")

    assert fields_to_row(fields) == ["d", "w", "t", "s", "e", "h", "k", "n"]


def test_fields_to_row_drops_row_number():
    record = row_to_record(["d", "w"], 0)

    assert fields_to_row(record) == ["d", "w", "", "", "", "", "", ""]


def test_blank_rows():
    assert is_blank_row([])
    assert is_blank_row(["", "Site A"])
    assert is_blank_row(["  "])
    assert not is_blank_row(["2024-05-01"])


def test_activity_sheet_name():
    assert activity_sheet_name("101") == "Activity-101"
    assert activity_sheet_name("101", prefix="Tabella") == "Tabella-101"


def test_row_to_employee_reads_name_then_id():
    employee = row_to_employee(["Mario Rossi", "101"])

    assert employee.name == "Mario Rossi"
    assert employee.id == "101"
