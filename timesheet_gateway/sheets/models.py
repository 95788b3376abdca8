from dataclasses import astuple, dataclass
from typing import List


# Positional order of the activity worksheet, columns A-H
ACTIVITY_COLUMNS = (
    "date",
    "worksite",
    "task",
    "start_time",
    "end_time",
    "total_hours",
    "km",
    "notes",
)

# Header occupies row 1, so data index 0 lives on row 2
HEADER_OFFSET = 2

# Column I is read along with the record but not mapped
ACTIVITY_RANGE = "A:I"
EMPLOYEE_RANGE = "A:B"


@dataclass
class Employee:
    """A row of the shared employee sheet (name in A, id in B)"""

    id: str
    name: str


@dataclass
class ActivityFields:
    """Editable values of an activity entry"""

    date: str = ""
    worksite: str = ""
    task: str = ""
    start_time: str = ""
    end_time: str = ""
    total_hours: str = ""
    km: str = ""
    notes: str = ""


@dataclass
class ActivityRecord(ActivityFields):
    """An activity entry stamped with the physical row it was read from"""

    row_number: int = 0


def activity_sheet_name(employee_id: str, prefix: str = "Activity") -> str:
    return f"{prefix}-{employee_id}"


def is_blank_row(row: List[str]) -> bool:
    """A row is reusable when its first column is missing or empty"""
    return not row or not str(row[0]).strip()


def row_to_record(row: List[str], index: int) -> ActivityRecord:
    """Map a data row (header already skipped) to a record"""
    cells = [str(cell) if cell is not None else "" for cell in row[: len(ACTIVITY_COLUMNS)]]
    cells += [""] * (len(ACTIVITY_COLUMNS) - len(cells))
    return ActivityRecord(*cells, row_number=index + HEADER_OFFSET)


def fields_to_row(fields: ActivityFields) -> List[str]:
    return [str(value) if value is not None else "" for value in astuple(fields)[: len(ACTIVITY_COLUMNS)]]


def row_to_employee(row: List[str]) -> Employee:
    name = row[0] if row else ""
    employee_id = row[1] if len(row) > 1 else ""
    return Employee(id=employee_id, name=name)
