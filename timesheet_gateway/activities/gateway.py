import logging
from typing import List, Optional, Tuple

from ..sheets.client import GoogleSheetsClient, SheetNotFoundError
from ..sheets.models import (
    ACTIVITY_RANGE,
    EMPLOYEE_RANGE,
    HEADER_OFFSET,
    ActivityFields,
    ActivityRecord,
    Employee,
    activity_sheet_name,
    fields_to_row,
    is_blank_row,
    row_to_employee,
    row_to_record,
)

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """Base class for activity gateway errors"""

    pass


class EmployeeNotFoundError(GatewayError):
    pass


class ActivitySheetNotFoundError(GatewayError):
    pass


class InvalidRowError(GatewayError, ValueError):
    pass


class ActivityGateway:
    """Translates employee and activity operations into sheet row operations"""

    def __init__(
        self,
        sheets_client: GoogleSheetsClient,
        employee_sheet_name: str,
        activity_sheet_prefix: str = "Activity",
    ):
        self.sheets_client = sheets_client
        self.employee_sheet_name = employee_sheet_name
        self.activity_sheet_prefix = activity_sheet_prefix

    def sheet_name_for(self, employee_id: str) -> str:
        return activity_sheet_name(employee_id, self.activity_sheet_prefix)

    def find_employee(self, employee_id: str) -> Optional[Employee]:
        """Look up an employee by id in column B, skipping the header"""
        rows = self.sheets_client.get_values(self.employee_sheet_name, EMPLOYEE_RANGE)
        for row in rows[1:]:
            if len(row) > 1 and str(row[1]) == employee_id:
                return row_to_employee(row)
        return None

    def authenticate(self, employee_id: str) -> Tuple[Employee, List[ActivityRecord]]:
        """Resolve an employee and load their records.

        A new employee without an activity sheet logs in with no records.
        """
        employee = self.find_employee(employee_id)
        if employee is None:
            logger.info(f"Login refused for unknown id {employee_id}")
            raise EmployeeNotFoundError("Unknown employee ID")

        records = self.list_records(employee_id)
        logger.info(f"Employee {employee_id} logged in with {len(records)} records")
        return employee, records

    def list_records(self, employee_id: str) -> List[ActivityRecord]:
        """Read every data row, dropping the blank ones create_record may reuse"""
        try:
            rows = self.sheets_client.get_values(self.sheet_name_for(employee_id), ACTIVITY_RANGE)
        except SheetNotFoundError:
            return []

        return [
            row_to_record(row, index)
            for index, row in enumerate(rows[1:])
            if not is_blank_row(row)
        ]

    def create_record(self, employee_id: str, fields: ActivityFields) -> List[ActivityRecord]:
        """Write into the first blank data row, or append when there is none"""
        sheet_name = self.sheet_name_for(employee_id)
        rows = self.sheets_client.get_values(sheet_name, ACTIVITY_RANGE)
        values = fields_to_row(fields)

        blank_row = self._first_blank_row(rows)
        if blank_row is not None:
            logger.info(f"Reusing blank row {blank_row} of {sheet_name}")
            self.sheets_client.update_row(sheet_name, blank_row, values)
        else:
            logger.info(f"Appending new row to {sheet_name}")
            self.sheets_client.append_row(sheet_name, values)

        return self.list_records(employee_id)

    def update_record(
        self, employee_id: str, row_number: int, fields: ActivityFields
    ) -> List[ActivityRecord]:
        # No existence check: a stale row number overwrites whatever sits there now
        self._check_row_number(row_number)
        sheet_name = self.sheet_name_for(employee_id)
        logger.info(f"Updating row {row_number} of {sheet_name}")
        self.sheets_client.update_row(sheet_name, row_number, fields_to_row(fields))
        return self.list_records(employee_id)

    def delete_record(self, employee_id: str, row_number: int) -> List[ActivityRecord]:
        """Remove one physical row; every later record moves up by one"""
        self._check_row_number(row_number)
        sheet_name = self.sheet_name_for(employee_id)
        sheet_id = self.sheets_client.get_sheet_id(sheet_name)
        if sheet_id is None:
            raise ActivitySheetNotFoundError(f"No activity sheet for employee {employee_id}")

        logger.info(f"Deleting row {row_number} of {sheet_name}")
        self.sheets_client.delete_row(sheet_id, row_number)
        return self.list_records(employee_id)

    @staticmethod
    def _first_blank_row(rows: List[List[str]]) -> Optional[int]:
        for index, row in enumerate(rows[1:]):
            if is_blank_row(row):
                return index + HEADER_OFFSET
        return None

    @staticmethod
    def _check_row_number(row_number: int) -> None:
        if row_number < HEADER_OFFSET:
            raise InvalidRowError(f"Row {row_number} is not a data row")
