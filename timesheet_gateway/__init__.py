"""Field Timesheet Gateway - clock-in and activity timesheets on Google Sheets.

Employees log in by id and keep their activity entries in a per-employee
worksheet of a shared spreadsheet.
"""

__version__ = "0.1.0"

from .activities.gateway import ActivityGateway
from .sheets.client import GoogleSheetsClient


__all__ = [
    "ActivityGateway",
    "GoogleSheetsClient",
]
