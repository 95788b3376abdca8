import logging
from typing import Any, List, Mapping, Optional

from google.api_core import exceptions, retry
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .models import ACTIVITY_RANGE

logger = logging.getLogger(__name__)


class SheetError(Exception):
    """Custom exception for sheet-related errors"""

    pass


class SheetNotFoundError(SheetError):
    """Raised when the addressed worksheet does not exist"""

    pass


# Quota and server-side failures; everything else fails on the first attempt
DEFAULT_RETRY = retry.Retry(
    predicate=retry.if_exception_type(
        exceptions.TooManyRequests,
        exceptions.ServerError,
        ConnectionError,
    ),
    initial=1.0,
    maximum=10.0,
    multiplier=2.0,
    timeout=60.0,
)


def _a1(sheet_name: str, range_spec: str) -> str:
    escaped = sheet_name.replace("'", "''")
    return f"'{escaped}'!{range_spec}"


def _is_missing_sheet(error: HttpError) -> bool:
    return error.resp.status == 400 and "Unable to parse range" in str(error)


def _execute_once(request: Any) -> Any:
    """Run a request, raising quota and 5xx errors as google.api_core exceptions"""
    try:
        return request.execute()
    except HttpError as e:
        status = e.resp.status
        if status == 429 or status >= 500:
            logger.warning(f"Transient Sheets API error {status}: {e}")
            raise exceptions.from_http_status(status, str(e), response=e.resp)
        raise


class GoogleSheetsClient:
    """Handles all Google Sheets operations"""

    SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]

    def __init__(
        self,
        spreadsheet_id: str,
        credentials_path: Optional[str] = None,
        credentials_info: Optional[Mapping[str, str]] = None,
        service: Any = None,
        retry_policy: retry.Retry = DEFAULT_RETRY,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.credentials_path = credentials_path
        self.credentials_info = credentials_info
        self.retry_policy = retry_policy
        self.service = service or self._build_sheets_service()

    def _build_sheets_service(self):
        """Create and return an authorized Sheets API service object"""
        try:
            if self.credentials_info:
                creds = service_account.Credentials.from_service_account_info(
                    dict(self.credentials_info), scopes=self.SCOPES
                )
            else:
                creds = service_account.Credentials.from_service_account_file(
                    self.credentials_path, scopes=self.SCOPES
                )
            return build("sheets", "v4", credentials=creds, cache_discovery=False)
        except Exception as e:
            logger.error(f"Failed to build sheets service: {e}")
            raise SheetError(f"Could not initialize sheets service: {str(e)}")

    def _execute(self, request: Any, idempotent: bool = True) -> Any:
        # Appends and row deletions are not safe to replay
        if idempotent:
            return self.retry_policy(_execute_once)(request)
        return _execute_once(request)

    def get_values(self, sheet_name: str, range_spec: str) -> List[List[str]]:
        """Read a range, returning an empty list when it holds no values"""
        range_name = _a1(sheet_name, range_spec)
        try:
            result = self._execute(
                self.service.spreadsheets()
                .values()
                .get(spreadsheetId=self.spreadsheet_id, range=range_name)
            )
            return result.get("values", [])
        except HttpError as e:
            if _is_missing_sheet(e):
                raise SheetNotFoundError(f"Sheet {sheet_name} does not exist")
            logger.error(f"Error reading {range_name}: {e}")
            raise SheetError(f"Failed to read {range_name}: {str(e)}")
        except Exception as e:
            logger.error(f"Error reading {range_name}: {e}")
            raise SheetError(f"Failed to read {range_name}: {str(e)}")

    def append_row(self, sheet_name: str, values: List[str]) -> None:
        """Append a row after the last row of the sheet's table"""
        try:
            self._execute(
                self.service.spreadsheets().values().append(
                    spreadsheetId=self.spreadsheet_id,
                    range=_a1(sheet_name, ACTIVITY_RANGE),
                    valueInputOption="RAW",
                    insertDataOption="INSERT_ROWS",
                    body={"values": [values]},
                ),
                idempotent=False,
            )
        except HttpError as e:
            if _is_missing_sheet(e):
                raise SheetNotFoundError(f"Sheet {sheet_name} does not exist")
            logger.error(f"Error appending to {sheet_name}: {e}")
            raise SheetError(f"Failed to append to sheet: {str(e)}")
        except Exception as e:
            logger.error(f"Error appending to {sheet_name}: {e}")
            raise SheetError(f"Failed to append to sheet: {str(e)}")

    def update_row(self, sheet_name: str, row_index: int, values: List[str]) -> None:
        """Overwrite columns A-I of a single row"""
        range_name = _a1(sheet_name, f"A{row_index}:I{row_index}")
        try:
            self._execute(
                self.service.spreadsheets().values().update(
                    spreadsheetId=self.spreadsheet_id,
                    range=range_name,
                    valueInputOption="RAW",
                    body={"values": [values]},
                )
            )
        except HttpError as e:
            if _is_missing_sheet(e):
                raise SheetNotFoundError(f"Sheet {sheet_name} does not exist")
            logger.error(f"Error updating row: {e}")
            raise SheetError(f"Failed to update row {row_index}: {str(e)}")
        except Exception as e:
            logger.error(f"Error updating row: {e}")
            raise SheetError(f"Failed to update row {row_index}: {str(e)}")

    def get_sheet_id(self, sheet_name: str) -> Optional[int]:
        """Resolve a sheet title to its numeric sheetId"""
        try:
            result = self._execute(
                self.service.spreadsheets().get(
                    spreadsheetId=self.spreadsheet_id,
                    fields="sheets.properties(sheetId,title)",
                )
            )
        except Exception as e:
            logger.error(f"Error listing sheets: {e}")
            raise SheetError(f"Failed to list sheets: {str(e)}")

        for sheet in result.get("sheets", []):
            properties = sheet.get("properties", {})
            if properties.get("title") == sheet_name:
                return properties.get("sheetId")
        return None

    def delete_row(self, sheet_id: int, row_index: int) -> None:
        """Delete one physical row, shifting the rows below it up"""
        request = {
            "deleteDimension": {
                "range": {
                    "sheetId": sheet_id,
                    "dimension": "ROWS",
                    "startIndex": row_index - 1,
                    "endIndex": row_index,
                }
            }
        }
        try:
            self._execute(
                self.service.spreadsheets().batchUpdate(
                    spreadsheetId=self.spreadsheet_id, body={"requests": [request]}
                ),
                idempotent=False,
            )
        except Exception as e:
            logger.error(f"Error deleting row: {e}")
            raise SheetError(f"Failed to delete row {row_index}: {str(e)}")
