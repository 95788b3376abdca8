import logging
from functools import lru_cache

from fastapi import HTTPException

from timesheet_gateway.activities.gateway import ActivityGateway
from timesheet_gateway.config import credentials_info, load_config
from timesheet_gateway.sheets.client import GoogleSheetsClient


logger = logging.getLogger(__name__)


@lru_cache
def build_gateway() -> ActivityGateway:
    """Build the gateway once per process from the environment."""
    config = load_config()
    sheets_client = GoogleSheetsClient(
        spreadsheet_id=config["SPREADSHEET_ID"],
        credentials_path=config["GOOGLE_CREDENTIALS"],
        credentials_info=credentials_info(config),
    )
    return ActivityGateway(
        sheets_client=sheets_client,
        employee_sheet_name=config["EMPLOYEE_SHEET_NAME"],
        activity_sheet_prefix=config["ACTIVITY_SHEET_PREFIX"],
    )


def get_gateway() -> ActivityGateway:
    # failed builds are not cached, so the next request tries again
    try:
        return build_gateway()
    except Exception as e:
        logger.error(f"Could not set up the activity gateway: {e}")
        raise HTTPException(status_code=500, detail="Spreadsheet connection is not configured")
