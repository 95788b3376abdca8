import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from timesheet_gateway.activities.gateway import ActivityGateway, ActivitySheetNotFoundError
from timesheet_gateway.api.dependencies import get_gateway
from timesheet_gateway.api.schemas import (
    ActivityPayload,
    ActivityRecordOut,
    EmployeeRequest,
    RecordsResponse,
)


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/activities", tags=["activities"])


def _records_response(message: str, records) -> RecordsResponse:
    return RecordsResponse(
        message=message,
        records=[ActivityRecordOut.from_record(record) for record in records],
    )


@router.post("", status_code=status.HTTP_201_CREATED)
def create_activity(
    body: ActivityPayload, gateway: ActivityGateway = Depends(get_gateway)
) -> RecordsResponse:
    """Add an activity, reusing the first blank row of the employee's sheet."""
    try:
        records = gateway.create_record(body.id, body.to_fields())
    except Exception as e:
        logger.error(f"Error in POST /api/activities: {e}")
        raise HTTPException(status_code=500, detail="Server error while adding the activity")

    return _records_response("Activity added successfully", records)


@router.put("/{row}")
def update_activity(
    body: ActivityPayload,
    row: int = Path(ge=2, description="Physical sheet row; row 1 is the header"),
    gateway: ActivityGateway = Depends(get_gateway),
) -> RecordsResponse:
    """Overwrite the activity stored on a given row."""
    try:
        records = gateway.update_record(body.id, row, body.to_fields())
    except Exception as e:
        logger.error(f"Error in PUT /api/activities/{row}: {e}")
        raise HTTPException(status_code=500, detail="Server error while updating the activity")

    return _records_response("Activity updated successfully", records)


@router.delete("/{row}")
def delete_activity(
    body: EmployeeRequest,
    row: int = Path(ge=2, description="Physical sheet row; row 1 is the header"),
    gateway: ActivityGateway = Depends(get_gateway),
) -> RecordsResponse:
    """Delete the activity on a given row; later rows shift up by one."""
    try:
        records = gateway.delete_record(body.id, row)
    except ActivitySheetNotFoundError as e:
        logger.warning(f"DELETE /api/activities/{row}: {e}")
        raise HTTPException(status_code=404, detail="Activity sheet not found")
    except Exception as e:
        logger.error(f"Error in DELETE /api/activities/{row}: {e}")
        raise HTTPException(status_code=500, detail="Server error while deleting the activity")

    return _records_response("Activity deleted successfully", records)
