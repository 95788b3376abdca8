import logging

from fastapi import APIRouter, Depends, HTTPException

from timesheet_gateway.activities.gateway import ActivityGateway
from timesheet_gateway.api.dependencies import get_gateway
from timesheet_gateway.api.schemas import (
    ActivityRecordOut,
    EmployeeOut,
    EmployeeRequest,
    LoginResponse,
)


logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"])


@router.post("/login")
def login(body: EmployeeRequest, gateway: ActivityGateway = Depends(get_gateway)) -> LoginResponse:
    """Log in an employee by id and return their activity records."""
    try:
        employee, records = gateway.authenticate(body.id)
    except Exception as e:
        logger.error(f"Error in /api/login: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return LoginResponse(
        employee=EmployeeOut(name=employee.name, id=employee.id),
        records=[ActivityRecordOut.from_record(record) for record in records],
    )
