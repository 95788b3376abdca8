from dataclasses import asdict
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from timesheet_gateway.sheets.models import ActivityFields, ActivityRecord


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeRequest(CamelModel):
    id: str

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: Any) -> Any:
        # ids typed as numbers on the client still match the sheet's text
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        if isinstance(value, str):
            return value.strip()
        return value


class ActivityPayload(EmployeeRequest):
    date: str = ""
    worksite: str = ""
    task: str = ""
    start_time: str = ""
    end_time: str = ""
    total_hours: str = ""
    km: str = ""
    notes: str = ""

    @field_validator(
        "date", "worksite", "task", "start_time", "end_time", "total_hours", "km", "notes", mode="before"
    )
    @classmethod
    def stringify(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    def to_fields(self) -> ActivityFields:
        return ActivityFields(**self.model_dump(exclude={"id"}))


class EmployeeOut(CamelModel):
    name: str
    id: str


class ActivityRecordOut(CamelModel):
    date: str
    worksite: str
    task: str
    start_time: str
    end_time: str
    total_hours: str
    km: str
    notes: str
    row_number: int

    @classmethod
    def from_record(cls, record: ActivityRecord) -> "ActivityRecordOut":
        return cls(**asdict(record))


class LoginResponse(CamelModel):
    employee: EmployeeOut
    records: list[ActivityRecordOut]


class RecordsResponse(CamelModel):
    message: str
    records: list[ActivityRecordOut]


class HealthStatus(BaseModel):
    status: str
    version: str
