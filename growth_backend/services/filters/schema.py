import json
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field

FilterPeriod = Literal["all", "current-year", "current-month"]


class ApiQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self):
        return json.loads(self.model_dump_json(by_alias=True, exclude_unset=True))

    def to_query(self) -> str:
        queryLine = '&'.join([f"{k}={v}" for k, v in self.model_dump(
            by_alias=True, exclude_unset=True).items()])
        if queryLine.__len__():
            return '?' + queryLine
        return ''


class RatingsFilterQuery(ApiQuery):
    year: int | None = Field(default=None)
    month: int | None = Field(default=None, ge=1, le=12)

class StudentRatingsRequest(ApiQuery):
    student_id: int = Field()
    year: int | None = Field(default=None)
    month: int | None = Field(default=None, ge=1, le=12)
