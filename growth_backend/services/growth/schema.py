import json
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ApiPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_dict(self):
        return json.loads(self.model_dump_json(by_alias=True, exclude_unset=True))


class ViewTools(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_dict(self):
        return json.loads(self.model_dump_json(by_alias=True))


# Backend payload

class GradeLevel(ApiPayload):
    id: int | None = Field(default=None)
    name: str | None = Field(default=None)

class StudentInfo(ApiPayload):
    id: int | None = Field(default=None)
    full_name: str | None = Field(default=None)
    student_calling_name: str | None = Field(default=None)
    admission_number: str | None = Field(default=None)
    grade_level: GradeLevel | None = Field(default=None)

class CategoryRating(ApiPayload):
    category_id: int = Field()
    category_name: str = Field()
    average_rating: float = Field()
    record_count: int = Field(ge=0)

class GrowthSummary(ApiPayload):
    average_overall: float = Field()
    total_records: int = Field(ge=0)
    filtered_period: str = Field()
    status_filter: int | None = Field(default=None)
    categories_with_data: int | None = Field(default=None)
    categories_total: int | None = Field(default=None)

class GrowthData(ApiPayload):
    student_info: StudentInfo | None = Field(default=None)
    # Validated separately so one bad row or summary does not sink the whole response
    summary: Any = Field(default=None)
    categories: List[Any] | None = Field(default=None)

class StudentGrowthApiResponse(ApiPayload):
    success: bool = Field(default=False)
    data: GrowthData | None = Field(default=None)
    message: str | None = Field(default=None)


# Views

class IntelligenceCardView(ViewTools):
    id: str = Field()
    categoryID: str = Field()
    title: str = Field()
    icon: str = Field()
    rating: float = Field()
    level: str = Field()
    color: str = Field()
    description: str = Field(default="")
    recordCount: int = Field(default=0)
    isPlaceholder: bool = Field(default=False)

class OverallRatingView(ViewTools):
    rating: float = Field()
    level: str = Field()
    totalRecords: int = Field()
    filteredPeriodLabel: str = Field()
    title: str = Field(default="Overall Intelligence Rating")
    icon: str = Field(default="analytics")
    color: str = Field(default="#6366F1")

class SynthesisResult(ViewTools):
    cards: List[IntelligenceCardView] = Field(default_factory=list)
    unmatchedNames: List[str] = Field(default_factory=list)
    duplicateNames: List[str] = Field(default_factory=list)
    skippedRecords: int = Field(default=0)

class DashboardView(ViewTools):
    cards: List[IntelligenceCardView] = Field(default_factory=list)
    overall: OverallRatingView = Field()
    studentInfo: StudentInfo | None = Field(default=None)
    unmatchedNames: List[str] = Field(default_factory=list)
    duplicateNames: List[str] = Field(default_factory=list)
    skippedRecords: int = Field(default=0)
