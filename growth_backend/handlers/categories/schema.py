import json
from typing import FrozenSet
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class BaseTools(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_dict(self):
        return json.loads(self.model_dump_json(by_alias=True, exclude_unset=True))


class CanonicalCategory(BaseTools):
    id: str = Field()
    displayName: str = Field()
    displayNameVariants: FrozenSet[str] = Field(default_factory=frozenset, validate_default=True)
    icon: str = Field()
    color: str = Field()
    description: str = Field(default="")

    @field_validator("displayNameVariants")
    @classmethod
    def _include_display_name(cls, value: FrozenSet[str], info: ValidationInfo) -> FrozenSet[str]:
        # The canonical title always resolves to itself
        displayName = info.data.get("displayName")
        if displayName:
            return frozenset(value) | {displayName}
        return frozenset(value)
