from pydantic import BaseModel, ConfigDict, Field


class RatingLevel(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str = Field()
    color: str = Field()
