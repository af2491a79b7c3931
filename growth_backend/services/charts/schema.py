import json
from pydantic import BaseModel, ConfigDict, Field


class ChartTools(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_dict(self):
        return json.loads(self.model_dump_json(by_alias=True))


class PieEntry(ChartTools):
    label: str = Field()
    rating: float = Field()
    color: str = Field(default="#9E9E9E")

class PieSector(ChartTools):
    label: str = Field()
    rating: float = Field()
    color: str = Field()
    startAngleDeg: float = Field()
    endAngleDeg: float = Field()
    percentage: float = Field()

    @property
    def sweepDeg(self) -> float:
        return self.endAngleDeg - self.startAngleDeg

class PointSchema(ChartTools):
    x: float = Field()
    y: float = Field()

class LegendItem(ChartTools):
    label: str = Field()
    color: str = Field()
    rating: float = Field()
    percentage: int = Field()
