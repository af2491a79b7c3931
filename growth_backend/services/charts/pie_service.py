import math
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from .schema import *
from ..growth.schema import IntelligenceCardView
from ...handlers.logers.loger_handlers import LogerHandler, get_loger

FULL_CIRCLE_DEG: float = 360.0
DEFAULT_MIN_ANGLE_DEG: float = 3.0
DEFAULT_LEGEND_LIMIT: int = 8


class AbstractPieService(ABC):

    @abstractmethod
    def __init__(self, logerHandler, minAngleDeg, legendLimit):
        super().__init__()
        self.logerHandler: LogerHandler = logerHandler
        self.minAngleDeg: float = minAngleDeg
        self.legendLimit: int = legendLimit

    @abstractmethod
    def allocate(self, entries: Sequence[Any], minAngleDeg: Optional[float] = None) -> List[PieSector]:
        # (label, rating, color) entries -> contiguous pie sectors.
        pass


class PieService(AbstractPieService):
    def __init__(self, logerHandler=None, minAngleDeg: float = DEFAULT_MIN_ANGLE_DEG, legendLimit: int = DEFAULT_LEGEND_LIMIT):
        super().__init__(logerHandler, minAngleDeg, legendLimit)
        self._loger = get_loger(logerHandler, "charts")

    @staticmethod
    def _to_entry(entry: Any) -> PieEntry:
        if isinstance(entry, PieEntry):
            return entry
        return PieEntry.model_validate(entry)

    @staticmethod
    def _chain(angles: List[float]) -> List[tuple]:
        ranges = []
        currentAngle = 0.0
        for angle in angles:
            startAngle = currentAngle
            currentAngle = startAngle + angle
            ranges.append((startAngle, currentAngle))
        return ranges

    def allocate(self, entries: Sequence[Any], minAngleDeg: Optional[float] = None) -> List[PieSector]:
        """
        Converts category ratings into pie sectors.

        Each entry gets rating / total of the circle. Zero-rated entries are
        forced up to minAngleDeg so they stay visible; when every rating is
        zero the circle is split equally. If the forced minimums push the sum
        past 360 degrees, every angle is scaled by 360 / sum and the ranges are
        chained again. Percentages are the raw shares, taken before that
        correction. Output order is input order.
        """
        if minAngleDeg is None:
            minAngleDeg = self.minAngleDeg

        pieEntries = [self._to_entry(entry) for entry in entries]
        if not pieEntries:
            return []

        total = sum(entry.rating for entry in pieEntries)

        angles: List[float] = []
        percentages: List[float] = []
        for entry in pieEntries:
            if total > 0:
                rawAngle = (entry.rating / total) * FULL_CIRCLE_DEG
                angle = minAngleDeg if entry.rating == 0 else rawAngle
            else:
                rawAngle = FULL_CIRCLE_DEG / len(pieEntries)
                angle = rawAngle

            angles.append(angle)
            percentages.append(rawAngle / FULL_CIRCLE_DEG * 100.0)

        usedAngle = sum(angles)
        if usedAngle > FULL_CIRCLE_DEG:
            self._loger.debug("Pie angles sum to %.2f deg, scaling down to %.0f", usedAngle, FULL_CIRCLE_DEG)
            scaleFactor = FULL_CIRCLE_DEG / usedAngle
            angles = [angle * scaleFactor for angle in angles]

        ranges = self._chain(angles)

        # Float drift after scaling must not leave the circle
        if usedAngle > FULL_CIRCLE_DEG and ranges[-1][1] > FULL_CIRCLE_DEG:
            ranges[-1] = (ranges[-1][0], FULL_CIRCLE_DEG)

        return [
            PieSector(
                label=entry.label,
                rating=entry.rating,
                color=entry.color,
                startAngleDeg=startAngle,
                endAngleDeg=endAngle,
                percentage=percentage,
            )
            for entry, (startAngle, endAngle), percentage in zip(pieEntries, ranges, percentages)
        ]

    @staticmethod
    def build_pie_entries(cards: Sequence[IntelligenceCardView], hideEmpty: bool = False) -> List[PieEntry]:
        pieEntries: List[PieEntry] = []
        for card in cards:
            if hideEmpty and card.rating <= 0:
                continue
            pieEntries.append(PieEntry(label=card.title, rating=card.rating, color=card.color))
        return pieEntries

    def allocate_cards(self, cards: Sequence[IntelligenceCardView], hideEmpty: bool = False) -> List[PieSector]:
        return self.allocate(self.build_pie_entries(cards, hideEmpty=hideEmpty))

    def build_legend(self, sectors: Sequence[PieSector], limit: Optional[int] = None) -> List[LegendItem]:
        if limit is None:
            limit = self.legendLimit
        return [
            LegendItem(label=sector.label, color=sector.color, rating=sector.rating, percentage=round(sector.percentage))
            for sector in list(sectors)[:limit]
        ]

    # SVG geometry, 0 degrees at 12 o'clock, clockwise

    @staticmethod
    def polar_to_cartesian(centerX: float, centerY: float, radius: float, angleDeg: float) -> PointSchema:
        angleRad = math.radians(angleDeg - 90.0)
        return PointSchema(
            x=centerX + radius * math.cos(angleRad),
            y=centerY + radius * math.sin(angleRad),
        )

    @classmethod
    def build_arc_path(cls, centerX: float, centerY: float, radius: float, startAngleDeg: float, endAngleDeg: float) -> str:
        start = cls.polar_to_cartesian(centerX, centerY, radius, endAngleDeg)
        end = cls.polar_to_cartesian(centerX, centerY, radius, startAngleDeg)
        largeArcFlag = "0" if endAngleDeg - startAngleDeg <= 180 else "1"

        return " ".join(str(part) for part in [
            "M", centerX, centerY,
            "L", start.x, start.y,
            "A", radius, radius, 0, largeArcFlag, 0, end.x, end.y,
            "Z",
        ])

    def build_sector_paths(self, sectors: Sequence[PieSector], centerX: float, centerY: float, radius: float) -> List[str]:
        return [
            self.build_arc_path(centerX, centerY, radius, sector.startAngleDeg, sector.endAngleDeg)
            for sector in sectors
        ]
