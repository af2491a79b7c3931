from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Set, Tuple

from pydantic import ValidationError

from .schema import *
from ...handlers.logers.loger_handlers import LogerHandler, get_loger
from ...handlers.categories.category_registry import CategoryRegistry
from ...handlers.categories.name_normalizer import NOT_FOUND, AbstractNameNormalizer
from ...handlers.categories.schema import CanonicalCategory
from ...handlers.ratings.rating_classifier import NO_DATA, clamp_rating, classify

EMPTY_PERIOD_LABEL = "No data"


class AbstractGrowthService(ABC):

    @abstractmethod
    def __init__(self, categoryRegistry, nameNormalizer, logerHandler):
        super().__init__()
        self.categoryRegistry: CategoryRegistry = categoryRegistry
        self.nameNormalizer: AbstractNameNormalizer = nameNormalizer
        self.logerHandler: LogerHandler = logerHandler

    @abstractmethod
    def synthesize(self, categories: List[Any]) -> SynthesisResult:
        # One card per canonical category, placeholders for the missing ones.
        pass

    @abstractmethod
    def aggregate(self, summary: Any) -> OverallRatingView:
        # Overall rating straight from the backend summary block.
        pass

    @abstractmethod
    def build_dashboard(self, apiResponse: Any) -> DashboardView:
        # Cards + overall for one backend response.
        pass


class GrowthService(AbstractGrowthService):
    def __init__(self, categoryRegistry, nameNormalizer, logerHandler=None):
        super().__init__(categoryRegistry, nameNormalizer, logerHandler)
        self._loger = get_loger(logerHandler, "growth")

    # Parsing

    def _parse_response(self, apiResponse: Any) -> Optional[StudentGrowthApiResponse]:
        if apiResponse is None:
            return None
        if isinstance(apiResponse, StudentGrowthApiResponse):
            return apiResponse

        try:
            return StudentGrowthApiResponse.model_validate(apiResponse)
        except ValidationError as exc:
            self._loger.warning("Invalid growth response structure: %s", exc.errors())
            return None

    def _parse_categories(self, categories: Optional[List[Any]]) -> Tuple[List[CategoryRating], int]:
        parsed: List[CategoryRating] = []
        skipped = 0

        for item in categories or []:
            if isinstance(item, CategoryRating):
                parsed.append(item)
                continue
            try:
                parsed.append(CategoryRating.model_validate(item))
            except ValidationError as exc:
                skipped += 1
                self._loger.warning("Skipping category record %r: %s", item, exc.errors())

        return parsed, skipped

    def _parse_summary(self, summary: Any) -> Optional[GrowthSummary]:
        if summary is None or isinstance(summary, GrowthSummary):
            return summary
        try:
            return GrowthSummary.model_validate(summary)
        except ValidationError as exc:
            self._loger.warning("Invalid growth summary %r: %s", summary, exc.errors())
            return None

    # Cards

    @staticmethod
    def _build_card(category: CanonicalCategory, record: CategoryRating, index: int) -> IntelligenceCardView:
        rating = clamp_rating(record.average_rating)
        ratingLevel = classify(rating)
        return IntelligenceCardView(
            id=f"{category.id}_{record.category_id}_{index}",
            categoryID=category.id,
            title=category.displayName,
            icon=category.icon,
            rating=rating,
            level=ratingLevel.level,
            color=category.color,
            description=category.description,
            recordCount=record.record_count,
            isPlaceholder=False,
        )

    @staticmethod
    def _build_placeholder(category: CanonicalCategory) -> IntelligenceCardView:
        return IntelligenceCardView(
            id=f"{category.id}_missing",
            categoryID=category.id,
            title=category.displayName,
            icon=category.icon,
            rating=0.0,
            level=NO_DATA.level,
            color=category.color,
            description=category.description,
            recordCount=0,
            isPlaceholder=True,
        )

    def synthesize(self, categories: List[Any]) -> SynthesisResult:
        records, skipped = self._parse_categories(categories)

        realCards: List[IntelligenceCardView] = []
        producedIDs: Set[str] = set()
        unmatchedNames: List[str] = []
        duplicateNames: List[str] = []

        for index, record in enumerate(records):
            categoryID = self.nameNormalizer.normalize(record.category_name)

            if categoryID is NOT_FOUND:
                unmatchedNames.append(record.category_name)
                continue

            # First record for a category wins
            if categoryID in producedIDs:
                duplicateNames.append(record.category_name)
                continue

            realCards.append(self._build_card(self.categoryRegistry.get(categoryID), record, index))
            producedIDs.add(categoryID)

        placeholders = [
            self._build_placeholder(category)
            for category in self.categoryRegistry.all()
            if category.id not in producedIDs
        ]

        if unmatchedNames:
            self._loger.warning("No mapping found for categories: %s", unmatchedNames)
        if duplicateNames:
            self._loger.warning("Duplicate records dropped for categories: %s", duplicateNames)
        self._loger.debug("Synthesized %s real and %s placeholder cards", len(realCards), len(placeholders))

        return SynthesisResult(
            cards=realCards + placeholders,
            unmatchedNames=unmatchedNames,
            duplicateNames=duplicateNames,
            skippedRecords=skipped,
        )

    # Overall

    @staticmethod
    def empty_overall() -> OverallRatingView:
        return OverallRatingView(
            rating=0.0,
            level=NO_DATA.level,
            totalRecords=0,
            filteredPeriodLabel=EMPTY_PERIOD_LABEL,
        )

    def aggregate(self, summary: Any) -> OverallRatingView:
        parsedSummary = self._parse_summary(summary)
        if parsedSummary is None:
            self._loger.debug("No growth summary, using empty overall rating")
            return self.empty_overall()

        rating = clamp_rating(parsedSummary.average_overall)
        return OverallRatingView(
            rating=rating,
            level=classify(rating).level,
            totalRecords=parsedSummary.total_records,
            filteredPeriodLabel=parsedSummary.filtered_period,
        )

    # Dashboard

    def empty_dashboard(self) -> DashboardView:
        synthesis = self.synthesize([])
        return DashboardView(cards=synthesis.cards, overall=self.empty_overall())

    def build_dashboard(self, apiResponse: Any) -> DashboardView:
        response = self._parse_response(apiResponse)

        if response is None or not response.success or response.data is None:
            self._loger.warning("Growth response missing or unsuccessful, using empty state")
            return self.empty_dashboard()

        synthesis = self.synthesize(response.data.categories)
        overall = self.aggregate(response.data.summary)

        return DashboardView(
            cards=synthesis.cards,
            overall=overall,
            studentInfo=response.data.student_info,
            unmatchedNames=synthesis.unmatchedNames,
            duplicateNames=synthesis.duplicateNames,
            skippedRecords=synthesis.skippedRecords,
        )

    @staticmethod
    def cards_with_data(cards: List[IntelligenceCardView]) -> List[IntelligenceCardView]:
        return [card for card in cards if not card.isPlaceholder]
