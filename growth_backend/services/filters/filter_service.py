from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Callable, Dict, Optional

from .schema import *
from ...handlers.logers.loger_handlers import LogerHandler, get_loger


class FilterSlugs:
    ALL: str = "all"
    CURRENT_YEAR: str = "current-year"
    CURRENT_MONTH: str = "current-month"

    @classmethod
    def all(cls) -> list[str]:
        return [cls.ALL, cls.CURRENT_YEAR, cls.CURRENT_MONTH]


class AbstractFilterService(ABC):

    @abstractmethod
    def __init__(self, clock, logerHandler):
        super().__init__()
        self.clock: Callable[[], date] = clock
        self.logerHandler: LogerHandler = logerHandler

    @abstractmethod
    def translate(self, filterID: FilterPeriod | str, now: Optional[date] = None) -> Dict[str, int]:
        # UI filter id -> backend query parameters.
        pass


class FilterService(AbstractFilterService):
    def __init__(self, clock: Callable[[], date] = datetime.now, logerHandler=None):
        super().__init__(clock, logerHandler)
        self._loger = get_loger(logerHandler, "filters")

    def build_filter_query(self, filterID: FilterPeriod | str, now: Optional[date] = None) -> RatingsFilterQuery:
        if now is None:
            now = self.clock()

        match filterID:
            case FilterSlugs.CURRENT_YEAR:
                return RatingsFilterQuery(year=now.year)

            case FilterSlugs.CURRENT_MONTH:
                return RatingsFilterQuery(year=now.year, month=now.month)

            case FilterSlugs.ALL:
                return RatingsFilterQuery()

            case _:
                self._loger.warning("Unknown filter %r, falling back to all time", filterID)
                return RatingsFilterQuery()

    def translate(self, filterID: FilterPeriod | str, now: Optional[date] = None) -> Dict[str, int]:
        return self.build_filter_query(filterID, now).to_dict()

    def build_ratings_request(self, studentID: int, filterID: FilterPeriod | str, now: Optional[date] = None) -> StudentRatingsRequest:
        filterParams = self.translate(filterID, now)
        return StudentRatingsRequest(student_id=studentID, **filterParams)
