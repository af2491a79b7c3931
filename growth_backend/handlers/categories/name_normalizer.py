from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Tuple

from .category_registry import CategoryRegistry
from ..logers.loger_handlers import LogerHandler, get_loger

NOT_FOUND = None


class AbstractNameNormalizer(ABC):

    @abstractmethod
    def __init__(self, categoryRegistry, logerHandler):
        super().__init__()
        self.categoryRegistry: CategoryRegistry = categoryRegistry
        self.logerHandler: LogerHandler = logerHandler

    @abstractmethod
    def normalize(self, rawName: str) -> Optional[str]:
        pass


class NameNormalizer(AbstractNameNormalizer):
    """
    Resolves a backend category name to a canonical category id.

    Lookup order is exact variant match, then case-insensitive match.
    Anything else is NOT_FOUND: substring matching is ambiguous for names
    like "Contribution to School Community" vs "Contribution to Society",
    so it is never used for identity.
    """

    def __init__(self, categoryRegistry, logerHandler=None):
        super().__init__(categoryRegistry, logerHandler)
        self._loger = get_loger(logerHandler, "names")

    def normalize(self, rawName: str) -> Optional[str]:
        if not isinstance(rawName, str) or not rawName.strip():
            return NOT_FOUND

        categoryID = self.categoryRegistry.find_exact(rawName)
        if categoryID is not None:
            return categoryID

        categoryID = self.categoryRegistry.find_case_insensitive(rawName)
        if categoryID is not None:
            self._loger.debug("Resolved category name by case: %r -> %s", rawName, categoryID)
            return categoryID

        return NOT_FOUND

    def canonical_name(self, rawName: str) -> Optional[str]:
        categoryID = self.normalize(rawName)
        if categoryID is NOT_FOUND:
            return None
        return self.categoryRegistry.get(categoryID).displayName

    def normalize_many(self, rawNames: Iterable[str]) -> Tuple[Dict[str, str], List[str]]:
        resolved: Dict[str, str] = {}
        unmatched: List[str] = []

        for rawName in rawNames:
            categoryID = self.normalize(rawName)
            if categoryID is NOT_FOUND:
                unmatched.append(rawName)
                continue
            resolved[rawName] = categoryID

        if unmatched:
            self._loger.warning("No canonical category for names: %s", unmatched)
        return resolved, unmatched
