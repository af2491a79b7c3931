from typing import Dict, Iterable, List, Optional

from .schema import CanonicalCategory


class CategoryNotRegisteredError(KeyError):
    pass


class CategoryRegistry:
    def __init__(self, categories: Iterable[CanonicalCategory] = ()):
        self._categories: Dict[str, CanonicalCategory] = {}
        self._variants: Dict[str, str] = {}
        self._foldedVariants: Dict[str, str] = {}
        self.slugNameList: List[str] = []

        for category in categories:
            self.register(category)

    def register(self, category: CanonicalCategory) -> None:
        if category.id in self._categories:
            raise ValueError(f"Category id: {category.id} already registered")

        for variant in category.displayNameVariants:
            ownerID = self._variants.get(variant) or self._foldedVariants.get(self._fold(variant))
            if ownerID is not None and ownerID != category.id:
                raise ValueError(f"Category name: {variant!r} already claimed by {ownerID}")

        self._categories[category.id] = category
        self.slugNameList.append(category.id)
        for variant in category.displayNameVariants:
            self._variants[variant] = category.id
            self._foldedVariants[self._fold(variant)] = category.id

    @staticmethod
    def _fold(name: str) -> str:
        return name.strip().casefold()

    def _is_slug_exist(self, slug: str) -> bool:
        return slug in self._categories

    def _error_if_slug_does_not_registered(self, slug: str):
        if not self._is_slug_exist(slug):
            raise CategoryNotRegisteredError(f"Category: {slug} does not registered")

    def get(self, categoryID: str) -> CanonicalCategory:
        self._error_if_slug_does_not_registered(categoryID)
        return self._categories[categoryID]

    def is_registered(self, categoryID: str) -> bool:
        return self._is_slug_exist(categoryID)

    def all(self) -> List[CanonicalCategory]:
        return [self._categories[slug] for slug in self.slugNameList]

    def ids(self) -> List[str]:
        return list(self.slugNameList)

    def find_exact(self, rawName: str) -> Optional[str]:
        return self._variants.get(rawName)

    def find_case_insensitive(self, rawName: str) -> Optional[str]:
        return self._foldedVariants.get(self._fold(rawName))

    def __len__(self) -> int:
        return len(self.slugNameList)
