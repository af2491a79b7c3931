from datetime import datetime

import pytest

from growth_backend.handlers.categories.category_catalog import build_default_registry
from growth_backend.handlers.categories.name_normalizer import NameNormalizer
from growth_backend.services.growth.growth_service import GrowthService
from growth_backend.services.filters.filter_service import FilterService
from growth_backend.services.charts.pie_service import PieService


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def normalizer(registry):
    return NameNormalizer(categoryRegistry=registry)


@pytest.fixture
def growth_service(registry, normalizer):
    return GrowthService(categoryRegistry=registry, nameNormalizer=normalizer)


@pytest.fixture
def filter_service():
    return FilterService(clock=lambda: datetime(2025, 6, 1))


@pytest.fixture
def pie_service():
    return PieService(minAngleDeg=3.0)
