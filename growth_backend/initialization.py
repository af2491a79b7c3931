from datetime import datetime

from .config import GrowthConfig

from .handlers.logers.loger_handlers import LogerHandler
from .handlers.categories.category_catalog import build_default_registry
from .handlers.categories.name_normalizer import NameNormalizer

from .services.growth.growth_service import GrowthService
from .services.filters.filter_service import FilterService
from .services.charts.pie_service import PieService


growthConfig = GrowthConfig.from_env()

# Handlers

logerHandler = LogerHandler(logsFilePath=growthConfig.logsFilePath,
                            logerName=growthConfig.logerName,
                            logLevel=growthConfig.logLevel)

categoryRegistry = build_default_registry()

nameNormalizer = NameNormalizer(categoryRegistry=categoryRegistry, logerHandler=logerHandler)

# Services

growthService = GrowthService(categoryRegistry=categoryRegistry,
                              nameNormalizer=nameNormalizer,
                              logerHandler=logerHandler)

filterService = FilterService(clock=datetime.now, logerHandler=logerHandler)

pieService = PieService(logerHandler=logerHandler,
                        minAngleDeg=growthConfig.minAngleDeg,
                        legendLimit=growthConfig.legendLimit)
