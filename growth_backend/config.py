import os
from dataclasses import dataclass
from typing import Optional

from .handlers.logers.loger_handlers import DEFAULT_LOGER_NAME


@dataclass(frozen=True)
class GrowthConfig:
    minAngleDeg: float = 3.0  # degrees, keeps zero-rated sectors tappable
    legendLimit: int = 8
    logerName: str = DEFAULT_LOGER_NAME
    logsFilePath: Optional[str] = None
    logLevel: str = "INFO"

    def __post_init__(self):
        if not self.minAngleDeg > 0:
            raise ValueError(f"minAngleDeg must be positive, got {self.minAngleDeg}")

    @classmethod
    def from_env(cls) -> "GrowthConfig":
        defaults = cls()
        return cls(
            minAngleDeg=float(os.environ.get("GROWTH_MIN_ANGLE_DEG", defaults.minAngleDeg)),
            legendLimit=int(os.environ.get("GROWTH_LEGEND_LIMIT", defaults.legendLimit)),
            logerName=os.environ.get("GROWTH_LOGER_NAME", defaults.logerName),
            logsFilePath=os.environ.get("GROWTH_LOGS_FILE") or defaults.logsFilePath,
            logLevel=os.environ.get("GROWTH_LOG_LEVEL", defaults.logLevel),
        )
