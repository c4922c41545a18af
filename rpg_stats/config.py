"""
Configuration for rpg-stats.

Provides the StatConfig dataclass used to describe a stat before it is
built, and the logging setup shared by applications embedding the engine.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Optional
import logging


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging for applications embedding rpg-stats.

    Installs a root handler with LOG_FORMAT and sets the ``rpg_stats`` logger
    level, so level-by-level DEBUG output can be turned on without raising
    the verbosity of other libraries.

    Args:
        verbose: Log rpg_stats at DEBUG instead of INFO
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    logging.getLogger("rpg_stats").setLevel(level)


logger = logging.getLogger(__name__)


@dataclass
class StatConfig:
    """
    Configuration for building an RPGStat.

    If exp_per_level is given it is used as the Exp table as-is. Otherwise,
    when both base_exp and exp_multiplier are set, a table with max_level
    entries is generated from them.
    """

    name: str
    max_level: int
    min_level: int = 0
    display_name: Optional[str] = None

    # Exp table options
    base_exp: Optional[float] = None
    exp_multiplier: Optional[float] = None
    exp_per_level: list[float] = field(default_factory=list)

    def __post_init__(self):
        """Coerce numeric fields so configs read from plain data behave."""
        self.max_level = int(self.max_level)
        self.min_level = int(self.min_level)
        if self.base_exp is not None:
            self.base_exp = float(self.base_exp)
        if self.exp_multiplier is not None:
            self.exp_multiplier = float(self.exp_multiplier)
        self.exp_per_level = [float(exp) for exp in self.exp_per_level]

    @property
    def generates_table(self) -> bool:
        """Check if the Exp table should be generated from base_exp and exp_multiplier."""
        return (
            not self.exp_per_level
            and self.base_exp is not None
            and self.exp_multiplier is not None
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StatConfig":
        """Create from dictionary, ignoring unknown keys."""
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            logger.debug(f"Ignoring unknown StatConfig keys: {sorted(unknown)}")
        return cls(
            name=data["name"],
            max_level=data["max_level"],
            min_level=data.get("min_level", 0),
            display_name=data.get("display_name"),
            base_exp=data.get("base_exp"),
            exp_multiplier=data.get("exp_multiplier"),
            exp_per_level=list(data.get("exp_per_level", [])),
        )
