"""Configuration settings for the date utilities."""
from dataclasses import dataclass, field
from datetime import tzinfo

from dateutil import tz


@dataclass
class Config:
    """Library configuration settings.

    Centralized configuration to avoid hardcoded values throughout the codebase.
    """
    # Zone used for local calendar fields and for parse results without an offset
    local_tz: tzinfo = field(default_factory=tz.tzlocal)

    # "literal" subtracts pi from reflex angles, "shortest" is the textbook reduction
    clock_angle_mode: str = "literal"

    @classmethod
    def load(cls) -> 'Config':
        """
        Load configuration.

        Returns:
            Config instance with default values
        """
        return cls()


# Global config instance
config = Config.load()
