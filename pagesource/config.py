import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

# Items per page of search results
PAGE_SIZE = 4

# Artificial latency per page, in milliseconds
SIMULATED_DELAY = 200

ENV_PAGE_SIZE = "PAGESOURCE_PAGE_SIZE"
ENV_SIMULATED_DELAY = "PAGESOURCE_SIMULATED_DELAY_MS"


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"Environment variable {name} must be an integer, got '{raw}'",
            option=name,
            original_error=e,
        ) from e


@dataclass(frozen=True)
class SourceOptions:
    """
    Tunable parameters of a paginated items source.

    The defaults match the values existing scenarios are written against:
    four items per page and a 200 ms delay before each page.
    """

    page_size: int = PAGE_SIZE
    simulated_delay_ms: int = SIMULATED_DELAY

    def __post_init__(self) -> None:
        self.validate()

    @property
    def simulated_delay(self) -> float:
        """The per-page delay in seconds."""
        return self.simulated_delay_ms / 1000

    def validate(self) -> None:
        """
        Check that the options describe a usable source.

        Raises:
            ConfigurationError: If page_size is below 1 or the delay is negative
        """
        if self.page_size < 1:
            raise ConfigurationError(
                f"page_size must be at least 1, got {self.page_size}", option="page_size"
            )
        if self.simulated_delay_ms < 0:
            raise ConfigurationError(
                f"simulated_delay_ms cannot be negative, got {self.simulated_delay_ms}",
                option="simulated_delay_ms",
            )

    @classmethod
    def from_env(cls) -> "SourceOptions":
        """
        Build options from PAGESOURCE_* environment variables.

        Unset or empty variables fall back to the defaults.
        """
        return cls(
            page_size=_read_int(ENV_PAGE_SIZE, PAGE_SIZE),
            simulated_delay_ms=_read_int(ENV_SIMULATED_DELAY, SIMULATED_DELAY),
        )
