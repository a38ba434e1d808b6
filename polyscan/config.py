import os
import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar, Optional
from dotenv import load_dotenv
from polyscan.alphabet import Nucleotide
from polyscan.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Defaults:
    window_size: int = 10
    threshold: float = 80.0
    nucleotide: str = "A"


DEFAULTS = Defaults()


@dataclass(frozen=True)
class ScanConfig:
    nucleotide: Nucleotide = Nucleotide(DEFAULTS.nucleotide)
    window_size: int = DEFAULTS.window_size
    threshold: float = DEFAULTS.threshold
    # report ceil(score) instead of the exact percentage
    integer_scores: bool = False

    ENV_WINDOW_SIZE: ClassVar[str] = "POLYSCAN_WINDOW_SIZE"
    ENV_THRESHOLD: ClassVar[str] = "POLYSCAN_THRESHOLD"
    ENV_NUCLEOTIDE: ClassVar[str] = "POLYSCAN_NUCLEOTIDE"

    def __post_init__(self) -> None:
        try:
            nucleotide = Nucleotide.parse(self.nucleotide)
        except ValueError:
            raise ConfigurationError(f"Nucleotide must be one of A, C, G, T or N; got {self.nucleotide!r}.") from None
        object.__setattr__(self, "nucleotide", nucleotide)

        if isinstance(self.window_size, bool) or not isinstance(self.window_size, int):
            raise ConfigurationError(f"Window size must be an integer; got {self.window_size!r}.")
        if self.window_size <= 0:
            raise ConfigurationError(f"Window size must be positive; got {self.window_size}.")

        if isinstance(self.threshold, bool) or not isinstance(self.threshold, Real):
            raise ConfigurationError(f"Threshold must be a number; got {self.threshold!r}.")
        if math.isnan(self.threshold) or not 0 <= self.threshold <= 100:
            raise ConfigurationError(f"Threshold must be between 0 and 100; got {self.threshold}.")

    @property
    def complement(self) -> Nucleotide:
        return self.nucleotide.complement

    @classmethod
    def from_env(cls, nucleotide: Optional[str] = None,
                      window_size: Optional[int] = None,
                      threshold: Optional[float] = None,
                      integer_scores: bool = False) -> "ScanConfig":
        load_dotenv()
        if nucleotide is None:
            nucleotide = os.getenv(cls.ENV_NUCLEOTIDE, DEFAULTS.nucleotide)
        if window_size is None:
            window_size = _read_env(cls.ENV_WINDOW_SIZE, int, DEFAULTS.window_size)
        if threshold is None:
            threshold = _read_env(cls.ENV_THRESHOLD, float, DEFAULTS.threshold)
        return cls(nucleotide=nucleotide,
                   window_size=window_size,
                   threshold=threshold,
                   integer_scores=integer_scores)


def _read_env(name: str, cast, default):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return cast(value)
    except ValueError:
        raise ConfigurationError(f"Invalid value {value!r} for environment variable {name}.") from None
