"""
library-wide settings.

the settings object is frozen; `configure` swaps in a new one, so a reader
never observes a half-applied change.
"""
import logging
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Iterator, Optional

from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

OVERFLOW_POLICIES = ('raise', 'wrap')


@dataclass(frozen=True)
class Settings:
    """configuration for seqy operators"""
    range_bits: Optional[int] = None  # None = unbounded python ints
    range_overflow: str = 'raise'     # raise, wrap

    def __post_init__(self):
        if self.range_bits is not None:
            if isinstance(self.range_bits, bool) or not isinstance(self.range_bits, int) or self.range_bits < 2:
                raise InvalidArgumentError('range_bits', "range_bits must be an int >= 2 or None.")
        if self.range_overflow not in OVERFLOW_POLICIES:
            raise InvalidArgumentError(
                'range_overflow', f"range_overflow must be one of {', '.join(OVERFLOW_POLICIES)}.")

    @property
    def range_bounds(self) -> Optional[tuple]:
        """inclusive (min, max) of the configured signed integer width"""
        if self.range_bits is None:
            return None
        half = 1 << (self.range_bits - 1)
        return -half, half - 1


_settings = Settings()


def get_settings() -> Settings:
    return _settings


def configure(**changes) -> Settings:
    """replace the global settings with the given fields changed"""
    global _settings
    known = {f.name for f in fields(Settings)}
    for name in changes:
        if name not in known:
            raise InvalidArgumentError(name, f"unknown setting '{name}'.")
    _settings = replace(_settings, **changes)
    logger.debug("settings changed: %s", _settings)
    return _settings


@contextmanager
def settings_override(**changes) -> Iterator[Settings]:
    """temporarily apply settings, restoring the previous ones on exit"""
    global _settings
    previous = _settings
    try:
        yield configure(**changes)
    finally:
        _settings = previous
