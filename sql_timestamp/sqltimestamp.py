from dataclasses import dataclass
from datetime import timezone
from typing import ClassVar, Self

from absl import logging

from .errors import SemanticsMismatchError
from .formatter import MAX_PRECISION, PICOSECONDS_PER_MICROSECOND, format_timestamp
from .rounding import POWERS_OF_TEN, round_div, round_to_magnitude
from .timezonekey import TimeZoneKey


@dataclass(frozen=True)
class SqlTimestamp:
  """A SQL TIMESTAMP value with 0 to 12 fractional second digits.

  The instant is split into `epoch_micros`, microseconds since 1970-01-01T00:00:00, and `picos_of_micro`, the
  non-negative picoseconds within that microsecond. Values carrying a `session_time_zone_key` follow the legacy
  semantics and are formatted in that zone; all other values are zone-less and formatted as UTC.

  Build values with `from_millis()` or `new_instance()` so the fields are rounded to the declared precision.
  """
  precision: int
  epoch_micros: int
  picos_of_micro: int
  session_time_zone_key: TimeZoneKey | None = None

  # Signed 64-bit range.
  _EPOCH_MICROS_MAX: ClassVar[int] = 0x7fff_ffff_ffff_ffff
  _EPOCH_MICROS_MIN: ClassVar[int] = -0x8000_0000_0000_0000

  def __post_init__(self) -> None:
    _check_precision(self.precision)
    if not self._EPOCH_MICROS_MIN <= self.epoch_micros <= self._EPOCH_MICROS_MAX:
      raise ValueError(f'epoch_micros {self.epoch_micros} out of range, '
                       f'expected to be in range [{self._EPOCH_MICROS_MIN}, {self._EPOCH_MICROS_MAX}]')
    if not 0 <= self.picos_of_micro < PICOSECONDS_PER_MICROSECOND:
      raise ValueError(f'picos_of_micro {self.picos_of_micro} out of range, '
                       f'expected to be in range [0, {PICOSECONDS_PER_MICROSECOND})')
    if self.picos_of_micro % POWERS_OF_TEN[MAX_PRECISION - max(self.precision, 6)] != 0:
      raise ValueError(f'picos_of_micro {self.picos_of_micro} carries more digits than precision {self.precision}')

  @classmethod
  def from_millis(cls, precision: int, millis: int) -> Self:
    return cls.new_instance(precision, millis * 1000, 0)

  @classmethod
  def legacy_from_millis(cls, precision: int, millis_utc: int, session_time_zone_key: TimeZoneKey) -> Self:
    """Deprecated, builds a legacy semantics value tied to `session_time_zone_key`."""
    return cls.new_legacy_instance(precision, millis_utc * 1000, 0, session_time_zone_key)

  @classmethod
  def new_instance(cls, precision: int, epoch_micros: int, picos_of_micro: int) -> Self:
    return cls._new_instance_with_rounding(precision, epoch_micros, picos_of_micro, None)

  @classmethod
  def new_legacy_instance(cls, precision: int, epoch_micros: int, picos_of_micro: int,
                          session_time_zone_key: TimeZoneKey) -> Self:
    """Deprecated, builds a legacy semantics value tied to `session_time_zone_key`."""
    logging.log_first_n(logging.WARNING,
                        'Building a legacy semantics timestamp bound to session time zone %s. '
                        'Legacy timestamps are deprecated, use new_instance() instead.', 1, session_time_zone_key)
    return cls._new_instance_with_rounding(precision, epoch_micros, picos_of_micro, session_time_zone_key)

  @classmethod
  def _new_instance_with_rounding(cls, precision: int, epoch_micros: int, picos_of_micro: int,
                                  session_time_zone_key: TimeZoneKey | None) -> Self:
    _check_precision(precision)

    if precision < 6:
      epoch_micros = round_to_magnitude(epoch_micros, 6 - precision)
      picos_of_micro = 0
    elif precision == 6:
      if round_to_magnitude(picos_of_micro, 6) >= PICOSECONDS_PER_MICROSECOND:
        epoch_micros += 1
      picos_of_micro = 0
    else:
      picos_of_micro = round_to_magnitude(picos_of_micro, MAX_PRECISION - precision)
      # Rounding 999_999 up at precision 7 lands on a whole microsecond.
      carry, picos_of_micro = divmod(picos_of_micro, PICOSECONDS_PER_MICROSECOND)
      epoch_micros += carry

    return cls(precision, epoch_micros, picos_of_micro, session_time_zone_key)

  def millis(self) -> int:
    if self.is_legacy_timestamp():
      raise SemanticsMismatchError('millis() can be called in new timestamp semantics only')
    return round_div(self.epoch_micros, 1000)

  def millis_utc(self) -> int:
    """Deprecated, applicable in legacy timestamp semantics only."""
    if not self.is_legacy_timestamp():
      raise SemanticsMismatchError('millis_utc() can be called in legacy timestamp semantics only')
    return round_div(self.epoch_micros, 1000)

  def is_legacy_timestamp(self) -> bool:
    return self.session_time_zone_key is not None

  def round_to(self, precision: int) -> Self:
    return self._new_instance_with_rounding(precision, self.epoch_micros, self.picos_of_micro,
                                            self.session_time_zone_key)

  def __str__(self) -> str:
    if self.session_time_zone_key is None:
      zone = timezone.utc
    else:
      zone = self.session_time_zone_key.zone()
    return format_timestamp(self.precision, self.epoch_micros, self.picos_of_micro, zone)


def _check_precision(precision: int) -> None:
  if not 0 <= precision <= MAX_PRECISION:
    raise ValueError(f'precision {precision} out of range, expected to be in range [0, {MAX_PRECISION}]')
