from datetime import datetime, timedelta, timezone, tzinfo
from typing import Final

from .rounding import POWERS_OF_TEN

MAX_PRECISION: Final[int] = 12

MICROSECONDS_PER_SECOND: Final[int] = 1_000_000
PICOSECONDS_PER_MICROSECOND: Final[int] = 1_000_000

_SECONDS_PER_DAY: Final[int] = 86_400
_SECONDS_PER_HOUR: Final[int] = 3_600
_SECONDS_PER_MINUTE: Final[int] = 60

# 0001-01-02T00:00:00Z and 9999-12-30T23:59:59Z, a day inside what datetime can localize in any zone.
_ZONE_LOOKUP_SECONDS_MIN: Final[int] = -62_135_510_400
_ZONE_LOOKUP_SECONDS_MAX: Final[int] = 253_402_214_399

# Days from 0000-03-01 to 1970-01-01 in the proleptic Gregorian calendar.
_DAYS_0000_03_01_TO_EPOCH: Final[int] = 719_468
_DAYS_PER_400_YEARS: Final[int] = 146_097


def format_timestamp(precision: int, epoch_micros: int, picos_of_micro: int, zone: tzinfo = timezone.utc) -> str:
  """Formats a timestamp as `uuuu-MM-dd HH:mm:ss[.F]` with exactly `precision` fractional digits.

  Years follow the proleptic Gregorian calendar without eras: year 0 is `0000`, earlier years are negative (`-0001`)
  and years past 9999 are prefixed with `+` (`+10000`).
  """
  if not 0 <= precision <= MAX_PRECISION:
    raise ValueError(f'precision {precision} out of range, expected to be in range [0, {MAX_PRECISION}]')

  epoch_seconds = epoch_micros // MICROSECONDS_PER_SECOND
  local_seconds = epoch_seconds + _offset_seconds(epoch_seconds, zone)
  days, second_of_day = divmod(local_seconds, _SECONDS_PER_DAY)
  year, month, day = _civil_from_days(days)

  hour, second_of_hour = divmod(second_of_day, _SECONDS_PER_HOUR)
  minute, second = divmod(second_of_hour, _SECONDS_PER_MINUTE)

  formatted = f'{_format_year(year)}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}'
  if precision == 0:
    return formatted

  pico_fraction = (epoch_micros % MICROSECONDS_PER_SECOND) * PICOSECONDS_PER_MICROSECOND + picos_of_micro
  scaled_fraction = pico_fraction // POWERS_OF_TEN[MAX_PRECISION - precision]
  return f'{formatted}.{scaled_fraction:0{precision}d}'


def _offset_seconds(epoch_seconds: int, zone: tzinfo) -> int:
  if zone is timezone.utc:
    return 0

  # Offsets outside the range datetime supports are taken at the nearest supported instant.
  clamped = min(max(epoch_seconds, _ZONE_LOOKUP_SECONDS_MIN), _ZONE_LOOKUP_SECONDS_MAX)
  offset = datetime.fromtimestamp(clamped, tz=zone).utcoffset()
  if offset is None:
    return 0
  return offset // timedelta(seconds=1)


def _civil_from_days(days: int) -> tuple[int, int, int]:
  """Converts days since 1970-01-01 into a proleptic Gregorian (year, month, day)."""
  days += _DAYS_0000_03_01_TO_EPOCH
  era = days // _DAYS_PER_400_YEARS
  day_of_era = days - era * _DAYS_PER_400_YEARS
  year_of_era = (day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096) // 365
  day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
  # Months are counted from March so the leap day is the last day of the year.
  shifted_month = (5 * day_of_year + 2) // 153
  day = day_of_year - (153 * shifted_month + 2) // 5 + 1
  month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
  year = year_of_era + era * 400 + (1 if month <= 2 else 0)
  return year, month, day


def _format_year(year: int) -> str:
  if year < 0:
    return f'-{-year:04d}'
  if year > 9999:
    return f'+{year}'
  return f'{year:04d}'
