import re
from dataclasses import dataclass
from datetime import timedelta, timezone, tzinfo
from typing import ClassVar, Self
from zoneinfo import ZoneInfo


@dataclass(frozen=True)
class TimeZoneKey:
  """Opaque session time zone identifier.

  The id is stored as given. It is only resolved into zone rules when a value carrying it is formatted, so an unknown
  id fails there with `zoneinfo.ZoneInfoNotFoundError`.
  """
  zone_id: str

  UTC: ClassVar[Self]

  _UTC_IDS: ClassVar[frozenset[str]] = frozenset({'UTC', 'Z'})
  _OFFSET_REGEX: ClassVar[str] = (r'^'
                                  r'(?P<sign>[+-])'
                                  r'(?P<hours>\d{2})'
                                  r':(?P<minutes>[0-5]\d)'
                                  r'$')
  _OFFSET_PATTERN: ClassVar[re.Pattern[str]] = re.compile(_OFFSET_REGEX)

  def __str__(self) -> str:
    return self.zone_id

  def zone(self) -> tzinfo:
    if self.zone_id in self._UTC_IDS:
      return timezone.utc

    if (match := self._OFFSET_PATTERN.search(self.zone_id)) is not None:
      offset = timedelta(hours=int(match['hours']), minutes=int(match['minutes']))
      return timezone(-offset if match['sign'] == '-' else offset)

    return ZoneInfo(self.zone_id)


TimeZoneKey.UTC = TimeZoneKey('UTC')
