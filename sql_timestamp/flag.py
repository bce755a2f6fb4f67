from typing import Any

from absl import flags

from .formatter import MAX_PRECISION

PRECISION = flags.DEFINE_integer(
    name='precision',
    default=None,
    required=True,
    lower_bound=0,
    upper_bound=MAX_PRECISION,
    help='Number of fractional second digits of the timestamp, from 0 to 12.',
)

EPOCH_MICROS = flags.DEFINE_integer(
    name='epoch_micros',
    default=None,
    help='Microseconds since 1970-01-01T00:00:00. May be negative.',
)
EPOCH_MILLIS = flags.DEFINE_integer(
    name='epoch_millis',
    default=None,
    help='Milliseconds since 1970-01-01T00:00:00. May be negative.',
)
PICOS_OF_MICRO = flags.DEFINE_integer(
    name='picos_of_micro',
    default=0,
    help='Picoseconds within the microsecond given by --epoch_micros. '
    'Rounded to --precision like every other input.',
)

SESSION_TIME_ZONE = flags.DEFINE_string(
    name='session_time_zone',
    default=None,
    help='Session time zone id (ex. America/New_York, +05:30). '
    'If provided, builds a deprecated legacy semantics timestamp formatted in this zone.',
)

ROUND_TO = flags.DEFINE_integer(
    name='round_to',
    default=None,
    lower_bound=0,
    upper_bound=MAX_PRECISION,
    help='If provided, rounds the timestamp to this precision before printing.',
)

JSON = flags.DEFINE_bool(
    name='json',
    default=False,
    help='Prints the timestamp as a JSON document instead of the bare string.',
)

flags.mark_flags_as_mutual_exclusive([EPOCH_MICROS, EPOCH_MILLIS], required=True)


def _picos_with_micros_validator(flag: dict[str, Any]) -> bool:
  if flag[EPOCH_MILLIS.name] is not None and flag[PICOS_OF_MICRO.name] != 0:
    raise flags.ValidationError(f'Flag {PICOS_OF_MICRO.name} expected to be used with {EPOCH_MICROS.name} only.')
  return True


flags.register_multi_flags_validator(
    [EPOCH_MILLIS, PICOS_OF_MICRO],
    _picos_with_micros_validator,
)
