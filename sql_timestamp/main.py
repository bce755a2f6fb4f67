from absl import app, logging

from .flag import EPOCH_MICROS, EPOCH_MILLIS, JSON, PICOS_OF_MICRO, PRECISION, ROUND_TO, SESSION_TIME_ZONE
from .serialization import dumps
from .sqltimestamp import SqlTimestamp
from .timezonekey import TimeZoneKey


def build_timestamp() -> SqlTimestamp:
  precision = PRECISION.value
  epoch_micros = EPOCH_MICROS.value
  epoch_millis = EPOCH_MILLIS.value
  picos_of_micro = PICOS_OF_MICRO.value
  session_time_zone = SESSION_TIME_ZONE.value
  round_to = ROUND_TO.value

  if (epoch_micros is None) == (epoch_millis is None):
    raise app.UsageError(f'Exactly one of --{EPOCH_MICROS.name} and --{EPOCH_MILLIS.name} is required.')

  if session_time_zone is None:
    if epoch_millis is not None:
      timestamp = SqlTimestamp.from_millis(precision, epoch_millis)
    else:
      timestamp = SqlTimestamp.new_instance(precision, epoch_micros, picos_of_micro)
  else:
    session_time_zone_key = TimeZoneKey(session_time_zone)
    if epoch_millis is not None:
      timestamp = SqlTimestamp.legacy_from_millis(precision, epoch_millis, session_time_zone_key)
    else:
      timestamp = SqlTimestamp.new_legacy_instance(precision, epoch_micros, picos_of_micro, session_time_zone_key)
  logging.debug(f'{timestamp=}')

  if round_to is not None:
    timestamp = timestamp.round_to(round_to)
    logging.debug(f'Rounded to precision {round_to}, {timestamp=}')

  return timestamp


def main(args: list[str]) -> None:
  if len(args) > 1:
    raise app.UsageError(f'Unexpected positional arguments: {args[1:]}')

  timestamp = build_timestamp()
  print(dumps(timestamp) if JSON.value else str(timestamp))


def app_run_main() -> None:
  app.run(main)
