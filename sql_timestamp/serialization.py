import json
from typing import Any, Final

from jsonschema import Draft202012Validator

from .sqltimestamp import SqlTimestamp

# Locale independent and written in DateTimeFormatter pattern syntax. It defines the external data format and
# must never change.
JSON_FORMAT: Final[str] = 'uuuu-MM-dd HH:mm:ss[.SSS]'


class SqlTimestampJSONEncoder(json.JSONEncoder):
  """Encodes `SqlTimestamp` values as their canonical string."""

  def default(self, o: Any) -> Any:
    if isinstance(o, SqlTimestamp):
      return str(o)
    return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
  return json.dumps(obj, cls=SqlTimestampJSONEncoder, **kwargs)


def validate_serialized(value: Any) -> None:
  """Raises `jsonschema.ValidationError` if `value` is not a serialized timestamp."""
  _SERIALIZED_TIMESTAMP_VALIDATOR.validate(value)


SERIALIZED_TIMESTAMP_SCHEMA: Final[dict[str, Any]] = {
    'type': 'string',
    'pattern': (r'^'
                r'(?:[+]\d{5,}|-\d{4,}|\d{4})'
                r'-(?:0[1-9]|1[0-2])'
                r'-(?:0[1-9]|[12]\d|3[01])'
                r' (?:[01]\d|2[0-3])'
                r':[0-5]\d'
                r':[0-5]\d'
                r'(?:\.\d{1,12})?'
                r'$'),
}
_SERIALIZED_TIMESTAMP_VALIDATOR = Draft202012Validator(SERIALIZED_TIMESTAMP_SCHEMA)
Draft202012Validator.check_schema(_SERIALIZED_TIMESTAMP_VALIDATOR.schema)
