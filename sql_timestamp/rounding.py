from typing import Final

POWERS_OF_TEN: Final[tuple[int, ...]] = (
    1,
    10,
    100,
    1_000,
    10_000,
    100_000,
    1_000_000,
    10_000_000,
    100_000_000,
    1_000_000_000,
    10_000_000_000,
    100_000_000_000,
    1_000_000_000_000,
)


def round_div(value: int, factor: int) -> int:
  """Divides `value` by `factor`, rounding ties toward positive infinity.

  Negative values are divided truncating toward zero after the `+1` correction, so -1.5 becomes -1 and -1.501
  becomes -2. Persisted values depend on this exact tie rule.
  """
  if factor <= 0:
    raise ValueError(f'expected factor to be positive, got {factor}')

  if factor == 1:
    return value

  if value >= 0:
    return (value + factor // 2) // factor

  # The numerator is never positive here, so negating twice gives truncating division.
  return -(-(value + 1 - factor // 2) // factor)


def round_to_magnitude(value: int, magnitude: int) -> int:
  """Rounds `value` to the nearest multiple of 10**`magnitude` using `round_div`."""
  factor = POWERS_OF_TEN[magnitude]
  return round_div(value, factor) * factor
