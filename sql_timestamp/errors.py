class SemanticsMismatchError(RuntimeError):
  """Raised when an accessor of one timestamp semantics (legacy or new) is called on a value of the other."""
