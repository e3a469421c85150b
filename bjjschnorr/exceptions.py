class MalformedKeyError(ValueError):
  """Key string is malformed or the key is unusable (e.g. zero secret)"""

class WitnessError(ValueError):
  """Witness record is missing fields or has invalid values"""

class CliArgError(ValueError):
  """Invalid CLI argument"""

class DegenerateAdditionError(ArithmeticError):
  """Point addition hit a zero denominator (the inputs cannot be valid curve points)"""
