from __future__ import annotations

from functools import cached_property

from .util import bits_le, parse_dec, tobytes, toint

# Field prime (BN254 scalar field, the native field of Circom circuits)
p = 21888242871839275222246405745257275088548364400416034343698204186575808495617

# Order of the prime subgroup generated by Base8
n = 2736030358979909402780800718157159386076813972158567259200215660948447373041

# Bit lengths used by circomlib's EscalarMulAny for each kind of multiplier
FIELD_BITS = 254
SCALAR_BITS = 253

p2 = (p - 1) // 2


class _Residue:
  """Integer modulo a fixed prime. Subclasses never mix with each other."""
  modulus: int
  nbits: int

  def __init__(self, x: int):
    if not isinstance(x, int): raise TypeError(f"{type(self).__name__} needs an int, not {type(x).__name__}")
    self.val = x % self.modulus

  @classmethod
  def from_bytes(cls, b: bytes):
    """Read any number of little endian bytes, reducing modulo the prime."""
    return cls(toint(b))

  @classmethod
  def from_dec(cls, s: str):
    """Parse canonical decimal. Unreduced values are rejected rather than wrapped."""
    return cls(parse_dec(s, cls.modulus))

  def __hash__(self): return self.val
  def __repr__(self): return value_name(self)
  def __str__(self): return str(self.val)
  def __int__(self): return self.val
  def __bytes__(self): return tobytes(self.val)
  def bit(self, i: int): return bool(self.val & 1 << i)

  @property
  def bits(self):
    """Little endian bits, exactly nbits of them"""
    return bits_le(self.val, self.nbits)

  def __eq__(self, other):
    # Note: if we return NotImplemented, Python does object comparison and returns False
    if type(other) is not type(self): raise TypeError(f"Cannot compare {type(self).__name__} with {other!r}")
    return self.val == other.val

  def __neg__(self): return type(self)(-self.val)

  def __add__(self, o):
    if type(o) is not type(self): return NotImplemented
    return type(self)(self.val + o.val)

  def __sub__(self, o):
    if type(o) is not type(self): return NotImplemented
    return type(self)(self.val - o.val)

  def __mul__(self, o):
    if type(o) is not type(self): return NotImplemented
    return type(self)(self.val * o.val)

  def __truediv__(self, o):
    """Division modulo the prime"""
    if type(o) is not type(self): return NotImplemented
    return type(self)(self.val * o.inv.val)

  def __pow__(self, s: int):
    return type(self)(pow(self.val, s, self.modulus))

  @cached_property
  def sq(self):
    """Squared"""
    return self * self

  @cached_property
  def inv(self):
    if not self.val: raise ZeroDivisionError(f"{type(self).__name__}(0) has no inverse")
    return type(self)(pow(self.val, -1, self.modulus))


class fe(_Residue):
  """A prime field element modulo p, the BabyJubJub base field"""
  modulus = p
  nbits = FIELD_BITS

  # Euler's criterion
  @cached_property
  def is_square(self) -> bool: return not self.val or pow(self.val, p2, p) == 1


class sc(_Residue):
  """A scalar modulo n, the order of the BabyJubJub prime subgroup"""
  modulus = n
  nbits = SCALAR_BITS

  @property
  def fe(self) -> fe:
    """Lift into the base field (lossless as n < p)"""
    return fe(self.val)


def to_scalar(e: fe) -> sc:
  """Reduce a field element into a scalar via its little endian encoding."""
  if not isinstance(e, fe): raise TypeError(f"Expected fe, got {type(e).__name__}")
  return sc.from_bytes(bytes(e))


zero, one, minus1 = fe(0), fe(1), fe(-1)


def value_name(s: _Residue) -> str:
  """Return variable names rather than fe(...) for any constants defined here"""
  for name, val in globals().items():
    if type(val) is type(s) and s == val:
      return name
  return f"{type(s).__name__}({s.val})"
