from __future__ import annotations

from typing import Iterable, Union

from ..exceptions import DegenerateAdditionError
from .scalar import FIELD_BITS, SCALAR_BITS, fe, n, one, sc, zero
from .util import bits_le

# Twisted Edwards curve: a x2 + y2 = 1 + d x2 y2
# BabyJubJub constants as used by circomlib (not the a=1 form of other libraries):
a, d = fe(168700), fe(168696)

# a is a square and d is not, so the affine addition law is complete: its
# denominators never vanish for points on the curve, low order ones included.
# Points are affine (x, y) tuples of field elements, exactly what the circuit sees.

class BjjPoint:
  def __init__(self, x: fe, y: fe):
    self.x = x
    self.y = y
    if not self.is_on_curve: raise ValueError("Not a curve point on BabyJubJub")

  @staticmethod
  def from_dec(x: str, y: str) -> BjjPoint:
    """Restore from decimal coordinates (as found in witness files)"""
    return BjjPoint(fe.from_dec(x), fe.from_dec(y))

  @property
  def is_on_curve(self) -> bool:
    x2, y2 = self.x.sq, self.y.sq
    return a * x2 + y2 == one + d * x2 * y2

  @property
  def is_zero(self) -> bool:
    return self.x == zero and self.y == one

  @property
  def coords(self) -> tuple:
    return self.x, self.y

  def __repr__(self): return point_name(self)
  def __str__(self): return f"({self.x}, {self.y})"
  def __hash__(self): return hash((self.x.val, self.y.val))

  def __add__(self, othr: BjjPoint) -> BjjPoint:
    if not isinstance(othr, BjjPoint): return NotImplemented
    x1x2 = self.x * othr.x
    y1y2 = self.y * othr.y
    t = d * x1x2 * y1y2
    xden, yden = one + t, one - t
    if xden == zero or yden == zero:
      raise DegenerateAdditionError(f"Zero denominator adding {self!r} and {othr!r}")
    x3 = (self.x * othr.y + self.y * othr.x) / xden
    y3 = (y1y2 - a * x1x2) / yden
    return BjjPoint(x3, y3)

  def __sub__(self, othr: BjjPoint) -> BjjPoint:
    return self + -othr

  def __neg__(self) -> BjjPoint:
    return BjjPoint(-self.x, self.y)

  def __mul__(self, s: Union[sc, fe, int]) -> BjjPoint:
    """
    Multiply by a scalar (253 bits) or by an unreduced field element (254 bits).

    The bit lengths match circomlib's EscalarMulAny inputs for s and e. Plain
    ints are taken modulo n first.
    """
    if isinstance(s, int): s = sc(s)
    if isinstance(s, sc): return scalarmult(self, s.bits)
    if isinstance(s, fe): return scalarmult(self, s.bits)
    return NotImplemented

  def __rmul__(self, s: Union[sc, fe, int]) -> BjjPoint:
    return self * s

  def __eq__(self, othr):
    if not isinstance(othr, BjjPoint): raise TypeError(f"BjjPoints cannot be compared with {type(othr)}")
    return self.x == othr.x and self.y == othr.y


def scalarmult(P: BjjPoint, bits: Iterable[bool]) -> BjjPoint:
  """Double-and-add over little endian bits. The number of bits is fixed by the caller."""
  Q = ZERO  # Neutral element
  for bit in bits:
    if bit: Q += P
    P += P
  return Q

def mul_bits(P: BjjPoint, k: int, nbits: int) -> BjjPoint:
  """Multiply by the low nbits of a raw integer, without any modular reduction."""
  return scalarmult(P, bits_le(k, nbits))

# Neutral element
ZERO = BjjPoint(zero, one)

# Point of order two
ZERO2 = BjjPoint(zero, -one)

# Generator of the full group (order 8 n)
GEN = BjjPoint(
  fe(995203441582195749578291179787384436505546430278305826713579947235728471134),
  fe(5472060717959818805561601436314318772137091100104008585924551046643952123905),
)

# Base point (prime group generator, circomlib Base8 = 8 * GEN)
G = BjjPoint(
  fe(5299619240641551281634865583518297030282874472190772894086521144482721001553),
  fe(16950150798460657717958625567821834550301663161624707787222815936182638968203),
)

assert FIELD_BITS > SCALAR_BITS >= n.bit_length()


def point_name(P: BjjPoint) -> str:
  """Return variable names rather than xy coordinates for any constants defined here"""
  for name, val in globals().items():
    if isinstance(val, BjjPoint) and P == val:
      return name
  return f"BjjPoint({P.x!r}, {P.y!r})"
