from typing import Iterator

import nacl.bindings as sodium


def toint(x) -> int:
  if isinstance(x, int): return x
  return int.from_bytes(x, "little")

def tobytes(x: int) -> bytes:
  return x.to_bytes(32, "little")

def bits_le(x: int, nbits: int) -> Iterator[bool]:
  """The low nbits of x, least significant first. Higher bits are ignored."""
  for i in range(nbits):
    yield bool(x >> i & 1)

def sha256(s) -> int:
  """Return SHA-256 as 256 bit little endian integer"""
  return int.from_bytes(sodium.crypto_hash_sha256(bytes(memoryview(s))), "little")

def sha512(s) -> int:
  """Return SHA-512 as 512 bit little endian integer"""
  return int.from_bytes(sodium.crypto_hash_sha512(bytes(memoryview(s))), "little")

def dec(x) -> str:
  """Canonical unsigned decimal of a field element, scalar or int (no sign, no padding)"""
  val = x if isinstance(x, int) else x.val
  if val < 0: raise ValueError(f"Negative value {val} has no canonical encoding")
  return str(val)

def parse_dec(s: str, modulus: int) -> int:
  """Strict decimal parsing of a value that must be below modulus."""
  s = s.strip()
  if not s.isascii() or not s.isdigit():
    raise ValueError(f"Expected an unsigned decimal number, got {s[:80]!r}")
  val = int(s)
  if val >= modulus:
    raise ValueError(f"Value {s[:80]} out of range")
  return val
