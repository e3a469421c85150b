from enum import Enum
from random import SystemRandom

from bjjschnorr.elliptic import BjjPoint, G, fe, n, poseidon, sc, sha256, sha512, to_scalar
from bjjschnorr.exceptions import MalformedKeyError

# Schnorr signatures over BabyJubJub, verifiable by a Circom circuit:
#   R = k G,  e = Poseidon(R.x, PK.x, PK.y, H(m)),  s = k - e sk  (mod n)
# The challenge e stays unreduced in the base field as that is what the circuit
# computes. It is only reduced for the scalar arithmetic of s.


class KeyPair:
  """A secret scalar and its public point sk * G"""

  def __init__(self, sk: sc, pk: BjjPoint):
    self._sk = sk
    self._pk = pk

  @property
  def sk(self) -> sc: return self._sk

  @property
  def pk(self) -> BjjPoint: return self._pk

  def __repr__(self): return f"<KeyPair {self.pk}>"

  def __eq__(self, other):
    if not isinstance(other, KeyPair): return NotImplemented
    return self.sk == other.sk

  def __hash__(self): return hash(self.pk)


class Signature:
  """Response s (mod n), challenge e (mod p, unreduced) and the commitment R"""

  def __init__(self, s: sc, e: fe, r: BjjPoint):
    self._s = s
    self._e = e
    self._r = r

  @property
  def s(self) -> sc: return self._s

  @property
  def e(self) -> fe: return self._e

  @property
  def r(self) -> BjjPoint: return self._r

  def __repr__(self): return f"<Signature s={self.s} e={self.e}>"

  def __eq__(self, other):
    if not isinstance(other, Signature): return NotImplemented
    return self.s == other.s and self.e == other.e and self.r == other.r

  def __hash__(self): return hash((self.s, self.e))


class VerifyResult(Enum):
  VALID = "valid"
  INVALID = "invalid"

  def __bool__(self): return self is VerifyResult.VALID


def hash_message(message: bytes) -> fe:
  """SHA-256 of the message as a little endian integer mod p (the circuit's msgHash)"""
  return fe(sha256(message))

def challenge(rx: fe, pk: BjjPoint, msghash: fe) -> fe:
  return poseidon(rx, pk.x, pk.y, msghash)

def nonce(sk: sc, message: bytes) -> sc:
  """Deterministic nonce: SHA-512 over the secret scalar and the message, reduced mod n"""
  return sc(sha512(bytes(sk) + bytes(memoryview(message))))


def generate_keypair(rng=None) -> KeyPair:
  """Create a new random keypair. Any object with randrange() may be passed as rng."""
  if rng is None: rng = SystemRandom()
  return derive_keypair(sc(rng.randrange(1, n)))

def derive_keypair(sk) -> KeyPair:
  if isinstance(sk, int): sk = sc(sk)
  if not isinstance(sk, sc): raise TypeError(f"Secret key must be a scalar, not {type(sk).__name__}")
  if not sk.val: raise MalformedKeyError("Secret key must not be zero mod n")
  return KeyPair(sk, sk * G)


def sign(keypair: KeyPair, message: bytes) -> Signature:
  return sign_with_nonce(keypair, message, nonce(keypair.sk, message))

def sign_with_nonce(keypair: KeyPair, message: bytes, k: sc) -> Signature:
  """
  Sign with an explicit nonce.

  Only for testing: using the same k for two different messages reveals the secret key.
  """
  R = k * G
  e = challenge(R.x, keypair.pk, hash_message(message))
  s = k - to_scalar(e) * keypair.sk
  return Signature(s, e, R)

def verify(signature: Signature, message: bytes, pk: BjjPoint) -> VerifyResult:
  """Check that Poseidon(R'.x, PK, H(m)) == e for R' = s G + e PK. Any failure is just INVALID."""
  # e multiplies with all of its 254 bits, the group order takes care of the reduction
  R = signature.s * G + signature.e * pk
  if challenge(R.x, pk, hash_message(message)) == signature.e:
    return VerifyResult.VALID
  return VerifyResult.INVALID
