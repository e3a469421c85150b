# A plain Python submodule for BabyJubJub math and the Poseidon hash, bit-exact
# with the circomlib gadgets (BabyAdd, EscalarMulAny, Poseidon) so that values
# computed here can be fed to Circom circuits as they are.

# Not constant time, not zeroing buffers after use. Inversions in particular
# take a data dependent amount of time.

# Public symbols are imported here. These are very low level primitives.
# Lower case constants are field elements or scalars, upper case are BjjPoints.

from .ed import GEN, ZERO, ZERO2, BjjPoint, G, a, d, mul_bits, scalarmult
from .poseidon import poseidon
from .scalar import FIELD_BITS, SCALAR_BITS, fe, minus1, n, one, p, sc, to_scalar, zero
from .util import bits_le, dec, sha256, sha512, tobytes, toint
