from collections import deque
from functools import lru_cache
from typing import Iterator, List, Tuple

from .scalar import FIELD_BITS, fe, p, zero

# Poseidon hash with x^5 S-box over the BN254 scalar field, as in circomlib's Poseidon(nInputs)
# https://eprint.iacr.org/2019/458.pdf

# Round constants and MDS matrices are not bundled but regenerated exactly as the
# reference script does (generate_parameters_grain.sage 1 0 254 t 8 R_P p),
# which is where circomlib's poseidon_constants come from.

FULL_ROUNDS = 8
# Partial rounds for widths t = 2..17 (1..16 inputs)
PARTIAL_ROUNDS = [56, 57, 56, 60, 60, 63, 64, 63, 60, 66, 60, 65, 70, 60, 64, 68]
MAX_INPUTS = len(PARTIAL_ROUNDS)


def grain(t: int, rf: int, rp: int) -> Iterator[int]:
  """Self-shrinking Grain LFSR bit stream seeded by the instance parameters"""
  # field=1 (prime), sbox=0 (x^5), field size, width, full and partial rounds, 30 ones
  seed = f"{1:02b}{0:04b}{FIELD_BITS:012b}{t:012b}{rf:010b}{rp:010b}" + 30 * "1"
  state = deque((int(c) for c in seed), maxlen=80)

  def step():
    bit = state[62] ^ state[51] ^ state[38] ^ state[23] ^ state[13] ^ state[0]
    state.append(bit)
    return bit

  for _ in range(160):
    step()
  while True:
    # Bits come in pairs, the first one deciding whether the second is output
    if step():
      yield step()
    else:
      step()


def field_bits(bits: Iterator[int]) -> int:
  """Read FIELD_BITS bits, most significant first."""
  val = 0
  for _ in range(FIELD_BITS):
    val = val << 1 | next(bits)
  return val


@lru_cache(maxsize=None)
def parameters(t: int) -> Tuple[List[fe], List[List[fe]]]:
  """Round constants (flat, t per round) and the t x t MDS matrix for width t"""
  if not 2 <= t <= MAX_INPUTS + 1: raise ValueError(f"Poseidon width {t} is not supported")
  rp = PARTIAL_ROUNDS[t - 2]
  bits = grain(t, FULL_ROUNDS, rp)
  constants = []
  for _ in range((FULL_ROUNDS + rp) * t):
    # Rejection sampling for uniform constants
    val = field_bits(bits)
    while val >= p:
      val = field_bits(bits)
    constants.append(fe(val))
  # Cauchy matrix 1 / (x_i + y_j) from 2t distinct random elements
  while True:
    rand = [fe(field_bits(bits)) for _ in range(2 * t)]
    while len(set(rand)) != len(rand):
      rand = [fe(field_bits(bits)) for _ in range(2 * t)]
    xs, ys = rand[:t], rand[t:]
    if any(x + y == zero for x in xs for y in ys):
      continue
    return constants, [[(x + y).inv for y in ys] for x in xs]


def permute(state: List[fe]) -> List[fe]:
  t = len(state)
  constants, mds = parameters(t)
  rounds = len(constants) // t
  half = FULL_ROUNDS // 2
  for r in range(rounds):
    state = [s + c for s, c in zip(state, constants[r * t:(r + 1) * t])]
    if r < half or r >= rounds - half:
      state = [s**5 for s in state]
    else:
      state[0] = state[0]**5
    state = [sum((m * s for m, s in zip(row, state)), zero) for row in mds]
  return state


def poseidon(*inputs: fe) -> fe:
  """Hash 1..16 field elements into one, compatible with circomlib Poseidon(len(inputs))"""
  if not 1 <= len(inputs) <= MAX_INPUTS:
    raise ValueError(f"Poseidon takes 1 to {MAX_INPUTS} inputs, got {len(inputs)}")
  for x in inputs:
    if not isinstance(x, fe): raise ValueError(f"Poseidon inputs must be field elements, got {x!r}")
  return permute([zero, *inputs])[0]
