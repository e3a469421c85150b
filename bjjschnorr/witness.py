import json
from pathlib import Path

from bjjschnorr.elliptic import BjjPoint, dec, fe, sc
from bjjschnorr.exceptions import WitnessError
from bjjschnorr.schnorr import Signature, hash_message

# Input signals of the schnorr Circom circuit, in the order it declares them
FIELDS = "pkX", "pkY", "msgHash", "s", "e"


def witness_input(signature: Signature, pk: BjjPoint, message: bytes) -> dict:
  """The circuit input record, all values as decimal strings"""
  return {
    "pkX": dec(pk.x),
    "pkY": dec(pk.y),
    "msgHash": dec(hash_message(message)),
    # s < n < p so its integer value is the same read as a field element
    "s": dec(signature.s),
    "e": dec(signature.e),
  }


def dumps(record: dict) -> str:
  return json.dumps(record, indent=2)


def export_witness(signature: Signature, pk: BjjPoint, message: bytes, path) -> dict:
  """Write input.json for snarkjs, creating the folder if needed."""
  record = witness_input(signature, pk, message)
  path = Path(path)
  path.parent.mkdir(parents=True, exist_ok=True)
  path.write_text(dumps(record) + "\n", encoding="ascii")
  return record


def parse_witness(record) -> tuple:
  """Validate a witness record, return (pk, msghash, s, e)"""
  if not isinstance(record, dict):
    raise WitnessError("Witness must be a JSON object")
  missing = [k for k in FIELDS if k not in record]
  if missing:
    raise WitnessError(f"Witness is missing {', '.join(missing)}")
  for k in FIELDS:
    if not isinstance(record[k], str):
      raise WitnessError(f"Witness {k} should be a decimal string")
  try:
    pk = BjjPoint.from_dec(record["pkX"], record["pkY"])
    msghash = fe.from_dec(record["msgHash"])
    s = sc.from_dec(record["s"])
    e = fe.from_dec(record["e"])
  except ValueError as err:
    raise WitnessError(f"Invalid witness: {err}")
  return pk, msghash, s, e


def read_witness(path) -> tuple:
  try:
    with open(path, "rb") as f:
      record = json.load(f)
  except OSError as err:
    raise WitnessError(f"Cannot read witness {path}: {err.strerror}")
  except json.JSONDecodeError as err:
    raise WitnessError(f"Witness file {path} is not valid JSON: {err}")
  return parse_witness(record)
