import sys

from bjjschnorr import schnorr, witness
from bjjschnorr.cli.sign import read_message
from bjjschnorr.exceptions import CliArgError


def main_verify(args):
  if not args.infile:
    raise CliArgError("An input record is required, e.g. -i build/input.json")
  message = read_message(args)
  pk, msghash, s, e = witness.read_witness(args.infile)
  if msghash != schnorr.hash_message(message):
    raise ValueError("Message does not match the msgHash of the record")
  # The commitment is not part of the record, verification recomputes it
  sig = schnorr.Signature(s, e, None)
  if not schnorr.verify(sig, message, pk):
    raise ValueError("Signature mismatch")
  sys.stderr.write(f" \x1B[1;32m✓\x1B[0m Signature valid for pkX={pk.x}\n")
