import sys

from bjjschnorr import schnorr, witness
from bjjschnorr.cli.keygen import load_keypair
from bjjschnorr.exceptions import CliArgError

DEFAULT_MESSAGE = "hello world"
DEFAULT_OUTFILE = "build/input.json"


def read_message(args) -> bytes:
  if args.files:
    raise CliArgError(f"Unexpected arguments {' '.join(args.files)}, use -m for the message")
  if len(args.message) + bool(args.msgfile) > 1:
    raise CliArgError("Only one message may be specified")
  if args.msgfile:
    with open(args.msgfile, "rb") as f:
      return f.read()
  return (args.message[0] if args.message else DEFAULT_MESSAGE).encode()


def main_sign(args):
  message = read_message(args)
  if len(args.outfile) > 1:
    raise CliArgError("Only one output file may be specified")
  outfile = args.outfile[0] if args.outfile else DEFAULT_OUTFILE

  sys.stderr.write("[1/4] Loading keypair...\n" if args.secret else "[1/4] Generating keypair...\n")
  kp = load_keypair(args.secret)
  sys.stderr.write(f"  pkX = {kp.pk.x}\n  pkY = {kp.pk.y}\n")

  sys.stderr.write(f"[2/4] Signing {len(message)} bytes...\n")
  sig = schnorr.sign(kp, message)
  sys.stderr.write(f"  e = {sig.e}\n  s = {sig.s}\n")

  sys.stderr.write("[3/4] Verifying signature...\n")
  if not schnorr.verify(sig, message, kp.pk):
    raise RuntimeError("A fresh signature did not verify")
  sys.stderr.write("  \x1B[1;32m✓\x1B[0m Signature valid\n")

  sys.stderr.write(f"[4/4] Exporting witness input to {outfile}...\n")
  record = witness.export_witness(sig, kp.pk, message, outfile)
  print(witness.dumps(record))
