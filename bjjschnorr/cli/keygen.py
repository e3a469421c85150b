import sys

from bjjschnorr import schnorr
from bjjschnorr.elliptic import sc
from bjjschnorr.exceptions import CliArgError, MalformedKeyError


def load_keypair(secret: str) -> schnorr.KeyPair:
  """Derive from a decimal secret scalar, or generate a new keypair if empty"""
  if not secret:
    return schnorr.generate_keypair()
  try:
    sk = sc.from_dec(secret)
  except ValueError:
    raise MalformedKeyError("The secret key should be a decimal number below the group order")
  return schnorr.derive_keypair(sk)


def main_keygen(args):
  if args.files:
    raise CliArgError(f"Unexpected arguments {' '.join(args.files)}")
  kp = load_keypair(args.secret)
  if not args.secret:
    sys.stderr.write(" 🔑  New secret key created, keep it safe\n")
  print(f"sk   {kp.sk}")
  print(f"pkX  {kp.pk.x}")
  print(f"pkY  {kp.pk.y}")
