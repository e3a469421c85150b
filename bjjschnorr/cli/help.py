import sys
from typing import NoReturn

import bjjschnorr

T = "\x1B[1;44m"  # titlebar (white on blue)
H = "\x1B[1;37m"  # heading (bright white)
C = "\x1B[0;34m"  # command (dark blue)
F = "\x1B[1;34m"  # flag (light blue)
D = "\x1B[1;30m"  # dark / syntax markup
N = "\x1B[0m"     # normal color

usage = dict(
  keygen=f"{C}bjjschnorr {F}keygen {D}[{F}-k {N}secret{D}] —{N} create a keypair and show it in decimal\n",
  sign=f"""\
{C}bjjschnorr {F}sign {D}[{F}-k {N}secret{D}] [{F}-m {N}message {D}|{F} -f {N}file{D}] [{F}-o {N}build/input.json{D}]{N}
""",
  verify=f"{C}bjjschnorr {F}verify -i {N}input.json {D}[{F}-m {N}message {D}|{F} -f {N}file{D}]{N}\n",
)

usagetext = dict(
  keygen=f"""\
Prints the secret scalar and the public key coordinates. A random key is made
unless a secret scalar is given.

  {F}-k {N}secret         Derive the public key of this decimal secret scalar
""",
  sign=f"""\
Sign a message and export the circuit input record (pkX, pkY, msgHash, s, e)
for snarkjs. The signature is verified before it is written. A fresh key is
generated for each run unless {F}-k{N} is given.

  {F}-k {N}secret         Sign with this decimal secret scalar
  {F}-m {N}message        Message text (default "hello world")
  {F}-f {N}file           Sign the contents of a file instead
  {F}-o {N}filename       Where to write the JSON (default build/input.json)
""",
  verify=f"""\
Verify the signature stored in an input record against a message. The msgHash
stored in the record must also match the message.

  {F}-i {N}filename       Input record written by {C}bjjschnorr {F}sign{N}
  {F}-m {N}message        Message text (default "hello world")
  {F}-f {N}file           Message from a file
""",
)

cmdhelp = {k: f"{usage[k]}\n{usagetext.get(k, '')}".rstrip("\n") + "\n" for k in usage}

introduction = f"bjjschnorr {bjjschnorr.__version__} - Schnorr signatures on BabyJubJub for Circom"

introduction = f"""\
{T}{introduction:78}{N}
"""

shorthelp = f"""\
{introduction}
{"".join(usage.values())}
Signatures use Poseidon challenges and can be proven in zero knowledge with the
circomlib based schnorr circuit. Commonly used options:

  {F}-k {N}secret         Secret scalar in decimal (random when not given)
  {F}-m {N}message        The message text
  {F}--help --version{N}  Useful information. Help applies to subcommands too.
"""

allcommands = '\n\n'.join(cmdhelp.values())

fullhelp = f"""\
{introduction}
{allcommands}"""

def print_help(modehelp: str = None, error: str = None) -> NoReturn:
  stream = sys.stderr if error else sys.stdout
  if modehelp is None: stream.write(shorthelp)
  elif (h := cmdhelp.get(modehelp)): stream.write(h)
  else: stream.write(fullhelp)
  if error:
    stream.write(f"\n{error}\n")
    sys.exit(1)
  sys.exit(0)

def print_version() -> NoReturn:
  print(f"bjjschnorr {bjjschnorr.__version__}")
  sys.exit(0)
