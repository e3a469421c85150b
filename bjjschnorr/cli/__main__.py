import sys
from typing import NoReturn

import colorama

from bjjschnorr.cli.args import argparse
from bjjschnorr.cli.keygen import main_keygen
from bjjschnorr.cli.sign import main_sign
from bjjschnorr.cli.verify import main_verify
from bjjschnorr.exceptions import CliArgError

modes = {
  "keygen": main_keygen,
  "sign": main_sign,
  "verify": main_verify,
}


def main() -> NoReturn:
  """
  The main CLI entry point.

  Consider calling bjjschnorr.schnorr and bjjschnorr.witness directly if you use from Python code.

  System exit codes:
  * 0 The requested function was completed successfully
  * 1 CLI argument error
  * 2 Interrupted
  * 3 I/O error (broken pipe)
  * 10 Invalid signature, bad keys or records, missing files

  :raises SystemExit: on normal exit or any expected error, including KeyboardInterrupt
  :raises Exception: on unexpected error (report a bug), or on any error with `--debug`
  """
  colorama.init()
  # CLI argument processing
  args = argparse()

  # Run the mode-specific main function
  if args.debug:
    modes[args.mode](args)  # --debug makes us not catch errors
    sys.exit(0)
  try:
    modes[args.mode](args)  # Normal run
  except CliArgError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(1)
  except ValueError as e:
    sys.stderr.write(f"Error: {e}\n")
    sys.exit(10)
  except BrokenPipeError:
    sys.stderr.write('I/O error (broken pipe)\n')
    sys.exit(3)
  except OSError as e:
    sys.stderr.write(f"Error: {e.filename}: {e.strerror}\n")
    sys.exit(10)
  except KeyboardInterrupt:
    sys.stderr.write("Interrupted.\n")
    sys.exit(2)
  sys.exit(0)

if __name__ == "__main__":
  main()
