import sys

from bjjschnorr.cli.help import print_help, print_version


class Args:

  def __init__(self):
    self.mode = None
    self.files = []
    self.secret = ""
    self.message = []
    self.msgfile = ""
    self.outfile = []
    self.infile = ""
    self.debug = None


keygenargs = dict(
  secret='-k --secret'.split(),
  debug='--debug'.split(),
)

signargs = dict(
  secret='-k --secret'.split(),
  message='-m --message'.split(),
  msgfile='-f --file'.split(),
  outfile='-o --out --output'.split(),
  debug='--debug'.split(),
)

verifyargs = dict(
  infile='-i --in --input'.split(),
  message='-m --message'.split(),
  msgfile='-f --file'.split(),
  debug='--debug'.split(),
)

def needhelp(av):
  """Check for -h and --help but not past --"""
  for a in av:
    if a == '--': return False
    if a.lower() in ('-h', '--help'): return True
  return False

def subcommand(arg):
  if arg in ('keygen', 'key', '-g'): return 'keygen', keygenargs
  if arg in ('sign', '-s'): return 'sign', signargs
  if arg in ('verify', '-v'): return 'verify', verifyargs
  if arg in ('help', ): return 'help', {}
  return None, {}

def argparse():
  # Custom parsing due to argparse module's limitations
  av = sys.argv[1:]
  if not av:
    print_help()

  if any(a.lower() in ('--version', ) for a in av):
    print_version()

  # Support a few other forms for convenience
  if av[0].startswith("-") and len(av[0]) > 2 and not av[0].startswith("--"):
    av.insert(1, f'-{av[0][2:]}')
    av[0] = av[0][:2]

  args = Args()
  args.mode, ad = subcommand(av[0])

  if args.mode == 'help' or needhelp(av):
    if args.mode == 'help' and len(av) == 2 and (mode := subcommand(av[1])[0]):
      print_help(mode)
    print_help(args.mode or "help")

  if args.mode is None:
    sys.stderr.write(' 💣  Invalid or missing command (keygen/sign/verify/help).\n')
    sys.exit(1)

  aiter = iter(av[1:])
  shortargs = [flag[1:] for switches in ad.values() for flag in switches if not flag.startswith("--")]
  for a in aiter:
    aprint = a
    if not a.startswith('-'):
      args.files.append(a)
      continue
    if a == '--':
      args.files += aiter
      break
    if a.startswith('--'):
      a = a.lower()
    if not a.startswith('--') and len(a) > 2:
      if any(arg not in shortargs for arg in list(a[1:])):
        falseargs = [arg for arg in list(a[1:]) if arg not in shortargs]
        print_help(args.mode, f' 💣  Unknown argument: bjjschnorr {args.mode} {a} (failing -{" -".join(falseargs)})')
      a = [f'-{shortarg}' for shortarg in list(a[1:]) if shortarg in shortargs]
    if isinstance(a, str):
      a = [a]
    for av in a:
      argvar = next((k for k, v in ad.items() if av in v), None)
      if argvar is None:
        print_help(args.mode, f' 💣  Unknown argument: bjjschnorr {args.mode} {aprint}')
      try:
        var = getattr(args, argvar)
        if isinstance(var, list):
          var.append(next(aiter))
        elif isinstance(var, str):
          setattr(args, argvar, next(aiter))
        else:
          setattr(args, argvar, True)
      except StopIteration:
        print_help(args.mode, f' 💣  Argument parameter missing: bjjschnorr {args.mode} {aprint} …')

  return args
