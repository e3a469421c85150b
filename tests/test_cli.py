import json
import sys

import pytest

from bjjschnorr.cli.__main__ import main
from bjjschnorr.cli.args import argparse

from .test_schnorr import GOLDEN_E, GOLDEN_PKX, GOLDEN_PKY, GOLDEN_S, GOLDEN_SK


def test_argparser(capsys):
  sys.argv = "bjjschnorr sign -k 12345 --message hello -o out.json".split()
  a = argparse()
  assert a.mode == "sign"
  assert a.secret == "12345"
  assert a.message == ["hello"]
  assert a.outfile == ["out.json"]
  cap = capsys.readouterr()
  assert not cap.out
  assert not cap.err

  # Mode combined with a flag
  sys.argv = "bjjschnorr -sk 5".split()
  a = argparse()
  assert a.mode == "sign"
  assert a.secret == "5"

  # Missing argument parameter
  sys.argv = "bjjschnorr sign -m".split()
  with pytest.raises(SystemExit) as exc:
    argparse()
  assert exc.value.code == 1
  cap = capsys.readouterr()
  assert not cap.out
  assert "Argument parameter missing: bjjschnorr sign -m …" in cap.err

  # Flag of another mode
  sys.argv = "bjjschnorr keygen -o out.json".split()
  with pytest.raises(SystemExit):
    argparse()
  cap = capsys.readouterr()
  assert "Unknown argument: bjjschnorr keygen -o" in cap.err

  # Anything after -- is positional
  sys.argv = "bjjschnorr verify -- -m".split()
  a = argparse()
  assert a.files == ["-m"]
  assert a.message == []


## End-to-End testing: Running bjjschnorr as if it was ran from command line

# A fixture to run bjjschnorr more easily, checks exitcode and returns its output
@pytest.fixture
def bjjschnorr(capsys):
  def run_main(*args, exitcode=0):
    if args and args[0] == "bjjschnorr":
      raise ValueError("Only arguments please, no 'bjjschnorr' in the beginning")
    sys.argv = [str(arg) for arg in ("bjjschnorr", *args)]
    with pytest.raises(SystemExit) as exc:
      main()
    assert exc.value.code == exitcode, f"Was expecting {exitcode=} but bjjschnorr did sys.exit({exc.value.code})"
    return capsys.readouterr()
  return run_main


def test_help(bjjschnorr):
  cap = bjjschnorr()
  assert "keygen" in cap.out
  cap = bjjschnorr("--help")
  assert "verify -i" in cap.out
  cap = bjjschnorr("help", "sign")
  assert "snarkjs" in cap.out
  cap = bjjschnorr("--version")
  assert cap.out.startswith("bjjschnorr ")
  cap = bjjschnorr("frobnicate", exitcode=1)
  assert "Invalid or missing command" in cap.err


def test_keygen(bjjschnorr):
  cap = bjjschnorr("keygen", "-k", GOLDEN_SK)
  assert cap.out.split() == ["sk", str(GOLDEN_SK), "pkX", str(GOLDEN_PKX), "pkY", str(GOLDEN_PKY)]
  cap = bjjschnorr("keygen")
  assert len(cap.out.split()) == 6
  assert "New secret key" in cap.err
  cap = bjjschnorr("keygen", "-k", "0", exitcode=10)
  assert "must not be zero" in cap.err
  cap = bjjschnorr("keygen", "-k", "0x10", exitcode=10)
  assert "decimal" in cap.err
  bjjschnorr("keygen", "extra", exitcode=1)


def test_sign_and_verify(bjjschnorr, tmp_path):
  fname = tmp_path / "build" / "input.json"
  cap = bjjschnorr("sign", "-k", GOLDEN_SK, "-m", "deterministic test", "-o", fname)
  record = json.loads(cap.out)
  assert record["pkX"] == str(GOLDEN_PKX)
  assert record["s"] == str(GOLDEN_S)
  assert record["e"] == str(GOLDEN_E)
  assert json.loads(fname.read_text()) == record
  assert "[4/4]" in cap.err
  assert "Signature valid" in cap.err

  cap = bjjschnorr("verify", "-i", fname, "-m", "deterministic test")
  assert "Signature valid" in cap.err

  # Message does not match the record
  cap = bjjschnorr("verify", "-i", fname, "-m", "something else", exitcode=10)
  assert "msgHash" in cap.err

  # Tampered e
  record["e"] = str(GOLDEN_E ^ 1)
  fname.write_text(json.dumps(record))
  cap = bjjschnorr("verify", "-i", fname, "-m", "deterministic test", exitcode=10)
  assert "Signature mismatch" in cap.err


def test_sign_file_and_fresh_key(bjjschnorr, tmp_path):
  msgfile = tmp_path / "message.bin"
  msgfile.write_bytes(10_000 * b"\xAB")
  fname = tmp_path / "input.json"
  cap = bjjschnorr("sign", "-f", msgfile, "-o", fname)
  assert "Generating keypair" in cap.err
  bjjschnorr("verify", "-i", fname, "-f", msgfile)
  bjjschnorr("verify", "-i", fname, "-m", "hello world", exitcode=10)


def test_default_message(bjjschnorr, tmp_path, monkeypatch):
  monkeypatch.chdir(tmp_path)
  bjjschnorr("sign", "-k", "5")
  assert (tmp_path / "build" / "input.json").exists()
  bjjschnorr("verify", "-i", "build/input.json")
  bjjschnorr("verify", "-i", "build/input.json", "-m", "hello world")


def test_errors(bjjschnorr, tmp_path):
  cap = bjjschnorr("verify", "-m", "x", exitcode=1)
  assert "input record is required" in cap.err
  cap = bjjschnorr("verify", "-i", tmp_path / "missing.json", exitcode=10)
  assert "Cannot read witness" in cap.err
  cap = bjjschnorr("sign", "-f", tmp_path / "missing.bin", exitcode=10)
  assert "missing.bin" in cap.err
  cap = bjjschnorr("sign", "-m", "a", "-m", "b", exitcode=1)
  assert "Only one message" in cap.err


def test_debug_raises(tmp_path):
  sys.argv = ["bjjschnorr", "verify", "--debug", "-i", str(tmp_path / "missing.json")]
  with pytest.raises(ValueError):
    main()


def test_broken_pipe(bjjschnorr, mocker):
  mocker.patch("bjjschnorr.cli.keygen.print", side_effect=BrokenPipeError, create=True)
  cap = bjjschnorr("keygen", "-k", "5", exitcode=3)
  assert "broken pipe" in cap.err
