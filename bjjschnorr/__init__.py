# Schnorr signatures over BabyJubJub, compatible with circomlib's Poseidon and BabyAdd gadgets
name = "bjjschnorr"
__version__ = "0.3.0"

from .schnorr import KeyPair, Signature, VerifyResult, derive_keypair, generate_keypair, sign, verify
