"""Function and event signature hashes."""

from __future__ import annotations

from typing import Iterable

from Crypto.Hash import keccak

from abicodec.param_type import ParamType, write_param_type


def _signature_hash(name: str, params: Iterable[ParamType]) -> bytes:
    types = ",".join(write_param_type(param) for param in params)
    text = f"{name}({types})".encode("utf-8")
    return keccak.new(digest_bits=256, data=text).digest()


def short_signature(name: str, params: Iterable[ParamType]) -> bytes:
    """The 4-byte selector of a function with this name and parameter types."""
    return _signature_hash(name, params)[:4]


def long_signature(name: str, params: Iterable[ParamType]) -> bytes:
    """The full 32-byte Keccak-256 hash of the signature, as used for event topics."""
    return _signature_hash(name, params)