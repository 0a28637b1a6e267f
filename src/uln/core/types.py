"""Type aliases and constants used across the ULN package."""

from __future__ import annotations

ULNString = str
CheckDigit = int

ULN_LENGTH = 10
PREFIX_LENGTH = 9
MODULUS = 11

# Weights applied left to right to the nine-digit prefix.
WEIGHTS: tuple[int, ...] = tuple(10 - i for i in range(PREFIX_LENGTH))
