"""Deterministic mock data generation."""

from .seeded import seeded_random, SeededRandom
from .mock_tokens import generate_tokens, generate_address, ADDRESS_ALPHABET, ADDRESS_LENGTH

__all__ = [
    "seeded_random",
    "SeededRandom",
    "generate_tokens",
    "generate_address",
    "ADDRESS_ALPHABET",
    "ADDRESS_LENGTH",
]
