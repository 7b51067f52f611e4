"""Unit tests for the deterministic token generator."""

import math

import pytest

from token_pulse.core.enums import PROTOCOL_NAMES, TokenStatus
from token_pulse.core.models import HISTORY_LENGTH
from token_pulse.generator import (
    ADDRESS_ALPHABET,
    ADDRESS_LENGTH,
    generate_address,
    generate_tokens,
    seeded_random,
)


class TestSeededRandom:
    def test_same_seed_same_value(self):
        assert seeded_random(42) == seeded_random(42)

    def test_range(self):
        for seed in range(500):
            assert 0.0 <= seeded_random(seed) < 1.0

    def test_matches_fractional_sine(self):
        x = math.sin(7) * 10000
        assert seeded_random(7) == x - math.floor(x)


class TestGenerateTokens:
    def test_deterministic(self):
        first = generate_tokens(30)
        second = generate_tokens(30)
        assert first == second
        assert [t.to_dict() for t in first] == [t.to_dict() for t in second]

    def test_prefix_stable_across_counts(self):
        assert generate_tokens(30)[:5] == generate_tokens(5)

    def test_status_cycle(self):
        tokens = generate_tokens(3)
        assert [t.status for t in tokens] == [
            TokenStatus.NEW_PAIRS,
            TokenStatus.FINAL_STRETCH,
            TokenStatus.MIGRATED,
        ]

    def test_unique_ids(self):
        tokens = generate_tokens(60)
        assert len({t.id for t in tokens}) == 60
        assert tokens[0].id == "token-0"

    def test_contract_address_alphabet(self):
        assert len(ADDRESS_ALPHABET) == 58
        for ch in "0OIl":
            assert ch not in ADDRESS_ALPHABET

        for token in generate_tokens(30):
            assert len(token.contract_address) == ADDRESS_LENGTH
            assert set(token.contract_address) <= set(ADDRESS_ALPHABET)

    def test_address_depends_on_index(self):
        assert generate_address(1) != generate_address(2)
        assert generate_address(1) == generate_address(1)

    def test_fields_in_range(self):
        for token in generate_tokens(30):
            assert token.price > 0
            assert token.protocol in PROTOCOL_NAMES
            assert len(token.history) == HISTORY_LENGTH
            assert all(0 <= p < 100 for p in token.history)
            assert 0 <= token.security.top10_holders < 50
            assert -20 <= token.price_change_24h < 20
            assert -2.5 <= token.price_change_5m < 2.5
            assert token.time_since_creation.endswith("m")
            assert isinstance(token.transactions, int)

    def test_zero_index_price_clamped(self):
        # sin(0) == 0 would give a zero price
        assert generate_tokens(1)[0].price > 0

    def test_injected_random(self):
        tokens = generate_tokens(3, rand=lambda seed: 0.5)
        assert all(t.price == 5.0 for t in tokens)
        assert all(t.protocol == PROTOCOL_NAMES[6] for t in tokens)
        assert all(t.security.no_mint and not t.security.has_audit for t in tokens)

    @pytest.mark.parametrize("count", [0, -1])
    def test_non_positive_count_rejected(self, count):
        with pytest.raises(ValueError):
            generate_tokens(count)

    def test_non_int_count_rejected(self):
        with pytest.raises(TypeError):
            generate_tokens("30")
