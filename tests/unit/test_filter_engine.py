"""Unit tests for the filter engine."""

from token_pulse.core.models import FilterSpec
from token_pulse.filters.engine import apply_filter, matches
from token_pulse.generator import generate_tokens


def _ids(records):
    return [r.id for r in records]


class TestFilterEngine:
    def test_empty_spec_is_identity(self, sample_tokens):
        result = apply_filter(sample_tokens, FilterSpec())
        assert result == sample_tokens
        assert _ids(result) == ["t0", "t1", "t2", "t3", "t4"]

    def test_protocol_allow_list(self, sample_tokens):
        result = apply_filter(sample_tokens, FilterSpec(protocols=["Pump"]))
        assert _ids(result) == ["t0", "t2"]

    def test_keywords_case_insensitive_on_name_or_symbol(self, sample_tokens):
        assert _ids(apply_filter(sample_tokens, FilterSpec(keywords=["PePe"]))) == ["t0", "t3"]
        assert _ids(apply_filter(sample_tokens, FilterSpec(keywords=["leash"]))) == ["t1"]

    def test_keywords_are_or_matched(self, sample_tokens):
        result = apply_filter(sample_tokens, FilterSpec(keywords=["shib", "floki"]))
        assert _ids(result) == ["t2", "t4"]

    def test_excluded_keywords(self, sample_tokens):
        result = apply_filter(sample_tokens, FilterSpec(excluded_keywords=["pepe", "INU"]))
        assert _ids(result) == ["t1", "t4"]

    def test_rules_combine(self, sample_tokens):
        spec = FilterSpec(protocols=["Pump", "Moonshot"], keywords=["pepe"], excluded_keywords=["baby"])
        assert _ids(apply_filter(sample_tokens, spec)) == ["t0"]

    def test_no_match_returns_empty(self, sample_tokens):
        assert apply_filter(sample_tokens, FilterSpec(keywords=["nothing-here"])) == []

    def test_blank_keywords_ignored(self, sample_tokens):
        assert apply_filter(sample_tokens, FilterSpec(keywords=[""], excluded_keywords=[" "])) == sample_tokens

    def test_matches_short_circuits_on_protocol(self, token_factory):
        token = token_factory(protocol="Bonk")
        assert not matches(token, FilterSpec(protocols=["Pump"], keywords=["pepe"]))
        assert matches(token, FilterSpec(protocols=["Bonk"], keywords=["pepe"]))

    def test_idempotent(self):
        records = generate_tokens(30)
        specs = [
            FilterSpec(),
            FilterSpec(keywords=["o"]),
            FilterSpec(excluded_keywords=["coin"], protocols=[r.protocol for r in records[:5]]),
        ]
        for spec in specs:
            once = apply_filter(records, spec)
            assert apply_filter(once, spec) == once

    def test_preserves_order_and_does_not_mutate(self):
        records = generate_tokens(30)
        before = [r.to_dict() for r in records]
        result = apply_filter(records, FilterSpec(keywords=["o"]))

        positions = [records.index(r) for r in result]
        assert positions == sorted(positions)
        assert [r.to_dict() for r in records] == before

    def test_does_not_modify_input_list(self, sample_tokens):
        original = list(sample_tokens)
        apply_filter(sample_tokens, FilterSpec(keywords=["pepe"]))
        assert sample_tokens == original
