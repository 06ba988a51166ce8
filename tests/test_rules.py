"""
Counting rule tests: concrete scenarios, error propagation, the rule
registry, and the DIALCOUNT_FINE_ARITHMETIC feature flag.
"""

import pytest

from dialcount import rules
from dialcount.core.commands import parse_command
from dialcount.core.errors import InvalidFormat, InvalidSteps, ParseError
from dialcount.rules import (
    count_coarse,
    count_fine,
    get_rule,
    list_rule_names,
    run_rule,
    walk_hits,
    zero_hits,
)


@pytest.mark.parametrize(
    "text, coarse, fine",
    [
        ("R50", 1, 1),
        ("L50", 1, 1),
        ("R55", 0, 1),
        ("R150", 1, 2),
        ("R50\nL25", 1, 1),
        ("R200", 0, 2),
        ("L1000", 0, 10),
        ("R50\nR100\nR100\nR9", 3, 3),
        ("", 0, 0),
    ],
)
def test_scenarios(text, coarse, fine):
    assert count_coarse(text) == coarse
    assert count_fine(text, arithmetic=False) == fine
    assert count_fine(text, arithmetic=True) == fine


def test_sample_input(sample_input):
    assert count_coarse(sample_input) == 3
    assert count_fine(sample_input, arithmetic=False) == 6


def test_custom_start():
    assert count_coarse("R1", start=99) == 1
    assert count_fine("L3", start=2) == 1
    # start is normalized before use
    assert count_coarse("R1", start=-1) == 1


def test_accepts_list_of_lines():
    assert count_coarse(["R50\n", "\n", "L100\n"]) == 2


@pytest.mark.parametrize(
    "text, exc",
    [("X5", InvalidFormat), ("R5\nL+1", ParseError), ("R50\nL0", InvalidSteps)],
)
@pytest.mark.parametrize("rule", [count_coarse, count_fine])
def test_errors_abort_the_run(rule, text, exc):
    with pytest.raises(exc):
        rule(text)


def test_error_after_hits_still_raises():
    # R50 would score, but the run fails as a whole
    with pytest.raises(InvalidFormat) as info:
        count_coarse("R50\nR50\n?3")
    assert info.value.line_no == 3


class TestPerCommandPrimitives:

    def test_walk_hits(self):
        assert walk_hits(50, parse_command("R150")) == (0, 2)
        assert walk_hits(0, parse_command("L1")) == (99, 0)

    def test_zero_hits_from_zero_needs_full_turn(self):
        assert zero_hits(0, parse_command("R99")) == 0
        assert zero_hits(0, parse_command("L100")) == 1
        assert zero_hits(0, parse_command("R250")) == 2

    def test_zero_hits_large_magnitude(self):
        assert zero_hits(50, parse_command("R1000000000")) == 10_000_000


class TestRegistry:

    def test_names(self):
        assert list_rule_names() == ["coarse", "fine"]

    def test_get_rule(self):
        assert get_rule("coarse") is count_coarse
        assert get_rule("fine") is count_fine

    def test_unknown_rule(self):
        with pytest.raises(KeyError, match="unknown rule"):
            get_rule("medium")

    def test_run_rule(self):
        assert run_rule("coarse", "R150") == 1
        assert run_rule("fine", "R150") == 2
        assert run_rule("coarse", "R1", start=99) == 1


class TestFeatureFlag:

    def test_flag_selects_closed_form(self, monkeypatch):
        calls = []

        def spy(position, command):
            calls.append(command)
            return zero_hits(position, command)

        monkeypatch.setattr(rules, "zero_hits", spy)
        monkeypatch.setattr(rules, "DIALCOUNT_FINE_ARITHMETIC_ENABLED", True)
        assert count_fine("R150\nL5") == 2
        assert len(calls) == 2

    def test_explicit_argument_overrides_flag(self, monkeypatch):
        monkeypatch.setattr(rules, "DIALCOUNT_FINE_ARITHMETIC_ENABLED", True)
        monkeypatch.setattr(rules, "zero_hits", lambda *a: pytest.fail("closed form used"))
        assert count_fine("R150", arithmetic=False) == 2



class TestRunRuleOptions:

    def test_options_reach_rules_that_take_them(self, monkeypatch):
        monkeypatch.setattr(rules, "zero_hits", lambda *a: pytest.fail("closed form used"))
        assert run_rule("fine", "R150", arithmetic=False) == 2

    def test_options_dropped_for_other_rules(self):
        assert run_rule("coarse", "R150", arithmetic=True) == 1

    def test_none_option_defers_to_flag(self, monkeypatch):
        monkeypatch.setattr(rules, "DIALCOUNT_FINE_ARITHMETIC_ENABLED", False)
        monkeypatch.setattr(rules, "zero_hits", lambda *a: pytest.fail("closed form used"))
        assert run_rule("fine", "R150", arithmetic=None) == 2
