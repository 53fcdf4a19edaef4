"""Expectations, matchers and structural equality."""

from vouch.assertions.equality import deep_equal
from vouch.assertions.expectation import Expectation, NegatedExpectation
from vouch.assertions.matchers import BUILTIN_MATCHERS, Matcher, MatcherBuilder, MatcherRegistry

__all__ = [
    "BUILTIN_MATCHERS",
    "Expectation",
    "Matcher",
    "MatcherBuilder",
    "MatcherRegistry",
    "NegatedExpectation",
    "deep_equal",
]
