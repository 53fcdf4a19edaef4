"""Matcher registry and built-in matchers.

A matcher is a predicate ``(subject, *args) -> truthy``. The registry maps
matcher names to predicates and can be extended at runtime; every
:class:`~vouch.assertions.expectation.Expectation` resolves its methods from
the live registry, so extensions are visible immediately.
"""

import logging
import math
from collections.abc import Callable, Iterator, Mapping, MutableMapping
from typing import Any

from vouch.assertions.equality import (
    deep_equal,
    is_instant,
    is_record,
    is_scalar,
    is_sequence,
    record_get,
    record_items,
)
from vouch.errors import MatcherRegistrationError


logger = logging.getLogger(__name__)

Matcher = Callable[..., Any]
MatcherBuilder = Callable[["MatcherRegistry"], Mapping[str, Matcher]]

RESERVED_NAMES = frozenset({"not_"})


def to_be_truthy(value: Any) -> bool:
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def to_be_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def to_be_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_be_string(value: Any) -> bool:
    return isinstance(value, str)


def to_be_array(value: Any) -> bool:
    return is_sequence(value)


def to_be_date(value: Any) -> bool:
    return is_instant(value)


def to_be_object(value: Any) -> bool:
    """Structured values: anything that is not None, a scalar, or a callable."""
    return value is not None and not is_scalar(value) and not callable(value)


def to_be_function(value: Any) -> bool:
    return callable(value)


def to_have_length(value: Any, length: int) -> bool:
    return (to_be_array(value) or to_be_string(value)) and len(value) == length


def to_be(value: Any, expected: Any) -> bool:
    return deep_equal(value, expected)


def to_contain(haystack: Any, needle: Any) -> bool:
    """Membership for sequences, key subset for records, substring for strings."""
    if to_be_array(haystack):
        return any(deep_equal(item, needle) for item in haystack)
    if is_record(haystack) and is_record(needle):
        return all(deep_equal(record_get(haystack, key), value) for key, value in record_items(needle).items())
    if to_be_string(haystack) and to_be_string(needle):
        return needle in haystack
    return False


def to_have_been_called(value: Any) -> bool:
    return to_be_function(value) and hasattr(value, "calls") and len(value.calls) > 0


def to_have_been_called_times(value: Any, times: int) -> bool:
    return to_have_been_called(value) and len(value.calls) == times


def _kwargs_equal(actual: Mapping[str, Any], expected: Mapping[str, Any]) -> bool:
    return set(actual) == set(expected) and all(deep_equal(actual[key], expected[key]) for key in expected)


def to_have_been_called_with(value: Any, /, *args: Any, **kwargs: Any) -> bool:
    """Some recorded call had exactly ``args``, and exactly ``kwargs`` when any are given."""
    return to_have_been_called(value) and any(
        deep_equal(list(args), call) and (not kwargs or _kwargs_equal(getattr(call, "kwargs", {}), kwargs))
        for call in value.calls
    )


BUILTIN_MATCHERS: dict[str, Matcher] = {
    fn.__name__: fn
    for fn in (
        to_be_truthy,
        to_be_boolean,
        to_be_number,
        to_be_string,
        to_be_array,
        to_be_date,
        to_be_object,
        to_be_function,
        to_have_length,
        to_be,
        to_contain,
        to_have_been_called,
        to_have_been_called_times,
        to_have_been_called_with,
    )
}


class MatcherRegistry(MutableMapping[str, Matcher]):
    """Mutable mapping of matcher names to predicates.

    Entries are also readable as attributes, which keeps extension builders
    short::

        registry.extend(lambda m: {
            "to_be_decimal": lambda value: m.to_be_number(value) and value % 1,
        })
    """

    def __init__(self, matchers: Mapping[str, Matcher] | None = None) -> None:
        self._matchers: dict[str, Matcher] = {}
        self.update(BUILTIN_MATCHERS if matchers is None else matchers)

    def __getitem__(self, name: str) -> Matcher:
        return self._matchers[name]

    def __setitem__(self, name: str, matcher: Matcher) -> None:
        self._validate(name, matcher)
        self._matchers[name] = matcher

    def __delitem__(self, name: str) -> None:
        del self._matchers[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._matchers)

    def __len__(self) -> int:
        return len(self._matchers)

    def __getattr__(self, name: str) -> Matcher:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._matchers[name]
        except KeyError:
            raise AttributeError(f"No matcher named {name!r}") from None

    def __repr__(self) -> str:
        return f"MatcherRegistry({sorted(self._matchers)})"

    def _validate(self, name: str, matcher: Any) -> None:
        if not isinstance(name, str) or not name.isidentifier():
            msg = f"Matcher name must be an identifier, got {name!r}"
            raise MatcherRegistrationError(msg)
        if name.startswith("_") or name in RESERVED_NAMES:
            msg = f"Matcher name {name!r} is reserved"
            raise MatcherRegistrationError(msg)
        if not callable(matcher):
            msg = f"Matcher {name!r} must be callable, got {type(matcher).__name__}"
            raise MatcherRegistrationError(msg)

    def extend(self, builder: MatcherBuilder) -> "MatcherRegistry":
        """Merge the matchers returned by ``builder(self)`` into the registry.

        Args:
            builder: Receives this registry (so new matchers can compose
                existing ones) and returns a mapping of new entries.

        Returns:
            The registry itself.
        """
        additions = builder(self)
        if not isinstance(additions, Mapping):
            msg = f"Matcher builder must return a mapping, got {type(additions).__name__}"
            raise MatcherRegistrationError(msg)
        for name, matcher in additions.items():
            self[name] = matcher
        logger.debug("Registered matchers: %s", ", ".join(additions))
        return self

    def copy(self) -> "MatcherRegistry":
        """Return an independent registry with the same entries."""
        return MatcherRegistry(self._matchers)
