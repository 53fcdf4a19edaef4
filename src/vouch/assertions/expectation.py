"""Chainable expectations built from the live matcher registry."""

from typing import Any

from vouch.assertions.matchers import Matcher, MatcherRegistry
from vouch.errors import AssertionFailure, ExpectationResult


def describe_subject(subject: Any) -> str:
    """Display form of a subject: its name when callable, otherwise its repr."""
    if callable(subject):
        return getattr(subject, "__name__", None) or repr(subject)
    return repr(subject)


def describe_arguments(args: tuple[Any, ...], kwargs: dict[str, Any] | None = None) -> str | None:
    if kwargs:
        parts = [repr(arg) for arg in args] + [f"{key}={value!r}" for key, value in kwargs.items()]
        return f"[{', '.join(parts)}]"
    if not args:
        return None
    return repr(args[0]) if len(args) == 1 else repr(list(args))


class _MatcherView:
    """Exposes every registry entry as a method on one subject."""

    __slots__ = ("_subject", "_registry", "_negated")

    def __init__(self, subject: Any, registry: MatcherRegistry, negated: bool) -> None:
        self._subject = subject
        self._registry = registry
        self._negated = negated

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            matcher = self._registry[name]
        except KeyError:
            raise AttributeError(f"Unknown matcher {name!r}") from None
        return self._bind(name, matcher)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._registry))

    def _bind(self, name: str, matcher: Matcher) -> Any:
        def assertion(*args: Any, **kwargs: Any) -> "Expectation":
            passed = bool(matcher(self._subject, *args, **kwargs))
            if passed == self._negated:
                result = ExpectationResult(
                    matcher=name,
                    negated=self._negated,
                    subject=describe_subject(self._subject),
                    arguments=describe_arguments(args, kwargs),
                )
                raise AssertionFailure(result)
            return Expectation(self._subject, self._registry)

        assertion.__name__ = name
        assertion.__qualname__ = f"{type(self).__name__}.{name}"
        return assertion


class NegatedExpectation(_MatcherView):
    """Mirror of an Expectation whose matchers pass when the predicate fails."""

    __slots__ = ()

    def __init__(self, subject: Any, registry: MatcherRegistry) -> None:
        super().__init__(subject, registry, negated=True)

    def __repr__(self) -> str:
        return f"expect({describe_subject(self._subject)}).not_"


class Expectation(_MatcherView):
    """Assertion handle for one subject value.

    Every matcher in the registry is available as a method. A passing call
    returns an expectation for the same subject, so assertions chain; a
    failing call raises :class:`~vouch.errors.AssertionFailure`.

    Examples
    --------
    >>> expect([1, 2, 3]).to_be_array().to_have_length(3).to_contain(2)
    >>> expect(mock).not_.to_have_been_called()
    """

    __slots__ = ("not_",)

    def __init__(self, subject: Any, registry: MatcherRegistry) -> None:
        super().__init__(subject, registry, negated=False)
        self.not_ = NegatedExpectation(subject, registry)

    def __repr__(self) -> str:
        return f"expect({describe_subject(self._subject)})"
