"""Recording mock functions."""

from collections.abc import Callable
from typing import Any


class Call(tuple):
    """Positional arguments of one call, with its keyword arguments in ``kwargs``.

    Compares like a plain tuple, so ``mock.calls == [(1, 2)]`` holds for a
    call made as ``mock(1, 2, key="v")``.
    """

    kwargs: dict[str, Any]

    def __new__(cls, args: tuple[Any, ...] = (), kwargs: dict[str, Any] | None = None) -> "Call":
        call = super().__new__(cls, args)
        call.kwargs = dict(kwargs or {})
        return call

    def __repr__(self) -> str:
        parts = [repr(arg) for arg in self]
        parts.extend(f"{key}={value!r}" for key, value in self.kwargs.items())
        return f"call({', '.join(parts)})"


class Mock:
    """Callable that records its invocations.

    Calls return, in order of precedence: the fixed value set with
    :meth:`return_value`, the result of ``implementation()``, or None.

    Attributes:
    ----------
    calls : list[Call]
        Arguments of every call since creation or the last reset. Each entry
        is the tuple of positional arguments; keyword arguments are on its
        ``kwargs`` attribute.
    implementation : Callable[[], Any] | None
        Current implementation. Assign to override it until the next reset.
    """

    def __init__(self, implementation: Callable[[], Any] | None = None, *, name: str | None = None) -> None:
        self._default_implementation = implementation
        self.__name__ = name or self._derive_name(implementation)
        self.calls: list[Call] = []
        self.implementation: Callable[[], Any] | None = None
        self._response: Any = None
        self.reset()

    @staticmethod
    def _derive_name(implementation: Callable[[], Any] | None) -> str:
        impl_name = getattr(implementation, "__name__", None)
        if impl_name and impl_name != "<lambda>":
            return f"mock({impl_name})"
        return "mock"

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append(Call(args, kwargs))
        if self._response is not None:
            return self._response
        if self.implementation is not None:
            return self.implementation()
        return None

    def __repr__(self) -> str:
        return f"<Mock {self.__name__} calls={len(self.calls)}>"

    def return_value(self, response: Any) -> None:
        """Return ``response`` from every call until the next reset."""
        self._response = response

    def reset(self) -> None:
        """Clear recorded calls and the fixed value, and restore the original implementation."""
        self.calls = []
        self._response = None
        self.implementation = self._default_implementation


def mock_fn(implementation: Callable[[], Any] | None = None) -> Mock:
    """Create a :class:`Mock`, optionally backed by a zero-argument implementation."""
    return Mock(implementation)
