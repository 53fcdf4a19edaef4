"""Exception types raised by vouch."""

from pathlib import Path

from pydantic import BaseModel


class ExpectationResult(BaseModel):
    """Description of a failed expectation.

    Attributes
    ----------
    matcher : str
        Registry name of the matcher that was evaluated.
    negated : bool
        Whether the matcher was called through ``.not_``.
    subject : str
        Display form of the value under test.
    arguments : str | None
        Display form of the matcher arguments, if any were passed.
    """

    matcher: str
    negated: bool = False
    subject: str
    arguments: str | None = None

    @property
    def readable_matcher(self) -> str:
        """Matcher name as words, prefixed with ``not`` when negated."""
        words = self.matcher.replace("_", " ").strip()
        return f"not {words}" if self.negated else words

    @property
    def message(self) -> str:
        parts = ["Expected", self.subject, self.readable_matcher]
        if self.arguments is not None:
            parts.append(self.arguments)
        return " ".join(parts)


class VouchError(Exception):
    """Base class for framework errors."""


class AssertionFailure(AssertionError):
    """AssertionError with the attached ExpectationResult."""

    def __init__(self, result: ExpectationResult):
        self.expectation_result = result
        super().__init__(result.message)


class RegistrationError(VouchError):
    """Raised when suites, tests or hooks are declared outside a registering suite."""


class MatcherRegistrationError(VouchError):
    """Raised when a matcher extension returns an unusable entry."""


class ModuleLoadError(VouchError):
    """A test module could not be loaded or its suites could not be registered."""

    def __init__(self, module: str, path: Path, cause: BaseException):
        self.module = module
        self.path = path
        self.cause = cause
        super().__init__(f"Error loading test {module}: {cause}")
