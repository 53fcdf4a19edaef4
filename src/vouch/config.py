"""Run configuration."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RunConfig(BaseSettings):
    """Configuration for a test run.

    Loads from environment variables automatically:
        VOUCH_PATH, VOUCH_SUFFIX, VOUCH_TRACE_OUTPUT

    Or pass values directly to Runner / run().
    """

    path: str = Field(default="./", description="Base path that module identifiers are resolved against")
    suffix: str = Field(default="_spec.py", description="Appended to module identifiers to form file names")
    trace_output: Path | None = Field(
        default=None, description="JSONL file receiving one span per test; tracing is off when unset"
    )

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="VOUCH_",
    )

    @field_validator("suffix")
    @classmethod
    def _suffix_is_python_file(cls, value: str) -> str:
        if not value.endswith(".py"):
            msg = f"suffix must end with '.py', got {value!r}"
            raise ValueError(msg)
        return value

    def resolve(self, identifier: str) -> Path:
        """Return the file path of the test module named ``identifier``."""
        name = identifier if identifier.endswith(".py") else f"{identifier}{self.suffix}"
        return Path(self.path) / name
