"""Pydantic models for tool arguments.

Each tool validates its loosely-typed argument bag against one of these
models before a prompt is built. Validation is lax: numeric strings are
coerced, integral floats become ints, absent optional fields fall back to
their defaults and unknown keys are ignored.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class SummaryStyle(str, Enum):
    """Summary styles accepted by local_summarize."""

    BRIEF = "brief"
    DETAILED = "detailed"
    BULLET_POINTS = "bullet_points"
    EXECUTIVE = "executive"


class OutputFormat(str, Enum):
    """Output formats accepted by local_extract."""

    JSON = "json"
    YAML = "yaml"
    MARKDOWN_TABLE = "markdown_table"


def _as_int_if_integral(value: int | float) -> int | float:
    """Render 150.0 as 150 in prompts; keep fractional word counts as given."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class ToolArguments(BaseModel):
    """Base class for tool argument models."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class SummarizeArguments(ToolArguments):
    text: str
    style: SummaryStyle = SummaryStyle.BRIEF
    max_length: int | float = 150
    focus: str | None = None

    @field_validator("max_length")
    @classmethod
    def integral_as_int(cls, value: int | float) -> int | float:
        return _as_int_if_integral(value)


class DraftArguments(ToolArguments):
    task: str
    context: str
    format: str | None = None
    tone: str | None = None


class ClassifyArguments(ToolArguments):
    text: str
    categories: list[str]
    allow_multiple: bool = False
    explain: bool = False


class ExtractArguments(ToolArguments):
    text: str
    fields: list[str]
    output_format: OutputFormat = OutputFormat.JSON


class TransformArguments(ToolArguments):
    text: str
    instruction: str


class CompleteArguments(ToolArguments):
    """Arguments for the raw completion passthrough.

    max_tokens and temperature stay None when absent so the builder can
    tell "not given" apart from an explicit 0.
    """

    prompt: str
    system: str | None = None
    max_tokens: int | float | None = None
    temperature: float | None = None

    @field_validator("max_tokens")
    @classmethod
    def integral_as_int(cls, value: int | float | None) -> int | float | None:
        return None if value is None else _as_int_if_integral(value)


class StatusArguments(ToolArguments):
    """local_status takes no arguments."""
