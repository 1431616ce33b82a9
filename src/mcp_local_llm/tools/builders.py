"""Prompt builders for each tool.

A builder turns validated tool arguments into a CompletionRequest. Builders
are pure functions of their arguments and the settings: they do no I/O and
the same inputs always yield an equal request.
"""

import math
from collections.abc import Callable

from mcp_local_llm.backend.types import ChatMessage, CompletionRequest
from mcp_local_llm.config import LocalLLMSettings
from mcp_local_llm.tools.schemas import (
    ClassifyArguments,
    CompleteArguments,
    DraftArguments,
    ExtractArguments,
    OutputFormat,
    SummarizeArguments,
    SummaryStyle,
    TransformArguments,
)

SUMMARIZE_TEMPERATURE = 0.3
DRAFT_TEMPERATURE = 0.7
CLASSIFY_TEMPERATURE = 0.1
EXTRACT_TEMPERATURE = 0.1
TRANSFORM_TEMPERATURE = 0.3

CLASSIFY_MAX_TOKENS = 50
CLASSIFY_EXPLAIN_MAX_TOKENS = 200

STYLE_INSTRUCTIONS: dict[SummaryStyle, Callable[[int | float], str]] = {
    SummaryStyle.BRIEF: lambda n: (
        f"Provide a concise summary in approximately {n} words."
    ),
    SummaryStyle.DETAILED: lambda n: (
        f"Provide a thorough summary covering all main points in approximately {n} words."
    ),
    SummaryStyle.BULLET_POINTS: lambda n: (
        f"Summarize as bullet points (aim for {math.ceil(n / 20)} key points)."
    ),
    SummaryStyle.EXECUTIVE: lambda n: (
        "Provide an executive summary with key takeaways and action items "
        f"in approximately {n} words."
    ),
}

FORMAT_INSTRUCTIONS: dict[OutputFormat, str] = {
    OutputFormat.JSON: "Output as valid JSON object.",
    OutputFormat.YAML: "Output as YAML.",
    OutputFormat.MARKDOWN_TABLE: "Output as a markdown table.",
}


def _check_exhaustive(table: dict, enum_type: type) -> None:
    missing = set(enum_type) - set(table)
    if missing:
        names = ", ".join(sorted(member.value for member in missing))
        raise RuntimeError(f"No {enum_type.__name__} entry for: {names}")


_check_exhaustive(STYLE_INSTRUCTIONS, SummaryStyle)
_check_exhaustive(FORMAT_INSTRUCTIONS, OutputFormat)


def _messages(system: str | None, user: str) -> tuple[ChatMessage, ...]:
    if system:
        return (
            ChatMessage(role="system", content=system),
            ChatMessage(role="user", content=user),
        )
    return (ChatMessage(role="user", content=user),)


def build_summarize(
    args: SummarizeArguments, settings: LocalLLMSettings
) -> CompletionRequest:
    """Build the request for local_summarize.

    The token budget is twice the requested word count, rounded up to a
    whole token and capped at the configured default.
    """
    instruction = STYLE_INSTRUCTIONS[args.style](args.max_length)
    focus = f"\nFocus especially on: {args.focus}" if args.focus else ""

    return CompletionRequest(
        model=settings.model,
        messages=_messages(
            f"You are a precise summarization assistant. {instruction}{focus}",
            f"Summarize the following text:\n\n{args.text}",
        ),
        max_tokens=math.ceil(min(args.max_length * 2, settings.max_tokens)),
        temperature=SUMMARIZE_TEMPERATURE,
    )


def build_draft(args: DraftArguments, settings: LocalLLMSettings) -> CompletionRequest:
    """Build the request for local_draft."""
    format_clause = f"Format: {args.format}" if args.format else ""
    tone_clause = f"Tone: {args.tone}" if args.tone else ""
    system = (
        "You are a drafting assistant. Generate initial drafts that can be "
        f"refined later. {format_clause} {tone_clause}"
    ).strip()

    return CompletionRequest(
        model=settings.model,
        messages=_messages(
            system,
            f"Task: {args.task}\n\nContext:\n{args.context}\n\nGenerate a draft:",
        ),
        max_tokens=settings.max_tokens,
        temperature=DRAFT_TEMPERATURE,
    )


def build_classify(
    args: ClassifyArguments, settings: LocalLLMSettings
) -> CompletionRequest:
    """Build the request for local_classify.

    Classification runs near-deterministic with a small token budget; asking
    for an explanation raises the budget.
    """
    if args.allow_multiple:
        multiple = "You may assign multiple categories if appropriate."
    else:
        multiple = "Assign exactly one category."

    if args.explain:
        explain = "Provide a brief explanation for your classification."
    else:
        explain = "Only output the category name(s), nothing else."

    categories = ", ".join(args.categories)
    system = (
        "You are a classification assistant. Classify text into one of these "
        f"categories: {categories}. {multiple} {explain}"
    )

    return CompletionRequest(
        model=settings.model,
        messages=_messages(system, f"Classify this text:\n\n{args.text}"),
        max_tokens=CLASSIFY_EXPLAIN_MAX_TOKENS if args.explain else CLASSIFY_MAX_TOKENS,
        temperature=CLASSIFY_TEMPERATURE,
    )


def build_extract(
    args: ExtractArguments, settings: LocalLLMSettings
) -> CompletionRequest:
    """Build the request for local_extract."""
    fields = ", ".join(args.fields)
    system = (
        "You are a data extraction assistant. Extract the following fields "
        f"from text: {fields}. {FORMAT_INSTRUCTIONS[args.output_format]} "
        'If a field is not found, use null or "not found".'
    )

    return CompletionRequest(
        model=settings.model,
        messages=_messages(
            system, f"Extract information from this text:\n\n{args.text}"
        ),
        max_tokens=settings.max_tokens,
        temperature=EXTRACT_TEMPERATURE,
    )


def build_transform(
    args: TransformArguments, settings: LocalLLMSettings
) -> CompletionRequest:
    return CompletionRequest(
        model=settings.model,
        messages=_messages(
            "You are a text transformation assistant. "
            "Apply the requested transformation precisely.",
            f"Instruction: {args.instruction}\n\nText to transform:\n{args.text}",
        ),
        max_tokens=settings.max_tokens,
        temperature=TRANSFORM_TEMPERATURE,
    )


def build_complete(
    args: CompleteArguments, settings: LocalLLMSettings
) -> CompletionRequest:
    """Build the request for local_complete.

    The prompt is sent verbatim. A missing or zero max_tokens uses the
    configured default and a fractional one is rounded up. Temperature only
    falls back when it is missing, so an explicit 0 reaches the backend.
    """
    temperature = (
        settings.temperature if args.temperature is None else args.temperature
    )

    return CompletionRequest(
        model=settings.model,
        messages=_messages(args.system, args.prompt),
        max_tokens=math.ceil(args.max_tokens or settings.max_tokens),
        temperature=temperature,
    )
