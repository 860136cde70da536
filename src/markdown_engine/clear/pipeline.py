"""Ordered clear-formatting pipeline and its public entry point."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Sequence

from markdown_engine.buffer import EditResult, ensure_selection
from markdown_engine.runtime.telemetry import span

from . import stages

Transform = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class ClearStage:
    name: str
    transform: Transform

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("stage name cannot be empty")
        if not callable(self.transform):
            raise TypeError("transform must be callable")

    def __call__(self, text: str) -> str:
        return self.transform(text)


DEFAULT_STAGES: tuple[ClearStage, ...] = (
    ClearStage("fenced_code", stages.strip_fenced_code),
    ClearStage("inline_code", stages.strip_inline_code),
    ClearStage("images", stages.strip_images),
    ClearStage("links", stages.strip_links),
    ClearStage("link_definitions", stages.drop_link_definitions),
    ClearStage("footnotes", stages.drop_footnotes),
    ClearStage("emphasis", stages.strip_emphasis),
    ClearStage("strikethrough", stages.strip_strikethrough),
    ClearStage("escapes", stages.unescape),
    ClearStage("html", stages.strip_html),
    ClearStage("line_markers", stages.strip_line_markers),
    ClearStage("tables", stages.flatten_tables),
    ClearStage("whitespace", stages.normalize_whitespace),
)


class ClearPipeline:
    """Runs its stages in order; the order is part of the behaviour."""

    def __init__(self, stages: Iterable[ClearStage] = DEFAULT_STAGES) -> None:
        self._stages: tuple[ClearStage, ...] = tuple(stages)
        names = [stage.name for stage in self._stages]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate stage names in {names}")

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(stage.name for stage in self._stages)

    def __iter__(self) -> Iterator[ClearStage]:
        return iter(self._stages)

    def without(self, *names: str) -> "ClearPipeline":
        unknown = set(names) - set(self.names)
        if unknown:
            raise KeyError(f"unknown stages: {sorted(unknown)}")
        return ClearPipeline(stage for stage in self._stages if stage.name not in names)

    def run(self, text: str) -> str:
        for stage in self._stages:
            text = stage(text)
        return text

    def trace(self, text: str) -> Sequence[tuple[str, str]]:
        """Output after each stage, for debugging pattern interactions."""

        steps: list[tuple[str, str]] = []
        for stage in self._stages:
            text = stage(text)
            steps.append((stage.name, text))
        return steps


DEFAULT_PIPELINE = ClearPipeline()


def clear_formatting(
    text: str, start: int, end: int, *, pipeline: ClearPipeline = DEFAULT_PIPELINE
) -> EditResult:
    """Strip markdown/HTML syntax from ``text[start:end]``.

    A caret (``start == end``) is a defined no-op: the buffer and selection
    come back unchanged with ``changed=False``.
    """

    with span(
        "clear::selection",
        component="clear",
        metadata={"start": start, "end": end},
    ) as handle:
        selection = ensure_selection(text, start, end)
        if selection.is_caret:
            handle.add_metadata("noop", True)
            return EditResult.unchanged(text, start, end, label="clear")

        cleared = pipeline.run(text[start:end])
        new_text = text[:start] + cleared + text[end:]
        handle.add_metadata("removed", selection.length - len(cleared))
        return EditResult(new_text, start, start + len(cleared), label="clear")
