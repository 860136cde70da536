"""Textual host adapter; ``app`` (the demo) needs the ``textual`` package."""

from .controller import TextualFormatAdapter, TextualUIHooks

__all__ = ["TextualFormatAdapter", "TextualUIHooks"]
