"""Editor session: commits engine results against a single buffer."""

from .bus import EventBus
from .editor import Commit, EditorSession

__all__ = ["Commit", "EditorSession", "EventBus"]
