"""TUI entrypoint."""

from __future__ import annotations

from .core import TagSession
from .serializer import TagMode
from .ui.app import TagXmlApp


def run_tui(mode: TagMode = TagMode.REGULAR) -> str | None:
    """Run the form; returns the copied element text, or None when cancelled."""
    app = TagXmlApp(TagSession(mode=mode))
    return app.run()
