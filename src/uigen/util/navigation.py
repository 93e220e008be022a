"""Navigator implementations."""

from __future__ import annotations

import logging
import webbrowser

from uigen.auth.collaborators import Navigator
from uigen.util.config import resolve_app_url

logger = logging.getLogger(__name__)


class HistoryNavigator(Navigator):
    """Keeps the visited paths in memory."""

    def __init__(self):
        self.history: list[str] = []

    @property
    def current(self) -> str | None:
        return self.history[-1] if self.history else None

    def go_to(self, path: str) -> None:
        self.history.append(path)


class BrowserNavigator(HistoryNavigator):
    """Opens project paths in the user's web browser."""

    def __init__(self, app_url: str | None = None):
        super().__init__()
        self.app_url = resolve_app_url(app_url)

    def url_for(self, path: str) -> str:
        return f"{self.app_url}/{path.lstrip('/')}"

    def go_to(self, path: str) -> None:
        super().go_to(path)
        url = self.url_for(path)
        logger.info("Opening %s", url)
        webbrowser.open(url)
