"""Textual application for browsing protocol adaptors."""

import argparse
import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static

from config.settings import get_settings
from src.adaptors.exceptions import AdaptorError
from src.core.models import ProtocolAdaptor
from src.data.pipeline import AdaptorPipeline
from src.ui.widgets.adaptor_table import AdaptorTable

logger = logging.getLogger(__name__)


class AdaptorBrowserApp(App):
    """Terminal UI listing the built protocol adaptors."""

    TITLE = "Protocol Adaptors"

    CSS = """
    Screen { background: #000000; }

    AdaptorTable {
        height: 1fr;
    }

    #detail {
        height: auto;
        max-height: 8;
        background: #111;
        color: #ccc;
        padding: 0 1;
    }

    #status {
        dock: bottom;
        height: 1;
        background: #111;
        color: #888;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "refresh", "Refresh"),
    ]

    def __init__(self, adaptor_type: Optional[str] = None, pipeline: Optional[AdaptorPipeline] = None):
        super().__init__()
        self.settings = get_settings()
        self.pipeline = pipeline or AdaptorPipeline(settings=self.settings)
        self.adaptor_type = adaptor_type or self.settings.adaptor_type

    def compose(self) -> ComposeResult:
        yield Header()
        yield AdaptorTable(on_adaptor_select=self._show_detail, id="adaptors")
        yield Static("", id="detail")
        yield Static(f"Type: {self.adaptor_type or 'all'} | R: Refresh  Q: Quit", id="status")
        yield Footer()

    def on_mount(self) -> None:
        """Load adaptors after the app is mounted."""
        self._load(force_refresh=False)

    def action_refresh(self) -> None:
        """Rebuild the adaptor list, bypassing caches."""
        self._load(force_refresh=True)

    def _load(self, force_refresh: bool) -> None:
        status = self.query_one("#status", Static)
        try:
            adaptors = self.pipeline.get_adaptors(self.adaptor_type, force_refresh=force_refresh)
        except AdaptorError as e:
            logger.error(f"Error building adaptors: {e}")
            status.update(f"Error: {e}")
            return
        self.query_one("#adaptors", AdaptorTable).load_adaptors(adaptors)
        status.update(f"Type: {self.adaptor_type or 'all'} | {len(adaptors)} adaptors | R: Refresh  Q: Quit")

    def _show_detail(self, adaptor: ProtocolAdaptor) -> None:
        lines = [f"{adaptor.label} ({adaptor.module}, id {adaptor.id})"]
        if adaptor.methodology_url:
            lines.append(f"Code: {adaptor.methodology_url}")
        if isinstance(adaptor.methodology, str):
            lines.append(adaptor.methodology)
        elif adaptor.methodology:
            lines.extend(f"{k}: {v}" for k, v in adaptor.methodology.items())
        self.query_one("#detail", Static).update("\n".join(lines))


def main():
    parser = argparse.ArgumentParser(description="Browse protocol adaptors")
    parser.add_argument("--type", dest="adaptor_type", default=None, help="Adaptor type (dexs, fees, ...)")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    AdaptorBrowserApp(adaptor_type=args.adaptor_type).run()


if __name__ == "__main__":
    main()
