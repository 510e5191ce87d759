"""Protocol adaptor DataTable widget."""

from typing import Callable, List, Optional

from rich.text import Text
from textual.widgets import DataTable

from src.core.models import ProtocolAdaptor, ProtocolType


class AdaptorTable(DataTable):
    """
    DataTable widget for displaying protocol adaptors.

    Shows module key, display name, category, chains and status.
    """

    COLUMNS = [
        ("Module", 18),
        ("Name", 28),
        ("Category", 16),
        ("Type", 10),
        ("Chains", 30),
        ("Status", 9),
    ]

    MAX_CHAINS_SHOWN = 4

    def __init__(
        self,
        on_adaptor_select: Optional[Callable[[ProtocolAdaptor], None]] = None,
        **kwargs,
    ):
        super().__init__(
            cursor_type="row",
            zebra_stripes=True,
            **kwargs,
        )
        self._adaptors: List[ProtocolAdaptor] = []
        self._on_adaptor_select = on_adaptor_select

    def on_mount(self) -> None:
        """Set up columns when widget is mounted."""
        for name, width in self.COLUMNS:
            self.add_column(name, width=width)

    def load_adaptors(self, adaptors: List[ProtocolAdaptor]) -> None:
        """
        Load adaptors into the table.

        Args:
            adaptors: List of ProtocolAdaptor records to display
        """
        self._adaptors = adaptors
        self.clear()

        for idx, adaptor in enumerate(adaptors):
            self.add_row(
                Text(adaptor.module, style="dim"),
                Text(adaptor.label, style="bold"),
                self._format_category(adaptor.category),
                self._format_type(adaptor.protocol_type),
                self._format_chains(adaptor.chains),
                self._format_status(adaptor.disabled),
                # Breakdown adapters share a module and id, so key by position
                key=str(idx),
            )

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Handle row selection."""
        if self._on_adaptor_select and event.row_key and event.row_key.value is not None:
            idx = int(event.row_key.value)
            if idx < len(self._adaptors):
                self._on_adaptor_select(self._adaptors[idx])

    def _format_category(self, category: Optional[str]) -> Text:
        if not category:
            return Text("--", style="dim")
        style = "magenta" if category == "Chain" else "cyan"
        return Text(category, style=style)

    def _format_type(self, protocol_type: Optional[ProtocolType]) -> Text:
        if protocol_type is None:
            return Text("--", style="dim")
        return Text(protocol_type.value)

    def _format_chains(self, chains: List[str]) -> Text:
        """Format chain list, truncated after a few chains."""
        if not chains:
            return Text("--", style="dim")
        shown = ", ".join(chains[: self.MAX_CHAINS_SHOWN])
        hidden = len(chains) - self.MAX_CHAINS_SHOWN
        if hidden > 0:
            shown += f" +{hidden}"
        return Text(shown)

    def _format_status(self, disabled: bool) -> Text:
        if disabled:
            return Text("disabled", style="red")
        return Text("active", style="green")
