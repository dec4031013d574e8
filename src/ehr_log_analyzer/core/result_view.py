"""Tabular views over a ParseResult: search, filters, CSV export and summary metrics."""

from typing import Any, Dict, List, Optional, Union
from pathlib import Path
import pandas as pd

from .models import ParseResult
from ..utils.config import ConfigManager, config as default_config
from ..utils.exceptions import ExportError, ValidationError
from ..utils.logger import get_logger

logger = get_logger("view")


ALL = "all"
REPORT_SEVERITIES = ["Fatal", "Error"]


class ResultView:
    """
    Presents the four collections of a ParseResult as DataFrames.

    Features:
    - Case-insensitive substring search over each tab's search fields
    - Categorical filter (RPC type on ``rpcs``, severity on ``eac``)
    - CSV export of exactly the rows currently shown
    - Summary metrics for the overview cards
    """

    def __init__(self, result: ParseResult, config: Optional[ConfigManager] = None):
        self.result = result
        self.config = config or default_config
        self._records = {
            "players": [p.to_dict() for p in result.players],
            "rpcs": [r.to_dict() for r in result.rpcs],
            "chats": [c.to_dict() for c in result.chats],
            "eac": [e.to_dict() for e in result.eac_reports],
        }

    @property
    def tabs(self) -> List[str]:
        return list(self._records.keys())

    def tab_config(self, tab: str) -> Dict[str, Any]:
        if tab not in self._records:
            raise ValidationError(
                f"Unknown tab '{tab}'. Choose one of: {', '.join(self.tabs)}"
            )
        return self.config.get_tab_config(tab)

    def frame(self, tab: str) -> pd.DataFrame:
        """All rows of a tab, unfiltered, in parse order."""
        columns = self.tab_config(tab)["columns"]
        return pd.DataFrame(self._records[tab], columns=columns)

    def filter_options(self, tab: str) -> List[str]:
        """Values accepted by the categorical filter of a tab (besides 'all')."""
        if tab == "rpcs":
            return self.rpc_types()
        if tab == "eac":
            return list(REPORT_SEVERITIES)
        self.tab_config(tab)
        return []

    def rpc_types(self) -> List[str]:
        """Sorted unique RPC type names."""
        return sorted({rpc.rpc_type for rpc in self.result.rpcs})

    def filtered(
        self,
        tab: str,
        search_term: Optional[str] = None,
        filter_value: Optional[str] = None
    ) -> pd.DataFrame:
        """
        Rows of a tab after the categorical filter and search are applied.

        Args:
            tab: One of players, rpcs, chats, eac
            search_term: Text to search for (case-insensitive); empty means no search
            filter_value: Exact value for the tab's filter field; None or 'all' means no filter

        Returns:
            Filtered DataFrame (RPC rows sorted by count, highest first)
        """
        tab_config = self.tab_config(tab)
        df = self.frame(tab)

        if filter_value and filter_value != ALL:
            filter_field = tab_config.get("filter_field")
            if not filter_field:
                raise ValidationError(f"Tab '{tab}' has no filter")
            df = df[df[filter_field] == filter_value]

        if search_term:
            df = self.search_text(df, search_term, tab_config["search_fields"])

        sort_by = tab_config.get("sort_by")
        if sort_by:
            df = df.sort_values(sort_by, ascending=False, kind="stable")

        logger.debug(f"Tab '{tab}': showing {len(df)} of {len(self._records[tab])} rows")
        return df.reset_index(drop=True)

    @staticmethod
    def search_text(df: pd.DataFrame, search_term: str, search_columns: List[str]) -> pd.DataFrame:
        """Keep rows where any of the columns contains the term, ignoring case."""
        if df.empty:
            return df

        mask = pd.Series(False, index=df.index, dtype=bool)

        for col in search_columns:
            if col not in df.columns:
                continue

            mask |= df[col].astype(str).str.contains(
                search_term,
                case=False,
                na=False,
                regex=False
            )

        return df[mask]

    def export_csv(
        self,
        tab: str,
        output_path: Optional[Union[str, Path]] = None,
        search_term: Optional[str] = None,
        filter_value: Optional[str] = None
    ) -> Path:
        """
        Write the currently filtered rows of a tab to CSV.

        Args:
            tab: Tab to export
            output_path: Target file or directory; defaults to the tab's file name
                in the current directory

        Returns:
            Path of the written file
        """
        df = self.filtered(tab, search_term, filter_value)

        path = Path(output_path) if output_path else Path(".")
        if path.is_dir():
            path = path / self.tab_config(tab)["export_file"]

        try:
            df.to_csv(path, index=False, encoding="utf-8")
        except OSError as e:
            raise ExportError(f"Could not write {path}: {e}")

        logger.info(f"Exported {len(df)} rows from '{tab}' to {path}")
        return path

    def summary(self) -> Dict[str, int]:
        """Counts shown on the overview cards."""
        return {
            "total_players": len(self.result.players),
            "rpc_events": self.result.total_rpc_calls,
            "chat_messages": len(self.result.chats),
            "eac_reports": len(self.result.eac_reports),
        }
