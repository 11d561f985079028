"""
CSV emitter - flattens reshaped submission documents into a CSV string.

Polars-based implementation:
- Nested objects flatten to dotted column names ("form.createdAt", "address.city")
- Arrays of plain values join into one cell with the array separator
- Arrays of objects (datagrid rows) expand into one CSV row per item; the
  remaining cells of the record are repeated on every expanded row (gap fill)
- Column order: requested headers first, then any extra data columns in
  first-seen order
- Cast all columns to Utf8, fill nulls with empty string
- write_csv(include_header=True, separator=',', quote_style='necessary', line_terminator='\n')

The header row is written even when there are no records.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, List
import polars as pl

from chefs.core.config import settings

Row = Dict[str, str]


class CSVEmitter:
    """
    Emits submission exports as CSV text.

    Features:
    - Caller-defined header order (form metadata, then form design fields)
    - Header reconciliation across records with different field sets
    - Missing cells rendered empty
    - UTF-8, LF line endings, necessary quoting
    """

    def __init__(self, array_separator: str = None, fill_gaps: bool = True):
        """
        Initialize CSV emitter.

        Args:
            array_separator: Joins arrays of plain values (default from settings)
            fill_gaps: Repeat record values on rows expanded from arrays of objects
        """
        self.array_separator = array_separator or settings.EXPORT_ARRAY_SEPARATOR
        self.fill_gaps = fill_gaps

    def emit(self, records: List[Dict[str, Any]], headers: List[str]) -> str:
        """
        Render records as CSV.

        Args:
            records: Reshaped submission documents
            headers: Preferred column order

        Returns:
            CSV text including the header row
        """
        rows: List[Row] = []
        for record in records:
            rows.extend(self._flatten(record, ""))

        columns = self._reconcile_headers(headers, rows)
        df = self._build_frame(rows, columns)
        df = self._cast_and_fill(df)

        return df.write_csv(
            include_header=True,
            separator=",",
            quote_style="necessary",
            line_terminator="\n",
        )

    def _flatten(self, value: Any, prefix: str) -> List[Row]:
        """Flatten a value into one or more partial rows keyed by dotted path."""
        if isinstance(value, dict):
            parts = [self._flatten(v, f"{prefix}.{k}" if prefix else str(k)) for k, v in value.items()]
            return self._merge(parts)

        if isinstance(value, (list, tuple)):
            if any(isinstance(item, (dict, list, tuple)) for item in value):
                rows: List[Row] = []
                for item in value:
                    rows.extend(self._flatten(item, prefix))
                return rows or [{}]
            if not value:
                return [{}]
            return [{prefix: self.array_separator.join(self._format_scalar(v) for v in value)}]

        if value is None:
            return [{}]
        return [{prefix: self._format_scalar(value)}]

    def _merge(self, parts: List[List[Row]]) -> List[Row]:
        """
        Combine sibling fragments side by side.

        Row i takes fragment i of every sibling. Siblings with fewer fragments
        repeat their last one when gap filling is on, otherwise leave blanks.
        """
        height = max((len(p) for p in parts), default=1)
        merged: List[Row] = []
        for i in range(height):
            row: Row = {}
            for fragments in parts:
                if i < len(fragments):
                    row.update(fragments[i])
                elif self.fill_gaps and fragments:
                    row.update(fragments[-1])
            merged.append(row)
        return merged or [{}]

    def _format_scalar(self, value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        if isinstance(value, Decimal):
            return format(value, "f")
        return str(value)

    def _reconcile_headers(self, headers: Iterable[str], rows: List[Row]) -> List[str]:
        """Requested headers (deduplicated) followed by unseen data columns."""
        columns: List[str] = []
        seen = set()
        for header in headers:
            if header not in seen:
                seen.add(header)
                columns.append(header)

        for row in rows:
            for key in row:
                if key not in seen:
                    seen.add(key)
                    columns.append(key)

        return columns

    def _build_frame(self, rows: List[Row], columns: List[str]) -> pl.DataFrame:
        """Select columns in order (missing cells → null)."""
        return pl.DataFrame(
            {column: [row.get(column) for row in rows] for column in columns},
            schema={column: pl.Utf8 for column in columns},
        )

    def _cast_and_fill(self, df: pl.DataFrame) -> pl.DataFrame:
        """Cast all columns to Utf8 and fill nulls with empty string."""
        casted = df.select([pl.col(c).cast(pl.Utf8) for c in df.columns])
        return casted.select([pl.col(c).fill_null("") for c in casted.columns])
