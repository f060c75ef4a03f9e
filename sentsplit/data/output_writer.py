"""Output writer for split sentences and passage statuses."""

import json
import re
from pathlib import Path
from typing import Iterable, List, Literal, Union

import pandas as pd

# Regex pattern for illegal control characters (except tab, newline, carriage return)
ILLEGAL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f]')


def sanitize_text(text: str) -> str:
    """Remove control characters that may interfere with CSV/Excel.

    Args:
        text: Input text

    Returns:
        Sanitized text
    """
    if not text:
        return text
    return ILLEGAL_CHARS.sub('', text)


class OutputWriter:
    """
    Writes row dictionaries to CSV or JSON.

    Can be used as a context manager; rows are buffered and written on exit.
    """

    def __init__(
        self,
        output_path: Union[str, Path],
        format: Literal["csv", "json"] = "csv",
    ):
        """
        Initialize the output writer.

        Args:
            output_path: Path to write output file.
            format: Output format (csv or json).
        """
        self.output_path = Path(output_path)
        self.format = format
        self._buffer: List[dict] = []

        # Ensure output directory exists
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

    def write_row(self, row: dict) -> None:
        """
        Write a single row to the buffer.

        Args:
            row: Column name to value mapping.
        """
        self._buffer.append(row)

    def write_rows(self, rows: Iterable[dict]) -> None:
        """Write multiple rows to the buffer."""
        for row in rows:
            self.write_row(row)

    def flush(self) -> None:
        """Write buffered rows to file."""
        if not self._buffer:
            return

        if self.format == "csv":
            df = pd.DataFrame(self._buffer)
            for col in df.select_dtypes(include=["object"]).columns:
                df[col] = df[col].apply(
                    lambda x: sanitize_text(x) if isinstance(x, str) else x
                )
            df.to_csv(self.output_path, index=False)
        elif self.format == "json":
            with open(self.output_path, "w", encoding="utf-8") as f:
                json.dump(self._buffer, f, ensure_ascii=False, indent=2)

    def __enter__(self) -> "OutputWriter":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - flush on close."""
        self.flush()

    @property
    def count(self) -> int:
        """Return the number of rows in the buffer."""
        return len(self._buffer)
