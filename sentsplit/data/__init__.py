"""Output modules."""

from .output_writer import OutputWriter, sanitize_text

__all__ = ["OutputWriter", "sanitize_text"]
