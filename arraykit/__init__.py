"""Classic algorithms on integer sequences and strings: sums, scans, rearranging, searching."""

__version__ = "0.1.0"
__all__ = ["sums", "scans", "rearrange", "strings", "search"]