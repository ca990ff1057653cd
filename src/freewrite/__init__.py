"""Plain-text writing editor: buffer, find/replace engine, and Textual host."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "runtime",
    "search",
    "session",
]

__version__ = "0.1.0"
