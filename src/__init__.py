"""pageforge - schema-driven editor for structured marketing-page content."""

__version__ = "0.1.0"
