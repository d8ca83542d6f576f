"""coordchess — chess board model and coordinate-notation move validation."""

__version__ = "0.1.0"
