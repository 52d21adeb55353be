"""FPL team analyzer: squad ratings, transfer and captaincy suggestions."""

__version__ = "0.1.0"
