"""In-memory car rental simulation engine."""

__version__ = "0.1.0"
