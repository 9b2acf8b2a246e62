"""AI-assisted orchid care-profile inference."""

__version__ = "1.0.0"
