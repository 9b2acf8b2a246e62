from .html import strip_tags
from .logging import configure_logging, ExtraFormatter

__all__ = ["strip_tags", "configure_logging", "ExtraFormatter"]
