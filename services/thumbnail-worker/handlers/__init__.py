"""Handler layer exports."""

from handlers.preview_handler import PreviewHandler

__all__ = ["PreviewHandler"]
