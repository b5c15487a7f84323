"""Interactive title pickers."""

from .base import Picker, get_picker

__all__ = ["Picker", "get_picker"]
