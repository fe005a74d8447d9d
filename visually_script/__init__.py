"""Visually Script: build Visually presentations from Python and export them as JSON."""

from .config import Settings, get_settings
from .presentation import Presentation
from .services.diagnostics import Diagnostic
from .services.ids import IdGenerator
from .slide import Slide

__all__ = ["Presentation", "Slide", "IdGenerator", "Diagnostic", "Settings", "get_settings"]
