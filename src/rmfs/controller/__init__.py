"""Internal controller exports for rmfs."""

from __future__ import annotations

from .remarkable_controller import RemarkableController

__all__ = ["RemarkableController"]
