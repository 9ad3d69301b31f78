"""Textual front end."""

from medrpg.ui.app import MedSchoolApp, style_line

__all__ = ["MedSchoolApp", "style_line"]
