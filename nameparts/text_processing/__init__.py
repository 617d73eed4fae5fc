"""Text preparation that runs before any vocabulary lookups."""

from nameparts.text_processing.text_preprocessor import NICKNAME_PATTERN, TextPreprocessor

__all__ = ["NICKNAME_PATTERN", "TextPreprocessor"]
