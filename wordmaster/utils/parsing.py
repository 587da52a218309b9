"""Text parsing utilities for consistent text processing across the application."""

import unicodedata
from typing import Optional, Tuple


class TextParser:
    """
    Centralized text parsing utilities.

    Single source of truth for field splitting and the
    normalization used when comparing typed answers.
    """

    BOM = "\ufeff"

    @classmethod
    def normalize_unicode(cls, text: str) -> str:
        """
        Normalize text to NFC form for consistent Unicode handling.

        Prevents issues with characters like é being represented as
        either a single codepoint (NFC) or base + combining accent (NFD).

        Args:
            text: Input text

        Returns:
            NFC-normalized text
        """
        if not text:
            return ""
        return unicodedata.normalize('NFC', str(text))

    @classmethod
    def split_pair(cls, line: str, delimiter: str = ';') -> Optional[Tuple[str, str]]:
        """
        Split a line into (term, definition) on the first delimiter.

        Everything after the first delimiter belongs to the definition,
        so "foo;bar;baz" gives ("foo", "bar;baz").

        Args:
            line: One line of input
            delimiter: Field delimiter

        Returns:
            (term, definition) tuple, or None if the line has no delimiter
            or either field is empty
        """
        parts = line.split(delimiter)
        if len(parts) < 2:
            return None

        term = parts[0].strip()
        definition = delimiter.join(parts[1:]).strip()
        if not term or not definition:
            return None

        return cls.normalize_unicode(term), cls.normalize_unicode(definition)

    @classmethod
    def normalize_answer(cls, text: str) -> str:
        """Normalize a typed answer for comparison: trim and lowercase."""
        return cls.normalize_unicode(text).strip().lower()
