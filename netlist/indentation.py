"""Indentation prefix used when writing nested XML."""

from __future__ import annotations


class Indentation:
    """A growing and shrinking run of spaces."""

    def __init__(self, tabulation_size: int = 2) -> None:
        self.tabulation_size = tabulation_size
        self._text = ""

    def increase(self) -> Indentation:
        """Add one level of indentation."""
        self._text += " " * self.tabulation_size
        return self

    def decrease(self) -> Indentation:
        """Remove one level of indentation, never going below none."""
        if len(self._text) > self.tabulation_size:
            self._text = self._text[: len(self._text) - self.tabulation_size]
        else:
            self._text = ""
        return self

    def __str__(self) -> str:
        return self._text