"""
onedata.generation.base

Generator interface and error type.
"""

from __future__ import annotations

from typing import Protocol


class GenerationError(Exception):
    """Raised by generator clients on transport errors or unusable responses."""


class TextGenerator(Protocol):
    async def generate(self, *, model: str, prompt: str) -> str:
        """
        Return the generated text for `prompt`.
        Implementations raise GenerationError when no text can be produced.
        """
