"""Toybox ScanAccumulator — opt-in profiling for scanning.

This module provides accumulated metrics while lexers run:
- Total profiling time
- Tokens emitted
- Matches discarded (whitespace, comments)
- Characters consumed by rules

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from toybox.profiling import profiled_scan

    with profiled_scan() as metrics:
        tokens = list(lexer.tokenize())

    print(metrics.summary())
    # {"total_ms": 0.4, "tokens": 12, "discarded": 11, "characters": 58, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during scanning.

    Attributes:
        start_time: Profiling start timestamp.
        tokens: Number of tokens emitted by rule actions.
        discarded: Number of matches whose action returned None.
        characters: Number of input characters consumed by rules.
        inputs: Number of input() resets observed.

    """

    start_time: float = field(default_factory=perf_counter)
    tokens: int = 0
    discarded: int = 0
    characters: int = 0
    inputs: int = 0

    def record_input(self) -> None:
        self.inputs += 1

    def record_match(self, length: int, emitted: bool) -> None:
        """Record one rule match.

        Args:
            length: Number of characters the match consumed.
            emitted: Whether the action produced a token.

        """
        self.characters += length
        if emitted:
            self.tokens += 1
        else:
            self.discarded += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, tokens, discarded, characters, inputs.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "tokens": self.tokens,
            "discarded": self.discarded,
            "characters": self.characters,
            "inputs": self.inputs,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated by every lexer that runs
        inside the block.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = ["ScanAccumulator", "get_scan_accumulator", "profiled_scan"]
