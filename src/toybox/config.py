"""ContextVar-based scan configuration for Toybox.

Provides context-local defaults using Python's ContextVars (PEP 567).
A Lexer snapshots the active config when it is constructed; explicit
constructor arguments take precedence over it.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from toybox.config import ScanConfig, scan_config_context
    from toybox.lexer import Lexer, MatchStrategy

    with scan_config_context(ScanConfig(match_strategy=MatchStrategy.LONGEST)):
        lexer = Lexer()  # uses LONGEST

    # Or set/reset explicitly
    set_scan_config(ScanConfig(initial_state="CODE"))
    try:
        lexer = Lexer()
    finally:
        reset_scan_config()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from toybox.lexer.states import INITIAL
from toybox.lexer.strategy import MatchStrategy


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        match_strategy: Policy used when several rules match at one position
        initial_state: Lexical state at the bottom of a fresh state stack
        regex_flags: `re` flags used when compiling string patterns

    """

    match_strategy: MatchStrategy = MatchStrategy.FIRST
    initial_state: str = INITIAL
    regex_flags: int = 0

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored. A string match_strategy is looked up by
        member name ("FIRST", "longest", ...).

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.

        Returns:
            New ScanConfig instance with values from dict.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "match_strategy": "longest",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.match_strategy
            <MatchStrategy.LONGEST: 'longest'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        strategy = filtered.get("match_strategy")
        if strategy is not None and not isinstance(strategy, MatchStrategy):
            filtered["match_strategy"] = MatchStrategy.parse(strategy)
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (context-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: ScanConfig to use within the context.

    Example:
        >>> with scan_config_context(ScanConfig(match_strategy=MatchStrategy.LAST)):
        ...     lexer = Lexer()
        >>> lexer.match_strategy
        <MatchStrategy.LAST: 'last'>

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
