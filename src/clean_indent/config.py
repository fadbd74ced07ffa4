"""User-facing configuration for the clean-indent behaviors."""

from __future__ import annotations

from dataclasses import dataclass

from clean_indent.runtime import telemetry


@dataclass(slots=True)
class IndentConfig:
    """Knobs consumed by the indent session and the in-memory host.

    ``simple_indent_mode`` swaps the host's mode-specific indenter for a plain
    "copy the previous non-blank line" policy. ``tab_width`` sets tab stops used
    for column math; ``indent_width`` is the step used by language indenters.
    """

    simple_indent_mode: bool = False
    tab_width: int = 8
    indent_width: int = 4
    indent_tabs_mode: bool = False
    report_trims: bool = True

    def __post_init__(self) -> None:
        if self.tab_width <= 0:
            raise ValueError("tab_width must be positive")
        if self.indent_width <= 0:
            raise ValueError("indent_width must be positive")

    @classmethod
    def from_env(cls) -> "IndentConfig":
        """Build a config from ``CLEAN_INDENT_*`` environment variables."""

        defaults = cls()
        return cls(
            simple_indent_mode=telemetry.env_flag(
                "SIMPLE_MODE", defaults.simple_indent_mode
            ),
            tab_width=_env_int("TAB_WIDTH", defaults.tab_width),
            indent_width=_env_int("INDENT_WIDTH", defaults.indent_width),
            indent_tabs_mode=telemetry.env_flag(
                "TABS_MODE", defaults.indent_tabs_mode
            ),
            report_trims=telemetry.env_flag("REPORT_TRIMS", defaults.report_trims),
        )


def _env_int(name: str, fallback: int) -> int:
    raw = telemetry.env(name)
    if raw is None:
        return fallback
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(
            f"{telemetry.ENV_PREFIX}{name} must be an integer, got {raw!r}"
        ) from exc


__all__ = ["IndentConfig"]
