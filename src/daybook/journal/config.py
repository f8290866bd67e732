"""Configuration dataclass for the journal store.

A pure data container with sensible defaults. Build it directly, or from the
``journal.*`` section of a :class:`daybook.core.config.Config`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from daybook.core.exceptions import ConfigurationError

if TYPE_CHECKING:
    from daybook.core.config import Config

# Colours handed out to new categories in rotation (tailwind 500 shades)
CATEGORY_PALETTE: tuple[str, ...] = (
    "#3B82F6",  # blue
    "#10B981",  # emerald
    "#F59E0B",  # amber
    "#EF4444",  # red
    "#8B5CF6",  # violet
    "#EC4899",  # pink
    "#14B8A6",  # teal
    "#F06F1A",  # primary orange
)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


@dataclass
class JournalConfig:
    """Settings for the journal store.

    Attributes:
        sentiment_enabled: Recompute entry sentiment on every save.
        autosave_delay: Quiet period (seconds) before an editor session writes.
        category_palette: Colours assigned to new categories in rotation.
    """

    sentiment_enabled: bool = True
    autosave_delay: float = 1.0
    category_palette: list[str] = field(default_factory=lambda: list(CATEGORY_PALETTE))

    def __post_init__(self):
        if self.autosave_delay < 0:
            raise ConfigurationError(f"autosave_delay must be >= 0, got {self.autosave_delay}")
        if not self.category_palette:
            raise ConfigurationError("category_palette must contain at least one colour")

    def palette_color(self, index: int) -> str:
        """Colour for the ``index``-th category, wrapping around the palette."""
        return self.category_palette[index % len(self.category_palette)]

    @classmethod
    def from_config(cls, config: Config) -> JournalConfig:
        """Read the ``journal`` section. Env overrides arrive as strings."""
        section = config.get("journal", {}) or {}
        try:
            delay = float(section.get("autosave_delay", 1.0))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid journal.autosave_delay: {section.get('autosave_delay')!r}") from e

        palette = section.get("category_palette") or list(CATEGORY_PALETTE)
        if isinstance(palette, str):
            palette = [c.strip() for c in palette.split(",") if c.strip()]

        return cls(
            sentiment_enabled=_as_bool(section.get("sentiment_enabled", True)),
            autosave_delay=delay,
            category_palette=list(palette),
        )
