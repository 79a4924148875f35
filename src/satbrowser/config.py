"""Module-wide configuration for satbrowser.

Provides the configuration objects consumed by the rendering selection
pipeline (:class:`SelectionConfig`) and the catalog refresh poller
(:class:`PollConfig`), together with the module-wide default selection
configuration (``set_selection_config`` / ``get_selection_config``).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectionConfig:
    """Tunables for the rendering selection pipeline.

    Args:
        viewport_margin: Longitude margin in degrees added around the
            viewport. Latitude receives half of it.
        max_satellites: Default hard cap on records handed to a renderer.
        icon_full_zoom: Zoom at or above which every loaded icon is shown.
        icon_medium_zoom: Lower edge of the medium zoom band.
        icon_low_zoom: Lower edge of the low zoom band. Below it no icons
            are shown.
        icon_medium_probability: Probability of an icon in the medium band.
        icon_low_probability: Probability of an icon in the low band.
        icon_seed: Seed of the default PRNG key used when a caller does not
            supply one.
    """

    viewport_margin: float = 10.0
    max_satellites: int = 1000
    icon_full_zoom: float = 5.0
    icon_medium_zoom: float = 4.0
    icon_low_zoom: float = 3.0
    icon_medium_probability: float = 0.5
    icon_low_probability: float = 0.25
    icon_seed: int = 0

    def __post_init__(self) -> None:
        if self.viewport_margin < 0:
            raise ValueError(
                f"viewport_margin must be non-negative, got {self.viewport_margin}"
            )
        if self.max_satellites < 0:
            raise ValueError(
                f"max_satellites must be non-negative, got {self.max_satellites}"
            )
        if not self.icon_low_zoom <= self.icon_medium_zoom <= self.icon_full_zoom:
            raise ValueError(
                "Icon zoom bands must satisfy "
                "icon_low_zoom <= icon_medium_zoom <= icon_full_zoom"
            )
        for name in ("icon_medium_probability", "icon_low_probability"):
            p = getattr(self, name)
            if not 0.0 <= p <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {p}")


@dataclass(frozen=True)
class PollConfig:
    """Configuration for the bounded catalog refresh poller.

    Args:
        max_attempts: Maximum number of refreshes after the initial one.
        interval: Seconds between attempts.
    """

    max_attempts: int = 15
    interval: float = 2.0

    def __post_init__(self) -> None:
        if self.max_attempts < 0:
            raise ValueError(
                f"max_attempts must be non-negative, got {self.max_attempts}"
            )
        if self.interval < 0:
            raise ValueError(f"interval must be non-negative, got {self.interval}")

    @classmethod
    def disabled(cls) -> PollConfig:
        """Create a configuration that performs only the initial refresh.

        Returns:
            A PollConfig with zero follow-up attempts.
        """
        return cls(max_attempts=0, interval=0.0)

    def __str__(self) -> str:
        return (
            f"PollConfig(max_attempts={self.max_attempts}, "
            f"interval={self.interval})"
        )

    def __repr__(self) -> str:
        return self.__str__()


_selection_config = SelectionConfig()


def set_selection_config(config: SelectionConfig) -> None:
    """Replace the module-wide default selection configuration.

    Args:
        config: New default configuration.
    """
    global _selection_config
    _selection_config = config


def get_selection_config() -> SelectionConfig:
    """Return the module-wide default selection configuration."""
    return _selection_config
