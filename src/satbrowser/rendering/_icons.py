"""Icon-versus-marker level-of-detail decision.

At medium and low zoom only a random fraction of loaded icons is drawn to
thin icon density. The randomness source is an explicit ``jax.random`` key:
each record's draw comes from the key folded with a stable hash of the
record id, so a decision is reproducible for a given (key, record) pair
and uncorrelated between records. Pass a fresh key per frame for
per-frame variation, or hold one key for a stable picture.
"""

from __future__ import annotations

import zlib
from collections.abc import Collection, Sequence

import jax
import jax.numpy as jnp
import numpy as np

from satbrowser._record import SatelliteRecord
from satbrowser.config import SelectionConfig, get_selection_config

ALWAYS_SHOWN_ID = "iss"
"""Records whose id contains this string are always drawn as icons."""


def _id_hash(satellite_id: str) -> int:
    """Stable 31-bit hash of a record id."""
    return zlib.crc32(satellite_id.encode("utf-8")) & 0x7FFFFFFF


def default_icon_key(config: SelectionConfig | None = None) -> jax.Array:
    """Return the PRNG key used when callers do not supply one.

    Args:
        config: Selection configuration. Default: module-wide configuration.

    Returns:
        A ``jax.random`` key seeded from ``config.icon_seed``.
    """
    config = config if config is not None else get_selection_config()
    return jax.random.PRNGKey(config.icon_seed)


def icon_draws(key: jax.Array, satellite_ids: Sequence[str]) -> np.ndarray:
    """Return one uniform ``[0, 1)`` float32 draw per record id.

    Draws are always float32 so that a (key, id) pair yields the same value
    whether or not JAX 64-bit mode is enabled.

    Args:
        key: ``jax.random`` key.
        satellite_ids: Record ids.

    Returns:
        Host float array aligned with *satellite_ids*.
    """
    if not satellite_ids:
        return np.zeros(0, dtype=np.float32)
    hashes = jnp.asarray([_id_hash(s) for s in satellite_ids], dtype=jnp.uint32)
    draws = jax.vmap(
        lambda h: jax.random.uniform(jax.random.fold_in(key, h), dtype=jnp.float32)
    )(hashes)
    return np.asarray(draws)


def is_always_shown(record: SatelliteRecord) -> bool:
    """Return True if *record* is always drawn as an icon once loaded."""
    return ALWAYS_SHOWN_ID in record.id


def icon_probability(zoom: float, config: SelectionConfig | None = None) -> float:
    """Return the probability of drawing an ordinary loaded icon at *zoom*.

    Args:
        zoom: Map zoom level.
        config: Selection configuration. Default: module-wide configuration.

    Returns:
        1.0 at full zoom, the band probability at medium and low zoom, and
        0.0 below the lowest band.
    """
    config = config if config is not None else get_selection_config()
    if zoom >= config.icon_full_zoom:
        return 1.0
    if zoom >= config.icon_medium_zoom:
        return config.icon_medium_probability
    if zoom >= config.icon_low_zoom:
        return config.icon_low_probability
    return 0.0


def _icon_eligible(
    record: SatelliteRecord, loaded_icons: Collection[str]
) -> bool:
    return bool(record.image) and record.id in loaded_icons


def should_render_as_icon(
    record: SatelliteRecord,
    loaded_icons: Collection[str],
    zoom: float,
    tracked_id: str | None = None,
    *,
    key: jax.Array | None = None,
    config: SelectionConfig | None = None,
) -> bool:
    """Decide whether *record* is drawn as an icon rather than a marker.

    Args:
        record: Record to decide for.
        loaded_icons: Ids of records whose icon asset is loaded.
        zoom: Map zoom level.
        tracked_id: Id of the tracked record, or None.
        key: ``jax.random`` key for density thinning. Default:
            :func:`default_icon_key`.
        config: Selection configuration. Default: module-wide configuration.

    Returns:
        True to draw an icon.
    """
    if not _icon_eligible(record, loaded_icons):
        return False
    if tracked_id is not None and tracked_id == record.id:
        return True
    if is_always_shown(record):
        return True

    p = icon_probability(zoom, config)
    if p >= 1.0:
        return True
    if p <= 0.0:
        return False

    if key is None:
        key = default_icon_key(config)
    return bool(icon_draws(key, [record.id])[0] < p)


def icon_mask(
    records: Sequence[SatelliteRecord],
    loaded_icons: Collection[str],
    zoom: float,
    tracked_id: str | None = None,
    *,
    key: jax.Array | None = None,
    config: SelectionConfig | None = None,
) -> np.ndarray:
    """Vectorized :func:`should_render_as_icon` over a list of records.

    Produces the same decision per record as the scalar function for the
    same key.

    Returns:
        Host boolean array aligned with *records*.
    """
    p = icon_probability(zoom, config)
    if key is None:
        key = default_icon_key(config)

    thinned = icon_draws(key, [r.id for r in records]) < p
    return np.array(
        [
            _icon_eligible(r, loaded_icons)
            and (
                (tracked_id is not None and r.id == tracked_id)
                or is_always_shown(r)
                or bool(thinned[i])
            )
            for i, r in enumerate(records)
        ],
        dtype=bool,
    )
