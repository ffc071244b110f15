"""Random-source configuration for the esf_permutations package.

Every sampler accepts an explicit ``random_state``.  When a caller
passes ``None`` the samplers draw from one process-wide
``numpy.random.Generator``, created lazily on first use and never
reseeded afterwards unless the configuration changes.

Seed resolution order (first match wins):
    1. Programmatic override via :func:`set_random_state`.
    2. The ``ESF_PERMUTATIONS_SEED`` environment variable.
    3. Fresh OS entropy.

Examples:
    Reproducible output from the shell::

        export ESF_PERMUTATIONS_SEED=2018

    Reproducible output programmatically::

        import esf_permutations
        esf_permutations.set_random_state(2018)

    Restore the default resolution order::

        esf_permutations.set_random_state(None)
"""

from __future__ import annotations

import logging
import os
import warnings

import numpy as np

from ._typing import RandomSource, RandomState

_ENV_VAR = "ESF_PERMUTATIONS_SEED"

_logger = logging.getLogger(__name__)

# Sentinel indicating "no programmatic override has been set".
_seed_override: int | None = None

# Process-wide generator; ``None`` until the first call that needs it.
_default_rng: np.random.Generator | None = None


def get_random_state() -> int | None:
    """Return the seed the default generator is (or will be) built from.

    Resolution order:
        1. Value set by :func:`set_random_state`.
        2. ``ESF_PERMUTATIONS_SEED`` environment variable.
        3. ``None`` (OS entropy).

    Returns:
        An integer seed, or ``None`` for OS entropy.
    """
    # 1. Programmatic override
    if _seed_override is not None:
        return _seed_override

    # 2. Environment variable
    env = os.environ.get(_ENV_VAR, "").strip()
    if env:
        try:
            seed = int(env)
        except ValueError:
            seed = -1
        if seed >= 0:
            return seed
        warnings.warn(
            f"Ignoring {_ENV_VAR}={env!r}: expected a non-negative integer.",
            UserWarning,
            stacklevel=2,
        )

    # 3. Entropy
    return None


def set_random_state(seed: int | None) -> None:
    """Pin (or clear) the seed of the process-wide generator.

    The current default generator is discarded; the next sampling call
    that relies on it builds a new one from the resolved seed.

    Args:
        seed: A non-negative integer, or ``None`` to restore the
            default resolution order.

    Raises:
        TypeError: If *seed* is neither an integer nor ``None``.
        ValueError: If *seed* is negative.
    """
    global _seed_override, _default_rng
    if seed is not None:
        if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
            raise TypeError(
                f"Seed must be an integer or None, got {type(seed).__name__}."
            )
        if seed < 0:
            raise ValueError(f"Seed must be non-negative, got {seed}.")
        seed = int(seed)
    _seed_override = seed
    _default_rng = None


def get_default_rng() -> np.random.Generator:
    """Return the process-wide generator, creating it on first use."""
    global _default_rng
    if _default_rng is None:
        seed = get_random_state()
        _logger.debug(
            "Seeding default generator from %s",
            "OS entropy" if seed is None else f"seed {seed}",
        )
        _default_rng = np.random.default_rng(seed)
    return _default_rng


def resolve_rng(random_state: RandomState = None) -> RandomSource:
    """Turn a ``random_state`` argument into a usable random source.

    Args:
        random_state: ``None`` for the process-wide generator, an
            integer seed for a fresh ``numpy.random.Generator``, or an
            object implementing :class:`RandomSource` (returned as-is).

    Returns:
        An object with ``random()`` and ``integers(high)`` methods.

    Raises:
        TypeError: If *random_state* is none of the accepted kinds.
    """
    if random_state is None:
        return get_default_rng()
    if isinstance(random_state, bool):
        raise TypeError("random_state must not be a bool.")
    if isinstance(random_state, (int, np.integer)):
        return np.random.default_rng(int(random_state))
    if isinstance(random_state, RandomSource):
        return random_state
    raise TypeError(
        "random_state must be None, an integer seed, or an object with "
        f"random() and integers() methods, got {type(random_state).__name__}."
    )
