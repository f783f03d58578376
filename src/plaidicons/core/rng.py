"""Deterministic random draws derived from a seed string.

The generator is counter based: draw ``n`` is the SHA-256 digest of the seed
digest and ``n``, truncated to 53 bits and scaled into [0, 1). The state is an
immutable value, so every stage receives a state and hands back the advanced
one instead of mutating a shared generator:

    state = init_rng("slackicons")
    value, state = next_value(state)

Do NOT use Python's built-in ``hash()`` here; it is salted per process.
"""

from __future__ import annotations

import hashlib
import logging
import secrets
from dataclasses import dataclass

from .errors import RandomSourceError

logger = logging.getLogger(__name__)

DEFAULT_SEED_BYTES = 16

_MANTISSA_BITS = 53


@dataclass(frozen=True)
class RngState:
    """Position in the draw sequence of one seed.

    Attributes:
        digest: SHA-256 digest of the seed string
        counter: Number of values drawn so far
    """

    digest: bytes
    counter: int = 0


def init_rng(seed: str) -> RngState:
    """Create the initial state for ``seed``."""
    return RngState(digest=hashlib.sha256(seed.encode("utf-8")).digest())


def next_value(state: RngState) -> tuple[float, RngState]:
    """Draw the next float in [0, 1).

    Args:
        state: Current generator state

    Returns:
        Tuple of (value, advanced state)
    """
    block = hashlib.sha256(state.digest + state.counter.to_bytes(8, "big")).digest()
    bits = int.from_bytes(block[:8], "big") >> (64 - _MANTISSA_BITS)
    value = bits / (1 << _MANTISSA_BITS)
    return value, RngState(digest=state.digest, counter=state.counter + 1)


def random_seed(nbytes: int = DEFAULT_SEED_BYTES) -> str:
    """Generate a fresh hex seed from the system's secure random source.

    Raises:
        RandomSourceError: If the operating system cannot provide entropy
    """
    try:
        seed = secrets.token_hex(nbytes)
    except (OSError, NotImplementedError) as e:
        raise RandomSourceError(f"Could not read {nbytes} random bytes: {e}") from e

    logger.debug(f"Generated random seed: {seed}")
    return seed
