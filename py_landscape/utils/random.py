"""
Random number generation utilities.

Landscapes never share a module-global generator: every run asks for its own
Alea stream here and passes it down explicitly.
"""

import uuid
from typing import Optional, Union

import structlog

from ..core.alea_prng import AleaPRNG

logger = structlog.get_logger()

Seed = Union[int, str]


def new_seed() -> str:
    """Short random seed string, in the style of generated map seeds."""
    return uuid.uuid4().hex[:8]


def create_prng(seed: Optional[Seed] = None) -> AleaPRNG:
    """
    Create an independent Alea PRNG.

    Args:
        seed: Seed string or int. When omitted a fresh seed is generated
            and logged so the run can be reproduced later.

    Returns:
        AleaPRNG instance
    """
    if seed is None:
        seed = new_seed()
        logger.info("Generated random seed", seed=seed)
    return AleaPRNG(seed)
