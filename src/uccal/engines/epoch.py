"""
uccal.engines.epoch
-------------------
Unix milliseconds <-> UCC milliseconds.

The extra ONE_YEAR accounts for the historical calendar having no year
zero while UCC years are counted astronomically.
"""

from __future__ import annotations

from .specs import OFFSET, ONE_YEAR


def unix_to_ucc(ms: int) -> int:
    return ms - OFFSET - ONE_YEAR


def ucc_to_unix(ms: int) -> int:
    return ms + OFFSET + ONE_YEAR
