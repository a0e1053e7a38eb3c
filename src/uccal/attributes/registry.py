from __future__ import annotations
from typing import Any, Callable, Dict, Sequence

from ..core.types import MappedDate

AttrFunc = Callable[[MappedDate, int], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def available_attributes() -> list[str]:
    return sorted(_REGISTRY)

def compute_attributes(mapped: MappedDate, days: int, names: Sequence[str]) -> Dict[str, Any]:
    """Evaluate the named attributes for one day.

    ``days`` is the day count since the UCC epoch; only the moon needs it.
    """
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise KeyError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out.update(_REGISTRY[name](mapped, days))
    return out
