"""
Breakpoint scale and responsive value resolution.

Map a viewport width to the value a responsive specification declares for
it. The same rule serves column counts and column spans: the largest
breakpoint whose minimum width is satisfied wins, ``default`` only applies
when no sized breakpoint matches. No UI framework dependencies.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Optional, Tuple

from ..data_models import DEFAULT_BREAKPOINT, ResponsiveSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Breakpoint:
    """Named viewport threshold, inclusive lower bound in pixels."""
    name: str
    min_width: int

    def matches(self, width: float) -> bool:
        return width >= self.min_width


@dataclass(frozen=True, slots=True)
class BreakpointScale:
    """
    Ordered set of breakpoints, smallest first.

    ``default`` is implicit and never part of the sized breakpoints.
    """
    breakpoints: Tuple[Breakpoint, ...]

    @classmethod
    def from_mapping(cls, thresholds: Mapping[str, int]) -> "BreakpointScale":
        """
        Build a scale from ``name -> min_width`` pairs.

        Args:
            thresholds: Minimum widths keyed by breakpoint name

        Returns:
            Scale sorted by ascending minimum width
        """
        sized = [
            Breakpoint(name, int(width))
            for name, width in thresholds.items()
            if name != DEFAULT_BREAKPOINT
        ]
        sized.sort(key=lambda bp: bp.min_width)
        return cls(tuple(sized))

    @property
    def names(self) -> Tuple[str, ...]:
        return (DEFAULT_BREAKPOINT,) + tuple(bp.name for bp in self.breakpoints)

    def __iter__(self) -> Iterator[Breakpoint]:
        return iter(self.breakpoints)

    def __contains__(self, name: object) -> bool:
        return name == DEFAULT_BREAKPOINT or any(bp.name == name for bp in self.breakpoints)

    def min_width(self, name: str) -> Optional[int]:
        if name == DEFAULT_BREAKPOINT:
            return 0
        for bp in self.breakpoints:
            if bp.name == name:
                return bp.min_width
        return None

    def active(self, width: float) -> str:
        """Name of the largest breakpoint satisfied by ``width``."""
        current = DEFAULT_BREAKPOINT
        for bp in self.breakpoints:
            if bp.matches(width):
                current = bp.name
        return current

    def as_dict(self) -> Dict[str, int]:
        return {bp.name: bp.min_width for bp in self.breakpoints}


# Tailwind's default screens
DEFAULT_SCALE = BreakpointScale.from_mapping({
    "sm": 640,
    "md": 768,
    "lg": 1024,
    "xl": 1280,
    "2xl": 1536,
})


def resolve_breakpoint_value(
    spec: ResponsiveSpec,
    width: float,
    fallback: Optional[int] = None,
    scale: BreakpointScale = DEFAULT_SCALE,
) -> Optional[int]:
    """
    Resolve the value a responsive specification declares for ``width``.

    Args:
        spec: Responsive specification to resolve
        width: Viewport width in pixels
        fallback: Value used when neither a sized breakpoint nor ``default`` applies
        scale: Breakpoint thresholds to resolve against

    Returns:
        Value of the largest satisfied breakpoint present in ``spec``,
        else the ``default`` entry, else ``fallback``
    """
    # walk largest first so the first hit wins
    for bp in reversed(scale.breakpoints):
        if bp.name in spec and bp.matches(width):
            return spec[bp.name]

    if DEFAULT_BREAKPOINT in spec:
        return spec[DEFAULT_BREAKPOINT]

    unknown = [name for name in spec if name not in scale]
    if unknown:
        logger.debug("Ignoring unknown breakpoints %s", unknown)
    return fallback
