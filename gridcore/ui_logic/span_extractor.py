"""
Responsive layout token parsing.

Turn a free-form class string such as ``"p-4 grid-cols-2 md:grid-cols-6"``
into a ResponsiveSpec. Tokens follow the ``[breakpoint:]keyword-N``
grammar and must match as whole tokens, so the numeric suffix of an
unrelated rule is never picked up.
"""
import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Optional, Pattern

from ..data_models import DEFAULT_BREAKPOINT, ResponsiveSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TokenFamily:
    """A keyword whose tokens carry an integer, plus the value used when none parse."""
    keyword: str
    default: int
    pattern: Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        compiled = re.compile(r"^(?:(\w+):)?" + re.escape(self.keyword) + r"-?(\d+)$")
        object.__setattr__(self, "pattern", compiled)

    @property
    def fallback_spec(self) -> ResponsiveSpec:
        return ResponsiveSpec(((DEFAULT_BREAKPOINT, self.default),))


GRID_COLUMNS = TokenFamily("grid-cols", 12)
COLUMN_SPAN = TokenFamily("col-span", 1)


def parse_token(token: str, family: TokenFamily) -> Optional[tuple[str, int]]:
    """
    Parse a single token.

    Args:
        token: One whitespace-delimited class token
        family: Token family to match against

    Returns:
        (breakpoint, value) pair, or None if the token belongs to another rule
    """
    match = family.pattern.match(token)
    if not match:
        return None
    return (match.group(1) or DEFAULT_BREAKPOINT, int(match.group(2)))


@lru_cache(maxsize=512)
def extract_responsive_spec(class_name: Optional[str], family: TokenFamily) -> ResponsiveSpec:
    """
    Collect every token of ``family`` in ``class_name``.

    Args:
        class_name: Raw class/style string, may be empty or None
        family: GRID_COLUMNS or COLUMN_SPAN

    Returns:
        ResponsiveSpec keyed by breakpoint; the family's fallback when
        nothing matches. Later tokens override earlier ones.
    """
    values: Dict[str, int] = {}
    for token in (class_name or "").split():
        parsed = parse_token(token, family)
        if parsed is not None:
            breakpoint_name, value = parsed
            values[breakpoint_name] = value

    if not values:
        if class_name:
            logger.debug("No %s tokens in %r, using default %d",
                         family.keyword, class_name, family.default)
        return family.fallback_spec

    return ResponsiveSpec.from_mapping(values)


def extract_column_spec(class_name: Optional[str]) -> ResponsiveSpec:
    """Column-count specification of a grid container."""
    return extract_responsive_spec(class_name, GRID_COLUMNS)


def extract_span_spec(class_name: Optional[str]) -> ResponsiveSpec:
    """Column-span specification of a grid item."""
    return extract_responsive_spec(class_name, COLUMN_SPAN)
