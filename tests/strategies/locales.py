"""Hypothesis strategies for CLDR locale identifiers.

Event-Emitting Strategies (HypoFuzz-Optimized):
    - parent_pairs: Emits the parent kind (root or concrete)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from currencydata.constants import EXCLUDED_LOCALES

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

_LANGUAGES = ["en", "es", "pt", "zh", "az", "bs", "sr", "ff", "ha", "vai", "eo", "ca", "yue"]
_SCRIPTS = ["Latn", "Cyrl", "Arab", "Hant", "Hans", "Adlm", "Dsrt", "Shaw"]
_REGIONS = ["001", "150", "419", "AU", "GB", "ES", "MO", "PT", "AR", "US"]


@composite
def locale_ids(draw: DrawFn, separator: str = "-") -> str:
    """Generate language[-Script][-REGION] identifiers."""
    parts = [draw(st.sampled_from(_LANGUAGES))]
    if draw(st.booleans()):
        parts.append(draw(st.sampled_from(_SCRIPTS)))
    if draw(st.booleans()):
        parts.append(draw(st.sampled_from(_REGIONS)))
    return separator.join(parts)


excluded_locale_ids: SearchStrategy[str] = st.one_of(
    st.sampled_from(sorted(EXCLUDED_LOCALES)),
    st.builds(
        lambda language, region: f"{language}-{region}",
        st.sampled_from(sorted(loc for loc in EXCLUDED_LOCALES if "-" not in loc)),
        st.sampled_from(_REGIONS),
    ),
)


@composite
def parent_pairs(draw: DrawFn) -> list[tuple[str, str]]:
    """Generate (child, parent) pair lists with unique children."""
    children = draw(st.lists(locale_ids(), min_size=0, max_size=25, unique=True))
    pairs = []
    for child in children:
        parent = draw(st.one_of(st.just("root"), locale_ids()))
        event(f"parent={'root' if parent == 'root' else 'concrete'}")
        pairs.append((child, parent))
    return pairs
