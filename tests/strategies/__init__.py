"""Hypothesis strategies for moneylex property-based testing.

Strategies generate amount text together with the subunit count it must
parse to, so properties can assert exact values rather than round trips.

- amounts: canonical, grouped, and suffixed amount strings

Usage:
    from tests.strategies import canonical_amounts, grouped_amounts
    from tests.strategies.amounts import suffixed_amounts

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - canonical_amounts, grouped_amounts, suffixed_amounts
"""

from .amounts import (
    canonical_amounts,
    grouped_amounts,
    subunit_counts,
    suffixed_amounts,
)

__all__ = [
    "canonical_amounts",
    "grouped_amounts",
    "subunit_counts",
    "suffixed_amounts",
]
