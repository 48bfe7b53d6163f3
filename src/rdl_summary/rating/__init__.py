"""Combined disability rating (VA step-wise combination)."""

from __future__ import annotations

from rdl_summary.rating.combiner import combine, combine_exact, round_half_up_to_ten

__all__ = ["combine", "combine_exact", "round_half_up_to_ten"]
