"""Summary assembly: candidate record in, summary record out."""

from __future__ import annotations

from rdl_summary.summary.assembler import assemble, assemble_payload

__all__ = ["assemble", "assemble_payload"]
