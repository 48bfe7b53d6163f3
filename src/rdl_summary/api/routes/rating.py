"""Stand-alone combined rating endpoint."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rdl_summary.rating.combiner import combine

router = APIRouter(tags=["rating"])


class CombineRequest(BaseModel):
    """Percentages to combine, or a stated rating to pass through."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    stated_rating: Optional[int] = None
    percents: list[int] = Field(default_factory=list)


@router.post("/rating/combine")
async def combine_rating(request: CombineRequest) -> dict[str, Any]:
    """Combine ``percents`` with the step-wise rule (or echo ``statedRating``)."""
    result = combine(request.stated_rating, request.percents)
    return result.model_dump(by_alias=True)
