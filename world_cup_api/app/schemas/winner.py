"""
Pydantic schemas for World Cup winners.

A winner pairs a country name with the year it won the tournament.
``Winners`` is the envelope used both on the wire (``GET /winners``)
and on disk, i.e. ``{"winners": [{"country": ..., "year": ...}]}``.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Winner(BaseModel):
    """A single tournament winner.

    Validation is strict: ``"2030"`` or ``2030.0`` is not a year.
    """

    model_config = ConfigDict(strict=True)

    country: str = Field(..., description="Name of the winning country")
    year: int = Field(..., description="Tournament year")


class Winners(BaseModel):
    """Envelope around the ordered list of winners."""

    winners: List[Winner] = Field(default_factory=list)
