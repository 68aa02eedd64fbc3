"""Rendered frame data models.

A rendered frame is plain data: glyphs and axis labels without any
terminal-control or color content.
"""

from pydantic import BaseModel, Field

from candlechart.models.candle import CandleType


class RenderedSample(BaseModel):
    """One cell of the frame: a glyph and the direction of its candle."""

    candle_type: CandleType = Field(..., description="Direction of the source candle")
    content: str = Field(..., description="Glyph drawn in the cell")

    model_config = {"frozen": True}


class RenderedLine(BaseModel):
    """One terminal row: axis label followed by one sample per visible candle."""

    axis_component: str = Field(..., description="Y axis label for the row")
    samples: list[RenderedSample] = Field(
        default_factory=list, description="Samples in visible-candle order"
    )

    model_config = {"frozen": True}


class RenderedChart(BaseModel):
    """Ordered rows of a rendered chart, top row first."""

    lines: list[RenderedLine] = Field(default_factory=list, description="Rendered rows")

    model_config = {"frozen": True}
