"""Terminal presentation of rendered charts."""

from candlechart.display.terminal import draw, rgb_style, to_text

__all__ = ["draw", "rgb_style", "to_text"]
