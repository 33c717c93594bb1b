"""Math-aware text rendering for chat bubbles."""

from src.rendering.math_renderer import (
    MathRenderer,
    MathSpan,
    katex_markup,
    render_math,
    split_at_delimiters,
)

__all__ = [
    "MathRenderer",
    "MathSpan",
    "katex_markup",
    "render_math",
    "split_at_delimiters",
]
