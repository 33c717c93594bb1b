"""Prose/LaTeX rendering for chat messages.

Text is split into lines, and each line into plain and math spans at
recognized delimiter pairs. Math spans go to a pluggable typesetter; the
default one emits placeholders that KaTeX typesets in the browser.
"""

import html
import logging
import re
from collections.abc import Callable, Sequence

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

# (tex, display_mode) -> HTML
Typesetter = Callable[[str, bool], str]


class Delimiter(BaseModel):
    """A recognized math delimiter pair."""

    model_config = ConfigDict(frozen=True)

    left: str
    right: str
    display: bool


# Order matters: "$$" must win over "$" at the same position.
DEFAULT_DELIMITERS: tuple[Delimiter, ...] = (
    Delimiter(left="$$", right="$$", display=True),
    Delimiter(left="$", right="$", display=False),
    Delimiter(left="\\(", right="\\)", display=False),
    Delimiter(left="\\[", right="\\]", display=True),
)


class MathSpan(BaseModel):
    """A piece of a rendered line.

    Attributes:
        text: Plain text, or the TeX source between the delimiters.
        is_math: Whether this span is delimited math.
        display: Display (block) mode; always False for plain text.
        raw: The original text including delimiters.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    is_math: bool = False
    display: bool = False
    raw: str = ""


def _find_end_of_math(delimiter: str, text: str, start: int) -> int:
    """Index of the closing delimiter, or -1.

    Escaped characters are skipped and delimiters inside braces don't count.
    """
    index = start
    brace_level = 0
    while index < len(text):
        character = text[index]
        if brace_level <= 0 and text.startswith(delimiter, index):
            return index
        if character == "\\":
            index += 1
        elif character == "{":
            brace_level += 1
        elif character == "}":
            brace_level -= 1
        index += 1
    return -1


def split_at_delimiters(
    text: str,
    delimiters: Sequence[Delimiter] = DEFAULT_DELIMITERS,
) -> list[MathSpan]:
    """Split one line into plain and math spans, left to right.

    An opening delimiter without a matching close leaves the rest of the
    line as literal text.
    """
    spans: list[MathSpan] = []
    opener = re.compile("|".join(re.escape(d.left) for d in delimiters))

    while True:
        match = opener.search(text)
        if match is None:
            break
        if match.start() > 0:
            spans.append(MathSpan(text=text[: match.start()], raw=text[: match.start()]))
            text = text[match.start() :]

        delimiter = next(d for d in delimiters if text.startswith(d.left))
        end = _find_end_of_math(delimiter.right, text, len(delimiter.left))
        if end == -1:
            break

        raw = text[: end + len(delimiter.right)]
        spans.append(
            MathSpan(
                text=text[len(delimiter.left) : end],
                is_math=True,
                display=delimiter.display,
                raw=raw,
            )
        )
        text = text[len(raw) :]

    if text:
        spans.append(MathSpan(text=text, raw=text))
    return spans


def render_math(
    text: str,
    delimiters: Sequence[Delimiter] = DEFAULT_DELIMITERS,
) -> list[list[MathSpan]]:
    """Split text into lines of spans. Math never crosses a line break."""
    return [split_at_delimiters(line, delimiters) for line in text.split("\n")]


def katex_markup(tex: str, display: bool) -> str:
    """Placeholder element typeset in place by the page's KaTeX hook."""
    mode = "true" if display else "false"
    return f'<span class="tutor-math" data-display="{mode}">{html.escape(tex)}</span>'


class MathRenderer:
    """Renders message text to HTML with typeset math.

    Rendering is a pure function of the text, so re-rendering unchanged
    content yields the same markup.
    """

    def __init__(
        self,
        typeset: Typesetter = katex_markup,
        delimiters: Sequence[Delimiter] = DEFAULT_DELIMITERS,
    ) -> None:
        self._typeset = typeset
        self._delimiters = tuple(delimiters)

    def _render_span(self, span: MathSpan) -> str:
        if not span.is_math:
            return html.escape(span.text)
        try:
            return self._typeset(span.text, span.display)
        except Exception as e:
            logger.warning(f"Failed to typeset {span.raw!r}: {e}")
            return html.escape(span.raw)

    def render(self, text: str) -> str:
        """Render text as HTML, one ``<br>``-separated line per input line."""
        lines = render_math(text, self._delimiters)
        return "<br>".join(
            "".join(self._render_span(span) for span in line) for line in lines
        )
