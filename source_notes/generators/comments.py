"""Javadoc comment extraction and Markdown formatting.

Turns a raw Javadoc comment (delimiters and leading ``*`` markers
included) into Markdown: prose paragraphs become block quotes, inline
tags are rewritten to styled HTML spans, and block tags such as
``@author`` or ``@since`` are kept on lines of their own.
"""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

CODE_STYLE = "color: blue; font-weight: bold;"
EMPHASIS_STYLE = "color: red; font-style: italic; font-weight: bold;"

QUOTE_PREFIX = "> "
PARAGRAPH_BREAK = "\n\n"

_CONTINUATION_MARKER = re.compile(r"^\s*\*\s?")

# Applied in order; each pattern keeps the text captured by group 1.
_INLINE_REWRITES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\{@code (.+?)\}"), f'<span style="{CODE_STYLE}">\\1</span>'),
    (
        re.compile(r"\{@link(?:plain)? [^}]*\b(\w+)\}"),
        f'<span style="{CODE_STYLE}">\\1</span>',
    ),
    (re.compile(r"</?a(?:\s[^>]*)?>"), ""),
    (re.compile(r"</?p(?:\s[^>]*)?>"), ""),
    (re.compile(r"<em>(.+?)</em>"), f'<span style="{EMPHASIS_STYLE}">\\1</span>'),
    (re.compile(r"<i>(.+?)</i>"), f'<span style="{EMPHASIS_STYLE}">\\1</span>'),
]


def strip_continuation_marker(line: str) -> str:
    """Remove one leading ``*`` marker and the surrounding whitespace.

    Args:
        line: A single interior line of a Javadoc comment.

    Returns:
        The line content without its marker.
    """
    return _CONTINUATION_MARKER.sub("", line, count=1).strip()


def rewrite_inline_markup(line: str) -> str:
    """Rewrite Javadoc inline tags and HTML emphasis into styled spans.

    ``{@code x}`` and ``{@link a.B#c}`` become blue bold spans (links
    keep only their last identifier), ``<a>`` and ``<p>`` tags are
    dropped with their text kept, and ``<em>``/``<i>`` become red
    italic spans.

    Args:
        line: Comment line content.

    Returns:
        The rewritten line.
    """
    for pattern, replacement in _INLINE_REWRITES:
        line = pattern.sub(replacement, line)
    return line


def is_block_tag(line: str) -> bool:
    """Check whether a comment line starts a block tag like ``@author``."""
    return line.startswith("@")


def extract_comment(doc_comment: Optional[str]) -> str:
    """Convert a raw Javadoc comment into Markdown note text.

    The first and last lines are treated as the ``/**`` and ``*/``
    delimiter lines and dropped. Consecutive prose lines are joined into
    one quoted paragraph; blank lines close the open paragraph, and
    repeated blank lines never produce more than one break. Block tag
    lines always stand alone, unquoted.

    Args:
        doc_comment: Raw comment text, or None when the declaration has
            no documentation.

    Returns:
        Markdown text ending in a newline, or an empty string when there
        is no comment.
    """
    if doc_comment is None:
        return ""

    lines = doc_comment.split("\n")
    parts: list[str] = []
    paragraph_open = False

    for raw_line in lines[1:-1]:
        line = strip_continuation_marker(raw_line)

        if not line:
            if paragraph_open:
                parts.append(PARAGRAPH_BREAK)
                paragraph_open = False
            continue

        line = rewrite_inline_markup(line)

        if is_block_tag(line):
            if paragraph_open:
                parts.append(PARAGRAPH_BREAK)
                paragraph_open = False
            parts.append(line + "\n")
            continue

        if not paragraph_open:
            parts.append(QUOTE_PREFIX)
            paragraph_open = True
        parts.append(line + " ")

    parts.append("\n")
    text = "".join(parts)
    logger.debug("Extracted %d comment lines into %d chars", len(lines), len(text))
    return text
