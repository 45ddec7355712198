"""Line classifier: reduce PIO assembly lines to op + raw arguments.

WHY: PIO source mixes instructions with directives (.program, .side_set,
.wrap), labels, comments, side-set annotations and delay annotations.
The validator only cares about the mnemonic, so everything else has to
be peeled off first, without ever losing the original line number.

HOW: Each line is trimmed and dropped early if it is blank, a comment, or
a directive. The rest goes through an ordered sequence of small
find-and-truncate steps:

  comment (;)  →  label (:)  →  side-set ("side")  →  delay ([)

then splits on whitespace into op and args.

RULES:
- The comment is stripped BEFORE the label, so a colon inside a comment
  is never mistaken for a label separator
- A label with nothing after it yields no instruction
- "side" is matched as a literal, case-sensitive substring anywhere in
  the remaining text; an operand containing those letters is truncated
  too (e.g. "mov x, outside" → args "x, out")
- Only the op is lowercased; args and comment keep their case
- Lines are split on "\\n" only; a stray "\\r" goes away with the trim
- Whitespace is the Unicode space set minus the ASCII separators
  \\x1c-\\x1f, which str.strip() and str.split() would otherwise eat
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from tinypio.core.ir import Instruction

_COMMENT_MARK = ";"
_DIRECTIVE_MARK = "."
_LABEL_MARK = ":"
_SIDE_SET_MARK = "side"
_DELAY_MARK = "["

# Unicode White_Space characters. Unlike str.isspace(), the ASCII
# information separators \x1c-\x1f are not included.
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def split_fields(text: str) -> List[str]:
    """Split on runs of WHITESPACE, dropping empty fields."""
    fields: List[str] = []
    current: List[str] = []
    for ch in text:
        if ch in WHITESPACE:
            if current:
                fields.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        fields.append("".join(current))
    return fields


def _is_skippable(text: str) -> bool:
    """True for blank, comment-only, and directive lines."""
    return (
        not text
        or text.startswith(_COMMENT_MARK)
        or text.startswith(_DIRECTIVE_MARK)
    )


def strip_comment(text: str) -> Tuple[str, str]:
    """Split off a trailing ``; comment``.

    Returns:
        (working line, comment), both trimmed. The comment is "" when the
        line has none.
    """
    idx = text.find(_COMMENT_MARK)
    if idx < 0:
        return text, ""
    return text[:idx].strip(WHITESPACE), text[idx + 1:].strip(WHITESPACE)


def strip_label(text: str) -> str:
    """Drop a leading ``label:`` and return what follows it (trimmed)."""
    idx = text.find(_LABEL_MARK)
    if idx < 0:
        return text
    return text[idx + 1:].strip(WHITESPACE)


def strip_side_set(text: str) -> str:
    """Truncate at the first ``side`` substring."""
    idx = text.find(_SIDE_SET_MARK)
    if idx < 0:
        return text
    return text[:idx].strip(WHITESPACE)


def strip_delay(text: str) -> str:
    """Truncate at the first ``[`` of a ``[N]`` delay annotation."""
    idx = text.find(_DELAY_MARK)
    if idx < 0:
        return text
    return text[:idx].strip(WHITESPACE)


def classify_line(text: str, line_number: int) -> Optional[Instruction]:
    """Classify a single source line.

    Args:
        text: The raw line, without its newline.
        line_number: 1-based position of the line in the source.

    Returns:
        An Instruction, or None when the line carries no executable
        content (blank, comment, directive, or bare label).
    """
    working = text.strip(WHITESPACE)
    if _is_skippable(working):
        return None

    working, comment = strip_comment(working)

    if _LABEL_MARK in working:
        working = strip_label(working)
        if not working:
            return None

    working = strip_side_set(working)
    working = strip_delay(working)

    fields = split_fields(working)
    if not fields:
        return None

    return Instruction(
        line=line_number,
        op=fields[0].lower(),
        args=" ".join(fields[1:]),
        comment=comment,
    )


def classify_source(source: str) -> List[Instruction]:
    """Classify every line of a PIO program, in source order.

    Args:
        source: Full program text.

    Returns:
        One Instruction per line with executable content. Line numbers
        are 1-based positions in ``source``.
    """
    instructions: List[Instruction] = []
    for index, line in enumerate(source.split("\n"), start=1):
        inst = classify_line(line, index)
        if inst is not None:
            instructions.append(inst)
    return instructions
