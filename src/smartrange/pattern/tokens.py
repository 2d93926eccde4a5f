"""Split a rendered date string into tokens aligned with a pattern mask.

Each mask segment yields exactly one token, so ``tokens[i]`` is the
rendered text of ``mask[i]``. Field text is whatever lies between two
literals; the literals themselves are located by plain substring search.

Python 3.13+.
"""

from dataclasses import dataclass

from smartrange.diagnostics import ErrorTemplate, RenderMismatchError
from smartrange.enums import Granularity

from .mask import PatternMask

__all__ = ["Token", "tokenize"]


@dataclass(frozen=True, slots=True)
class Token:
    """Rendered text of one mask segment for one instant.

    Attributes:
        kind: Granularity of a field token, None for a delimiter token
        content: The rendered text
    """

    kind: Granularity | None
    content: str

    @property
    def is_delimiter(self) -> bool:
        return self.kind is None


def tokenize(rendered: str, mask: PatternMask) -> tuple[Token, ...]:
    """Split ``rendered`` into one token per segment of ``mask``.

    Walks the mask in order. A field segment is held pending until the
    next literal is found; the text before that literal becomes the
    pending field's token. Text left after the last literal belongs to a
    trailing field. Joining the contents of the result reproduces
    ``rendered`` exactly.

    Args:
        rendered: Output of the formatting engine for one instant
        mask: Mask of the pattern that produced ``rendered``

    Returns:
        Tuple of tokens, same length and order as ``mask``

    Raises:
        RenderMismatchError: If a literal of the mask cannot be located
            where it must be, or text is left over after a trailing literal

    Example:
        >>> mask = parse_pattern("MMM d, y")
        >>> [t.content for t in tokenize("Jan 5, 2024", mask)]
        ['Jan', ' ', '5', ', ', '2024']
    """
    tokens: list[Token] = []
    remaining = rendered
    pending: Granularity | None = None

    for segment in mask:
        if not segment.is_delimiter:
            pending = segment.level
            continue

        literal = segment.text
        head, found, tail = remaining.partition(literal)
        # Without a pending field the literal must follow immediately
        if not found or (pending is None and head):
            diagnostic = ErrorTemplate.render_mismatch(mask.pattern, rendered, literal)
            raise RenderMismatchError(diagnostic, fallback_value=rendered)

        if pending is not None:
            tokens.append(Token(kind=pending, content=head))
            pending = None
        tokens.append(Token(kind=None, content=literal))
        remaining = tail

    if pending is not None:
        tokens.append(Token(kind=pending, content=remaining))
    elif remaining:
        diagnostic = ErrorTemplate.render_mismatch(mask.pattern, rendered, remaining)
        raise RenderMismatchError(diagnostic, fallback_value=rendered)

    return tuple(tokens)
