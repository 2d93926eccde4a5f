"""Join two token sequences into one range string.

Given mask "MMM d, y" and best match MONTH:

    left   = "Jan "          (start tokens up to the first finer field)
    right  = ", 2024"        (end tokens back to the first finer field)
    middle = "5" / "10"      (both instants)
    result = "Jan 5 - 10, 2024"

Python 3.13+.
"""

from collections.abc import Sequence

from smartrange.constants import DEFAULT_SEPARATOR
from smartrange.enums import Granularity
from smartrange.pattern import PatternMask, Token

__all__ = ["splice"]


def splice(
    mask: PatternMask,
    start_tokens: Sequence[Token],
    end_tokens: Sequence[Token],
    best_match: Granularity,
    *,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Compose the range string.

    Segments coarser than or equal to ``best_match`` at the front are taken
    once from the start instant, those at the back once from the end
    instant. Everything between is rendered for both instants around
    ``separator``. When every field is shared, the start rendering is
    returned alone. When no field is shared (always the case for
    Granularity.NEVER), both full renderings are joined, literals included.

    Args:
        mask: Pattern mask both token sequences were cut with
        start_tokens: Tokens of the start instant
        end_tokens: Tokens of the end instant
        best_match: Output of find_best_match()
        separator: Text placed between the two halves

    Returns:
        The composed range string

    Raises:
        ValueError: If the token sequences do not match the mask length
    """
    count = len(mask)
    if len(start_tokens) != count or len(end_tokens) != count:
        msg = (
            f"Token count mismatch: mask has {count} segments, got "
            f"{len(start_tokens)} start and {len(end_tokens)} end tokens"
        )
        raise ValueError(msg)

    left: list[str] = []
    i = 0
    while i < count:
        segment = mask[i]
        if segment.is_delimiter:
            left.append(segment.text)
        elif segment.level > best_match:
            break
        else:
            left.append(start_tokens[i].content)
        i += 1

    if i == count:
        return "".join(left)

    # No field shared: shared literals alone would clip one rendering
    if not any(level <= best_match for level in mask.levels):
        return (
            "".join(token.content for token in start_tokens)
            + separator
            + "".join(token.content for token in end_tokens)
        )

    right: list[str] = []
    j = count - 1
    while j > i:
        segment = mask[j]
        if not segment.is_delimiter and segment.level > best_match:
            break
        right.append(end_tokens[j].content)
        j -= 1

    start_middle = "".join(token.content for token in start_tokens[i : j + 1])
    end_middle = "".join(token.content for token in end_tokens[i : j + 1])

    return "".join(left) + start_middle + separator + end_middle + "".join(reversed(right))
