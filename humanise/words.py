"""Small English text helpers shared by the humanisers."""

from collections.abc import Iterable
from typing import Any


def plural_suffix(count: int, word: str, opposite: bool = False) -> str:
    """Append an ``s`` to ``word`` unless ``count`` is exactly one.

    With ``opposite=True`` the rule flips, which suits verbs: one machine
    ``makes`` something, five machines ``make`` it.

    Examples:
        >>> plural_suffix(1, "apple")
        'apple'
        >>> plural_suffix(5, "apple")
        'apples'
        >>> plural_suffix(1, "make", opposite=True)
        'makes'
    """
    plural = count != 1
    if plural != opposite:
        return f"{word}s"
    return word


def humanise_list(
    items: Iterable[Any],
    conjunction: str | None = "and",
    separator: str = ", ",
) -> str:
    """Join items the way a sentence would list them.

    Two items are joined with the bare conjunction; three or more use a
    serial comma before it. Without a conjunction every item is joined
    with ``separator``.

    Examples:
        >>> humanise_list(["apples"])
        'apples'
        >>> humanise_list(["apples", "bananas"])
        'apples and bananas'
        >>> humanise_list(["apples", "bananas", "strawberries"])
        'apples, bananas, and strawberries'
    """
    parts = [str(item) for item in items]
    if conjunction is None or len(parts) < 2:
        return separator.join(parts)
    if len(parts) == 2:
        return f"{parts[0]} {conjunction} {parts[1]}"
    head = separator.join(parts[:-1])
    return f"{head}{separator}{conjunction} {parts[-1]}"
