"""PatternCursor: a compiled regex paired with a resumable scan position.

``re.Pattern`` objects are stateless, so a scan that should pause and resume
needs somewhere to keep its position. PatternCursor keeps it in
``last_index``:

- global cursors search forward from ``last_index``;
- sticky cursors only match exactly at ``last_index``;
- a successful match moves ``last_index`` to the match end (one past it when
  the match is empty, so repeated calls always make progress);
- a failed match resets ``last_index`` to 0.

Example::

    cursor = PatternCursor(r"\\d+")
    cursor.exec("a1b22")   # <re.Match ... '1'>, last_index == 2
    cursor.exec("a1b22")   # <re.Match ... '22'>, last_index == 5
    cursor.exec("a1b22")   # None, last_index == 0
"""

from __future__ import annotations

import re

__all__ = ["PatternCursor"]


class PatternCursor:
    """A regex with a match position that survives between calls.

    Args:
        pattern:    Regex source text or an already compiled pattern.
        flags:      ``re`` flags combined with those of ``pattern``.
        global_:    Search forward from ``last_index`` and advance it.
        sticky:     Only match at ``last_index``. Implies position tracking.
        last_index: Starting scan position. Must be >= 0.
    """

    __slots__ = ("global_", "last_index", "pattern", "sticky")

    def __init__(
        self,
        pattern: str | re.Pattern[str],
        flags: int = 0,
        *,
        global_: bool = True,
        sticky: bool = False,
        last_index: int = 0,
    ) -> None:
        if last_index < 0:
            msg = f"last_index must be >= 0, got {last_index}"
            raise ValueError(msg)
        if isinstance(pattern, re.Pattern):
            pattern = re.compile(pattern.pattern, pattern.flags | flags)
        else:
            pattern = re.compile(pattern, flags)
        self.pattern: re.Pattern[str] = pattern
        self.global_ = global_
        self.sticky = sticky
        self.last_index = last_index

    @property
    def source(self) -> str:
        """The regex source text."""
        return self.pattern.pattern

    @property
    def flags(self) -> int:
        """The compiled ``re`` flags."""
        return self.pattern.flags

    def exec(self, text: str) -> re.Match[str] | None:
        """Run one match step against ``text``.

        Returns:
            The match, or None when nothing matched from the current position.
        """
        if not (self.global_ or self.sticky):
            return self.pattern.search(text)

        start = self.last_index
        if start > len(text):
            self.last_index = 0
            return None

        if self.sticky:
            match = self.pattern.match(text, start)
        else:
            match = self.pattern.search(text, start)

        if match is None:
            self.last_index = 0
            return None

        end = match.end()
        self.last_index = end + 1 if end == match.start() else end
        return match

    def test(self, text: str) -> bool:
        return self.exec(text) is not None

    def reset(self) -> None:
        self.last_index = 0

    def __repr__(self) -> str:
        return (
            f"PatternCursor({self.source!r}, flags={self.flags}, "
            f"global_={self.global_}, sticky={self.sticky}, "
            f"last_index={self.last_index})"
        )
