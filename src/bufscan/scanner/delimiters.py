"""Token boundary classification."""

from bufscan.models.state import ReaderState


class DelimiterClassifier:
    """Decides whether a character ends a token.

    Whitespace always does. The state's delimiter override, when set, adds
    exactly one more character. The classifier reads the override from the
    shared ReaderState on every call so set/clear take effect immediately.
    """

    __slots__ = ("_state",)

    def __init__(self, state: ReaderState) -> None:
        self._state = state

    def is_delimiter(self, c: str) -> bool:
        return c.isspace() or c == self._state.delimiter
