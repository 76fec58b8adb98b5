class LudoError(Exception):
    """Base exception for the ludo_core package."""

    pass


class BoardConfigurationError(LudoError, ValueError):
    """Raised when the board is built or called with out-of-range arguments.

    Covers player count, player index, piece index and step count. Distinct
    from ``MoveResult.INVALID_MOVE``, which is an ordinary rule outcome.
    """

    pass


class CorruptedBoardError(LudoError, RuntimeError):
    """Raised when a piece cannot be found anywhere on the board (broken invariant)."""

    pass


class GameAborted(LudoError):
    """Raised when an interactive player asks to quit."""

    pass
