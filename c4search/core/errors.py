# c4search/core/errors.py


class OutOfBoundsError(IndexError):
    """A cell outside width x height was addressed. Always a programming error."""


class InvalidBoardError(ValueError):
    """Board construction input does not describe a width x height grid."""


class NoLegalMoveError(ValueError):
    """Search was asked for a move on a board where every column is full."""
