"""
Custom exceptions shared across layers.

NOTE: An illegal move is NOT an exception. The board simply does not change and the selection is dropped.
These errors are for malformed input at the boundary or for misuse of the domain objects.
"""


class ChessboardError(Exception):
    """Top-level error. Catch this one if you do not care which layer complained."""


class InvalidRequestError(ChessboardError):
    """Input coming from the adapter / API layer could not be interpreted."""


class InvalidFENError(ChessboardError):
    """Placement string does not describe a valid board."""


class BoardStateError(ChessboardError):
    """The board was asked to do something that breaks its invariants (unknown piece, two pieces on one square, ...)"""
