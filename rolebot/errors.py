# rolebot/errors.py
# Error taxonomy shared by the pipeline, the clients and the HTTP layer.


class RolebotError(Exception):
    """Base class for every error raised by rolebot."""


class MissingInput(RolebotError):
    """The request carried no usable query."""


class ProviderError(RolebotError):
    """An embedding or chat-model call failed or returned malformed data."""


class DimensionMismatchError(ProviderError, ValueError):
    """Two vectors that must share a dimensionality do not."""

    def __init__(self, left: int, right: int):
        super().__init__(f"Vectors must have the same length ({left} != {right})")
        self.left = left
        self.right = right
