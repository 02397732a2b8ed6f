class PicrossError(Exception):
    """Base class for every error raised by the board core."""


class InvalidDimension(PicrossError, ValueError):
    """Board or pattern dimensions that cannot describe a grid."""


class IndexOutOfRange(PicrossError, IndexError):
    """A row or column index outside the board."""

    def __init__(self, axis: str, index: int, size: int):
        self.axis = axis
        self.index = index
        self.size = size
        super().__init__(f"{axis} index {index} out of range [0, {size})")


class InvalidPattern(PicrossError, ValueError):
    """A pattern row containing a character that is neither filled nor empty."""
