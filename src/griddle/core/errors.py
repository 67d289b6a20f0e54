"""Exception types raised by griddle."""


class GriddleError(Exception):
    """Base class for all griddle errors."""


class InvalidArgumentError(GriddleError, ValueError):
    """A structurally invalid argument, such as a non-positive buffer size."""


class OutOfRangeError(GriddleError, IndexError):
    """A cell was addressed outside of the current buffer bounds."""


class DisplayClosedError(GriddleError, RuntimeError):
    """A display was used after being closed."""
