"""Exception and warning classes raised by polykernel."""


class PolykernelError(Exception):
    """Base class for all polykernel errors."""


class ValidationError(PolykernelError):
    """Raised when input values are malformed (e.g. non-finite coordinates)."""


class DegenerateInputError(PolykernelError):
    """Raised when a polygon cannot be triangulated.

    Covers rings with fewer than three distinct vertices, rings enclosing
    zero area, holes that cannot be bridged to the outer boundary and rings
    on which ear clipping finds no ear (self-intersecting input).
    """


class DegenerateGeometryError(PolykernelError):
    """Raised when a computation is undefined for the given points.

    For example the curvature through three points when two of them
    coincide.
    """


class ConfigurationError(PolykernelError):
    """Raised for invalid configuration values."""


class IterationLimitWarning(UserWarning):
    """Emitted when the simplex search gives up after its iteration budget."""


__all__ = [
    'PolykernelError',
    'ValidationError',
    'DegenerateInputError',
    'DegenerateGeometryError',
    'ConfigurationError',
    'IterationLimitWarning',
]
