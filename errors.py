class RayTracerError(Exception):
    """Base class for every error raised by the kernel, the canvas and the renderer."""


class IndexOutOfBoundsError(RayTracerError, IndexError):
    """A matrix, vector or canvas coordinate lies outside the valid range."""


class NotInvertibleError(RayTracerError, ValueError):
    """The matrix determinant is zero."""


class TransformNotInvertibleError(NotInvertibleError):
    """An object's transform cannot be inverted, so rays cannot be moved into object space."""


class EncodingIOError(RayTracerError, OSError):
    """Writing an encoded image to disk failed."""
