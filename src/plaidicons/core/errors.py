"""Exceptions raised by the plaid icon pipeline."""


class PlaidiconsError(Exception):
    """Base class for every error raised while generating an icon."""

    pass


class InvalidSizeError(PlaidiconsError, ValueError):
    """The requested output size is not a positive integer."""

    pass


class RandomSourceError(PlaidiconsError):
    """Random bytes for a fresh seed could not be obtained."""

    pass


class ColorGenerationError(PlaidiconsError):
    """A palette color could not be drawn or parsed."""

    pass


class EncodingError(PlaidiconsError):
    """The pixel buffer could not be rasterized or encoded."""

    pass


class CropOutOfBoundsError(PlaidiconsError):
    """The crop box does not fit inside the rotated image.

    The working canvas is oversized by sqrt(2) so this should never happen
    with the default crop offset.
    """

    pass
