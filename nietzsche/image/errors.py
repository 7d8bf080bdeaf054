"""Errors raised by image operations."""

from __future__ import annotations

import enum


@enum.unique
class ImageErrorKind(enum.Enum):
    """The kinds of failure an image operation can report."""

    COULD_NOT_READ_FILE = "could not read file"
    COULD_NOT_DECODE_FILE = "could not decode file"
    COULD_NOT_ENCODE_FILE = "could not encode file"
    COULD_NOT_SAVE_FILE = "could not save file"
    INVALID_RESIZE_MODE = "invalid resize mode"
    INVALID_PERCENTAGE = "percentage must be greater than 0"
    INVALID_PIXEL_WIDTH = "pixel width must be greater than 0"
    INVALID_PIXEL_HEIGHT = "pixel height must be greater than 0"
    INVALID_PIXEL = "pixel width or height must be valid"
    WIDTH_OR_HEIGHT_ZERO = "width or height must be greater than 0"
    COORDINATES_INVALID = "coordinates must be greater than 0"
    INVALID_COMPRESSION_LEVEL = "invalid compression level"
    INVALID_FORMAT = "invalid format"
    INVALID_ANGLE = "invalid angle"
    INVALID_MULTIPLIER = "invalid multiplier"
    COULD_NOT_CREATE_FILE = "could not create file"


class ImageError(Exception):
    """An image operation failed; ``kind`` says how."""

    def __init__(self, kind: ImageErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.value