"""Imagers: units that produce a Matrix for a frame."""

from holidaylights.imagers.base import Imager
from holidaylights.imagers.composite import CompositeImager, Layer
from holidaylights.imagers.converter import ImageToMatrixConverter
from holidaylights.imagers.image_file import ImageFileImager
from holidaylights.imagers.random_image import RandomImage
from holidaylights.imagers.text import TextImager, extract_text_matrix, find_text_bounds

__all__ = [
    "Imager",
    "CompositeImager",
    "Layer",
    "ImageToMatrixConverter",
    "ImageFileImager",
    "RandomImage",
    "TextImager",
    "extract_text_matrix",
    "find_text_bounds",
]
