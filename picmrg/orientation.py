"""Orientation analysis of a set of images."""

from enum import Enum

import numpy as np


class Orientation(Enum):
	VERTICAL = "vertical"  # majority of images taller than wide
	HORIZONTAL = "horizontal"  # majority of images wider than tall (or square)


# Stacking keeps the output narrow for mixed sets
TIE_BREAK_ORIENTATION = Orientation.HORIZONTAL


def is_tall(width, height):
	"""Return True if an image is taller than wide. Square images count as wide."""
	return height > width


def break_tie(tall_count, wide_count):
	"""
	Decide the orientation from the tall and wide counts.

	Args:
	    tall_count: Number of images taller than wide
	    wide_count: Number of images wider than tall, or square

	Returns:
	    Orientation of the majority, TIE_BREAK_ORIENTATION on equal counts
	"""
	if tall_count > wide_count:
		return Orientation.VERTICAL
	if wide_count > tall_count:
		return Orientation.HORIZONTAL
	return TIE_BREAK_ORIENTATION


def classify_orientation(images):
	"""
	Classify a set of images as vertical- or horizontal-dominant.

	Args:
	    images: Sequence of ImageFile (anything with width and height)

	Returns:
	    Orientation of the set
	"""
	if not images:
		return break_tie(0, 0)

	sizes = np.array([(img.width, img.height) for img in images])
	tall_count = int(np.count_nonzero(is_tall(sizes[:, 0], sizes[:, 1])))
	wide_count = len(images) - tall_count
	return break_tie(tall_count, wide_count)
