"""Aspect-preserving resize utilities."""

from PIL import Image

RESAMPLING = Image.Resampling.LANCZOS


def target_dimension(values):
	"""
	Choose the common dimension all images are scaled to.

	The smallest value is used so that no image is enlarged past the
	resolution of the smallest one.

	Args:
	    values: Heights (side-by-side layout) or widths (stacked layout)

	Returns:
	    The minimum of the values
	"""
	values = list(values)
	if not values:
		raise ValueError("Cannot choose a target dimension for an empty image set")
	return min(values)


def resize_to_height(image, target_height):
	"""
	Scale an image to a target height, keeping its aspect ratio.

	Args:
	    image: PIL Image
	    target_height: Height of the result in pixels

	Returns:
	    PIL Image, the input itself when the height already matches
	"""
	width, height = image.size
	if height == target_height:
		return image

	new_width = max(1, round(width * target_height / height))
	return image.resize((new_width, target_height), RESAMPLING)


def resize_to_width(image, target_width):
	"""Scale an image to a target width, keeping its aspect ratio."""
	width, height = image.size
	if width == target_width:
		return image

	new_height = max(1, round(height * target_width / width))
	return image.resize((target_width, new_height), RESAMPLING)
