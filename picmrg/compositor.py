"""
Canvas composition.

Images are normalized to a common height (side by side) or a common width
(stacked) and pasted edge to edge, so the canvas size is exactly the sum of
the resized images along the merge direction:
1. Pick the common dimension (smallest height or width of the set)
2. Resize every image to it, keeping aspect ratio
3. Paste the images in order with no gaps
"""

from PIL import Image

from picmrg.orientation import Orientation
from picmrg.resizer import resize_to_height, resize_to_width, target_dimension

# Fully transparent, only visible where inputs are transparent themselves
BACKGROUND_COLOR = (0, 0, 0, 0)


def place_image_on_canvas(canvas, img, position):
	"""Paste image onto canvas handling transparency properly."""
	if img.mode == "RGBA":
		canvas.paste(img, position, img)
	else:
		img_rgba = img.convert("RGBA")
		canvas.paste(img_rgba, position, img_rgba)


def _source_images(images):
	if not images:
		raise ValueError("Cannot merge an empty image set")
	return [image_file.image for image_file in images]


def merge_horizontally(images):
	"""
	Place images side by side, all scaled to the smallest height of the set.

	Args:
	    images: Sequence of ImageFile in merge order

	Returns:
	    PIL Image (RGBA) of size (sum of resized widths, common height)
	"""
	sources = _source_images(images)
	common_height = target_dimension(img.height for img in sources)
	resized_images = [resize_to_height(img, common_height) for img in sources]

	canvas_width = sum(img.width for img in resized_images)
	canvas = Image.new("RGBA", (canvas_width, common_height), BACKGROUND_COLOR)

	x_offset = 0
	for img in resized_images:
		place_image_on_canvas(canvas, img, (x_offset, 0))
		x_offset += img.width

	return canvas


def merge_vertically(images):
	"""
	Stack images top to bottom, all scaled to the smallest width of the set.

	Args:
	    images: Sequence of ImageFile in merge order

	Returns:
	    PIL Image (RGBA) of size (common width, sum of resized heights)
	"""
	sources = _source_images(images)
	common_width = target_dimension(img.width for img in sources)
	resized_images = [resize_to_width(img, common_width) for img in sources]

	canvas_height = sum(img.height for img in resized_images)
	canvas = Image.new("RGBA", (common_width, canvas_height), BACKGROUND_COLOR)

	y_offset = 0
	for img in resized_images:
		place_image_on_canvas(canvas, img, (0, y_offset))
		y_offset += img.height

	return canvas


def layout_for(orientation):
	"""
	Map a set orientation to the merge function.

	The merge runs across the dominant orientation: tall images go side by
	side so the output height stays bounded, wide images are stacked so the
	output width stays bounded.
	"""
	if orientation is Orientation.VERTICAL:
		return merge_horizontally
	return merge_vertically


def compose(images, orientation):
	"""Merge images into one canvas using the layout for the orientation."""
	return layout_for(orientation)(images)
