"""Image loading utilities."""

import os
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from picmrg.errors import DecodeError, NotFoundError


@dataclass(frozen=True)
class ImageFile:
	"""
	A decoded source image and the file metadata the merge needs.

	Fields:
	    path: Path of the source file
	    image: Decoded PIL image in RGBA mode
	    width: Width in pixels
	    height: Height in pixels
	    modified: Filesystem modification time (POSIX timestamp)
	"""
	path: str
	image: Image.Image
	width: int
	height: int
	modified: float


def load_image_file(path):
	"""
	Decode an image file and record its size and modification time.

	Args:
	    path: Path to the image file

	Returns:
	    ImageFile with the fully decoded RGBA image

	Raises:
	    NotFoundError: if the file no longer exists
	    DecodeError: if the file is not a valid or complete image
	"""
	path = os.fspath(path)
	try:
		modified = os.path.getmtime(path)
		with Image.open(path) as img:
			# convert() forces a full decode so truncated files fail here
			rgba_img = img.convert("RGBA")
	except FileNotFoundError as e:
		raise NotFoundError(f"File not found: {path}") from e
	except (UnidentifiedImageError, Image.DecompressionBombError) as e:
		raise DecodeError(f"Not a valid image: {os.path.basename(path)}") from e
	except OSError as e:
		raise DecodeError(f"Could not decode {os.path.basename(path)}: {e}") from e

	width, height = rgba_img.size
	return ImageFile(
		path=path,
		image=rgba_img,
		width=width,
		height=height,
		modified=modified,
	)


def load_image_set(image_paths):
	"""
	Load every image of a directory, keeping going past unreadable files.

	Args:
	    image_paths: Paths in merge order

	Returns:
	    Tuple of (list of ImageFile in input order, list of (path, reason)
	    for the files that could not be loaded)
	"""
	images = []
	skipped = []
	for image_path in image_paths:
		try:
			images.append(load_image_file(image_path))
		except (DecodeError, NotFoundError) as e:
			skipped.append((os.fspath(image_path), str(e)))
	return images, skipped
