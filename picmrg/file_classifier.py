"""Filename checks for supported images and previously generated outputs."""

import os
import re

SUPPORTED_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tif", ".tiff", ".webp")

# Names written by older versions of the tool
GENERATED_OUTPUT_NAMES = ("merge.png", "merged.png")

# "merged-YY-MM-DD.png", any two-digit triple matches
GENERATED_OUTPUT_PATTERN = re.compile(r"merged-[0-9]{2}-[0-9]{2}-[0-9]{2}\.png")


def is_supported_image(filename):
	"""Return True if the file extension (case-insensitive) is a supported image format."""
	extension = os.path.splitext(os.path.basename(filename))[1]
	return extension.lower() in SUPPORTED_EXTENSIONS


def is_generated_output(filename):
	"""
	Check whether a filename follows the naming convention of merged outputs.

	Files matching this convention are excluded from merge inputs and are
	deleted before a new merged image is written, so the check is strict:
	"merged-2024-01-16.png" or "merged-image.png" are user files.

	Args:
	    filename: File name or path; only the base name is inspected

	Returns:
	    True for "merge.png", "merged.png" and "merged-YY-MM-DD.png"
	"""
	name = os.path.basename(filename)
	if name in GENERATED_OUTPUT_NAMES:
		return True
	return GENERATED_OUTPUT_PATTERN.fullmatch(name) is not None
