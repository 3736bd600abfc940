"""Directory listing for merge candidates (one level, never recursive)."""

import os

from picmrg.errors import AccessError, NotFoundError
from picmrg.file_classifier import is_generated_output, is_supported_image


def _list_entries(directory):
	"""List a directory's entries, translating OS errors into picmrg errors."""
	if not os.path.isdir(directory):
		raise NotFoundError(f"Directory not found: {directory}")

	try:
		with os.scandir(directory) as entries:
			return list(entries)
	except FileNotFoundError as e:
		raise NotFoundError(f"Directory not found: {directory}") from e
	except PermissionError as e:
		raise AccessError(f"Permission denied: {directory}") from e


def scan_directory(directory):
	"""
	Find the images of a directory that should go into a merge.

	Only regular files directly inside the directory are considered. Files
	named like a previous merge output are left out so they never end up
	merged into the next output.

	Args:
	    directory: Directory to scan

	Returns:
	    List of file paths sorted by filename

	Raises:
	    NotFoundError: if the directory does not exist
	    AccessError: if the directory cannot be read
	"""
	image_paths = [
		entry.path
		for entry in _list_entries(directory)
		if entry.is_file()
		and is_supported_image(entry.name)
		and not is_generated_output(entry.name)
	]
	return sorted(image_paths, key=os.path.basename)


def find_generated_outputs(directory):
	"""Return the paths of previously merged outputs in a directory, sorted."""
	return sorted(
		entry.path
		for entry in _list_entries(directory)
		if entry.is_file() and is_generated_output(entry.name)
	)


def list_subdirectories(root):
	"""Return the immediate subdirectories of root, ordered by name."""
	subdirectories = [entry.path for entry in _list_entries(root) if entry.is_dir()]
	return sorted(subdirectories, key=os.path.basename)
