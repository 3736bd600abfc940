"""
Per-directory merge.

This module runs the whole merge for one directory:
1. Scan the directory for candidate images
2. Load them, dropping files that cannot be decoded
3. Classify the set orientation and compose the canvas
4. Name the output after the newest source
5. Remove previously merged outputs, then write the new one

Every outcome is returned as a MergeResult; nothing here raises for a
problem that only concerns this directory.
"""

import os
from dataclasses import dataclass, field
from enum import Enum

from picmrg.compositor import compose
from picmrg.directory_scanner import find_generated_outputs, scan_directory
from picmrg.errors import PicmrgError, WriteError
from picmrg.image_loader import load_image_set
from picmrg.orientation import classify_orientation
from picmrg.output_namer import compute_output_name

MIN_IMAGES_TO_MERGE = 2


class MergeStatus(Enum):
	MERGED = "merged"
	SKIPPED_TOO_FEW = "skipped_too_few"
	SKIPPED_NO_IMAGES = "skipped_no_images"
	FAILED = "failed"


@dataclass(frozen=True)
class MergeResult:
	"""
	Outcome of merging one directory.

	Fields:
	    directory: The processed directory
	    status: MergeStatus of the directory
	    output_path: Written file (MERGED only)
	    reason: Why the directory was skipped or failed
	    skipped_files: (path, reason) for each file that could not be loaded
	    removed_outputs: Previously merged files deleted before writing
	"""
	directory: str
	status: MergeStatus
	output_path: str = None
	reason: str = None
	skipped_files: list = field(default_factory=list)
	removed_outputs: list = field(default_factory=list)

	@property
	def is_skipped(self):
		return self.status in (MergeStatus.SKIPPED_TOO_FEW, MergeStatus.SKIPPED_NO_IMAGES)


def remove_generated_outputs(directory):
	"""
	Delete every previously merged output in a directory.

	Returns:
	    List of removed paths

	Raises:
	    WriteError: if a file cannot be removed
	"""
	removed = []
	for output_path in find_generated_outputs(directory):
		try:
			os.remove(output_path)
		except FileNotFoundError:
			continue
		except OSError as e:
			raise WriteError(f"Could not remove {os.path.basename(output_path)}: {e}") from e
		removed.append(output_path)
	return removed


def write_merged_image(canvas, output_path):
	"""Encode the canvas as PNG and write it to output_path."""
	try:
		canvas.save(output_path, format="PNG")
	except (OSError, ValueError) as e:
		raise WriteError(f"Could not write {os.path.basename(output_path)}: {e}") from e


def merge_directory(directory):
	"""
	Merge all images of a directory into a single merged-YY-MM-DD.png.

	Args:
	    directory: Directory containing the source images

	Returns:
	    MergeResult describing what happened
	"""
	directory = os.fspath(directory)

	try:
		image_paths = scan_directory(directory)
	except PicmrgError as e:
		return MergeResult(directory, MergeStatus.FAILED, reason=str(e))

	if not image_paths:
		return MergeResult(directory, MergeStatus.SKIPPED_NO_IMAGES, reason="no images")
	if len(image_paths) < MIN_IMAGES_TO_MERGE:
		return MergeResult(directory, MergeStatus.SKIPPED_TOO_FEW, reason="only one image")

	images, skipped_files = load_image_set(image_paths)
	try:
		if len(images) < MIN_IMAGES_TO_MERGE:
			return MergeResult(
				directory,
				MergeStatus.SKIPPED_TOO_FEW,
				reason=f"only {len(images)} readable image(s)",
				skipped_files=skipped_files,
			)

		orientation = classify_orientation(images)
		canvas = compose(images, orientation)
		output_path = os.path.join(directory, compute_output_name(images))

		try:
			# Old outputs go first, so a new stamp never leaves two outputs behind
			removed_outputs = remove_generated_outputs(directory)
			write_merged_image(canvas, output_path)
		except PicmrgError as e:
			return MergeResult(
				directory,
				MergeStatus.FAILED,
				reason=str(e),
				skipped_files=skipped_files,
			)
		finally:
			canvas.close()
	finally:
		for image_file in images:
			image_file.image.close()

	return MergeResult(
		directory,
		MergeStatus.MERGED,
		output_path=output_path,
		skipped_files=skipped_files,
		removed_outputs=removed_outputs,
	)
