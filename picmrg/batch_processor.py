"""Batch processing of every subdirectory under a root folder."""

import os
from dataclasses import dataclass, field

from tqdm import tqdm

from picmrg.directory_scanner import list_subdirectories
from picmrg.errors import FatalStartupError, PicmrgError
from picmrg.merge_orchestrator import MergeStatus, merge_directory


@dataclass
class BatchSummary:
	"""Counts and per-directory results of one batch run."""
	merged: int = 0
	skipped: int = 0
	failed: int = 0
	results: list = field(default_factory=list)

	def record(self, result):
		self.results.append(result)
		if result.status is MergeStatus.MERGED:
			self.merged += 1
		elif result.status is MergeStatus.FAILED:
			self.failed += 1
		else:
			self.skipped += 1

	@property
	def directories_with_images(self):
		return sum(1 for r in self.results if r.status is not MergeStatus.SKIPPED_NO_IMAGES)


def validate_root(root):
	"""
	Check that the root folder can be processed.

	Raises:
	    FatalStartupError: if root is missing, not a directory or unreadable
	"""
	if not os.path.exists(root):
		raise FatalStartupError(f"Root path not found: {root}")
	if not os.path.isdir(root):
		raise FatalStartupError(f"Root path is not a directory: {root}")
	if not os.access(root, os.R_OK | os.X_OK):
		raise FatalStartupError(f"Root path is not readable: {root}")


def format_result(result):
	"""Return the status line printed for a directory, or None to stay silent."""
	dir_name = os.path.basename(result.directory)

	if result.status is MergeStatus.MERGED:
		return f"✓ Merged {dir_name} -> {os.path.basename(result.output_path)}"
	if result.status is MergeStatus.SKIPPED_TOO_FEW:
		return f"- Skipped {dir_name} ({result.reason})"
	if result.status is MergeStatus.SKIPPED_NO_IMAGES:
		return None
	return f"✗ Failed to merge images in {dir_name}: {result.reason}"


def process_root(root, verbose=False):
	"""
	Merge the images of every immediate subdirectory of root.

	Directories are processed one at a time in name order; a failing
	directory is reported and the run continues with the next one.

	Args:
	    root: Folder whose subdirectories hold the images
	    verbose: If True, print a line for every directory (including those
	        without images). If False, show a progress bar with one line per
	        merged, skipped or failed directory

	Returns:
	    BatchSummary of the run

	Raises:
	    FatalStartupError: if root cannot be processed at all
	"""
	root = os.fspath(root)
	validate_root(root)

	try:
		subdirectories = list_subdirectories(root)
	except PicmrgError as e:
		raise FatalStartupError(str(e)) from e

	summary = BatchSummary()

	directories_iter = tqdm(subdirectories, desc="Merging", unit="dir", disable=verbose or not subdirectories)

	for directory in directories_iter:
		dir_name = os.path.basename(directory)
		if verbose:
			print(f"Merging images in directory: {dir_name} ...")
		else:
			directories_iter.set_description(f"Merging: {dir_name[:40]}")

		result = merge_directory(directory)
		summary.record(result)

		for _, reason in result.skipped_files:
			tqdm.write(f"[WARNING] {dir_name}: {reason}")

		line = format_result(result)
		if line is None and verbose:
			line = f"- Skipped {dir_name} (no images)"
		if line is not None:
			tqdm.write(line)

		if verbose and result.removed_outputs:
			for removed in result.removed_outputs:
				print(f"  Removed previous output: {os.path.basename(removed)}")

	print_summary(summary)
	return summary


def print_summary(summary):
	"""Print the final statistics of a batch run."""
	if summary.directories_with_images == 0:
		print("No directories with images found to merge.")
		return

	print("\n" + "=" * 70)
	print("MERGING COMPLETE")
	print("=" * 70)
	print(f"✓ Merged: {summary.merged}")
	if summary.skipped > 0:
		print(f"- Skipped: {summary.skipped}")
	if summary.failed > 0:
		print(f"✗ Failed: {summary.failed}")
	print("=" * 70)
