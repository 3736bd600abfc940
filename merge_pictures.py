"""
Picture Merger - Merge the images of each subdirectory into one picture

For every folder directly under the root path that holds two or more images,
a single "merged-YY-MM-DD.png" is written into that folder. The date is the
newest modification date of the merged images. Previous merged outputs in the
folder are replaced.
"""

import argparse
import os
import sys
from importlib.metadata import PackageNotFoundError, version

from picmrg.batch_processor import process_root
from picmrg.errors import FatalStartupError

# ==================== CONFIGURATION ====================

# Print a line for every directory instead of a progress bar
VERBOSE = False

# ======================================================

PROGRAM_NAME = "picmrg"


def get_version():
	try:
		return version(PROGRAM_NAME)
	except PackageNotFoundError:
		return "dev"


def build_parser():
	parser = argparse.ArgumentParser(
		prog=PROGRAM_NAME,
		description="Merge the images of each subdirectory into one picture.",
		formatter_class=argparse.RawDescriptionHelpFormatter,
		epilog=(
			"Examples:\n"
			f"  {PROGRAM_NAME}                    # Use current directory\n"
			f"  {PROGRAM_NAME} /path/to/images    # Use specified directory"
		),
	)
	parser.add_argument(
		"root_path",
		nargs="?",
		default=None,
		metavar="ROOT_PATH",
		help="Directory to use as root path (default: current directory)",
	)
	return parser


def main(argv=None):
	args = build_parser().parse_args(argv)

	print(f"{PROGRAM_NAME} v{get_version()}: image merger\n")

	root_path = os.path.abspath(args.root_path or os.getcwd())
	print(f"Root path: {root_path}")

	try:
		process_root(root_path, verbose=VERBOSE)
	except FatalStartupError as e:
		print(f"Error scanning for images: {e}", file=sys.stderr)
		return 1

	return 0


if __name__ == "__main__":
	sys.exit(main())
