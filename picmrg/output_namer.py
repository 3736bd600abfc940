"""Output file naming based on the newest source image."""

from datetime import datetime

OUTPUT_PREFIX = "merged-"
OUTPUT_EXTENSION = ".png"

# Two-digit year, month and day of the local date
OUTPUT_DATE_FORMAT = "%y-%m-%d"


def latest_modification(images):
	"""Return the newest modification time of the set as a local datetime."""
	if not images:
		raise ValueError("Cannot name the output of an empty image set")
	latest_timestamp = max(image_file.modified for image_file in images)
	return datetime.fromtimestamp(latest_timestamp)


def compute_output_name(images):
	"""
	Build the merged output filename for a set of images.

	Example: sources modified on 2024-01-15 and 2024-01-22 give
	"merged-24-01-22.png".
	"""
	date_str = latest_modification(images).strftime(OUTPUT_DATE_FORMAT)
	return f"{OUTPUT_PREFIX}{date_str}{OUTPUT_EXTENSION}"
