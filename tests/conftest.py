import os
from datetime import datetime

import pytest
from PIL import Image

from picmrg.image_loader import ImageFile


def generate_test_image(width, height, color):
	"""Solid RGB image of the given size."""
	return Image.new("RGB", (width, height), tuple(color))


def save_test_image(image, path):
	os.makedirs(os.path.dirname(path), exist_ok=True)
	image.save(path)
	return path


def make_image_file(width, height, color=(255, 0, 0), modified=0.0, path="memory.png"):
	"""ImageFile built in memory, for tests that do not need the filesystem."""
	return ImageFile(
		path=path,
		image=generate_test_image(width, height, color).convert("RGBA"),
		width=width,
		height=height,
		modified=modified,
	)


def set_modified(path, year, month, day, hour=12):
	"""Set the modification time of a file to a local date."""
	timestamp = datetime(year, month, day, hour).timestamp()
	os.utime(path, (timestamp, timestamp))


@pytest.fixture
def test_root(tmp_path):
	"""
	Root folder with one subdirectory per scenario:
	vertical-images, horizontal-images, mixed-images, single-image,
	empty-dir and no-images.
	"""
	root = tmp_path / "root"
	for name in ("vertical-images", "horizontal-images", "mixed-images", "single-image", "empty-dir", "no-images"):
		(root / name).mkdir(parents=True)

	# Taller than wide
	save_test_image(generate_test_image(200, 400, (255, 0, 0)), root / "vertical-images" / "red.png")
	save_test_image(generate_test_image(150, 350, (0, 255, 0)), root / "vertical-images" / "green.jpg")
	save_test_image(generate_test_image(180, 420, (0, 0, 255)), root / "vertical-images" / "blue.jpeg")

	# Wider than tall
	save_test_image(generate_test_image(400, 200, (255, 255, 0)), root / "horizontal-images" / "yellow.png")
	save_test_image(generate_test_image(350, 150, (0, 255, 255)), root / "horizontal-images" / "cyan.bmp")
	save_test_image(generate_test_image(420, 180, (255, 0, 255)), root / "horizontal-images" / "magenta.tiff")

	# One tall, one wide, one square
	save_test_image(generate_test_image(100, 300, (255, 255, 255)), root / "mixed-images" / "white.png")
	save_test_image(generate_test_image(300, 100, (0, 0, 0)), root / "mixed-images" / "black.png")
	save_test_image(generate_test_image(200, 200, (128, 128, 128)), root / "mixed-images" / "gray.webp")

	save_test_image(generate_test_image(250, 250, (255, 165, 0)), root / "single-image" / "orange.png")

	(root / "no-images" / "readme.txt").write_text("This is not an image")
	(root / "no-images" / "data.json").write_text('{"test": true}')

	# Outputs of a previous run
	old_merged = generate_test_image(100, 100, (50, 50, 50))
	save_test_image(old_merged, root / "vertical-images" / "merged.png")
	save_test_image(old_merged, root / "horizontal-images" / "merged-23-12-25.png")

	return root
