from types import SimpleNamespace

import pytest

from picmrg.orientation import (
	TIE_BREAK_ORIENTATION,
	Orientation,
	break_tie,
	classify_orientation,
	is_tall,
)


def _sizes(*dimensions):
	return [SimpleNamespace(width=w, height=h) for w, h in dimensions]


def test_is_tall():
	assert is_tall(100, 200)
	assert not is_tall(200, 100)
	assert not is_tall(200, 200)


def test_majority_tall_is_vertical():
	assert classify_orientation(_sizes((100, 200), (150, 300))) is Orientation.VERTICAL


def test_majority_wide_is_horizontal():
	assert classify_orientation(_sizes((300, 150), (400, 200))) is Orientation.HORIZONTAL


def test_mixed_set_with_wide_majority():
	assert classify_orientation(_sizes((100, 200), (300, 150), (200, 100))) is Orientation.HORIZONTAL


def test_square_images_count_as_wide():
	assert classify_orientation(_sizes((100, 300), (200, 200), (300, 300))) is Orientation.HORIZONTAL


def test_three_tall_images():
	assert classify_orientation(_sizes((200, 400), (200, 400), (200, 400))) is Orientation.VERTICAL


def test_tie_resolves_to_horizontal():
	assert TIE_BREAK_ORIENTATION is Orientation.HORIZONTAL
	assert break_tie(2, 2) is Orientation.HORIZONTAL
	assert classify_orientation(_sizes((100, 200), (200, 100))) is Orientation.HORIZONTAL


@pytest.mark.parametrize(
	"tall_count, wide_count, expected",
	[
		(3, 0, Orientation.VERTICAL),
		(2, 1, Orientation.VERTICAL),
		(1, 2, Orientation.HORIZONTAL),
		(0, 0, Orientation.HORIZONTAL),
	],
)
def test_break_tie_counts(tall_count, wide_count, expected):
	assert break_tie(tall_count, wide_count) is expected


def test_empty_set_uses_tie_break():
	assert classify_orientation([]) is TIE_BREAK_ORIENTATION
