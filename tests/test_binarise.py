"""Tests for the threshold() contract: shapes, values, inversion and validation."""

from __future__ import annotations

import numpy as np
import pytest

from threshlab import D, InvalidArgument, binarise, threshold, to_grayscale

METHODS = ["binary", "otsu", "triangle"]


def _random_image(channels: int, seed: int = 0) -> np.ndarray:
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(12, 9, channels), dtype=np.int32)


def test_binary_example_scenario():
    image = np.array([[10, 200], [250, 5]]).reshape(2, 2, 1)

    out = threshold(image, "binary", False, 0.5)

    assert out.shape == (2, 2, 1)
    assert out[..., 0].tolist() == [[0, 255], [255, 0]]


def test_binary_example_scenario_inverted():
    image = np.array([[10, 200], [250, 5]]).reshape(2, 2, 1)

    out = threshold(image, "binary", True, 0.5)

    assert out[..., 0].tolist() == [[255, 0], [0, 255]]


@pytest.mark.parametrize("method", METHODS)
@pytest.mark.parametrize("channels", [1, 3])
def test_output_is_0_or_255_with_input_shape(method, channels):
    image = _random_image(channels)

    out = threshold(image, method)

    assert out.shape == image.shape
    assert out.dtype == np.int32
    assert set(np.unique(out)).issubset({0, 255})


@pytest.mark.parametrize("method", METHODS)
@pytest.mark.parametrize("channels", [1, 3])
@pytest.mark.parametrize("thresh_value", [0.0, 0.3, 0.5, 1.0])
def test_inverted_is_exact_complement(method, channels, thresh_value):
    image = _random_image(channels, seed=7)

    plain = threshold(image, method, False, thresh_value)
    inverted = threshold(image, method, True, thresh_value)

    assert np.array_equal(inverted, 255 - plain)


@pytest.mark.parametrize("inverted", [False, True])
def test_binary_method_matches_elementwise_comparison(inverted):
    image = _random_image(3, seed=3)
    gray = to_grayscale(image)
    thr = 0.4 * 255

    out = threshold(image, "binary", inverted, 0.4)

    expected = (gray <= thr) if inverted else (gray > thr)
    assert np.array_equal(out[..., 0] == 255, expected[..., 0])


def test_rgb_output_repeats_mask_on_every_channel():
    image = _random_image(3, seed=11)

    out = threshold(image, "otsu")

    assert np.array_equal(out[..., 0], out[..., 1])
    assert np.array_equal(out[..., 0], out[..., 2])


def test_float_image_and_nested_lists_are_accepted():
    as_list = [[[10.0], [200.0]], [[250.0], [5.0]]]

    out = threshold(as_list)

    assert out[..., 0].tolist() == [[0, 255], [255, 0]]


def test_binarise_reports_threshold():
    image = np.zeros((4, 4, 1), dtype=np.uint8)
    image[:, 2:] = 220
    image[:, :2] = 30

    out, thr = binarise(image, "otsu")

    assert thr == 30
    assert (out[:, :2] == 0).all() and (out[:, 2:] == 255).all()


def test_input_is_not_mutated():
    image = _random_image(3, seed=5)
    before = image.copy()

    threshold(image, "triangle", True)

    assert np.array_equal(image, before)


@pytest.mark.parametrize("method", ["otsu", "triangle"])
@pytest.mark.parametrize(
    "image",
    [
        np.full((5, 5, 1), 77, dtype=np.uint8),
        np.full((3, 3, 1), 77.4),
        np.full((4, 4, 3), 77, dtype=np.uint8),
        np.tile(np.array([10.3, 200.7, 50.2]), (3, 3, 1)),
    ],
)
def test_constant_image_is_deterministic(method, image):
    out = threshold(image, method)
    inverted = threshold(image, method, True)

    assert (out == 0).all()
    assert (inverted == 255).all()


def test_unset_arguments_read_current_defaults(monkeypatch):
    image = np.array([[10, 200], [250, 5]]).reshape(2, 2, 1)
    monkeypatch.setattr(D, "THRESH_VALUE", 0.9)

    out = threshold(image)

    assert out[..., 0].tolist() == [[0, 0], [255, 0]]


@pytest.mark.parametrize(
    "image",
    [
        np.zeros((4, 4), dtype=np.uint8),
        np.zeros((2, 4, 4, 1), dtype=np.uint8),
        np.zeros((4, 4, 2), dtype=np.uint8),
        np.zeros((4, 4, 4), dtype=np.uint8),
        np.zeros((0, 4, 1), dtype=np.uint8),
        np.zeros((4, 4, 1), dtype=bool),
        np.zeros((4, 4, 1), dtype=np.complex64),
        np.full((1, 1, 1), "a"),
    ],
)
def test_invalid_images_are_rejected(image):
    with pytest.raises(InvalidArgument):
        threshold(image)


def test_unknown_method_is_rejected():
    with pytest.raises(InvalidArgument, match="method"):
        threshold(np.zeros((2, 2, 1)), "adaptive")


@pytest.mark.parametrize("thresh_value", [-0.1, 1.5, "0.5", True, float("nan")])
def test_thresh_value_out_of_range_is_rejected(thresh_value):
    with pytest.raises(InvalidArgument):
        threshold(np.zeros((2, 2, 1)), "binary", False, thresh_value)


def test_invalid_argument_is_a_value_error():
    assert issubclass(InvalidArgument, ValueError)
