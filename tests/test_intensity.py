import numpy as np
import pytest

from histeq.processing.enhancement import (
    log_transform,
    gamma_transform,
    calc_histogram,
    global_equalization,
    local_equalization,
    calculate_transform_function,
)


@pytest.mark.parametrize("transform", [log_transform, gamma_transform])
def test_point_transform_spans_full_range(transform, random_image):
    result = transform(random_image)
    assert result.dtype == np.uint8
    assert result.shape == random_image.shape
    assert result.min() == 0
    assert result.max() == 255


@pytest.mark.parametrize("transform", [log_transform, gamma_transform])
def test_point_transform_stretches_low_contrast(transform, low_contrast):
    result = transform(low_contrast)
    assert result.min() == 0
    assert result.max() == 255


@pytest.mark.parametrize("transform", [log_transform, gamma_transform])
def test_point_transform_is_monotonic(transform, gradient):
    row = transform(gradient)[0].astype(int)
    assert np.all(np.diff(row) >= 0)


@pytest.mark.parametrize("transform", [log_transform, gamma_transform])
def test_constant_image_is_returned_unchanged(transform, mid_gray):
    result = transform(mid_gray)
    assert np.array_equal(result, mid_gray)
    assert result is not mid_gray


def test_transforms_do_not_modify_input(random_image):
    before = random_image.copy()
    log_transform(random_image)
    gamma_transform(random_image)
    global_equalization(random_image)
    local_equalization(random_image)
    assert np.array_equal(random_image, before)


def test_gamma_below_one_brightens_midtones(gradient):
    result = gamma_transform(gradient, gamma=0.4)
    assert result[0, 64] > 64


@pytest.mark.parametrize("kwargs", [{"c": 0}, {"c": -1.0}, {"gamma": 0}, {"gamma": -0.5}])
def test_gamma_transform_rejects_bad_parameters(random_image, kwargs):
    with pytest.raises(ValueError):
        gamma_transform(random_image, **kwargs)


def test_log_transform_rejects_bad_scale(random_image):
    with pytest.raises(ValueError):
        log_transform(random_image, c=0)


def test_color_image_is_rejected():
    color = np.zeros((8, 8, 3), dtype=np.uint8)
    with pytest.raises(ValueError):
        log_transform(color)
    with pytest.raises(ValueError):
        calc_histogram(color)


def test_float_image_is_rejected():
    with pytest.raises(ValueError):
        global_equalization(np.zeros((8, 8), dtype=np.float32))


def test_histogram_of_mid_gray(mid_gray):
    hist = calc_histogram(mid_gray)
    assert hist.shape == (256,)
    assert hist[128] == 16
    assert np.count_nonzero(hist) == 1


def test_histogram_counts_every_pixel(random_image):
    assert calc_histogram(random_image).sum() == random_image.size


def test_global_equalization_keeps_shape(low_contrast):
    result = global_equalization(low_contrast)
    assert result.shape == low_contrast.shape
    assert result.dtype == np.uint8
    assert result.max() == 255


def test_local_equalization_is_deterministic(random_image):
    first = local_equalization(random_image)
    second = local_equalization(random_image)
    assert first.shape == random_image.shape
    assert first.dtype == np.uint8
    assert np.array_equal(first, second)


def test_local_equalization_rejects_bad_clip_limit(random_image):
    with pytest.raises(ValueError):
        local_equalization(random_image, clip_limit=0)


def test_transform_function_is_step_for_mid_gray(mid_gray):
    table = calculate_transform_function(mid_gray)
    assert table.shape == (256,)
    assert np.all(table[:128] == 0)
    assert np.all(table[128:] == 255)


def test_transform_function_is_monotonic_and_bounded(random_image):
    table = calculate_transform_function(random_image)
    assert np.all(np.diff(table) >= 0)
    assert table.min() >= 0
    assert table.max() <= 255
    assert table[255] == 255


def test_transform_function_of_uniform_histogram_is_near_identity(gradient):
    table = calculate_transform_function(gradient)
    assert np.all(np.abs(table - np.arange(256)) <= 1)
