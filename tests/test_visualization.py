import numpy as np
import pytest

from histeq.processing import calc_histogram, calculate_transform_function
from histeq.processing.visualization import draw_histogram, draw_transform_function


def _red_pixels(canvas):
    return (canvas[..., 2] > 200) & (canvas[..., 0] < 100) & (canvas[..., 1] < 100)


@pytest.mark.parametrize("fixture", ["mid_gray", "random_image", "gradient"])
def test_histogram_chart_size_is_fixed(request, fixture):
    hist = calc_histogram(request.getfixturevalue(fixture))
    chart = draw_histogram(hist, "Original")
    assert chart.shape == (450, 562, 3)
    assert chart.dtype == np.uint8


def test_histogram_chart_custom_size(random_image):
    chart = draw_histogram(calc_histogram(random_image), "Small", width=300, height=200)
    assert chart.shape == (250, 350, 3)


def test_histogram_chart_does_not_modify_input(random_image):
    hist = calc_histogram(random_image)
    before = hist.copy()
    draw_histogram(hist, "Original")
    draw_histogram(hist, "Original again")
    assert np.array_equal(hist, before)


def test_histogram_chart_draws_curve_on_white(random_image):
    chart = draw_histogram(calc_histogram(random_image), "Original")
    assert np.all(chart[-1, -1] == 255)
    assert _red_pixels(chart).any()


def test_histogram_chart_accepts_plain_lists():
    chart = draw_histogram([0, 5, 10, 5], "List")
    assert chart.shape == (450, 562, 3)


def test_histogram_chart_needs_two_bins():
    with pytest.raises(ValueError):
        draw_histogram([3.0], "Single")


def test_histogram_charts_are_identical_for_same_input(random_image):
    hist = calc_histogram(random_image)
    assert np.array_equal(draw_histogram(hist, "A"), draw_histogram(hist, "A"))


def test_transform_chart_size_is_fixed(random_image):
    chart = draw_transform_function(calculate_transform_function(random_image), "Transfer")
    assert chart.shape == (450, 562, 3)
    assert _red_pixels(chart).any()


def test_transform_chart_plots_output_upwards(mid_gray):
    chart = draw_transform_function(calculate_transform_function(mid_gray), "Step")
    # table is 255 above index 128: curve sits 255 px above the X axis (y = 400)
    x = 25 + 2 * 200
    assert chart[144:147, x, 0].min() < 128
    # and on the X axis below index 128
    x = 25 + 2 * 60
    assert chart[398:402, x, 0].min() < 128


def test_transform_chart_needs_two_entries():
    with pytest.raises(ValueError):
        draw_transform_function([0], "Single")


def _peak_histogram():
    hist = np.zeros(256, dtype=np.float32)
    hist[100] = 50
    hist[101] = 10
    return hist


def test_histogram_chart_scales_peak_to_plot_height():
    chart = draw_histogram(_peak_histogram(), "Peak")
    # bin 100 sits at x = 25 + 2 * 100; a count of 50 drawn unscaled would top out at row 350
    rows = np.flatnonzero(_red_pixels(chart)[:, 25 + 2 * 100])
    assert rows.size > 0
    assert rows.min() <= 2


def test_histogram_chart_ignores_absolute_counts():
    hist = _peak_histogram()
    assert np.array_equal(draw_histogram(hist, "Peak"), draw_histogram(hist * 1000, "Peak"))


def _dark_pixels(region):
    return (region < 100).all(axis=-1)


@pytest.mark.parametrize("bins", [4, 64, 256])
def test_histogram_tick_labels_stay_on_canvas(bins):
    chart = draw_histogram(np.arange(bins, dtype=np.float32), "Ticks")
    # the "256" label ends the X axis, just right of x = 25 + 512
    assert _dark_pixels(chart[405:425, 525:]).any()


def test_histogram_tick_labels_do_not_depend_on_bin_count():
    small = draw_histogram([0, 5, 10, 5], "Ticks")
    full = draw_histogram(np.arange(256, dtype=np.float32), "Ticks")
    assert np.array_equal(small[408:], full[408:])
