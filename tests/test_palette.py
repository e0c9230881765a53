import pytest

from fractal import PALETTE, color_for, intensity, map_color


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, (0, 0, 0)),
        (35, (148, 0, 211)),
        (70, (75, 0, 130)),
        (105, (0, 0, 255)),
        (140, (0, 255, 0)),
        (175, (255, 255, 0)),
        (210, (255, 127, 0)),
        (254, (255, 0, 0)),
        (255, (255, 255, 255)),
    ],
)
def test_band_upper_edges(value, expected):
    assert map_color(value) == expected


@pytest.mark.parametrize("value, name", [(1, "violet"), (36, "indigo"), (71, "blue"), (106, "green"),
                                         (141, "yellow"), (176, "orange"), (211, "red")])
def test_band_lower_edges(value, name):
    band = next(band for band in PALETTE if band.name == name)
    assert map_color(value) == band.color


def test_every_byte_maps_to_exactly_one_band():
    for value in range(256):
        matching = [band for band in PALETTE if band.low <= value <= band.high]
        assert len(matching) == 1
        assert map_color(value) == matching[0].color


@pytest.mark.parametrize("value", [-1, 256])
def test_out_of_range_intensity_is_rejected(value):
    with pytest.raises(ValueError):
        map_color(value)


def test_intensity_of_escape_times():
    assert intensity(None) == 0
    assert intensity(1) == 254
    assert intensity(254) == 1
    assert intensity(400) == 1


def test_color_for_members_and_fast_escapes():
    assert color_for(None) == (0, 0, 0)
    assert color_for(1) == (255, 0, 0)
    assert color_for(230) == (148, 0, 211)
    assert color_for(200) == (75, 0, 130)
