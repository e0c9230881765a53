import pytest

from fractal import escape_time


@pytest.mark.parametrize("limit", [1, 2, 3, 10, 100, 255])
def test_origin_never_escapes(limit):
    assert escape_time(0j, limit) is None


def test_zero_limit_proves_nothing():
    assert escape_time(complex(5, 4), 0) is None


@pytest.mark.parametrize("c", [3 + 0j, complex(5, 4), complex(2, 1), complex(-2, 1), complex(-2, -1)])
def test_points_clearly_outside_escape_after_one_step(c):
    assert escape_time(c, 255) == 1


@pytest.mark.parametrize(
    "c, expected",
    [
        (complex(1, 0), 3),
        (complex(1, 1.5), 2),
        (complex(-1, -1.5), 2),
        (complex(0.5, 0.5), 5),
    ],
)
def test_known_escape_times(c, expected):
    assert escape_time(c, 255) == expected


def test_limit_caps_the_search():
    # 1+0j first leaves the circle at iteration 3.
    assert escape_time(complex(1, 0), 3) is None
    assert escape_time(complex(1, 0), 4) == 3


def test_boundary_of_escape_circle_does_not_count():
    # z reaches exactly 2 (|z|^2 == 4) for c == -2 and stays there.
    assert escape_time(complex(-2, 0), 255) is None
