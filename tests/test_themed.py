import pytest

from pawtools.themed import Resource, ThemedResource, is_light

DARK = Resource("icon_dark.svg", b"<svg fill='#ffffff'/>")
LIGHT = Resource("icon_light.svg", b"<svg/>")


@pytest.mark.parametrize(
    "foreground, expected",
    [
        ((0, 0, 0), True),
        ((255, 255, 255), False),
        ((0, 0, 255), False),
        ((170, 170, 170), False),
        ((169, 169, 169), True),
        ((255, 255, 255, 0), True),
    ],
)
def test_is_light(foreground, expected):
    assert is_light(foreground) is expected


def test_dark_foreground_selects_light_variant():
    res = ThemedResource(DARK, LIGHT)
    assert res.select((0, 0, 0)) is LIGHT
    assert res.name((0, 0, 0)) == "icon_light.svg"
    assert res.content((0, 0, 0)) == b"<svg/>"


def test_light_foreground_selects_dark_variant():
    res = ThemedResource(DARK, LIGHT)
    assert res.name((255, 255, 255, 255)) == "icon_dark.svg"
    assert res.content((255, 255, 255)) == DARK.content