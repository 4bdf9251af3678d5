import pytest

from macroflow.settings import (
    Colour,
    MacroCategory,
    MacroSettings,
    get_settings,
    set_settings,
)


@pytest.fixture
def restore_settings():
    original = get_settings()
    yield
    set_settings(original)


def test_default_colours():
    settings = MacroSettings()
    assert settings.normal_colour == Colour(255, 255, 255, 0)
    assert settings.hover_colour == Colour(255, 255, 255, 25)
    assert settings.categories == {}


def test_get_settings_is_stable():
    first = get_settings()
    second = get_settings()
    assert first is second
    assert first.normal_colour == Colour(255, 255, 255, 0)
    assert second.hover_colour == Colour(255, 255, 255, 25)


def test_set_settings_replaces(restore_settings):
    category = MacroCategory("Movement", [int])
    new = MacroSettings(categories={"movement": category})
    set_settings(new)
    assert get_settings() is new
    assert get_settings().categories["movement"].macro_classes == [int]


def test_set_settings_rejects_wrong_type(restore_settings):
    with pytest.raises(TypeError):
        set_settings({"categories": {}})


@pytest.mark.parametrize("components", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300)])
def test_colour_range(components):
    with pytest.raises(ValueError):
        Colour(*components)


def test_colour_default_alpha():
    assert Colour(1, 2, 3).a == 255


def test_category_lists_independent():
    a, b = MacroCategory(), MacroCategory()
    a.macro_classes.append(int)
    assert b.macro_classes == []