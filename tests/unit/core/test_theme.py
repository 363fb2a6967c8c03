"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path

import pytest
from recsort.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_bundled_theme_path,
    get_rich_theme,
    get_theme,
    load_theme,
)
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.header == "#69B9A1"
        assert colors.error == "#f53263"

    def test_accepts_short_hex(self) -> None:
        """ThemeColors accepts #RGB codes."""
        assert ThemeColors(border="#abc").border == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(text="ffffff")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(text="#gggggg")

    def test_fields_cover_rendered_styles(self) -> None:
        """Every color field feeds a style the CLI renders."""
        assert set(ThemeColors.model_fields) == {
            "text",
            "header",
            "border",
            "warning",
            "error",
            "removed",
            "moved",
            "created",
        }

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(unknown_field="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from valid TOML file."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ntext = "#000000"\nmoved = "#aabbcc"\n')

        result = _load_toml_colors(theme_file)

        assert result == {"text": "#000000", "moved": "#aabbcc"}

    def test_returns_none_for_missing_file(self, tmp_path: Path) -> None:
        """Returns None when file doesn't exist."""
        assert _load_toml_colors(tmp_path / "nonexistent.toml") is None

    def test_returns_none_for_invalid_toml(self, tmp_path: Path) -> None:
        """Returns None for malformed TOML."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml syntax")

        assert _load_toml_colors(theme_file) is None


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_bundled_theme_exists(self) -> None:
        """The bundled theme file ships with the package."""
        assert Path(get_bundled_theme_path()).is_file()

    def test_loads_bundled_theme(self) -> None:
        """Loads theme from bundled data file."""
        colors = load_theme()
        assert colors.header == "#69B9A1"
        assert colors.moved == "#0e8ac8"

    def test_invalid_theme_falls_back_to_defaults(self, tmp_path: Path) -> None:
        """Invalid colors fall back to model defaults."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\nheader = "green"\n')

        colors = load_theme(theme_file)

        assert colors == ThemeColors()

    def test_missing_theme_falls_back_to_defaults(self, tmp_path: Path) -> None:
        """A missing theme file yields default colors."""
        assert load_theme(tmp_path / "missing.toml") == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme and get_theme."""

    def test_returns_rich_theme(self) -> None:
        """Returns a Rich Theme with the action styles."""
        theme = get_rich_theme(ThemeColors())
        assert isinstance(theme, Theme)
        for style in ("removed", "moved", "created", "bold_header", "path"):
            assert style in theme.styles

    def test_defines_markup_styles(self) -> None:
        """The theme defines the CLI markup styles and nothing unused."""
        theme = get_rich_theme(ThemeColors())
        assert set(theme.styles) >= {
            "border",
            "warning",
            "error",
            "removed",
            "moved",
            "created",
            "bold_header",
            "path",
        }
        for unused in ("success", "muted"):
            assert unused not in theme.styles

    def test_get_theme_is_cached(self) -> None:
        """get_theme returns the same instance on repeated calls."""
        assert get_theme() is get_theme()
