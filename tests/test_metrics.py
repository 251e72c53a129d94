"""Tests for the font metrics model and metrics table loading."""

import json
import logging
from pathlib import Path

import pytest

from fontfallback import AutomaticFallback, FontFallbackOptions, get_font_fallback
from fontfallback.core.metrics import (
    DEFAULT_SANS_SERIF_FONT,
    DEFAULT_SERIF_FONT,
    FontMetrics,
    load_default_metrics,
    load_metrics_from_json,
    parse_metrics_table,
)
from fontfallback.exceptions import MetricsResourceUnavailableError

from tests.conftest import get_fixture

INTER = {
    "familyName": "Inter",
    "category": "sans-serif",
    "capHeight": 2048,
    "ascent": 2728,
    "descent": -680,
    "lineGap": 0,
    "unitsPerEm": 2816,
    "xHeight": 1536,
    "xWidthAvg": 1335,
}


class TestFontMetrics:
    """Tests for FontMetrics.from_dict and to_dict."""

    def test_from_dict(self) -> None:
        metrics = FontMetrics.from_dict(INTER, "inter")

        assert metrics.family_name == "Inter"
        assert metrics.category == "sans-serif"
        assert metrics.ascent == 2728
        assert metrics.descent == -680
        assert metrics.line_gap == 0
        assert metrics.units_per_em == 2816
        assert metrics.x_width_avg == 1335.0
        assert isinstance(metrics.x_width_avg, float)
        assert metrics.cap_height == 2048
        assert metrics.x_height == 1536
        assert not metrics.is_serif

    def test_to_dict_matches_source(self) -> None:
        assert FontMetrics.from_dict(INTER).to_dict() == INTER

    def test_optional_fields_default(self) -> None:
        data = {
            key: value
            for key, value in INTER.items()
            if key not in ("familyName", "capHeight", "xHeight")
        }

        metrics = FontMetrics.from_dict(data)

        assert metrics.family_name == ""
        assert metrics.cap_height == 0
        assert metrics.x_height == 0

    def test_missing_fields(self) -> None:
        with pytest.raises(ValueError, match="missing required fields: ascent"):
            FontMetrics.from_dict({k: v for k, v in INTER.items() if k != "ascent"})

    def test_not_a_dict(self) -> None:
        with pytest.raises(ValueError, match="must be a dictionary"):
            FontMetrics.from_dict(["inter"], "inter")

    @pytest.mark.parametrize(
        "field, value, message",
        [
            ("ascent", 2728.5, "'ascent' for 'inter' must be an integer"),
            ("descent", "-680", "'descent' for 'inter' must be an integer"),
            ("unitsPerEm", True, "'unitsPerEm' for 'inter' must be an integer"),
            ("xWidthAvg", "1335", "'xWidthAvg' for 'inter' must be a number"),
            ("category", 1, "Category for 'inter' must be a string"),
            ("familyName", None, "'familyName' for 'inter' must be a string"),
        ],
    )
    def test_invalid_field_types(self, field: str, value: object, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            FontMetrics.from_dict({**INTER, field: value}, "inter")

    def test_negative_line_gap(self) -> None:
        with pytest.raises(ValueError, match="must not be negative"):
            FontMetrics.from_dict({**INTER, "lineGap": -1})

    def test_unknown_category_is_kept(self) -> None:
        metrics = FontMetrics.from_dict({**INTER, "category": "display"})
        assert metrics.category == "display"
        assert not metrics.is_serif

    def test_frozen(self) -> None:
        metrics = FontMetrics.from_dict(INTER)
        with pytest.raises(AttributeError):
            metrics.ascent = 0  # type: ignore[misc]


class TestDefaultFallbackFonts:
    """Tests for the built-in fallback fonts."""

    def test_sans_serif(self) -> None:
        assert DEFAULT_SANS_SERIF_FONT.name == "Arial"
        assert DEFAULT_SANS_SERIF_FONT.metrics.units_per_em == 2048
        assert DEFAULT_SANS_SERIF_FONT.metrics.x_width_avg == 934.5116279069767
        assert not DEFAULT_SANS_SERIF_FONT.metrics.is_serif

    def test_serif(self) -> None:
        assert DEFAULT_SERIF_FONT.name == "Times New Roman"
        assert DEFAULT_SERIF_FONT.metrics.units_per_em == 2048
        assert DEFAULT_SERIF_FONT.metrics.x_width_avg == 854.3953488372093
        assert DEFAULT_SERIF_FONT.metrics.is_serif


class TestLoadMetrics:
    """Tests for metrics table loaders."""

    def test_load_default_metrics(self) -> None:
        table = load_default_metrics()

        assert "inter" in table
        assert "robotoSlab" in table
        assert table["robotoSlab"].is_serif
        assert all(isinstance(value, FontMetrics) for value in table.values())

    def test_load_default_metrics_is_cached(self) -> None:
        assert load_default_metrics() is load_default_metrics()

    def test_load_default_metrics_is_read_only(self) -> None:
        """Mutating the shared table fails and later lookups still resolve."""
        table = load_default_metrics()

        with pytest.raises(AttributeError):
            table.pop("inter")  # type: ignore[attr-defined]
        with pytest.raises(TypeError):
            table["inter"] = table["roboto"]  # type: ignore[index]
        with pytest.raises(TypeError):
            del table["inter"]  # type: ignore[attr-defined]

        result = get_font_fallback(FontFallbackOptions("Inter"))
        assert isinstance(result, AutomaticFallback)
        assert result.local_font_family == "Arial"

    def test_load_from_json(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            table = load_metrics_from_json(get_fixture("metrics.json"))

        assert set(table) == {"inter", "robotoSlab"}
        assert table["inter"].units_per_em == 2816
        assert "Loaded 2 font metrics" in caplog.text

    def test_load_accepts_path_objects(self) -> None:
        table = load_metrics_from_json(Path(get_fixture("metrics.json")))
        assert "inter" in table

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(MetricsResourceUnavailableError, match="not found"):
            load_metrics_from_json(tmp_path / "missing.json")

    def test_invalid_json(self) -> None:
        with pytest.raises(MetricsResourceUnavailableError, match="Invalid JSON"):
            load_metrics_from_json(get_fixture("truncated.json"))

    def test_top_level_not_a_dict(self, tmp_path: Path) -> None:
        path = tmp_path / "metrics.json"
        path.write_text(json.dumps([INTER]), encoding="utf-8")

        with pytest.raises(MetricsResourceUnavailableError, match="must be a dictionary"):
            load_metrics_from_json(path)

    def test_invalid_entry(self, tmp_path: Path) -> None:
        path = tmp_path / "metrics.json"
        path.write_text(json.dumps({"inter": {"category": "serif"}}), encoding="utf-8")

        with pytest.raises(MetricsResourceUnavailableError, match="inter"):
            load_metrics_from_json(path)

    def test_parse_metrics_table_empty(self) -> None:
        assert parse_metrics_table({}) == {}
