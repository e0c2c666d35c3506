"""Tests for the command line helpers in main.py."""

import logging

import pytest

from main import parse_location, save_data_uri
from services.content_studio import LocationContext
from services.content_studio.fallback import PLACEHOLDER_IMAGE


class TestParseLocation:

    def test_both_flags(self):
        assert parse_location(37.5665, 126.978) == LocationContext(lat=37.5665, lng=126.978)

    def test_no_flags(self):
        assert parse_location(None, None) is None

    def test_single_flag_is_ignored(self, caplog):
        with caplog.at_level(logging.WARNING, logger="trendpulse"):
            assert parse_location(37.5, None) is None
        assert "Both --lat and --lng" in caplog.text

    @pytest.mark.parametrize("lat,lng", [(91.0, 0.0), (-90.5, 0.0), (0.0, 180.1), (0.0, -200.0)])
    def test_out_of_range_is_ignored(self, caplog, lat, lng):
        with caplog.at_level(logging.WARNING, logger="trendpulse"):
            assert parse_location(lat, lng) is None
        assert "out of range" in caplog.text


class TestSaveDataUri:

    def test_base64_payload(self, tmp_path):
        path = save_data_uri("data:image/png;base64,QUJD", tmp_path / "thumb.png")

        assert path == tmp_path / "thumb.png"
        assert path.read_bytes() == b"ABC"

    def test_placeholder_written_as_svg(self, tmp_path):
        path = save_data_uri(PLACEHOLDER_IMAGE, tmp_path / "thumb.png")

        assert path.suffix == ".svg"
        assert path.read_text(encoding="utf-8").startswith("<svg")
