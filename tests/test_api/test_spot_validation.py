"""Tests for spot submission validation logic."""

from __future__ import annotations

from platform_api.spot_validator import SPOT_TYPES, validate_spot_submission


# ---------------------------------------------------------------------------
# Helpers: sample submissions
# ---------------------------------------------------------------------------

def _valid_submission(**overrides):
    data = {
        "name": "Capital Factory",
        "city_id": "austin",
        "types": ["coworking"],
        "description": "Startup hub with a big open coworking floor",
        "coordinates": [-97.7404, 30.2703],
    }
    data.update(overrides)
    return data


class TestValidSubmission:
    def test_valid_passes(self):
        result = validate_spot_submission(_valid_submission())
        assert result.is_valid is True
        assert result.errors == []

    def test_single_type_key_accepted(self):
        data = _valid_submission()
        del data["types"]
        data["type"] = "cafe"
        assert validate_spot_submission(data).is_valid is True

    def test_all_types_known(self):
        result = validate_spot_submission(_valid_submission(types=list(SPOT_TYPES)))
        assert result.is_valid is True

    def test_boundary_coordinates_accepted(self):
        result = validate_spot_submission(_valid_submission(coordinates=[180, -90]))
        assert result.is_valid is True


class TestRequiredFields:
    def test_short_name(self):
        result = validate_spot_submission(_valid_submission(name=" a "))
        assert result.errors == ["Name is required (at least 2 characters)"]

    def test_missing_city(self):
        result = validate_spot_submission(_valid_submission(city_id=""))
        assert result.errors == ["City is required"]

    def test_missing_type(self):
        result = validate_spot_submission(_valid_submission(types=[]))
        assert result.errors == ["Spot type is required"]

    def test_unknown_type(self):
        result = validate_spot_submission(_valid_submission(types=["coworking", "bar"]))
        assert result.errors == ["Unknown spot type: bar"]

    def test_short_description(self):
        result = validate_spot_submission(_valid_submission(description="too short"))
        assert result.errors == ["Description is required (at least 10 characters)"]

    def test_empty_submission_reports_everything(self):
        result = validate_spot_submission({})
        assert result.is_valid is False
        assert result.errors == [
            "Name is required (at least 2 characters)",
            "City is required",
            "Spot type is required",
            "Description is required (at least 10 characters)",
            "Location coordinates are required",
        ]


class TestCoordinates:
    def test_wrong_length(self):
        result = validate_spot_submission(_valid_submission(coordinates=[1.0]))
        assert result.errors == ["Location coordinates are required"]

    def test_non_numeric(self):
        result = validate_spot_submission(_valid_submission(coordinates=["-97.7", "30.2"]))
        assert result.errors == ["Invalid coordinates format"]

    def test_bool_rejected(self):
        result = validate_spot_submission(_valid_submission(coordinates=[True, 30.2]))
        assert result.errors == ["Invalid coordinates format"]

    def test_nan_rejected(self):
        result = validate_spot_submission(_valid_submission(coordinates=[float("nan"), 30.2]))
        assert result.errors == ["Invalid coordinates format"]

    def test_infinite_is_out_of_range(self):
        result = validate_spot_submission(_valid_submission(coordinates=[float("inf"), 30.2]))
        assert result.errors == ["Coordinates are out of valid range"]

    def test_out_of_range(self):
        result = validate_spot_submission(_valid_submission(coordinates=[-97.7, 95.0]))
        assert result.errors == ["Coordinates are out of valid range"]
