"""Mini README: Tests for the path constraint validator.

Structure:
    * range, battery and vehicle checks - reference scenarios and thresholds.
    * no-fly zone checks - active versus inactive zones.
    * accumulation - every violation reported in one pass.
"""

from __future__ import annotations

import pytest

from skysweep.validation import (
    BatteryPolicy,
    ErrorCode,
    NoFlyZone,
    VehicleCapability,
    WarningCode,
    ZoneSeverity,
    check_battery,
    check_no_fly_zones,
    validate_path,
)

AIRPORT = NoFlyZone(
    zone_id="nfz-1",
    name="Airport Restricted Zone",
    polygon=((-122.42, 37.78), (-122.41, 37.78), (-122.41, 37.77), (-122.42, 37.77), (-122.42, 37.78)),
    severity=ZoneSeverity.PROHIBITED,
    active=True,
)
CROSSING_PATH = [(-122.43, 37.775), (-122.40, 37.775)]
CLEAR_PATH = [(-122.43, 37.79), (-122.40, 37.79)]


def _vehicle(max_range_km: float = 50.0, battery: float = 100.0) -> VehicleCapability:
    return VehicleCapability(max_range_km=max_range_km, battery=battery, speed_kmh=40.0)


def test_range_exceeded_reports_deficit() -> None:
    result = validate_path(CLEAR_PATH, 20.0, _vehicle(max_range_km=15.0), [])

    assert not result.valid
    assert result.error_codes() == (ErrorCode.RANGE_EXCEEDED,)
    details = result.errors[0].details
    assert details["deficit"] == pytest.approx(5.0)
    assert details["pathDistance"] == pytest.approx(20.0)
    assert details["maxRange"] == pytest.approx(15.0)


def test_comfortable_battery_produces_no_issue() -> None:
    result = validate_path(CLEAR_PATH, 10.0, _vehicle(battery=100.0), [])

    assert result.valid
    assert result.errors == ()
    assert result.warnings == ()


def test_low_battery_is_a_hard_error() -> None:
    result = validate_path(CLEAR_PATH, 5.0, _vehicle(battery=15.0), [])

    assert not result.valid
    assert result.error_codes() == (ErrorCode.LOW_BATTERY,)
    details = result.errors[0].details
    assert details["required"] == pytest.approx(10.0)
    assert details["available"] == pytest.approx(15.0)
    assert details["remainingAfter"] == pytest.approx(5.0)
    assert result.warnings == ()


def test_marginal_battery_is_only_a_warning() -> None:
    result = validate_path(CLEAR_PATH, 5.0, _vehicle(battery=30.0), [])

    assert result.valid
    assert result.warning_codes() == (WarningCode.LOW_BATTERY_WARNING,)
    assert result.warnings[0].details["remainingAfter"] == pytest.approx(20.0)


@pytest.mark.parametrize(
    "battery, expect_error, expect_warning",
    [(20.0, False, True), (35.0, False, False), (19.9, True, False)],
)
def test_battery_thresholds_are_exclusive(battery, expect_error, expect_warning) -> None:
    """Remaining exactly 10 warns and exactly 25 passes; never both outcomes."""

    error, warning = check_battery(5.0, _vehicle(battery=battery))
    assert (error is not None) is expect_error
    assert (warning is not None) is expect_warning


def test_battery_policy_is_an_explicit_parameter() -> None:
    strict = BatteryPolicy(consumption_per_km=4.0, error_threshold=10.0, warning_threshold=25.0)
    error, warning = check_battery(5.0, _vehicle(battery=25.0), strict)
    assert error is not None
    assert warning is None


def test_missing_vehicle_short_circuits() -> None:
    result = validate_path(CROSSING_PATH, 500.0, None, [AIRPORT])

    assert not result.valid
    assert result.error_codes() == (ErrorCode.NO_DRONE,)
    assert result.warnings == ()


def test_path_crossing_prohibited_zone() -> None:
    result = validate_path(CROSSING_PATH, 2.6, _vehicle(), [AIRPORT])

    assert not result.valid
    assert result.error_codes() == (ErrorCode.NFZ_INTERSECTION,)
    details = result.errors[0].details
    assert details["zoneId"] == "nfz-1"
    assert details["severity"] == "PROHIBITED"
    assert details["zoneName"] == "Airport Restricted Zone"


def test_inactive_zone_is_ignored() -> None:
    dormant = NoFlyZone(
        zone_id=AIRPORT.zone_id,
        name=AIRPORT.name,
        polygon=AIRPORT.polygon,
        severity=AIRPORT.severity,
        active=False,
    )
    result = validate_path(CROSSING_PATH, 2.6, _vehicle(), [dormant])

    assert result.valid
    assert result.errors == ()


def test_every_severity_blocks_and_order_follows_input() -> None:
    zones = [
        NoFlyZone(zone_id=f"z-{severity.value}", name=severity.value, polygon=AIRPORT.polygon, severity=severity)
        for severity in ZoneSeverity
    ]
    errors = check_no_fly_zones(CROSSING_PATH, zones)
    assert [error.details["zoneId"] for error in errors] == [zone.zone_id for zone in zones]


def test_single_point_path_inside_zone_is_detected() -> None:
    errors = check_no_fly_zones([(-122.415, 37.775)], [AIRPORT])
    assert len(errors) == 1


def test_clear_path_has_no_zone_errors() -> None:
    assert check_no_fly_zones(CLEAR_PATH, [AIRPORT]) == []


def test_all_violations_are_accumulated() -> None:
    result = validate_path(CROSSING_PATH, 20.0, _vehicle(max_range_km=15.0, battery=30.0), [AIRPORT])

    assert result.error_codes() == (
        ErrorCode.NFZ_INTERSECTION,
        ErrorCode.RANGE_EXCEEDED,
        ErrorCode.LOW_BATTERY,
    )


def test_report_export_shape() -> None:
    result = validate_path(CROSSING_PATH, 5.0, _vehicle(battery=30.0), [AIRPORT])
    payload = result.as_dict()

    assert payload["valid"] is False
    assert payload["errors"][0]["code"] == "NFZ_INTERSECTION"
    assert payload["errors"][0]["details"]["zoneId"] == "nfz-1"
    assert payload["warnings"] == [
        {"code": "LOW_BATTERY_WARNING", "message": "Low battery after mission: ~20% remaining"}
    ]


def test_vehicle_values_are_range_checked() -> None:
    with pytest.raises(ValueError):
        VehicleCapability(max_range_km=10.0, battery=120.0, speed_kmh=30.0)
    with pytest.raises(ValueError):
        VehicleCapability(max_range_km=0.0, battery=50.0, speed_kmh=30.0)


def test_issue_codes_are_enum_members_exported_as_plain_strings() -> None:
    result = validate_path(CROSSING_PATH, 5.0, _vehicle(battery=30.0), [AIRPORT])

    assert all(isinstance(code, ErrorCode) for code in result.error_codes())
    assert all(isinstance(code, WarningCode) for code in result.warning_codes())
    payload = result.as_dict()
    assert type(payload["errors"][0]["code"]) is str
    assert type(payload["warnings"][0]["code"]) is str
