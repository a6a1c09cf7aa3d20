import math

import numpy as np

from src.features.runtime import build_rating_input
from src.pricing.quote import RatingInput


def _full(**overrides):
    raw = {
        "home_value": 350000,
        "state": "TX",
        "home_type": "single-family",
        "coverage_level": "standard",
        "deductible": 1000,
    }
    raw.update(overrides)
    return raw


def test_clean_record_has_no_warnings():
    built = build_rating_input(_full())
    assert built.warnings == []
    assert built.rating_input == RatingInput(350000, "TX", "single-family", "standard", 1000)


def test_camel_case_keys_are_accepted():
    raw = {"homeValue": 200000, "state": "fl", "homeType": "Mobile", "coverageLevel": "PREMIUM", "deductible": "500"}
    built = build_rating_input(raw)
    assert built.warnings == []
    assert built.rating_input == RatingInput(200000, "FL", "mobile", "premium", 500)


def test_missing_fields_fall_back_to_defaults():
    built = build_rating_input({})
    assert built.rating_input == RatingInput(350000, "TX", "single-family", "standard", 1000)
    assert len(built.warnings) == 5
    assert all("not provided" in w for w in built.warnings)


def test_blank_categoricals_fall_back_to_defaults():
    built = build_rating_input(_full(state="  ", home_type=None, coverage_level=float("nan")))
    assert built.rating_input.state == "TX"
    assert built.rating_input.home_type == "single-family"
    assert built.rating_input.coverage_level == "standard"
    assert len(built.warnings) == 3


def test_home_value_strings_are_parsed():
    assert build_rating_input(_full(home_value="350000")).rating_input.home_value == 350000
    assert build_rating_input(_full(home_value="$350,000")).rating_input.home_value == 350000
    assert build_rating_input(_full(home_value=" 425000.9 ")).rating_input.home_value == 425000
    assert build_rating_input(_full(home_value=np.int64(90000))).rating_input.home_value == 90000


def test_unparseable_home_value_becomes_zero_with_warning():
    for bad in ("abc", "", None, float("nan"), float("inf"), {"v": 1}):
        built = build_rating_input(_full(home_value=bad))
        assert built.rating_input.home_value == 0
        assert len(built.warnings) == 1
        assert "home_value" in built.warnings[0]


def test_negative_home_value_becomes_zero_with_warning():
    built = build_rating_input(_full(home_value=-5000))
    assert built.rating_input.home_value == 0
    assert "Negative" in built.warnings[0]


def test_clamp_clips_into_form_bounds():
    low = build_rating_input(_full(home_value=10000), clamp=True)
    assert low.rating_input.home_value == 50000
    assert "clipped" in low.warnings[0]

    high = build_rating_input(_full(home_value=9_000_000), clamp=True)
    assert high.rating_input.home_value == 5_000_000

    inside = build_rating_input(_full(home_value=400000), clamp=True)
    assert inside.rating_input.home_value == 400000
    assert inside.warnings == []


def test_no_clamp_by_default():
    built = build_rating_input(_full(home_value=10000))
    assert built.rating_input.home_value == 10000
    assert built.warnings == []


def test_deductible_parsing():
    assert build_rating_input(_full(deductible="$2,500")).rating_input.deductible == 2500
    assert build_rating_input(_full(deductible=5000.0)).rating_input.deductible == 5000
    assert build_rating_input(_full(deductible=np.int64(500))).rating_input.deductible == 500
    # left as given; the pricing core reports it
    assert build_rating_input(_full(deductible="lots")).rating_input.deductible == "lots"
    odd = build_rating_input(_full(deductible=999.5)).rating_input.deductible
    assert isinstance(odd, float) and not math.isnan(odd)


def test_home_value_uses_leading_integer_digits():
    assert build_rating_input(_full(home_value="1e6")).rating_input.home_value == 1
    assert build_rating_input(_full(home_value="12abc")).rating_input.home_value == 12
    assert build_rating_input(_full(home_value="-250")).rating_input.home_value == 0
    built = build_rating_input(_full(home_value="e6"))
    assert built.rating_input.home_value == 0
    assert "Could not parse" in built.warnings[0]


def test_home_value_too_large_for_float_becomes_zero_with_warning():
    for huge in (10**400, "9" * 400):
        built = build_rating_input(_full(home_value=huge))
        assert built.rating_input.home_value == 0
        assert len(built.warnings) == 1
        assert "home_value" in built.warnings[0]
