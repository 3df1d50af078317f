from hydroplan.profile.warnings import get_profile_warnings


def test_reference_profile_has_no_warnings(make_profile):
    assert get_profile_warnings(make_profile()) == []


def test_boundaries_do_not_warn(make_profile):
    profile = make_profile(
        weight_kg=150,
        age=80,
        session_duration_hours=12,
        training_temp_range={"min": 20, "max": 35},
        humidity_pct=80,
        elevation_gain_m=2000,
    )
    assert get_profile_warnings(profile) == []


def test_all_warnings_in_order(make_profile):
    profile = make_profile(
        weight_kg=35,
        age=14,
        session_duration_hours=14,
        sweat_rate="high",
        sweat_saltiness="high",
        training_temp_range={"min": 28, "max": 38},
        humidity_pct=90,
        cramp_timing="early",
        elevation_gain_m=2500,
    )

    warnings = get_profile_warnings(profile)

    assert len(warnings) == 8
    assert warnings[0].startswith("Unusual weight")
    assert warnings[1].startswith("Unusual age")
    assert warnings[2].startswith("Extended session duration")
    assert warnings[3].startswith("High sweat rate with high saltiness")
    assert warnings[4].startswith("Extreme heat")
    assert warnings[5].startswith("Very high humidity")
    assert warnings[6].startswith("Regular cramping")
    assert warnings[7].startswith("Significant elevation gain")


def test_high_sweat_alone_does_not_warn(make_profile):
    assert get_profile_warnings(make_profile(sweat_rate="high")) == []
