"""Hydration engine constants - single source of truth.

All numeric rules of the plan calculation live here. They are deliberately
not configurable: the same profile must always produce the same plan.
"""

# Temperature buckets on the mean training temperature (degrees C).
# COOL below 18, MODERATE 18..25 inclusive, HOT above 25.
COOL_BELOW_C = 18
HOT_ABOVE_C = 25

BASE_SWEAT_RATE_ML_PER_HOUR: dict[str, int] = {
    "cool": 600,
    "moderate": 800,
    "hot": 1100,
}

# Sweat rate adjustment by primary discipline, integer percent
DISCIPLINE_SWEAT_ADJUSTMENT_PCT: dict[str, int] = {
    "running": 10,
    "triathlon": 10,
    "cycling": 0,
    "swimming": -15,
    "gym": -20,
    "crossfit": -20,
    "walking": -20,
    "hiking": -20,
}

# Pre-activity water: ml per kg body weight (midpoint of 5-7 ml/kg)
PRE_WATER_ML_PER_KG = 6

# Pre-activity adjustments, integer percent, summed (not compounded)
PRE_HOT_PCT = 20
PRE_COOL_PCT = -10
PRE_DISCIPLINE_PCT: dict[str, int] = {
    "running": 15,
    "triathlon": 15,
    "swimming": -15,
}
PRE_LONG_SESSION_HOURS = 3
PRE_LONG_SESSION_PCT = 25
PRE_MEDIUM_SESSION_HOURS = 2
PRE_MEDIUM_SESSION_PCT = 15
PRE_ALTITUDE_PCT: dict[str, int] = {
    "high": 15,
    "moderate": 10,
}
PRE_FULL_SUN_PCT = 10

PRE_ELECTROLYTE_SACHETS = 1

# During activity: percent of hourly sweat loss replaced each hour
DURING_REPLACEMENT_PCT = 70

DURING_SACHETS_BOTH_HIGH = 2.0
DURING_SACHETS_ONE_HIGH = 1.5
DURING_SACHETS_BASE = 1.0
DURING_SACHETS_BOTH_LOW = 0.5

# Post activity: percent of the remaining deficit replaced
POST_REPLACEMENT_PCT = 150
POST_ML_PER_SACHET = 2000
POST_MIN_SACHETS = 1

LONG_SESSION_NOTE_HOURS = 2
ELEVATION_NOTE_M = 500

PRE_TIMING_LABEL = "2 hours before"
DURING_FREQUENCY_LABEL = "Every 15-20 minutes"
POST_TIMING_LABEL = "Within 30 minutes"

ELECTROLYTE_ATTENTION_NOTE = "Your high sweat rate or salty sweat requires extra attention to electrolyte replacement"
HEAT_NOTE = "Hot conditions increase dehydration risk - start hydrating early"
LONG_SESSION_NOTE = "For sessions over 2 hours, maintain consistent fluid intake every 15-20 minutes"
ALTITUDE_NOTE = "Altitude increases respiratory fluid loss - drink slightly more than feels necessary"
SUN_NOTE = "Full sun exposure raises skin temperature and sweat loss - wear light, breathable clothing and a cap"
ELEVATION_NOTE = "Significant elevation gain raises effort and sweat loss - plan extra intake on the climbs"
CRAMP_NOTE = "You reported cramping - take your electrolytes ahead of the point where cramps usually start"
LOW_SALT_NOTE = "Your low daily salt intake makes electrolyte replacement especially important"
URINE_COLOR_TIP = "Monitor urine color - pale yellow indicates good hydration"
SACHET_COMPOSITION_FACT = "Each sachet provides 500mg sodium, 250mg potassium, and 100mg magnesium"
NO_MIXING_FACT = "Sachets are taken straight from the pack - no mixing with water required"
TELEMETRY_NOTE = "Plan enhanced with your smartwatch data"
