"""Application constants."""

# Unit conversion: 1 kg = 2.20462 lb
LB_PER_KG = 2.20462

# Volume normalization defaults (decimal places carried by every volume figure)
DEFAULT_VOLUME_PRECISION = 2
STATS_CHANGE_PRECISION = 1

# Column capacity: workout_sets.weight Numeric(8, 2), volumes Numeric(10, 2), reps Integer
WEIGHT_PRECISION = 2
MAX_STORED_WEIGHT = 999_999.99
MAX_STORED_VOLUME = 99_999_999.99
MAX_STORED_REPS = 2_147_483_647

# Session limits (workout logging)
MAX_SETS_PER_SESSION = 50

# Singleton preferences row until auth lands
USER_PREFERENCES_ID = 1
