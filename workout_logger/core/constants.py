"""Application constants."""

# Persistence
STORAGE_KEY_APP_STATE = "APP_STATE_V1"
STORAGE_PREFIX = "workoutlogger_"

# Notifications
DEFAULT_REMINDER_HOUR = 18  # 18:00 local time

# Profile
DEFAULT_DISPLAY_NAME = "Athlete"

# Exercise library
UNKNOWN_EXERCISE_ID = "unknown"
UNKNOWN_EXERCISE_NAME = "Unknown exercise"
UNKNOWN_MUSCLE_GROUP = "Unknown"
CUSTOM_MUSCLE_GROUP = "Custom"
UNKNOWN_EQUIPMENT = "Unknown"

# Routine builder: plan given to a freshly added exercise
DEFAULT_SET_COUNT = 3
DEFAULT_TARGET_REPS = 8

# Dashboard
RECENT_SESSIONS_LIMIT = 5
