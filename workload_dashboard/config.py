"""Configuration constants and settings for the workload dashboard."""

import os
import re

# ============================================================================
# DATA SOURCES
# ============================================================================

DATA_SOURCE = os.getenv("WORKLOAD_DATA_SOURCE", "examples/action-data")
FETCH_TIMEOUT_SECONDS = float(os.getenv("WORKLOAD_FETCH_TIMEOUT", "20"))

# (id, display name, file name under DATA_SOURCE)
ROSTER = [
    ("Brian", "Brian", "brian.md"),
    ("Jeff", "Jeff", "jeff.md"),
    ("Jerry", "Jerry", "jerry.md"),
    ("Joey", "Joey", "joey.md"),
    ("Kelvin", "Kelvin", "kelvin.md"),
    ("Yammin", "Yammin", "yammin.md"),
]

# ============================================================================
# INPUT FORMAT
# ============================================================================

HEADER_CATEGORY = "類別"
HEADER_ITEM = "項目"
HEADER_ESTIMATED_TIME = "預估時間"
HEADER_ACTUAL_TIME = "實際時間"
HEADER_EST_START = "預計開始"
HEADER_EST_END = "預計完成"
HEADER_ACTUAL_END = "實際完成"

HEADERS = [
    HEADER_CATEGORY,
    HEADER_ITEM,
    HEADER_ESTIMATED_TIME,
    HEADER_ACTUAL_TIME,
    HEADER_EST_START,
    HEADER_EST_END,
    HEADER_ACTUAL_END,
]

# <month>月<day>日, year is always the current one
DATE_PATTERN = re.compile(r"^(\d{1,2})月(\d{1,2})日$")
ABSENT_DATE = "--"

# ============================================================================
# STATUS VALUES
# ============================================================================

STATUS_COMPLETED = "completed"
STATUS_DELAYED = "delayed"
STATUS_PENDING = "pending"

# ============================================================================
# HEATMAP POLICY
# ============================================================================

# Upper bound (inclusive) of task counts for intensity levels 0..3; above the
# last bound is level 4.
INTENSITY_BANDS = (0, 2, 5, 8)
MAX_INTENSITY = len(INTENSITY_BANDS)

# ============================================================================
# IMBALANCE POLICY
# ============================================================================

OVERLOADED_ABOVE = 50
HIGH_ABOVE = 20
UNDERUTILIZED_BELOW = -30

IMBALANCE_OVERLOADED = "overloaded"
IMBALANCE_HIGH = "high"
IMBALANCE_BALANCED = "balanced"
IMBALANCE_UNDERUTILIZED = "underutilized"

# ============================================================================
# TIMELINE LAYOUT
# ============================================================================

TIMELINE_PAD_BEFORE_DAYS = 5
TIMELINE_PAD_AFTER_DAYS = 5
TIMELINE_EMPTY_SPAN_DAYS = 30

TOP_CATEGORY_LIMIT = 5
