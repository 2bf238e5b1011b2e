"""
NC Table Configuration and Constants

This module centralizes all configuration parameters, constants, and default values
for better maintainability and consistency across the codebase.
"""

import os
import re

import numpy as np

# ============================================================================
# Calendars
# ============================================================================

# Calendars understood by cftime
KNOWN_CALENDARS = (
    "standard",
    "gregorian",
    "proleptic_gregorian",
    "julian",
    "noleap",
    "365_day",
    "all_leap",
    "366_day",
    "360_day",
)

# Used when a time variable has no 'calendar' attribute.
# Users can override via NCTABLE_DEFAULT_CALENDAR environment variable
DEFAULT_CALENDAR = os.environ.get("NCTABLE_DEFAULT_CALENDAR", "standard")

# ============================================================================
# Time Variable Detection
# ============================================================================

TIME_NAME_PREFIX = "time"

# '<unit> since <reference timestamp>', e.g. 'days since 2000-01-01'
TIME_UNITS_PATTERN = r"^\s*([a-z_]+)\s+since\s+(\S.*?)\s*$"
TIME_UNITS_REGEX = re.compile(TIME_UNITS_PATTERN, re.IGNORECASE)

# ============================================================================
# Character Arrays
# ============================================================================

# numpy dtype kind and item size of a netCDF CHAR element
CHAR_DTYPE_KIND = "S"
CHAR_ITEMSIZE = 1
STRING_ENCODING = "utf-8"

# ============================================================================
# Table Layout
# ============================================================================

INDEX_DTYPE = np.int64
GROUP_SEPARATOR = "/"

# ============================================================================
# Paging
# ============================================================================

DEFAULT_PAGE_SIZE = int(os.environ.get("NCTABLE_PAGE_SIZE", "100"))

# Page increment used by the fast forward/back controls
BIG_STEP = 10

# ============================================================================
# Backend
# ============================================================================

# None lets xarray pick an engine from the file contents
DEFAULT_ENGINE = None

# ============================================================================
# Logging
# ============================================================================

# Level of the 'nctable' logger before setup_logging() is called
DEFAULT_LOG_LEVEL = os.environ.get("NCTABLE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
