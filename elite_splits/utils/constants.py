"""
Application Constants

This module contains all application-wide constants to avoid magic numbers
and improve maintainability.
"""

# Time conversion constants
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600

# Counter storage
# Custom variable keys are ELITE_COUNT_PREFIX + segment index ("__elite_count_seg_3")
ELITE_COUNT_PREFIX = "__elite_count_seg_"

# Display
NO_VALUE_PLACEHOLDER = "—"
RATE_UNIT_SUFFIX = "s/elite"
RATE_DECIMALS = 1

# CSV export precision for numeric columns
DECIMAL_PRECISION = 4

# Highlight modes accepted by the settings layer
HIGHLIGHT_MODES = ("none", "percentage", "rank", "absolute")

# Configuration
CONFIG_DIR_ENV = "ELITE_SPLITS_CONFIG_DIR"
DEFAULT_CONFIG_DIR = "config"
HIGHLIGHT_SETTINGS_FILE = "highlight.yml"
