"""
Configuration constants for the knightpath project.

Board defaults and logging settings are defined here. Values that can be
overridden are read from environment variables (a project .env file is
loaded by the scripts before this module is imported).
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of knightpath/
PROJECT_ROOT = Path(__file__).parent.parent

# =============================================================================
# Board Configuration
# =============================================================================

# Side length of the board (standard chessboard is 8x8)
DEFAULT_BOARD_SIZE = int(os.environ.get("KNIGHTPATH_BOARD_SIZE", "8"))

# Squares used by the demonstration driver when none are given
DEFAULT_SOURCE = (0, 0)
DEFAULT_TARGET = (7, 0)

# Distance map value for squares the knight cannot reach
UNREACHABLE = -1

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
