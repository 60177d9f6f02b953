"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    BLACK_WON = "black won"
    WHITE_WON = "white won"
    ABORTED = "aborted"


# --- NOTE: Color does NOT contain an option for empty cells. The domain layer uses src/brique/stone.py for that.
# --- Same names as the domain enums on purpose: the imports show which version is used in what part of the code


class Color(StrEnum):
    BLACK = "black"
    WHITE = "white"
