"""Domain enums."""

from enum import Enum


class PatchSize(str, Enum):
    SMALL = "SMALL"
    LARGE = "LARGE"
