"""Shared enums for models, schemas and the volume engine."""

from enum import Enum


class WeightUnit(str, Enum):
    """Unit a weight (and therefore a volume) is expressed in."""

    KG = "kg"
    LB = "lb"


class RoundingMethod(str, Enum):
    """How a volume figure is cut down to its configured precision."""

    FLOOR = "floor"
    CEIL = "ceil"
    ROUND = "round"  # half away from zero
