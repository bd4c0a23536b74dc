"""Exercise taxonomy enumerations.

Stored by value (``native_enum=False``), so the database holds the lowercase
strings below.
"""
from enum import Enum


class PushOrPull(str, Enum):
    PUSH = "push"
    PULL = "pull"


class DynamicOrStatic(str, Enum):
    DYNAMIC = "dynamic"
    STATIC = "static"


class StraightOrBentArm(str, Enum):
    STRAIGHT = "straight"
    BENT = "bent"


class SquatOrHinge(str, Enum):
    SQUAT = "squat"
    HINGE = "hinge"


class UpperOrLower(str, Enum):
    UPPER = "upper"
    LOWER = "lower"


class CompoundOrIsolation(str, Enum):
    COMPOUND = "compound"
    ISOLATION = "isolation"


class LeverVariation(str, Enum):
    TUCK = "tuck"
    ADVANCED_TUCK = "advanced_tuck"
    STRADDLE = "straddle"
    ONE_LEG = "one_leg"
    HALF_LAY = "half_lay"
    FULL = "full"


class Grip(str, Enum):
    PRONATED = "pronated"
    SUPINATED = "supinated"
    NEUTRAL = "neutral"
    GYMNASTICS_RING = "gymnastics_ring"
    FLOOR = "floor"
    MIXED = "mixed"


class GripWidth(str, Enum):
    WIDE = "wide"
    SHOULDER = "shoulder"
    NARROW = "narrow"


class Equipment(str, Enum):
    LOW_PARALLETTES = "low_parallettes"
    HIGH_PARALLETTES = "high_parallettes"
    BENCH = "bench"
    DUMBBELLS = "dumbbells"
    BARBELL = "barbell"
    SMITH_MACHINE = "smith_machine"
    GYMNASTICS_RINGS = "gymnastics_rings"
    PULL_UP_BAR = "pull_up_bar"
    DIP_BAR = "dip_bar"


class Band(str, Enum):
    YELLOW = "yellow"
    RED = "red"
    BLACK = "black"
    PURPLE = "purple"
    GREEN = "green"
