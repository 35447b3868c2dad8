"""
Movement catalog and descriptive enumerations.

Every Movement maps to the muscles it targets and the fitness metrics it
develops.  The mapping lives in one table, MOVEMENT_TARGETS, which is
checked for totality at import time: a movement without an entry is a
defect in this file, not something callers need to handle.
"""

from enum import Enum
from typing import Final


class FitnessMetric(str, Enum):
    """Aspects of fitness a movement can improve."""

    STRENGTH = "Strength"
    STABILITY = "Stability"
    SPEED = "Speed"
    ENDURANCE = "Endurance"
    AEROBIC_ENDURANCE = "Aerobic Endurance"
    ANAEROBIC_ENDURANCE = "Anaerobic Endurance"
    MUSCULAR_ENDURANCE = "Muscular Endurance"
    AGILITY = "Agility"
    POWER = "Power"
    MOBILITY = "Mobility"


class Muscle(str, Enum):
    """Muscle groups and body parts a movement can target."""

    # Core
    CORE = "Core"
    OBLIQUES = "Obliques"
    PSOAS = "Psoas"
    ILIACUS = "Iliacus"

    # Upper body
    CHEST = "Chest"
    BACK = "Back"
    LATS = "Lats"
    SHOULDERS = "Shoulders"
    BICEPS = "Biceps"
    TRICEPS = "Triceps"

    # Lower body
    QUADRICEPS = "Quadriceps"
    HAMSTRINGS = "Hamstrings"
    GLUTES = "Glutes"
    CALVES = "Calves"
    ADDUCTORS = "Adductors"
    ABDUCTORS = "Abductors"

    FULL_BODY = "Full Body"


class WorkoutType(str, Enum):
    """Category label attached to a Workout block."""

    WARMUP = "Warmup"
    COOLDOWN = "Cooldown"
    STRENGTH_WORKOUT = "Strength Workout"
    ENDURANCE_WORKOUT = "Endurance Workout"
    STABILITY_WORKOUT = "Stability Workout"

    DYNAMIC_WARMUP = "Dynamic Warmup"
    FUNCTIONAL_WARMUP = "Functional Warmup"

    FUNCTIONAL_STRENGTH_WORKOUT = "Functional Strength Workout"

    MUSCULAR_ENDURANCE_WORKOUT = "Muscular Endurance Workout"
    AEROBIC_ENDURANCE_WORKOUT = "Aerobic Endurance Workout"
    ANAEROBIC_ENDURANCE_WORKOUT = "Anaerobic Endurance Workout"

    FUNCTIONAL_STABILITY_WORKOUT = "Functional Stability Workout"


class ActivityType(str, Enum):
    """Activity-type tag shared by activity groups and recorded activities."""

    TRADITIONAL_STRENGTH_TRAINING = "traditional_strength_training"
    FUNCTIONAL_STRENGTH_TRAINING = "functional_strength_training"
    CYCLING = "cycling"
    RUNNING = "running"
    WALKING = "walking"
    SWIMMING = "swimming"
    ROWING = "rowing"
    JUMP_ROPE = "jump_rope"
    HIIT = "hiit"
    YOGA = "yoga"
    PILATES = "pilates"
    FLEXIBILITY = "flexibility"
    MIND_AND_BODY = "mind_and_body"
    OTHER = "other"

    @property
    def display_name(self) -> str:
        return _ACTIVITY_DISPLAY_NAMES[self]


_ACTIVITY_DISPLAY_NAMES: Final[dict[ActivityType, str]] = {
    ActivityType.TRADITIONAL_STRENGTH_TRAINING: "Traditional Strength Training",
    ActivityType.FUNCTIONAL_STRENGTH_TRAINING: "Functional Strength Training",
    ActivityType.CYCLING: "Cycling",
    ActivityType.RUNNING: "Running",
    ActivityType.WALKING: "Walking",
    ActivityType.SWIMMING: "Swimming",
    ActivityType.ROWING: "Rowing",
    ActivityType.JUMP_ROPE: "Jump Rope",
    ActivityType.HIIT: "HIIT",
    ActivityType.YOGA: "Yoga",
    ActivityType.PILATES: "Pilates",
    ActivityType.FLEXIBILITY: "Flexibility",
    ActivityType.MIND_AND_BODY: "Mind and Body",
    ActivityType.OTHER: "Other",
}


class LocationType(str, Enum):
    """Where an activity group takes place."""

    INDOOR = "indoor"
    OUTDOOR = "outdoor"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class Movement(str, Enum):
    """Physical (or mental) movements an exercise can be built from."""

    # Upper body
    PULL_UPS = "Pull Ups"
    CHIN_UPS = "Chin Ups"
    CHEST_DIPS = "Chest Dips"
    TRICEP_DIPS = "Tricep Dips"
    BENCH_PRESS = "Bench Press"
    LAT_PULLDOWNS = "Lat Pulldowns"
    CABLE_PULLOVER = "Cable Pullover"
    CHEST_FLYS = "Chest Flys"
    BICEP_CURLS = "Bicep Curls"
    HAMMER_CURLS = "Hammer Curls"
    PREACHER_CURLS = "Preacher Curls"
    LATERAL_RAISES = "Lateral Raises"
    OVERHEAD_PRESS = "Overhead Press"
    FACE_PULLS = "Face Pulls"
    TRICEP_PULLDOWN = "Tricep Pulldown"
    OVERHEAD_PULL = "Overhead Pull"

    # Lower body
    BARBELL_BACK_SQUAT = "Barbell Back Squat"
    BARBELL_DEADLIFTS = "Barbell Deadlifts"
    CALF_RAISES = "Calf Raises"
    ADDUCTORS = "Adductors"
    ABDUCTORS = "Abductors"

    # Core
    L_SIT = "L-Sit"
    LEG_RAISE = "Leg Raise"

    # Cardio
    CYCLING = "Cycling"
    RUN = "Run"
    SPRINT = "Sprint"
    JUMP_ROPE = "Jump Rope"

    # Stretching
    BENCH_HIP_FLEXOR_STRETCH = "Bench Hip Flexor Stretch"
    HAMSTRING_STRETCH = "Hamstring Stretch"
    QUADRICEPS_STRETCH = "Quadriceps Stretch"
    CALF_STRETCH = "Calf Stretch"
    SHOULDER_STRETCH = "Shoulder Stretch"
    NECK_STRETCH = "Neck Stretch"
    SPINAL_TWIST = "Spinal Twist"
    CHILDS_POSE = "Child's Pose"

    # Yoga
    DOWNWARD_DOG = "Downward Dog"
    WARRIOR_ONE = "Warrior I"
    WARRIOR_TWO = "Warrior II"
    TRIANGLE_POSE = "Triangle Pose"
    TREE_POSE = "Tree Pose"
    CAT_COW_POSE = "Cat Cow Pose"
    COBRA_POSE = "Cobra Pose"
    PLANK_POSE = "Plank Pose"
    MOUNTAIN_POSE = "Mountain Pose"
    SUN_SALUTATION = "Sun Salutation"

    # Pilates
    PILATES_HUNDRED = "Pilates Hundred"
    PILATES_ROLL_UP = "Pilates Roll Up"
    PILATES_SINGLE_LEG_CIRCLE = "Pilates Single Leg Circle"
    PILATES_TEASER = "Pilates Teaser"
    PILATES_PLANK = "Pilates Plank"
    PILATES_BRIDGE = "Pilates Bridge"

    # Mindfulness
    MEDITATION = "Meditation"
    BREATHING_EXERCISE = "Breathing Exercise"
    BODY_SCANNING = "Body Scanning"
    PROGRESSIVE_MUSCLE_RELAXATION = "Progressive Muscle Relaxation"

    # Complex
    BEAR_CRAWLS = "Bear Crawls"
    HINGE_TO_SQUAT = "Hinge to Squat"
    PIKE_PULSE = "Pike Pulse"
    PRECISION_BROAD_JUMP = "Precision Broad Jump"
    ROPE_CLIMBING = "Rope Climbing"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def target_muscles(self) -> frozenset[Muscle]:
        return target_muscles(self)

    @property
    def target_metrics(self) -> frozenset[FitnessMetric]:
        return target_metrics(self)


# Short aliases keep the table below readable.
_M = Muscle
_F = FitnessMetric
_V = Movement


def _t(muscles: tuple[Muscle, ...], metrics: tuple[FitnessMetric, ...]) -> tuple[frozenset[Muscle], frozenset[FitnessMetric]]:
    return frozenset(muscles), frozenset(metrics)


# =============================================================================
# MOVEMENT → (MUSCLES, METRICS)
# =============================================================================

MOVEMENT_TARGETS: Final[dict[Movement, tuple[frozenset[Muscle], frozenset[FitnessMetric]]]] = {
    # Upper body
    _V.PULL_UPS: _t((_M.BACK, _M.LATS, _M.BICEPS), (_F.STRENGTH, _F.POWER)),
    _V.CHIN_UPS: _t((_M.BACK, _M.LATS, _M.BICEPS), (_F.STRENGTH, _F.POWER)),
    _V.CHEST_DIPS: _t((_M.CHEST, _M.TRICEPS), (_F.STRENGTH, _F.POWER)),
    _V.TRICEP_DIPS: _t((_M.TRICEPS,), (_F.STRENGTH, _F.MUSCULAR_ENDURANCE)),
    _V.BENCH_PRESS: _t((_M.CHEST, _M.TRICEPS), (_F.STRENGTH, _F.POWER)),
    _V.LAT_PULLDOWNS: _t((_M.BACK, _M.LATS, _M.BICEPS), (_F.STRENGTH, _F.MUSCULAR_ENDURANCE)),
    _V.CABLE_PULLOVER: _t((_M.BACK, _M.LATS, _M.BICEPS), (_F.STRENGTH, _F.MUSCULAR_ENDURANCE)),
    _V.CHEST_FLYS: _t((_M.CHEST, _M.TRICEPS), (_F.STRENGTH, _F.MUSCULAR_ENDURANCE)),
    _V.BICEP_CURLS: _t((_M.BICEPS,), (_F.STRENGTH, _F.MUSCULAR_ENDURANCE)),
    _V.HAMMER_CURLS: _t((_M.BICEPS,), (_F.STRENGTH, _F.MUSCULAR_ENDURANCE)),
    _V.PREACHER_CURLS: _t((_M.BICEPS,), (_F.STRENGTH, _F.MUSCULAR_ENDURANCE)),
    _V.LATERAL_RAISES: _t((_M.SHOULDERS,), (_F.STRENGTH, _F.STABILITY)),
    _V.OVERHEAD_PRESS: _t((_M.SHOULDERS,), (_F.STRENGTH, _F.STABILITY)),
    _V.FACE_PULLS: _t((_M.SHOULDERS,), (_F.STRENGTH, _F.STABILITY)),
    _V.TRICEP_PULLDOWN: _t((_M.TRICEPS,), (_F.STRENGTH, _F.MUSCULAR_ENDURANCE)),
    _V.OVERHEAD_PULL: _t((_M.TRICEPS,), (_F.STRENGTH, _F.MUSCULAR_ENDURANCE)),
    # Lower body
    _V.BARBELL_BACK_SQUAT: _t((_M.QUADRICEPS, _M.GLUTES), (_F.STRENGTH, _F.POWER, _F.STABILITY)),
    _V.BARBELL_DEADLIFTS: _t((_M.HAMSTRINGS, _M.GLUTES, _M.BACK), (_F.STRENGTH, _F.POWER, _F.STABILITY)),
    _V.CALF_RAISES: _t((_M.CALVES,), (_F.STRENGTH, _F.STABILITY)),
    _V.ADDUCTORS: _t((_M.ADDUCTORS,), (_F.STABILITY, _F.MOBILITY)),
    _V.ABDUCTORS: _t((_M.ABDUCTORS,), (_F.STABILITY, _F.MOBILITY)),
    # Core
    _V.L_SIT: _t((_M.CORE, _M.PSOAS), (_F.STRENGTH, _F.STABILITY, _F.MUSCULAR_ENDURANCE)),
    _V.LEG_RAISE: _t((_M.CORE, _M.PSOAS), (_F.STRENGTH, _F.STABILITY, _F.MUSCULAR_ENDURANCE)),
    # Cardio
    _V.CYCLING: _t((_M.FULL_BODY,), (_F.AEROBIC_ENDURANCE, _F.MUSCULAR_ENDURANCE)),
    _V.RUN: _t((_M.FULL_BODY,), (_F.AEROBIC_ENDURANCE, _F.SPEED)),
    _V.SPRINT: _t((_M.FULL_BODY,), (_F.ANAEROBIC_ENDURANCE, _F.SPEED, _F.POWER)),
    _V.JUMP_ROPE: _t((_M.FULL_BODY,), (_F.ANAEROBIC_ENDURANCE, _F.AGILITY, _F.SPEED)),
    # Stretching
    _V.BENCH_HIP_FLEXOR_STRETCH: _t((_M.PSOAS, _M.ILIACUS), (_F.MOBILITY,)),
    _V.HAMSTRING_STRETCH: _t((_M.HAMSTRINGS,), (_F.MOBILITY,)),
    _V.QUADRICEPS_STRETCH: _t((_M.QUADRICEPS,), (_F.MOBILITY,)),
    _V.CALF_STRETCH: _t((_M.CALVES,), (_F.MOBILITY,)),
    _V.SHOULDER_STRETCH: _t((_M.SHOULDERS,), (_F.MOBILITY,)),
    _V.NECK_STRETCH: _t((_M.FULL_BODY,), (_F.MOBILITY,)),  # no dedicated neck muscle
    _V.SPINAL_TWIST: _t((_M.BACK, _M.CORE), (_F.MOBILITY, _F.STABILITY)),
    _V.CHILDS_POSE: _t((_M.BACK, _M.CORE), (_F.MOBILITY, _F.STABILITY)),
    # Yoga
    _V.DOWNWARD_DOG: _t((_M.SHOULDERS, _M.HAMSTRINGS, _M.CALVES), (_F.MOBILITY, _F.STABILITY, _F.STRENGTH)),
    _V.WARRIOR_ONE: _t((_M.QUADRICEPS, _M.GLUTES, _M.CORE), (_F.STABILITY, _F.STRENGTH, _F.MOBILITY)),
    _V.WARRIOR_TWO: _t((_M.QUADRICEPS, _M.GLUTES, _M.CORE), (_F.STABILITY, _F.STRENGTH, _F.MOBILITY)),
    _V.TRIANGLE_POSE: _t((_M.HAMSTRINGS, _M.CORE, _M.SHOULDERS), (_F.MOBILITY, _F.STABILITY)),
    _V.TREE_POSE: _t((_M.CORE, _M.GLUTES), (_F.STABILITY,)),
    _V.CAT_COW_POSE: _t((_M.BACK, _M.CORE), (_F.MOBILITY, _F.STABILITY)),
    _V.COBRA_POSE: _t((_M.BACK, _M.CHEST), (_F.MOBILITY, _F.STRENGTH)),
    _V.PLANK_POSE: _t((_M.CORE, _M.SHOULDERS, _M.CHEST), (_F.STRENGTH, _F.STABILITY, _F.MUSCULAR_ENDURANCE)),
    _V.MOUNTAIN_POSE: _t((_M.CORE, _M.GLUTES), (_F.STABILITY,)),
    _V.SUN_SALUTATION: _t((_M.FULL_BODY,), (_F.MOBILITY, _F.STABILITY, _F.STRENGTH, _F.ENDURANCE)),
    # Pilates
    _V.PILATES_HUNDRED: _t((_M.CORE, _M.OBLIQUES), (_F.MUSCULAR_ENDURANCE, _F.STABILITY)),
    _V.PILATES_ROLL_UP: _t((_M.CORE, _M.PSOAS), (_F.STRENGTH, _F.STABILITY, _F.MOBILITY)),
    _V.PILATES_SINGLE_LEG_CIRCLE: _t((_M.CORE, _M.PSOAS), (_F.STABILITY, _F.MOBILITY)),
    _V.PILATES_TEASER: _t((_M.CORE, _M.PSOAS), (_F.STRENGTH, _F.STABILITY)),
    _V.PILATES_PLANK: _t((_M.CORE, _M.SHOULDERS), (_F.STRENGTH, _F.STABILITY, _F.MUSCULAR_ENDURANCE)),
    _V.PILATES_BRIDGE: _t((_M.GLUTES, _M.HAMSTRINGS, _M.CORE), (_F.STRENGTH, _F.STABILITY)),
    # Mindfulness: whole-body awareness, mental stability
    _V.MEDITATION: _t((_M.FULL_BODY,), (_F.STABILITY,)),
    _V.BREATHING_EXERCISE: _t((_M.FULL_BODY,), (_F.STABILITY,)),
    _V.BODY_SCANNING: _t((_M.FULL_BODY,), (_F.STABILITY,)),
    _V.PROGRESSIVE_MUSCLE_RELAXATION: _t((_M.FULL_BODY,), (_F.STABILITY,)),
    # Complex
    _V.BEAR_CRAWLS: _t((_M.CORE, _M.PSOAS), (_F.STRENGTH, _F.STABILITY, _F.MUSCULAR_ENDURANCE)),
    _V.HINGE_TO_SQUAT: _t((_M.FULL_BODY,), (_F.MOBILITY, _F.STABILITY, _F.STRENGTH)),
    _V.PIKE_PULSE: _t((_M.CORE, _M.PSOAS), (_F.STRENGTH, _F.STABILITY, _F.MOBILITY)),
    _V.PRECISION_BROAD_JUMP: _t((_M.FULL_BODY,), (_F.POWER, _F.AGILITY, _F.SPEED)),
    _V.ROPE_CLIMBING: _t((_M.FULL_BODY,), (_F.STRENGTH, _F.POWER, _F.MUSCULAR_ENDURANCE)),
}


def _check_catalog() -> None:
    missing = [m.name for m in Movement if m not in MOVEMENT_TARGETS]
    empty = [m.name for m, (mus, met) in MOVEMENT_TARGETS.items() if not mus or not met]
    if missing or empty:
        raise RuntimeError(
            "workout-sessions: movement catalog is incomplete "
            f"(missing: {missing}, empty: {empty})"
        )


_check_catalog()


def target_muscles(movement: Movement) -> frozenset[Muscle]:
    """Return the muscles targeted by a movement (never empty)."""
    return MOVEMENT_TARGETS[movement][0]


def target_metrics(movement: Movement) -> frozenset[FitnessMetric]:
    """Return the fitness metrics developed by a movement (never empty)."""
    return MOVEMENT_TARGETS[movement][1]


def movement_from_name(name: str) -> Movement | None:
    """
    Look up a Movement by display string or enum name.

    Matching is case-insensitive and treats "-", "_" and spaces alike, so
    "pull ups", "PULL_UPS" and "Pull Ups" all resolve.

    Returns:
        The Movement, or None if nothing matches
    """
    key = _normalise(name)
    for movement in Movement:
        if key in (_normalise(movement.value), _normalise(movement.name)):
            return movement
    return None


def _normalise(text: str) -> str:
    return text.strip().lower().replace("-", " ").replace("_", " ")


def sort_by_declaration(items: frozenset) -> list:
    """Order enum members by their declaration order (for stable display)."""
    if not items:
        return []
    order = {member: i for i, member in enumerate(type(next(iter(items))))}
    return sorted(items, key=order.__getitem__)
