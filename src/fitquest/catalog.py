"""Mission library — fixed workout missions, instruction tables and quest flavor pools."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MissionTemplate:
    key: str
    title: str
    description: str
    category: str
    difficulty: str
    estimated_time: float  # minutes
    equipment: tuple[str, ...]
    instructions: tuple[str, ...]


# --- Workout plan missions ---

STRENGTH_SESSION = MissionTemplate(
    key="strength_001",
    title="Strength Training Session",
    description="Complete a focused strength training workout targeting major muscle groups",
    category="strength",
    difficulty="medium",  # overridden per experience level
    estimated_time=45,  # upper bound, scaled by time available
    equipment=(),  # gym_access or home_equipment
    instructions=(),  # see strength_instructions()
)

BODYWEIGHT_CIRCUIT = MissionTemplate(
    key="strength_002",
    title="Bodyweight Strength Circuit",
    description="Build strength using bodyweight exercises",
    category="strength",
    difficulty="easy",
    estimated_time=20,
    equipment=("bodyweight_only",),
    instructions=(
        "Perform 3 rounds of:",
        "- 10 Push-ups (modify as needed)",
        "- 15 Squats",
        "- 30-second Plank",
        "- 10 Lunges per leg",
        "Rest 60 seconds between rounds",
    ),
)

CARDIO_SESSION = MissionTemplate(
    key="cardio_001",
    title="Cardiovascular Training",
    description="Improve heart health and endurance",
    category="cardio",
    difficulty="easy",
    estimated_time=30,
    equipment=("bodyweight_only",),
    instructions=(),  # see cardio_instructions()
)

FLEXIBILITY_SESSION = MissionTemplate(
    key="flexibility_001",
    title="Flexibility & Mobility",
    description="Improve flexibility and reduce muscle tension",
    category="flexibility",
    difficulty="easy",
    estimated_time=15,
    equipment=("bodyweight_only",),
    instructions=(
        "Hold each stretch for 30 seconds:",
        "- Neck rolls and shoulder shrugs",
        "- Arm circles and chest stretch",
        "- Hip circles and leg swings",
        "- Hamstring and calf stretches",
        "- Spinal twists (seated or standing)",
    ),
)

ACTIVE_RECOVERY = MissionTemplate(
    key="recovery_001",
    title="Active Recovery",
    description="Promote recovery and prepare for next workout",
    category="recovery",
    difficulty="easy",
    estimated_time=10,
    equipment=("bodyweight_only",),
    instructions=(
        "- 5 minutes gentle walking",
        "- Deep breathing exercises (4-7-8 pattern)",
        "- Gentle stretching focusing on worked muscles",
        "- Hydrate well",
        "- Note how you feel in a fitness journal",
    ),
)

GYM_BEGINNER_INSTRUCTIONS = (
    "Focus on compound movements:",
    "- Goblet squats: 3 sets x 8-12 reps",
    "- Assisted pull-ups or lat pulldowns: 3 sets x 5-10 reps",
    "- Dumbbell bench press: 3 sets x 8-12 reps",
    "- Plank: 3 sets x 20-30 seconds",
    "Rest 60-90 seconds between sets",
)

GYM_INSTRUCTIONS = (
    "Compound strength training:",
    "- Squats: 4 sets x 6-8 reps",
    "- Deadlifts: 4 sets x 5-6 reps",
    "- Bench press: 4 sets x 6-8 reps",
    "- Rows: 4 sets x 8-10 reps",
    "Rest 2-3 minutes between sets",
)

HOME_INSTRUCTIONS = (
    "Home strength circuit:",
    "- Push-up variations: 3 sets x 8-15 reps",
    "- Dumbbell squats: 3 sets x 12-15 reps",
    "- Dumbbell rows: 3 sets x 10-12 reps",
    "- Overhead press: 3 sets x 8-12 reps",
    "Rest 60 seconds between sets",
)

# Endurance below this level gets the walking plan
WALKING_PLAN_MAX_ENDURANCE = 4


def strength_instructions(experience: str, equipment: tuple[str, ...]) -> list[str]:
    if "gym_access" in equipment:
        if experience == "beginner":
            return list(GYM_BEGINNER_INSTRUCTIONS)
        return list(GYM_INSTRUCTIONS)
    return list(HOME_INSTRUCTIONS)


def cardio_instructions(endurance_level: float, duration: float) -> list[str]:
    minutes = f"{duration:g}"
    if endurance_level < WALKING_PLAN_MAX_ENDURANCE:
        return [
            f"{minutes}-minute beginner cardio:",
            "- 5 minutes easy walking",
            "- Alternate 1 minute brisk walk, 1 minute easy walk",
            "- End with 5 minutes easy walking",
            "- Focus on breathing and form over speed",
        ]
    return [
        f"{minutes}-minute cardio session:",
        "- 5 minute warm-up",
        "- High-intensity intervals: 30 seconds work, 90 seconds rest",
        "- Repeat for main portion of workout",
        "- 5 minute cool-down",
        "- Monitor heart rate if possible",
    ]


# --- Quest flavor pools (2-3 variants per category) ---

QUEST_POOLS: dict[str, tuple[MissionTemplate, ...]] = {
    "strength": (
        MissionTemplate(
            key="strength_push_pull",
            title="Push & Pull Builder",
            description="Alternate pushing and pulling moves to build balanced strength",
            category="strength",
            difficulty="medium",
            estimated_time=20,
            equipment=("bodyweight_only",),
            instructions=(
                "3 rounds: 10 push-ups, 12 inverted rows or towel rows",
                "Rest 60 seconds between rounds",
            ),
        ),
        MissionTemplate(
            key="strength_legs",
            title="Leg Day Lite",
            description="Squats and lunges for a stronger base",
            category="strength",
            difficulty="easy",
            estimated_time=15,
            equipment=("bodyweight_only",),
            instructions=(
                "3 rounds: 15 squats, 10 lunges per leg, 30-second wall sit",
            ),
        ),
        MissionTemplate(
            key="strength_core",
            title="Core Fortress",
            description="Plank variations to lock in core stability",
            category="strength",
            difficulty="hard",
            estimated_time=25,
            equipment=("bodyweight_only",),
            instructions=(
                "4 rounds: 45-second plank, 30-second side plank each side, 12 dead bugs",
            ),
        ),
    ),
    "cardio": (
        MissionTemplate(
            key="cardio_brisk_walk",
            title="Brisk Walk Quest",
            description="Get your heart rate up with a brisk outdoor walk",
            category="cardio",
            difficulty="easy",
            estimated_time=20,
            equipment=("bodyweight_only",),
            instructions=("Walk at a pace where talking takes a little effort",),
        ),
        MissionTemplate(
            key="cardio_intervals",
            title="Interval Sprint",
            description="Short bursts of effort with recovery in between",
            category="cardio",
            difficulty="hard",
            estimated_time=25,
            equipment=("bodyweight_only",),
            instructions=(
                "5 minute warm-up",
                "8 rounds: 30 seconds hard, 90 seconds easy",
                "5 minute cool-down",
            ),
        ),
    ),
    "flexibility": (
        MissionTemplate(
            key="flexibility_flow",
            title="Morning Mobility Flow",
            description="Loosen up hips, shoulders and spine",
            category="flexibility",
            difficulty="easy",
            estimated_time=10,
            equipment=("bodyweight_only",),
            instructions=("Cat-cow, hip circles, thread the needle: 1 minute each",),
        ),
        MissionTemplate(
            key="flexibility_deep_stretch",
            title="Deep Stretch Session",
            description="Longer holds for lasting range of motion",
            category="flexibility",
            difficulty="medium",
            estimated_time=20,
            equipment=("bodyweight_only",),
            instructions=("Hold hamstring, hip flexor and chest stretches for 60 seconds each",),
        ),
    ),
    "nutrition": (
        MissionTemplate(
            key="nutrition_veggies",
            title="Rainbow Plate",
            description="Eat vegetables of three different colors today",
            category="nutrition",
            difficulty="easy",
            estimated_time=10,
            equipment=(),
            instructions=("Add a vegetable to at least two meals",),
        ),
        MissionTemplate(
            key="nutrition_hydration",
            title="Hydration Hero",
            description="Drink eight glasses of water before evening",
            category="nutrition",
            difficulty="easy",
            estimated_time=5,
            equipment=(),
            instructions=("Keep a bottle in sight and refill it four times",),
        ),
        MissionTemplate(
            key="nutrition_meal_prep",
            title="Meal Prep Master",
            description="Prepare tomorrow's lunch with protein and vegetables",
            category="nutrition",
            difficulty="medium",
            estimated_time=30,
            equipment=(),
            instructions=("Cook one protein and one vegetable side", "Portion it into a container"),
        ),
    ),
    "sleep": (
        MissionTemplate(
            key="sleep_wind_down",
            title="Screen-Free Wind Down",
            description="No screens for 30 minutes before bed",
            category="sleep",
            difficulty="medium",
            estimated_time=30,
            equipment=(),
            instructions=("Dim the lights and read or stretch instead",),
        ),
        MissionTemplate(
            key="sleep_consistent_bedtime",
            title="Same Time Tonight",
            description="Go to bed within 15 minutes of your target bedtime",
            category="sleep",
            difficulty="easy",
            estimated_time=5,
            equipment=(),
            instructions=("Set a bedtime alarm 30 minutes ahead",),
        ),
    ),
    "stress": (
        MissionTemplate(
            key="stress_box_breathing",
            title="Box Breathing Break",
            description="Calm your nervous system with paced breathing",
            category="stress",
            difficulty="easy",
            estimated_time=5,
            equipment=(),
            instructions=("Inhale 4s, hold 4s, exhale 4s, hold 4s for 5 minutes",),
        ),
        MissionTemplate(
            key="stress_journal",
            title="Worry Dump",
            description="Write down what is on your mind and one next step for each",
            category="stress",
            difficulty="medium",
            estimated_time=15,
            equipment=(),
            instructions=("List every worry, then circle the ones you can act on",),
        ),
    ),
    "energy": (
        MissionTemplate(
            key="energy_sunlight",
            title="Morning Sunlight",
            description="Get 10 minutes of daylight within an hour of waking",
            category="energy",
            difficulty="easy",
            estimated_time=10,
            equipment=(),
            instructions=("Step outside or sit by a bright window",),
        ),
        MissionTemplate(
            key="energy_movement_snacks",
            title="Movement Snacks",
            description="Stand up and move for two minutes every hour",
            category="energy",
            difficulty="medium",
            estimated_time=15,
            equipment=(),
            instructions=("Set an hourly reminder", "Do stairs, squats or a quick walk"),
        ),
    ),
    "variety": (
        MissionTemplate(
            key="variety_new_activity",
            title="Try Something New",
            description="Do a workout or activity you have never tried",
            category="variety",
            difficulty="medium",
            estimated_time=20,
            equipment=(),
            instructions=("Pick a dance video, yoga class or a new route",),
        ),
        MissionTemplate(
            key="variety_gratitude",
            title="Gratitude Note",
            description="Write down three things that went well today",
            category="variety",
            difficulty="easy",
            estimated_time=5,
            equipment=(),
            instructions=("Keep it short, one line each",),
        ),
        MissionTemplate(
            key="variety_play",
            title="Active Play",
            description="Spend time playing a sport or game that gets you moving",
            category="variety",
            difficulty="hard",
            estimated_time=30,
            equipment=(),
            instructions=("Invite a friend if you can",),
        ),
    ),
}

# Reward ranges per difficulty: (xp_min, xp_max), (coin_min, coin_max)
REWARD_TABLE: dict[str, tuple[tuple[int, int], tuple[int, int]]] = {
    "easy": ((8, 15), (4, 8)),
    "medium": ((15, 25), (7, 12)),
    "hard": ((25, 35), (12, 18)),
}

# Base XP offset per category, physical work pays slightly more
CATEGORY_XP_OFFSET: dict[str, int] = {
    "strength": 3,
    "cardio": 3,
    "flexibility": 1,
    "recovery": 0,
    "nutrition": 2,
    "sleep": 2,
    "stress": 1,
    "energy": 1,
    "variety": 0,
}
