"""Built-in exercise library offered on first start."""

BUILTIN_EXERCISES: list[dict] = [
    {
        "name": "Barbell Bench Press",
        "primary_muscle_group": "Chest",
        "secondary_muscle_groups": ["Triceps", "Shoulders"],
        "equipment": "Barbell",
        "tags": ["compound", "push"],
        "instructions": "Lower the bar to mid-chest with elbows at about 45°, then press back to lockout.",
    },
    {
        "name": "Incline Dumbbell Press",
        "primary_muscle_group": "Chest",
        "secondary_muscle_groups": ["Shoulders", "Triceps"],
        "equipment": "Dumbbell",
        "tags": ["compound", "push"],
    },
    {
        "name": "Overhead Press",
        "primary_muscle_group": "Shoulders",
        "secondary_muscle_groups": ["Triceps"],
        "equipment": "Barbell",
        "tags": ["compound", "push"],
        "instructions": "Brace, press the bar straight up past the face and finish with the bar over mid-foot.",
    },
    {
        "name": "Lateral Raise",
        "primary_muscle_group": "Shoulders",
        "equipment": "Dumbbell",
        "tags": ["isolation"],
    },
    {
        "name": "Triceps Pushdown",
        "primary_muscle_group": "Triceps",
        "equipment": "Cable",
        "tags": ["isolation", "push"],
    },
    {
        "name": "Pull-up",
        "primary_muscle_group": "Back",
        "secondary_muscle_groups": ["Biceps"],
        "equipment": "Bodyweight",
        "tags": ["compound", "pull"],
        "instructions": "From a dead hang, pull until the chin clears the bar, then lower under control.",
    },
    {
        "name": "Barbell Row",
        "primary_muscle_group": "Back",
        "secondary_muscle_groups": ["Biceps"],
        "equipment": "Barbell",
        "tags": ["compound", "pull"],
    },
    {
        "name": "Lat Pulldown",
        "primary_muscle_group": "Back",
        "secondary_muscle_groups": ["Biceps"],
        "equipment": "Cable",
        "tags": ["compound", "pull", "beginner"],
    },
    {
        "name": "Dumbbell Curl",
        "primary_muscle_group": "Biceps",
        "equipment": "Dumbbell",
        "tags": ["isolation", "pull"],
    },
    {
        "name": "Back Squat",
        "primary_muscle_group": "Legs",
        "secondary_muscle_groups": ["Glutes", "Core"],
        "equipment": "Barbell",
        "tags": ["compound", "legs"],
        "instructions": "Sit the hips back and down to at least parallel, knees tracking over toes, then drive up.",
    },
    {
        "name": "Romanian Deadlift",
        "primary_muscle_group": "Legs",
        "secondary_muscle_groups": ["Glutes", "Back"],
        "equipment": "Barbell",
        "tags": ["compound", "hinge"],
    },
    {
        "name": "Deadlift",
        "primary_muscle_group": "Back",
        "secondary_muscle_groups": ["Legs", "Glutes"],
        "equipment": "Barbell",
        "tags": ["compound", "hinge"],
    },
    {
        "name": "Leg Press",
        "primary_muscle_group": "Legs",
        "secondary_muscle_groups": ["Glutes"],
        "equipment": "Machine",
        "tags": ["compound", "legs", "beginner"],
    },
    {
        "name": "Standing Calf Raise",
        "primary_muscle_group": "Calves",
        "equipment": "Machine",
        "tags": ["isolation", "legs"],
    },
    {
        "name": "Plank",
        "primary_muscle_group": "Core",
        "equipment": "Bodyweight",
        "tags": ["isometric", "beginner"],
        "instructions": "Forearms under shoulders, body in a straight line; hold without letting the hips sag.",
    },
]
