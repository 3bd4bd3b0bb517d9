from typing import Any


def format_number(value: int | float) -> str:
    """Render stored numbers the way a person typed them: 135.0 -> "135", 2.5 -> "2.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_exercise_details(exercise: Any) -> str:
    """One-line summary of an exercise's recorded metrics, e.g. ``3 sets × 10 reps • 135 lbs``."""
    details = []

    sets = getattr(exercise, "sets", None)
    reps = getattr(exercise, "reps", None)
    if sets is not None and reps is not None:
        details.append(f"{format_number(sets)} sets × {format_number(reps)} reps")

    weight = getattr(exercise, "weight", None)
    if weight is not None:
        details.append(f"{format_number(weight)} lbs")

    distance = getattr(exercise, "distance", None)
    if distance is not None:
        details.append(f"{format_number(distance)} miles")

    duration = getattr(exercise, "duration", None)
    if duration is not None:
        details.append(f"{format_number(duration)} min")

    return " • ".join(details)
