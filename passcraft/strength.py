"""
passcraft.strength
Cosmetic strength meter: length plus variety. Advisory only, not a security metric.
"""

from typing import Optional

from .charsets import classes_in

MAX_SCORED_LENGTH = 32
MAX_SCORED_CLASSES = 4


def estimate_strength(password: str, class_count: Optional[int] = None) -> dict:
    """
    Score a password on a 0..1 scale and attach a label.

    `class_count` is the number of selected character classes; when omitted the
    classes actually present in the password are counted.
    """
    if not password:
        return {"password": password, "score": 0.0, "percent": 0, "label": "—"}

    if class_count is None:
        class_count = len(classes_in(password))

    length_score = min(MAX_SCORED_LENGTH, len(password)) / MAX_SCORED_LENGTH
    variety_score = min(MAX_SCORED_CLASSES, max(0, class_count)) / MAX_SCORED_CLASSES

    score = 0.55 * length_score + 0.45 * variety_score

    if score >= 0.7:
        label = "Strong"
    elif score >= 0.45:
        label = "Medium"
    else:
        label = "Weak"

    return {
        "password": password,
        "score": score,
        "percent": round(score * 100),
        "label": label,
    }
