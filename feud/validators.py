"""Validation functions for levels and live boards."""

from .models import Level
from .round import RoundController


def validate_level(level: Level) -> list[str]:
    """
    Validate that a level can be played.

    Checks:
    - No blank answer texts
    - All answer points positive
    - No duplicate answers (case-insensitive)

    Args:
        level: Level to validate

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if not level.question.strip():
        errors.append(f'{level.id} has a blank question')

    for position, answer in enumerate(level.answers, start=1):
        if not answer.text.strip():
            errors.append(f'{level.id} answer #{position} has blank text')
        if answer.points <= 0:
            errors.append(f'{level.id} answer {answer.text!r} has {answer.points} points (must be > 0)')

    seen = set()
    duplicates = set()
    for answer in level.answers:
        key = answer.text.strip().lower()
        if key in seen:
            duplicates.add(answer.text)
        seen.add(key)

    if duplicates:
        errors.append(f'{level.id} has duplicate answers: {", ".join(sorted(duplicates))}')

    return errors


def level_warnings(level: Level) -> list[str]:
    """
    Check a level against board conventions.

    Conventions:
    - Points sum to 100
    - Answers listed in descending point order

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    if not level.answers:
        warnings.append(f'{level.id} has no answers')
        return warnings

    total = sum(a.points for a in level.answers)
    if total != 100:
        warnings.append(f'{level.id} points sum to {total} (conventionally 100)')

    points = [a.points for a in level.answers]
    if points != sorted(points, reverse=True):
        warnings.append(f'{level.id} answers are not in descending point order')

    return warnings


def validate_round(controller: RoundController) -> list[str]:
    """
    Sanity-check the live board for internal consistency.

    Checks:
    - Round score non-negative and no higher than revealed points
    - Lives no higher than the starting value
    - An exhausted round has every answer revealed

    Returns:
        List of warning messages (empty if consistent)
    """
    warnings = []
    state = controller.state

    if state.round_score < 0:
        warnings.append(f'{state.level_id} round score is negative ({state.round_score})')
    elif state.round_score > state.revealed_points:
        warnings.append(
            f'{state.level_id} round score ({state.round_score}) exceeds revealed points '
            f'({state.revealed_points})'
        )

    if state.lives > controller.starting_lives:
        warnings.append(
            f'{state.level_id} has {state.lives} lives (started with {controller.starting_lives})'
        )

    if state.exhausted and not state.all_revealed:
        hidden = sum(1 for a in state.answers if not a.revealed)
        warnings.append(f'{state.level_id} is exhausted with {hidden} hidden answers')

    return warnings
