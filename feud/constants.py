"""Constants and built-in level data for the feud board."""

# Starting lives per mode
STARTING_LIVES = {
    'single': 3,
    'team': 4,
}

# Seconds the wrong-guess pulse stays on after a miss
WRONG_FLASH_SECONDS = 0.5

TEAMS = (1, 2)

# Guess outcomes
OUTCOME_IGNORED = 'ignored'
OUTCOME_HIT = 'hit'
OUTCOME_MISS = 'miss'
OUTCOME_EXHAUSTED = 'exhausted'

# Built-in catalog, same shape as levels.json
DEFAULT_LEVELS = [
    {
        'id': 'food',
        'question': "Name a popular food item you'd find at a restaurant.",
        'answers': [
            {'text': 'Pizza', 'points': 35},
            {'text': 'Burger', 'points': 25},
            {'text': 'Sushi', 'points': 15},
            {'text': 'Pasta', 'points': 10},
            {'text': 'Tacos', 'points': 8},
            {'text': 'Salad', 'points': 4},
            {'text': 'Steak', 'points': 2},
            {'text': 'Ice Cream', 'points': 1},
        ],
    },
    {
        'id': 'healthy',
        'question': 'Name something people do to stay healthy.',
        'answers': [
            {'text': 'Exercise', 'points': 40},
            {'text': 'Eat Well', 'points': 30},
            {'text': 'Sleep', 'points': 15},
            {'text': 'Drink Water', 'points': 8},
            {'text': 'Meditate', 'points': 4},
            {'text': 'Take Vitamins', 'points': 2},
            {'text': 'Regular Checkups', 'points': 1},
            {'text': 'Reduce Stress', 'points': 1},
        ],
    },
    {
        'id': 'vacation',
        'question': 'Name a popular vacation destination.',
        'answers': [
            {'text': 'Hawaii', 'points': 35},
            {'text': 'Paris', 'points': 25},
            {'text': 'Disney World', 'points': 20},
            {'text': 'Las Vegas', 'points': 10},
            {'text': 'New York', 'points': 5},
            {'text': 'Caribbean', 'points': 3},
            {'text': 'London', 'points': 1},
            {'text': 'Tokyo', 'points': 1},
        ],
    },
]
