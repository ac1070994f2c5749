from .models import Answer, Level, RoundState, TeamState, GuessResult
from .matching import matches, normalize, split_words, words_cover
from .catalog import (
    LevelCatalog,
    LevelNotFoundError,
    default_catalog,
    load_catalog,
)
from .round import RoundController
from .validators import validate_level, level_warnings, validate_round

__all__ = [
    # Models
    'Answer',
    'Level',
    'RoundState',
    'TeamState',
    'GuessResult',
    # Matching
    'matches',
    'normalize',
    'split_words',
    'words_cover',
    # Catalog
    'LevelCatalog',
    'LevelNotFoundError',
    'default_catalog',
    'load_catalog',
    # Round
    'RoundController',
    # Validation
    'validate_level',
    'level_warnings',
    'validate_round',
]
