"""Pydantic schemas for level catalog and game config validation."""

from pydantic import BaseModel, Field, field_validator

from .constants import STARTING_LIVES, WRONG_FLASH_SECONDS


class AnswerEntry(BaseModel):
    """Ranked answer on a level."""

    text: str = Field(..., min_length=1)
    points: int = Field(..., gt=0)

    @field_validator('text')
    @classmethod
    def validate_text(cls, v):
        """Reject whitespace-only answers."""
        if not v.strip():
            raise ValueError('Answer text must not be blank')
        return v

    class Config:
        extra = 'forbid'


class LevelEntry(BaseModel):
    """One question with its answer board."""

    id: str = Field(..., min_length=1)
    question: str = Field(..., min_length=1)
    answers: list[AnswerEntry] = Field(default_factory=list)

    @field_validator('answers')
    @classmethod
    def validate_distinct_answers(cls, v):
        """Ensure answer texts are case-insensitively distinct."""
        seen = set()
        for answer in v:
            key = answer.text.strip().lower()
            if key in seen:
                raise ValueError(f'Duplicate answer: {answer.text}')
            seen.add(key)
        return v

    class Config:
        extra = 'forbid'


class CatalogFile(BaseModel):
    """Complete levels.json file structure."""

    levels: list[LevelEntry] = Field(..., min_length=1)

    @field_validator('levels')
    @classmethod
    def validate_unique_ids(cls, v):
        """Ensure level ids are unique."""
        ids = [level.id for level in v]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f'Duplicate level ids: {", ".join(duplicates)}')
        return v

    class Config:
        extra = 'forbid'


class GameConfig(BaseModel):
    """Game configuration settings."""

    mode: str = Field(default='single', pattern=r'^(single|team)$')
    single_player_lives: int = Field(default=STARTING_LIVES['single'], ge=0, le=10)
    team_lives: int = Field(default=STARTING_LIVES['team'], ge=0, le=10)
    wrong_flash_seconds: float = Field(default=WRONG_FLASH_SECONDS, gt=0, le=10)
    catalog_path: str | None = None

    class Config:
        extra = 'forbid'
