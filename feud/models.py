"""Data models for the feud board."""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple


@dataclass(frozen=True)
class Answer:
    """One entry on the board."""
    text: str
    points: int
    revealed: bool = False

    def reveal(self) -> 'Answer':
        """Return a revealed copy (reveals never flip back)."""
        return self if self.revealed else replace(self, revealed=True)


@dataclass(frozen=True)
class Level:
    """A question and its ranked answers (display order)."""
    id: str
    question: str
    answers: Tuple[Answer, ...] = ()


@dataclass
class RoundState:
    """Mutable state of the round in play, owned by a RoundController."""
    level_id: str
    question: str
    answers: Tuple[Answer, ...]
    lives: int
    round_score: int = 0
    exhausted: bool = False
    flash_until: Optional[float] = None  # monotonic deadline for the wrong-guess pulse

    @classmethod
    def start(cls, level: Level, lives: int) -> 'RoundState':
        """Fresh round: full lives, zero score, every answer hidden."""
        return cls(
            level_id=level.id,
            question=level.question,
            answers=tuple(Answer(a.text, a.points) for a in level.answers),
            lives=lives,
        )

    @property
    def all_revealed(self) -> bool:
        return all(a.revealed for a in self.answers)

    @property
    def revealed_points(self) -> int:
        return sum(a.points for a in self.answers if a.revealed)


@dataclass
class TeamState:
    """Cumulative team totals for the two-team variant."""
    team1_total: int = 0
    team2_total: int = 0

    def total(self, team: int) -> int:
        return self.team1_total if team == 1 else self.team2_total


@dataclass
class GuessResult:
    """Outcome of one submitted guess."""
    outcome: str  # ignored | hit | miss | exhausted
    guess: str = ''
    revealed: list[str] = field(default_factory=list)
    points: int = 0

    @property
    def is_hit(self) -> bool:
        return self.outcome == 'hit'
