"""Round state machine for the feud board.

A round moves from in-progress to one of two terminal states:

    - completed: every answer revealed by matching guesses
    - exhausted: a miss took lives below zero, so the rest were force-revealed

Only explicit navigation (go_to_level, next_level, restart) leaves a
terminal state.
"""

import logging
import time
from typing import Callable, Optional

from .catalog import LevelCatalog, LevelNotFoundError
from .config import get_starting_lives, get_wrong_flash_seconds
from .constants import (
    OUTCOME_EXHAUSTED,
    OUTCOME_HIT,
    OUTCOME_IGNORED,
    OUTCOME_MISS,
    STARTING_LIVES,
    TEAMS,
)
from .matching import matches
from .models import GuessResult, RoundState, TeamState

logger = logging.getLogger('feud.round')

Listener = Callable[['RoundController'], None]


class RoundController:
    """
    Owns the round in play and the team totals.

    All state changes go through the methods below; subscribed listeners
    are called after each one so a presentation layer can re-render from
    snapshot().
    """

    def __init__(
        self,
        catalog: LevelCatalog,
        mode: str = 'single',
        level_id: Optional[str] = None,
        lives: Optional[int] = None,
        flash_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize the controller and start the first round.

        Args:
            catalog: Levels available to play
            mode: 'single' or 'team'
            level_id: Level to start on (default: first in catalog)
            lives: Starting lives per round (default: from config for the mode)
            flash_seconds: Wrong-guess pulse duration (default: from config)
            clock: Monotonic time source for the wrong-guess pulse
        """
        if mode not in STARTING_LIVES:
            raise ValueError(f'Unknown mode: {mode}')

        self.catalog = catalog
        self.mode = mode
        self.starting_lives = get_starting_lives(mode) if lives is None else lives
        self.flash_seconds = get_wrong_flash_seconds() if flash_seconds is None else flash_seconds
        self._clock = clock
        self._listeners: list[Listener] = []
        self.teams = TeamState() if mode == 'team' else None
        self.guess_input = ''

        level = catalog.get(level_id) if level_id is not None else catalog.first()
        self.state = RoundState.start(level, self.starting_lives)

    # --- Observation ------------------------------------------------------

    @property
    def is_team_mode(self) -> bool:
        return self.teams is not None

    @property
    def level_id(self) -> str:
        return self.state.level_id

    @property
    def question(self) -> str:
        return self.state.question

    @property
    def answers(self):
        return self.state.answers

    @property
    def round_score(self) -> int:
        return self.state.round_score

    @property
    def lives(self) -> int:
        return self.state.lives

    @property
    def is_exhausted(self) -> bool:
        return self.state.exhausted

    @property
    def wrong_flash_active(self) -> bool:
        deadline = self.state.flash_until
        return deadline is not None and self._clock() < deadline

    @property
    def is_round_complete(self) -> bool:
        # Lives at exactly zero end the round for display and award purposes;
        # force-reveal waits for the next miss (lives < 0).
        return self.state.lives == 0 or self.state.all_revealed

    @property
    def can_award(self) -> bool:
        return self.is_team_mode and self.is_round_complete and self.state.round_score > 0

    def subscribe(self, listener: Listener) -> None:
        """Register a callback invoked after every state change."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self)

    def snapshot(self) -> dict:
        """
        Read-only view of the board for rendering.

        Hidden answers carry None for text and points so nothing leaks
        to the display before it is revealed.
        """
        view = {
            'level_id': self.state.level_id,
            'question': self.state.question,
            'answers': [
                {
                    'text': a.text if a.revealed else None,
                    'points': a.points if a.revealed else None,
                    'revealed': a.revealed,
                }
                for a in self.state.answers
            ],
            'round_score': self.state.round_score,
            'lives': self.state.lives,
            'wrong_flash': self.wrong_flash_active,
            'round_complete': self.is_round_complete,
            'exhausted': self.state.exhausted,
            'can_award': self.can_award,
        }
        if self.teams is not None:
            view['team1_total'] = self.teams.team1_total
            view['team2_total'] = self.teams.team2_total
        return view

    # --- Guessing ---------------------------------------------------------

    def set_guess_input(self, text: str) -> None:
        self.guess_input = text

    def _reveal(self, index: int) -> None:
        # Copy-on-write: a new tuple with exactly one entry flipped
        answers = self.state.answers
        self.state.answers = answers[:index] + (answers[index].reveal(),) + answers[index + 1:]

    def submit_guess(self, raw: Optional[str] = None) -> GuessResult:
        """
        Process one guess against the hidden answers.

        Every unrevealed answer the guess matches is revealed and scored.
        A guess matching nothing costs a life; once lives drop below zero
        the remaining answers are revealed without points. Blank guesses
        and guesses after exhaustion are ignored. The guess input is
        cleared either way.

        Args:
            raw: Guess text (default: the pending guess input)

        Returns:
            GuessResult describing what happened
        """
        guess = self.guess_input if raw is None else raw
        self.guess_input = ''

        if not guess.strip() or self.state.lives < 0:
            logger.debug(f'Ignoring guess {guess!r}')
            return GuessResult(outcome=OUTCOME_IGNORED, guess=guess)

        result = GuessResult(outcome=OUTCOME_HIT, guess=guess)
        for index, answer in enumerate(self.state.answers):
            if answer.revealed or not matches(guess, answer.text):
                continue
            self._reveal(index)
            self.state.round_score += answer.points
            result.revealed.append(answer.text)
            result.points += answer.points

        if result.revealed:
            logger.info(f'{guess!r} revealed {", ".join(result.revealed)} (+{result.points})')
        else:
            self._miss(result)

        self._notify()
        return result

    def _miss(self, result: GuessResult) -> None:
        self.state.lives -= 1
        result.outcome = OUTCOME_MISS
        logger.info(f'Miss on {result.guess!r}, {self.state.lives} lives left')

        if self.state.lives < 0:
            for index, answer in enumerate(self.state.answers):
                if not answer.revealed:
                    self._reveal(index)
            self.state.exhausted = True
            result.outcome = OUTCOME_EXHAUSTED
            logger.info(f'Lives exhausted on {self.state.level_id}, board revealed')

        self.state.flash_until = self._clock() + self.flash_seconds

    def reveal_all(self) -> None:
        """Show every answer without scoring it or touching lives."""
        for index, answer in enumerate(self.state.answers):
            if not answer.revealed:
                self._reveal(index)
        logger.info(f'All answers revealed on {self.state.level_id}')
        self._notify()

    # --- Navigation -------------------------------------------------------

    def go_to_level(self, level_id: str) -> bool:
        """
        Start a fresh round on the given level.

        Any unawarded round score is forfeited. An unknown id is logged
        and leaves the current round untouched.

        Returns:
            True if the level was loaded
        """
        try:
            level = self.catalog.get(level_id)
        except LevelNotFoundError as e:
            logger.warning(f'Cannot navigate: {e}')
            return False

        if self.state.round_score:
            logger.info(f'Leaving {self.state.level_id} with {self.state.round_score} unawarded points')
        self.state = RoundState.start(level, self.starting_lives)
        self.guess_input = ''
        logger.info(f'Started level {level.id}: {level.question}')
        self._notify()
        return True

    def next_level(self) -> bool:
        """Move to the next level in catalog order, wrapping around."""
        return self.go_to_level(self.catalog.next_id(self.state.level_id))

    def restart(self) -> bool:
        """Replay the current level from scratch."""
        return self.go_to_level(self.state.level_id)

    # --- Teams ------------------------------------------------------------

    def award_team(self, team: int) -> bool:
        """
        Credit the round score to a team.

        Only allowed in team mode once the round is complete and has
        points. Board and lives are left as they are.

        Args:
            team: 1 or 2

        Returns:
            True if points were awarded

        Raises:
            ValueError: If team is not 1 or 2
        """
        if team not in TEAMS:
            raise ValueError(f'Team must be 1 or 2, got {team}')

        if self.teams is None:
            logger.debug('Award ignored outside team mode')
            return False

        if not self.is_round_complete or self.state.round_score <= 0:
            logger.debug(
                f'Award to team {team} ignored (complete={self.is_round_complete}, '
                f'score={self.state.round_score})'
            )
            return False

        points = self.state.round_score
        if team == 1:
            self.teams.team1_total += points
        else:
            self.teams.team2_total += points
        self.state.round_score = 0
        logger.info(f'Team {team} awarded {points} points (total {self.teams.total(team)})')
        self._notify()
        return True
