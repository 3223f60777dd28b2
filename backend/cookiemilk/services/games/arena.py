import threading
from typing import NamedTuple, Optional

from .board import Board, Outcome, PlacementError, Team, random_snapshot
from .random_source import DEFAULT_SEED, RandomSource


class PlaceResult(NamedTuple):
    board: Optional[str]
    outcome: Optional[Outcome] = None
    error: Optional[PlacementError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class GameArena:
    """Process-wide owner of the live board and the shared random source.

    Each resource has its own lock and is only reached through these methods.
    """

    def __init__(self, seed: int = DEFAULT_SEED):
        self._seed = seed
        self._board = Board()
        self._board_lock = threading.Lock()
        self._rng = RandomSource(seed)
        self._rng_lock = threading.Lock()

    def init_app(self, app) -> None:
        self._seed = int(app.config.get('RANDOM_SEED', DEFAULT_SEED))
        app.extensions['arena'] = self
        self.reset()

    @property
    def seed(self) -> int:
        return self._seed

    def board(self) -> str:
        with self._board_lock:
            return self._board.render()

    def reset(self) -> str:
        # Board first, then the generator; the two are not updated atomically.
        with self._board_lock:
            rendered = self._board.reset()
        with self._rng_lock:
            self._rng.seed(self._seed)
        return rendered

    def place(self, team: Team, column: int) -> PlaceResult:
        with self._board_lock:
            try:
                rendered = self._board.place(team, column)
                return PlaceResult(rendered, self._board.outcome())
            except PlacementError as exc:
                return PlaceResult(exc.board, error=exc)

    def random_board(self) -> str:
        # The whole 16-draw fill runs under the lock so snapshots never interleave.
        with self._rng_lock:
            return random_snapshot(self._rng)
