from enum import Enum
from typing import List, NamedTuple, Optional

ROWS = 4
COLUMNS = 4

WALL = '⬜'


class Tile(str, Enum):
    EMPTY = '⬛'
    COOKIE = '🍪'
    MILK = '🥛'


class Team(str, Enum):
    COOKIE = 'cookie'
    MILK = 'milk'

    @property
    def tile(self) -> Tile:
        return Tile.COOKIE if self is Team.COOKIE else Tile.MILK

    @classmethod
    def parse(cls, name: str) -> 'Team':
        try:
            return cls(name)
        except ValueError:
            raise InvalidTeam(f'Unknown team {name!r}')


class PlacementError(Exception):
    """A move that was refused. ``board`` holds the rendering to show, if any."""

    def __init__(self, message: str, board: Optional[str] = None):
        super().__init__(message)
        self.board = board


class InvalidTeam(PlacementError):
    pass


class InvalidColumn(PlacementError):
    pass


class GameOver(PlacementError):
    pass


class ColumnFull(PlacementError):
    pass


class Outcome(NamedTuple):
    status: str  # in_progress, won, draw
    winner: Optional[Tile] = None

    @property
    def is_terminal(self) -> bool:
        return self.status != 'in_progress'


IN_PROGRESS = Outcome('in_progress')
DRAW = Outcome('draw')


def _lines():
    """Every row, column and both main diagonals as lists of (row, col)."""
    for r in range(ROWS):
        yield [(r, c) for c in range(COLUMNS)]
    for c in range(COLUMNS):
        yield [(r, c) for r in range(ROWS)]
    yield [(i, i) for i in range(ROWS)]
    yield [(i, COLUMNS - 1 - i) for i in range(ROWS)]


LINES = list(_lines())


class Board:
    """The 4x4 cookie and milk grid.

    Row 0 is the top row. Pieces fall to the lowest empty row of a column.
    The outcome is always computed from the cells, never stored.
    """

    def __init__(self):
        self._cells: List[List[Tile]] = []
        self.reset()

    @classmethod
    def random(cls, rng) -> 'Board':
        """Fill a fresh board with one draw per cell, top row first."""
        board = cls()
        for row in board._cells:
            for c in range(COLUMNS):
                row[c] = Tile.COOKIE if rng.next_bool() else Tile.MILK
        return board

    @classmethod
    def from_rows(cls, rows: List[str]) -> 'Board':
        """Build a board from four strings of 'C', 'M' and '.' (top row first)."""
        symbols = {'C': Tile.COOKIE, 'M': Tile.MILK, '.': Tile.EMPTY}
        if len(rows) != ROWS or any(len(r) != COLUMNS for r in rows):
            raise ValueError('Expected 4 rows of 4 cells')
        board = cls()
        board._cells = [[symbols[ch] for ch in row] for row in rows]
        return board

    def reset(self) -> str:
        self._cells = [[Tile.EMPTY] * COLUMNS for _ in range(ROWS)]
        return self.render()

    def cell(self, row: int, column: int) -> Tile:
        return self._cells[row][column]

    def winner(self) -> Optional[Tile]:
        for line in LINES:
            first = self._cells[line[0][0]][line[0][1]]
            if first is Tile.EMPTY:
                continue
            if all(self._cells[r][c] is first for r, c in line[1:]):
                return first
        return None

    def is_full(self) -> bool:
        return all(tile is not Tile.EMPTY for row in self._cells for tile in row)

    def outcome(self) -> Outcome:
        winner = self.winner()
        if winner is not None:
            return Outcome('won', winner)
        if self.is_full():
            return DRAW
        return IN_PROGRESS

    def place(self, team: Team, column: int) -> str:
        """Drop a piece for ``team`` into ``column`` (1-4) and return the new rendering.

        Raises InvalidColumn, GameOver or ColumnFull without touching the board.
        """
        if isinstance(column, bool) or not isinstance(column, int) or not 1 <= column <= COLUMNS:
            raise InvalidColumn(f'Column must be between 1 and {COLUMNS}, got {column!r}')
        if self.outcome().is_terminal:
            raise GameOver('The game is over', self.render())

        col = column - 1
        for row in reversed(self._cells):
            if row[col] is Tile.EMPTY:
                row[col] = team.tile
                return self.render()
        raise ColumnFull(f'Column {column} is full', self.render())

    def render(self) -> str:
        lines = [WALL + ''.join(tile.value for tile in row) + WALL for row in self._cells]
        lines.append(WALL * (COLUMNS + 2))
        text = '\n'.join(lines) + '\n'

        outcome = self.outcome()
        if outcome.status == 'won':
            text += f'{outcome.winner.value} wins!\n'
        elif outcome.status == 'draw':
            text += 'No winner.\n'
        return text

    def __str__(self):
        return self.render()


def random_snapshot(rng) -> str:
    return Board.random(rng).render()
