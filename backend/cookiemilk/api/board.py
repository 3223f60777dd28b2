from flask import Blueprint, Response, current_app
from cookiemilk import arena
from cookiemilk.services.games.board import ColumnFull, GameOver, InvalidTeam, Team


board = Blueprint('board', __name__)

# Refused moves that still show the board
_CONFLICT_ERRORS = (GameOver, ColumnFull)


def _text(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype='text/plain')


@board.route('/board', methods=['GET'])
def get_board():
    return _text(arena.board())


@board.route('/reset', methods=['POST'])
def reset_board():
    rendered = arena.reset()
    current_app.logger.info(f"[reset] board cleared seed={arena.seed}")
    return _text(rendered)


@board.route('/place/<string:team>/<string:column>', methods=['POST'])
def place(team, column):
    try:
        side = Team.parse(team)
    except InvalidTeam:
        return _text('', 400)
    try:
        col = int(column)
    except ValueError:
        return _text('', 400)

    result = arena.place(side, col)
    if result.ok:
        current_app.logger.debug(f"[place] team={side.value} column={col}")
        if result.outcome.is_terminal:
            current_app.logger.info(f"[game-over] status={result.outcome.status} {result.board.splitlines()[-1]}")
        return _text(result.board)

    if isinstance(result.error, _CONFLICT_ERRORS):
        current_app.logger.info(f"[place] refused team={side.value} column={col}: {result.error}")
        return _text(result.board, 503)
    return _text('', 400)


@board.route('/random-board', methods=['GET'])
def random_board():
    rendered = arena.random_board()
    current_app.logger.debug("[random-board] generated")
    return _text(rendered)
