from flask import Flask
from flask_cors import CORS
import click
from config import Config
from cookiemilk.services.games.arena import GameArena

arena = GameArena()

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS', []))

    # Resets the board and seeds the random source
    arena.init_app(flask_app)

    # Import and register blueprints here
    from cookiemilk.main import main
    flask_app.register_blueprint(main)

    from cookiemilk.api.board import board
    flask_app.register_blueprint(board, url_prefix='/12')

    @click.command('board-show')
    def board_show_command():
        """Prints the current board."""
        click.echo(arena.board(), nl=False)

    @click.command('board-reset')
    def board_reset_command():
        """Clears the board and reseeds the random source."""
        click.echo(arena.reset(), nl=False)
        flask_app.logger.info(f"[reset] board cleared from cli seed={arena.seed}")

    @click.command('random-board')
    def random_board_command():
        """Prints a randomly filled board."""
        click.echo(arena.random_board(), nl=False)

    flask_app.cli.add_command(board_show_command)
    flask_app.cli.add_command(board_reset_command)
    flask_app.cli.add_command(random_board_command)

    return flask_app
