"""
Command line entry points.
`serve` runs the HTTP server; `flask list-books` prints the bootstrapped library.
"""

import logging
import sys

import click

from config import Config
from models import get_book_store

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def register_commands(app):
    """Register custom CLI commands with the Flask app"""

    @app.cli.command('list-books')
    def list_books():
        """Print every book in the store"""
        books = get_book_store().list_all()
        click.echo(f"📚 {len(books)} books")
        for book in books:
            click.echo(f"{book.id}: {book.title} by {book.author}")


@click.command()
@click.option('--port', type=int, default=Config.PORT, show_default=True, help='port to serve on')
@click.option('--directory', type=str, default=Config.STATIC_DIRECTORY, show_default=True,
              help='directory of web files')
def serve(port, directory):
    """Serve the book API and static files until interrupted"""
    from app import create_app

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    app = create_app()
    app.config.update(PORT=port, STATIC_DIRECTORY=directory)

    logger.info(f"Running on port {port}")

    try:
        # Blocks until the process is terminated
        app.run(host=app.config['HOST'], port=port, threaded=True)
    except OSError as e:
        click.echo(str(e), err=True)
        sys.exit(1)
