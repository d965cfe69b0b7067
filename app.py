from flask import Flask

from config import Config
from models import BookStore
from seed_data import seed_store


def create_app(config_class=Config):
    # Static files are served by routes.static
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_class)

    # Keep record fields in declaration order
    app.json.sort_keys = False

    store = BookStore()
    seed_store(store)
    app.extensions['book_store'] = store

    from routes import main, books, static
    app.register_blueprint(main.bp)
    app.register_blueprint(books.bp)
    app.register_blueprint(static.bp)

    # Register CLI commands
    from cli_commands import register_commands
    register_commands(app)

    return app


if __name__ == '__main__':
    from cli_commands import serve
    serve()
