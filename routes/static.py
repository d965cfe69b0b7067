"""
Static file delivery.
Serves files from STATIC_DIRECTORY under the /static prefix, with the same
index, redirect and directory listing rules as a plain file server.
"""

import os
import posixpath

from flask import Blueprint, abort, current_app, redirect, render_template_string, request, send_from_directory
from werkzeug.security import safe_join

bp = Blueprint('static_files', __name__, url_prefix='/static')

INDEX_FILE = 'index.html'

LISTING_TEMPLATE = """<!doctype html>
<meta name="viewport" content="width=device-width">
<pre>
{% for name in names %}<a href="{{ name|urlencode }}">{{ name }}</a>
{% endfor %}</pre>
"""


def static_root() -> str:
    # Relative to the working directory, not app.root_path
    return os.path.abspath(current_app.config['STATIC_DIRECTORY'])


def list_directory(path: str):
    """Render a sorted list of links to the entries of a directory."""
    names = []
    with os.scandir(path) as entries:
        for entry in entries:
            names.append(entry.name + '/' if entry.is_dir() else entry.name)
    names.sort()
    return render_template_string(LISTING_TEMPLATE, names=names)


@bp.route('/', defaults={'filename': ''})
@bp.route('/<path:filename>')
def serve(filename):
    # Canonical URL for an index page is its directory
    if request.path.endswith('/' + INDEX_FILE):
        return redirect(request.path[:-len(INDEX_FILE)], code=301)

    root = static_root()
    target = safe_join(root, filename)
    if target is None:
        abort(404)

    if os.path.isdir(target):
        if filename and not filename.endswith('/'):
            return redirect(request.path + '/', code=301)
        if not os.path.isfile(os.path.join(target, INDEX_FILE)):
            return list_directory(target)
        filename = posixpath.join(filename, INDEX_FILE)

    return send_from_directory(root, filename)
