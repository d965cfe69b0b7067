import re

from flask import Blueprint

from models import get_book_store
from routes.handler import HandlerError, json_handler

bp = Blueprint('books', __name__, url_prefix='/books')

# Optional sign followed by ASCII digits, nothing else
INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')

# Ids are signed 64-bit integers
MIN_BOOK_ID = -2 ** 63
MAX_BOOK_ID = 2 ** 63 - 1


def parse_book_id(param: str) -> int:
    if not INTEGER_PATTERN.fullmatch(param):
        raise HandlerError(
            'Id should be an integer', 400,
            cause=ValueError(f'invalid book id: {param!r}')
        )
    try:
        book_id = int(param)
    except ValueError as e:
        # Digit strings past sys.get_int_max_str_digits()
        raise HandlerError('Id should be an integer', 400, cause=e)
    if not MIN_BOOK_ID <= book_id <= MAX_BOOK_ID:
        raise HandlerError(
            'Id should be an integer', 400,
            cause=ValueError(f'book id out of range: {param}')
        )
    return book_id


@bp.route('', methods=['GET'])
@json_handler
def list_books():
    return get_book_store().list_all()


@bp.route('/<book_id>', methods=['GET'])
@json_handler
def get_book(book_id):
    book = get_book_store().find_by_id(parse_book_id(book_id))
    if book is None:
        raise HandlerError(f'Could not find book {book_id}', 404)
    return book
