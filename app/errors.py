"""JSON error handlers shared by every blueprint."""

from flask import jsonify
from werkzeug.exceptions import HTTPException


def register_error_handlers(app):

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        # redirects raised as exceptions (e.g. routing's 308) keep their Location
        if e.code is not None and e.code < 400:
            return e.get_response()
        return jsonify({'error': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.exception("Unhandled error: %s", e)
        return jsonify({'error': 'Internal server error'}), 500
