"""Translate application errors into JSON responses."""

from __future__ import annotations

from flask import Flask, jsonify

from .errors import StorageError, TagLedgerError, ValidationError
from .logging_config import get_logger

logger = get_logger(__name__)


def register_error_handlers(app: Flask) -> None:
    """Install one handler per error family."""

    @app.errorhandler(ValidationError)
    def _validation_error(error: ValidationError):
        return jsonify({"message": error.message, "errors": error.errors}), error.status_code

    @app.errorhandler(StorageError)
    def _storage_error(error: StorageError):
        logger.error("Storage failure surfaced to client", exc_info=error)
        return jsonify({"message": StorageError.PUBLIC_MESSAGE}), 500

    @app.errorhandler(TagLedgerError)
    def _application_error(error: TagLedgerError):
        return jsonify({"message": error.message}), error.status_code
