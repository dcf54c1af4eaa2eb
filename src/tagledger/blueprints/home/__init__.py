"""Service health blueprint."""

from __future__ import annotations

from flask import Blueprint, jsonify

bp = Blueprint("home", __name__)


@bp.get("/health")
def health():
    return jsonify({"status": "ok"}), 200


__all__ = ["bp"]
