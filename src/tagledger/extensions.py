"""Database and repository wiring for the Flask application."""

from __future__ import annotations

from dataclasses import dataclass

from flask import Flask, current_app
from sqlalchemy.engine import Engine

from .config import BaseConfig
from .infra.database import SessionFactory, bootstrap_database
from .infra.repositories import SQLModelTransactionRepository, SQLModelUserRepository

EXTENSION_KEY = "tagledger"


@dataclass
class LedgerServices:
    """Per-app bundle of the engine, session factory and repositories."""

    engine: Engine
    session_factory: SessionFactory
    transactions: SQLModelTransactionRepository
    users: SQLModelUserRepository


def init_db(app: Flask) -> LedgerServices:
    """Create the engine and schema, then attach repositories to the app."""

    config: BaseConfig = app.config["TAGLEDGER_CONFIG"]
    engine, session_factory = bootstrap_database(config)
    services = LedgerServices(
        engine=engine,
        session_factory=session_factory,
        transactions=SQLModelTransactionRepository(session_factory),
        users=SQLModelUserRepository(session_factory),
    )
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services() -> LedgerServices:
    """Return the services bound to the current app."""

    try:
        return current_app.extensions[EXTENSION_KEY]
    except KeyError as exc:  # pragma: no cover - misconfigured app
        raise RuntimeError("Database not initialized; call init_db(app) first") from exc
