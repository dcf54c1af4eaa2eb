"""Flask CLI commands for TagLedger."""

from __future__ import annotations

import click

from .errors import TagLedgerError
from .validation import check_password, check_username


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("tagledger-init-db")
    def tagledger_init_db() -> None:
        """Create the database schema if it does not exist yet."""

        from .extensions import get_services
        from .infra.database import init_database

        init_database(get_services().engine)
        click.echo("Database schema ready.")

    @app.cli.command("tagledger-seed")
    @click.option("--username", default="alice", show_default=True, help="Demo account name")
    @click.option("--password", default="1234", show_default=True, help="Demo account password")
    def tagledger_seed(username: str, password: str) -> None:
        """Create a demo user with a month of sample transactions."""

        from .extensions import get_services
        from .services.seed import seed_demo_user

        if not check_username(username):
            raise click.BadParameter("Invalid username format.", param_hint="--username")
        if not check_password(password):
            raise click.BadParameter("Invalid password format.", param_hint="--password")

        services = get_services()
        try:
            summary = seed_demo_user(
                username=username,
                password=password,
                users=services.users,
                transactions=services.transactions,
            )
        except TagLedgerError as exc:
            raise click.ClickException(exc.message) from exc
        click.echo(f"Seeded {summary.transactions} transactions for {summary.username}.")
