from __future__ import annotations

from tagledger.services.analytics import summarize


def test_seed_command_loads_sample_ledger(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["tagledger-seed", "--username", "alice", "--password", "1234"])

    assert result.exit_code == 0, result.output
    assert "Seeded 29 transactions for alice." in result.output

    services = app.extensions["tagledger"]
    user = services.users.get_by_username("alice")
    rows = services.transactions.list_for_user(user_id=user.user_id)
    assert len(rows) == 29
    assert rows[0].date == "01-01-2025"

    def january(tags: str):
        return summarize(
            user_id=user.user_id,
            start_date="01-01-2025",
            end_date="31-01-2025",
            tags=tags,
            session_factory=services.session_factory,
        )

    assert float(january("").income) == 11000.0
    assert float(january("#water #food").spendings) == -230.0
    assert float(january("#living-place").spendings) == -1863.0
    assert float(january("#water").income) == 0.0


def test_seed_command_reports_duplicate_user(app):
    runner = app.test_cli_runner()
    runner.invoke(args=["tagledger-seed"])

    result = runner.invoke(args=["tagledger-seed"])

    assert result.exit_code != 0
    assert "already exists" in result.output


def test_seed_command_validates_credentials(app):
    result = app.test_cli_runner().invoke(args=["tagledger-seed", "--username", "a b"])

    assert result.exit_code != 0


def test_init_db_command(app):
    result = app.test_cli_runner().invoke(args=["tagledger-init-db"])

    assert result.exit_code == 0
    assert "Database schema ready." in result.output
