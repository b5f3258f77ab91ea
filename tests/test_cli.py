from __future__ import annotations

from typer.testing import CliRunner

from friendnet.cli import app

runner = CliRunner()


def test_shell_runs_batch_file(tmp_path):
    batch = tmp_path / "commands.txt"
    batch.write_text(
        "add_user alice\n"
        "add_user bob\n"
        "make_friends alice bob\n"
        "post alice bob hi bob\n"
        "profile bob\n"
        "quit\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["shell", str(batch)])

    assert result.exit_code == 0
    assert "Name: bob" in result.output
    assert "From: alice" in result.output
    assert "hi bob" in result.output


def test_shell_reads_stdin():
    result = runner.invoke(app, ["shell"], input="add_user alice\nlist_users\n")

    assert result.exit_code == 0
    assert "User List" in result.output
    assert "    alice" in result.output


def test_shell_missing_batch_file(tmp_path):
    result = runner.invoke(app, ["shell", str(tmp_path / "nope.txt")])

    assert result.exit_code == 1
    assert "Batch file not found" in result.output


def test_missing_batch_file_path_is_not_markup(tmp_path):
    missing = tmp_path / "[bold]nope.txt"

    result = runner.invoke(app, ["shell", str(missing)])

    assert result.exit_code == 1
    assert "[bold]nope.txt" in result.output
