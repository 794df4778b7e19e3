"""Tests for the command-line entry point."""

from sqlalchemy import create_engine, inspect
from typer.testing import CliRunner

from slycms.cli import app

runner = CliRunner()


def test_init_creates_schema_and_exits(tmp_path):
    db_path = tmp_path / "init.db"
    result = runner.invoke(app, ["-db", str(db_path), "-init"])

    assert result.exit_code == 0, result.output
    engine = create_engine(f"sqlite:///{db_path}")
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()
    assert {"articles", "profile"} <= tables


def test_init_is_repeatable(tmp_path):
    db_path = tmp_path / "twice.db"
    assert runner.invoke(app, ["-db", str(db_path), "-init"]).exit_code == 0
    assert runner.invoke(app, ["--db", str(db_path), "--init"]).exit_code == 0


def test_broken_template_is_fatal(tmp_path):
    layout = tmp_path / "broken.html"
    layout.write_text("{% if %}", encoding="utf-8")
    result = runner.invoke(app, ["-db", str(tmp_path / "x.db"), "-template", str(layout)])
    assert result.exit_code == 1
