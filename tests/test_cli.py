"""
Tests for the command line entry points.
"""

import logging

from click.testing import CliRunner
from flask import Flask

from cli_commands import serve


def test_list_books_command(app):
    result = app.test_cli_runner().invoke(args=["list-books"])
    assert result.exit_code == 0
    assert "4 books" in result.output
    assert "1: Ender's Game by Orson Scott Card" in result.output
    assert "4: Pragmatic Programmer by David Thomas" in result.output


def test_serve_passes_flags_to_server(monkeypatch, caplog):
    calls = {}

    def fake_run(self, **kwargs):
        calls["app"] = self
        calls.update(kwargs)

    monkeypatch.setattr(Flask, "run", fake_run)

    with caplog.at_level(logging.INFO, logger="cli_commands"):
        result = CliRunner().invoke(serve, ["--port", "8081", "--directory", "public/"])

    assert result.exit_code == 0
    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 8081
    assert calls["threaded"] is True
    assert calls["app"].config["STATIC_DIRECTORY"] == "public/"
    assert len(calls["app"].extensions["book_store"]) == 4
    assert "Running on port 8081" in caplog.messages


def test_serve_defaults(monkeypatch):
    calls = {}
    monkeypatch.setattr(Flask, "run", lambda self, **kwargs: calls.update(kwargs, app=self))

    result = CliRunner().invoke(serve, [])

    assert result.exit_code == 0
    assert calls["port"] == 80
    assert calls["app"].config["STATIC_DIRECTORY"] == "../frontend/"


def test_serve_exits_when_listen_fails(monkeypatch):
    def fail(self, **kwargs):
        raise OSError(98, "Address already in use")

    monkeypatch.setattr(Flask, "run", fail)

    result = CliRunner().invoke(serve, ["--port", "8081"])

    assert result.exit_code == 1
    assert "Address already in use" in result.output


def test_serve_rejects_non_integer_port():
    result = CliRunner().invoke(serve, ["--port", "eighty"])
    assert result.exit_code == 2
