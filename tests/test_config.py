"""Tests for configuration utilities."""

from pathlib import Path

from uigen.util.config import (
    DEFAULT_APP_URL,
    DEFAULT_SERVER_URL,
    resolve_anon_work_path,
    resolve_app_url,
    resolve_server_url,
)


def test_server_url_default():
    assert resolve_server_url() == DEFAULT_SERVER_URL


def test_server_url_env_and_argument(monkeypatch):
    monkeypatch.setenv("UIGEN_SERVER_URL", "http://api:9000/")
    assert resolve_server_url() == "http://api:9000"
    assert resolve_server_url("http://override/") == "http://override"


def test_app_url_default_and_env(monkeypatch):
    assert resolve_app_url() == DEFAULT_APP_URL
    monkeypatch.setenv("UIGEN_APP_URL", "https://app.example.com/")
    assert resolve_app_url() == "https://app.example.com"


def test_anon_work_path_argument(tmp_path):
    path, reason = resolve_anon_work_path(tmp_path / "anon.json")
    assert path == (tmp_path / "anon.json").resolve()
    assert reason == "argument"


def test_anon_work_path_env(monkeypatch, tmp_path):
    monkeypatch.setenv("UIGEN_ANON_WORK_PATH", str(tmp_path / "env.json"))
    path, reason = resolve_anon_work_path()
    assert path == (tmp_path / "env.json").resolve()
    assert reason == "env:UIGEN_ANON_WORK_PATH"


def test_anon_work_path_default(monkeypatch):
    monkeypatch.delenv("UIGEN_ANON_WORK_PATH", raising=False)
    path, reason = resolve_anon_work_path()
    assert path == Path.home() / ".uigen" / "anon_work.json"
    assert reason == "default"
