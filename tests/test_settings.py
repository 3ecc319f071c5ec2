from pathlib import Path

from app.settings import Settings, choose_env_file


def test_defaults_point_at_go_web_collection(monkeypatch):
    monkeypatch.delenv("DEFAULT_COLLECTION", raising=False)
    monkeypatch.delenv("PRELOAD_CONTENT", raising=False)
    s = Settings(_env_file=None)
    assert s.DEFAULT_COLLECTION == "go-web"
    assert s.PRELOAD_CONTENT is False


def test_content_root_uses_environment(monkeypatch):
    monkeypatch.setenv("CONTENT_ROOT", "/srv/content")
    assert Settings().CONTENT_ROOT == "/srv/content"


def test_preload_flag_parses_booleans(monkeypatch):
    monkeypatch.setenv("PRELOAD_CONTENT", "true")
    assert Settings().PRELOAD_CONTENT is True


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
