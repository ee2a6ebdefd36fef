# flake8: noqa
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

from recipeshare.config import Env, Settings
from recipeshare.logging_config import setup_logging


def test_defaults():
    s = Settings()
    assert s.api_prefix == "/api/recipes"
    assert s.env == Env.local
    assert s.seed_file is None


def test_reads_prefixed_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("RECIPESHARE_ENV", "prod")
    monkeypatch.setenv("RECIPESHARE_PORT", "9001")
    monkeypatch.setenv("RECIPESHARE_CORS_ORIGINS", '["http://localhost:3000"]')
    monkeypatch.setenv("RECIPESHARE_SEED_FILE", str(tmp_path / "seed.json"))
    s = Settings()
    assert s.env == Env.prod
    assert s.port == 9001
    assert s.cors_origins == ["http://localhost:3000"]
    assert s.seed_file == tmp_path / "seed.json"


def test_setup_logging_configures_root_once(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    logfile = tmp_path / "recipeshare.log"
    setup_logging("debug", logfile)
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2

    setup_logging("error")
    assert len(root.handlers) == 2
    assert root.level == logging.DEBUG

    for h in root.handlers:
        h.close()
