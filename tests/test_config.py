import logging

from src.utils.config import configure_logging, get_app_config, get_paths, get_project_root


def test_defaults(monkeypatch):
    for key in ("LOG_LEVEL", "API_TITLE", "API_VERSION", "CLAMP_HOME_VALUE"):
        monkeypatch.delenv(key, raising=False)
    cfg = get_app_config()
    assert cfg.log_level == "INFO"
    assert cfg.api_title == "Homeowners Insurance Cost Estimator"
    assert cfg.api_version == "0.1.0"
    assert cfg.clamp_home_value is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CLAMP_HOME_VALUE", "Yes")
    monkeypatch.setenv("API_TITLE", "")
    cfg = get_app_config()
    assert cfg.log_level == "DEBUG"
    assert cfg.clamp_home_value is True
    # empty string falls back to the default
    assert cfg.api_title == "Homeowners Insurance Cost Estimator"


def test_paths_are_under_project_root():
    root = get_project_root()
    assert (root / "src" / "utils" / "config.py").exists()
    paths = get_paths()
    assert paths.reports_dir == root / "reports"


def test_configure_logging_accepts_unknown_level():
    configure_logging("not-a-level")
    assert logging.getLogger().handlers
