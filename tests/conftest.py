"""Shared test setup: keep service log files out of the working tree."""
import tempfile

from status_service import config as app_config


def pytest_configure(config):
    if app_config._app_config is None:
        logs_dir = tempfile.mkdtemp(prefix="status_service_logs_")
        app_config._app_config = app_config.AppConfig(logs_dir=logs_dir)
