from .logging_config import LoggingConfig, get_logger

HOST = "0.0.0.0"
PORT = 8080
LOGS_DIR = "logs"

STATUS = "secure"
VERSION = "1.0.0"


class AppConfig:
    def __init__(self, logs_dir: str = LOGS_DIR):
        self.host = HOST
        self.port = PORT

        self.logging_config = LoggingConfig(logs_dir)
        self.logging_config.setup_logging()
        self.logger = get_logger(__name__)

_app_config = None

def get_app_config() -> AppConfig:
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config
