import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv, find_dotenv

from .constants import (
    APP_NAME,
    DATA_DIR_NAME,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_SUPPLIERS,
    SUPPLIERS_FILENAME,
)
from .errors import ConfigurationError


@dataclass(frozen=True)
class Settings:
    """Resolved runtime configuration for the bot."""
    app_name: str = APP_NAME
    data_dir: Path = Path(DATA_DIR_NAME)
    supplier_seed: tuple = DEFAULT_SUPPLIERS
    port: int = DEFAULT_PORT
    bot_token: Optional[str] = None        # xoxb-...
    app_token: Optional[str] = None        # xapp-... with connections:write (Socket Mode)
    signing_secret: Optional[str] = None   # HTTP mode request verification
    log_level: str = DEFAULT_LOG_LEVEL
    verify_token: bool = True              # Bolt calls auth.test on startup when True

    @property
    def suppliers_file(self) -> Path:
        return self.data_dir / SUPPLIERS_FILENAME

    @property
    def slack_enabled(self) -> bool:
        return bool(self.bot_token)

    @property
    def socket_mode_enabled(self) -> bool:
        return bool(self.bot_token and self.app_token)


def parse_supplier_seed(raw: Optional[str]) -> tuple:
    """Parse a comma-separated supplier seed (e.g. "OHC, Bospeed,,TDD").

    Entries are trimmed and empty ones dropped. An unset value falls back to
    DEFAULT_SUPPLIERS, as does an empty string.
    """
    if not raw:
        return DEFAULT_SUPPLIERS
    return tuple(name.strip() for name in raw.split(',') if name.strip())


def _parse_port(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid PORT value: {raw!r}")
    if not 0 < port < 65536:
        raise ConfigurationError(f"PORT out of range: {port}")
    return port


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from environment variables.

    When no mapping is given, a .env file (if any) is loaded into os.environ
    first and os.environ is used.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    data_dir = environ.get('DATA_DIR') or os.path.join(os.getcwd(), DATA_DIR_NAME)

    return Settings(
        app_name=environ.get('APP_NAME') or APP_NAME,
        data_dir=Path(data_dir),
        supplier_seed=parse_supplier_seed(environ.get('SUPPLIERS')),
        port=_parse_port(environ.get('PORT')),
        bot_token=environ.get('SLACK_BOT_TOKEN') or None,
        app_token=environ.get('SLACK_APP_TOKEN') or None,
        signing_secret=environ.get('SLACK_SIGNING_SECRET') or None,
        log_level=(environ.get('LOG_LEVEL') or DEFAULT_LOG_LEVEL).upper(),
    )


def configure_logging(settings: Settings):
    """Configure root logging for the process from settings.log_level."""
    level = getattr(logging, settings.log_level, None)
    if not isinstance(level, int):
        raise ConfigurationError(f"Invalid LOG_LEVEL value: {settings.log_level!r}")
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
