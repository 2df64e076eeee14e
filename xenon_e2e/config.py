"""
E2E Configuration

Run settings are layered the same way for every suite:

1. config/base/e2e.yaml
2. config/environments/{E2E_ENV}.yaml (overrides, optional)
3. config/local/overrides.yaml (overrides, optional, gitignored)
4. E2E_* environment variables

Usage:
    from xenon_e2e.config import load_config

    config = load_config()
    config.base_url
    config.user("admin").email
"""

import copy
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_DIR = BASE_DIR / "config"
CONFIG_NAME = "e2e"


def parse_bool(value: str) -> bool:
    return value.strip().lower() in ("true", "1", "yes", "on")


def parse_int(name: str) -> Callable[[Any], int]:
    def _parse(value: Any) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ConfigError(f"{name}: '{value}' is not a valid integer")

    return _parse


def parse_float(name: str) -> Callable[[Any], float]:
    def _parse(value: Any) -> float:
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ConfigError(f"{name}: '{value}' is not a valid number")

    return _parse


# (env var, key path inside the e2e config, parser)
ENV_OVERRIDES: List[Tuple[str, Tuple[str, ...], Callable[[str], Any]]] = [
    ("E2E_BASE_URL", ("base_url",), str),
    ("E2E_API_LOGIN_PATH", ("api_login_path",), str),
    ("E2E_ADMIN_EMAIL", ("users", "admin", "email"), str),
    ("E2E_ADMIN_PASSWORD", ("users", "admin", "password"), str),
    ("E2E_HEADLESS", ("browser", "headless"), parse_bool),
    ("E2E_SLOW_MO", ("browser", "slow_mo"), parse_int("E2E_SLOW_MO")),
    ("E2E_RECORD_VIDEO", ("browser", "record_video"), parse_bool),
    ("E2E_REQUIRE_APP", ("readiness", "require_app"), parse_bool),
    ("E2E_ARTIFACTS_DIR", ("artifacts_dir",), str),
    ("E2E_LOG_LEVEL", ("log_level",), str),
]


class ConfigLoader:
    """Load and merge configuration from YAML files."""

    def __init__(self, config_dir: Path = DEFAULT_CONFIG_DIR, environment: str = "local"):
        self.config_dir = Path(config_dir)
        self.environment = environment
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load(self, config_name: str) -> Dict[str, Any]:
        """
        Load configuration from YAML files with environment overrides.

        Args:
            config_name: Name of config file (without .yaml extension)

        Returns:
            Merged configuration dictionary

        Raises:
            ConfigError: base file missing or any file not valid YAML
        """
        if config_name in self._cache:
            return self._cache[config_name]

        base_path = self.config_dir / "base" / f"{config_name}.yaml"
        if not base_path.exists():
            raise ConfigError(f"Base config not found: {base_path}")

        config = self._read(base_path).get(config_name) or {}

        env_path = self.config_dir / "environments" / f"{self.environment}.yaml"
        if env_path.exists():
            config = self._merge_config(config, self._read(env_path).get(config_name) or {})
            logger.debug("Applied %s overrides from %s", self.environment, env_path)

        local_path = self.config_dir / "local" / "overrides.yaml"
        if local_path.exists():
            config = self._merge_config(config, self._read(local_path).get(config_name) or {})
            logger.debug("Applied local overrides from %s", local_path)

        self._cache[config_name] = config
        return config

    def _read(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping at top level of {path}")
        return data

    def _merge_config(self, base: Dict, override: Dict) -> Dict:
        """Deep merge override config into base config."""
        result = base.copy()
        for key, value in (override or {}).items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result


def apply_env_overrides(config: Dict[str, Any], environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """Return a copy of config with E2E_* environment variables applied."""
    environ = os.environ if environ is None else environ
    result = copy.deepcopy(config)
    for env_name, key_path, parser in ENV_OVERRIDES:
        raw = environ.get(env_name)
        if raw is None:
            continue
        node = result
        for key in key_path[:-1]:
            if not isinstance(node.get(key), dict):
                node[key] = {}
            node = node[key]
        node[key_path[-1]] = parser(raw)
    return result


@dataclass
class UserCredentials:
    """Credentials of a user seeded in the application under test."""

    email: str
    password: str
    role: str = "admin"


@dataclass
class E2EConfig:
    """Resolved E2E run configuration. Timeouts are in milliseconds."""

    base_url: str
    users: Dict[str, UserCredentials]
    api_login_path: str = "/api/AuthApi/login"

    default_timeout: int = 30000
    navigation_timeout: int = 60000
    toast_timeout: int = 5000
    download_timeout: int = 5000
    viewer_timeout: int = 10000

    headless: bool = True
    slow_mo: int = 0
    record_video: bool = False
    viewport: Dict[str, int] = field(default_factory=lambda: {"width": 1280, "height": 720})
    mobile_viewport: Dict[str, int] = field(default_factory=lambda: {"width": 375, "height": 667})

    readiness_timeout: float = 30.0
    readiness_interval: float = 0.5
    require_app: bool = False

    artifacts_dir: Path = BASE_DIR / "tests" / "e2e" / "artifacts"
    log_level: str = "INFO"
    environment: str = "local"

    def user(self, name: str = "admin") -> UserCredentials:
        try:
            return self.users[name]
        except KeyError:
            raise ConfigError(f"No user '{name}' configured (have: {sorted(self.users)})")

    def url(self, path: str = "") -> str:
        """Absolute URL for a route relative to the base URL."""
        return f"{self.base_url}{path}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any], environment: str = "local") -> "E2EConfig":
        if not data.get("base_url"):
            raise ConfigError("base_url is required")

        users = {}
        for name, raw in (data.get("users") or {}).items():
            if not raw or not raw.get("email") or raw.get("password") is None:
                raise ConfigError(f"User '{name}' needs an email and a password")
            users[name] = UserCredentials(
                email=raw["email"], password=str(raw["password"]), role=raw.get("role", name)
            )

        timeouts = data.get("timeouts") or {}
        browser = data.get("browser") or {}
        readiness = data.get("readiness") or {}

        artifacts_dir = Path(data.get("artifacts_dir", "tests/e2e/artifacts"))
        if not artifacts_dir.is_absolute():
            artifacts_dir = BASE_DIR / artifacts_dir

        return cls(
            base_url=str(data["base_url"]).rstrip("/"),
            users=users,
            api_login_path=data.get("api_login_path", "/api/AuthApi/login"),
            default_timeout=parse_int("timeouts.default")(timeouts.get("default", 30000)),
            navigation_timeout=parse_int("timeouts.navigation")(timeouts.get("navigation", 60000)),
            toast_timeout=parse_int("timeouts.toast")(timeouts.get("toast", 5000)),
            download_timeout=parse_int("timeouts.download")(timeouts.get("download", 5000)),
            viewer_timeout=parse_int("timeouts.viewer")(timeouts.get("viewer", 10000)),
            headless=bool(browser.get("headless", True)),
            slow_mo=parse_int("browser.slow_mo")(browser.get("slow_mo", 0)),
            record_video=bool(browser.get("record_video", False)),
            viewport=dict(browser.get("viewport") or {"width": 1280, "height": 720}),
            mobile_viewport=dict(browser.get("mobile_viewport") or {"width": 375, "height": 667}),
            readiness_timeout=parse_float("readiness.timeout")(readiness.get("timeout", 30)),
            readiness_interval=parse_float("readiness.interval")(readiness.get("interval", 0.5)),
            require_app=bool(readiness.get("require_app", False)),
            artifacts_dir=artifacts_dir,
            log_level=str(data.get("log_level", "INFO")).upper(),
            environment=environment,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "environment": self.environment,
            "base_url": self.base_url,
            "users": sorted(self.users),
            "headless": self.headless,
            "slow_mo": self.slow_mo,
            "default_timeout": self.default_timeout,
            "require_app": self.require_app,
        }


def load_config(
    config_dir: Optional[Path] = None,
    environment: Optional[str] = None,
    environ: Optional[Dict[str, str]] = None,
) -> E2EConfig:
    """Build the E2E configuration from YAML layers and the environment."""
    environ = os.environ if environ is None else environ
    config_dir = Path(config_dir or environ.get("E2E_CONFIG_DIR") or DEFAULT_CONFIG_DIR)
    environment = environment or environ.get("E2E_ENV", "local")

    raw = ConfigLoader(config_dir, environment).load(CONFIG_NAME)
    raw = apply_env_overrides(raw, environ)
    config = E2EConfig.from_dict(raw, environment=environment)
    logger.debug("Loaded E2E config: %s", config.to_dict())
    return config
