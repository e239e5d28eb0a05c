import tomllib
from pathlib import Path

from pydantic import ValidationError

from nolint_linter.config import RuleConfig

from .models import NolintlintSettings

DEFAULT_CONFIG_FILE = Path(".nolintlint.toml")


class ConfigError(ValueError):
    """Raised when the configuration file cannot be used"""


class LintConfig:
    """Handles loading and validation of .nolintlint.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        self.settings = NolintlintSettings()

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"{path}: invalid TOML: {e}") from e

        lint_data = data.get("tool", {}).get("nolintlint", {})
        try:
            self.settings = NolintlintSettings.model_validate(lint_data)
        except ValidationError as e:
            raise ConfigError(f"{path}: invalid [tool.nolintlint] settings:\n{e}") from e

    def to_rule_config(self, report_unused: bool = False) -> RuleConfig:
        settings = self.settings
        if report_unused:
            settings = settings.model_copy(update={"allow_unused": False})
        return settings.to_rule_config()
