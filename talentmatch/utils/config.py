"""Configuration management"""
import os
import yaml
from pathlib import Path
from typing import Dict, Any, List
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONFIG_PATH = "config/config.yaml"


class Config:
    """Application configuration manager"""

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH):
        self.config_path = Path(os.getenv("TALENTMATCH_CONFIG", config_path))
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file"""
        if self.config_path.exists():
            with open(self.config_path, 'r') as f:
                return yaml.safe_load(f) or {}
        return {}

    @property
    def log_level(self) -> str:
        return os.getenv("LOG_LEVEL", self.get("logging.level", "INFO")).upper()

    @property
    def data_path(self) -> str:
        return os.getenv("TALENTMATCH_DATA_PATH", self.get("data.path", "data/sample_pool.yaml"))

    @property
    def skill_vocabulary(self) -> List[str]:
        """Configured skill terms; empty means use the built-in vocabulary"""
        return list(self.get("matching.skill_vocabulary", []))

    @property
    def max_pool_size(self) -> int:
        return int(self.get("matching.max_pool_size", 200))

    @property
    def default_sort(self) -> str:
        return self.get("matching.default_sort", "match")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation"""
        keys = key.split('.')
        value = self._config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

# Global config instance
config = Config()
