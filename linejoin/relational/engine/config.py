import os
import copy
import yaml
from typing import Dict, Any, List, Optional
import logging

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LINEJOIN_CONFIG"

# Default configuration
DEFAULT_CONFIG = {
    "schema": {
        "fill_value": 0
    },
    "line_join": {
        "validate_path": True,
        "default_strategy": "reduction"
    },
    "experiments": {
        "seed": None,
        "repeats": 1,
        "progress": True
    }
}


def _merge(target: Dict, source: Dict) -> None:
    """Merge source into target in place; nested mappings merge key by key."""
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            _merge(existing, value)
        else:
            target[key] = value


class Config:
    """
    Settings shared by the relational model, the join engine and the
    experiment driver.

    One instance exists per process. It starts from DEFAULT_CONFIG, then
    merges the YAML file named by $LINEJOIN_CONFIG if that variable is set.
    Values are addressed with dotted paths such as 'line_join.validate_path'.
    """

    _instance = None
    _config_dict = None
    _config_file = None

    @classmethod
    def get_instance(cls) -> 'Config':
        if cls._instance is None:
            cls._instance = Config()
            env_file = os.environ.get(CONFIG_ENV_VAR)
            if env_file:
                cls._instance.load_from_file(env_file)
        return cls._instance

    def __init__(self):
        if Config._instance is not None:
            raise RuntimeError("Config is a singleton. Use Config.get_instance() instead.")
        self._config_dict = copy.deepcopy(DEFAULT_CONFIG)

    def load_from_file(self, config_file: str) -> bool:
        """
        Merge a YAML mapping over the current settings.

        Problems with the file are logged and leave the settings untouched;
        the return value tells whether anything was merged.
        """
        if not os.path.exists(config_file):
            logger.warning(f"Config file {config_file} not found. Using default configuration.")
            return False

        try:
            with open(config_file, 'r') as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Error loading config file {config_file}: {e}")
            return False

        if not loaded:
            logger.warning("Empty config file. Using default configuration.")
            return False
        if not isinstance(loaded, dict):
            logger.error(f"Config file {config_file} must contain a mapping, got {type(loaded).__name__}")
            return False

        _merge(self._config_dict, loaded)
        self._config_file = config_file
        logger.info(f"Loaded configuration from {config_file}")
        return True

    @staticmethod
    def _split(path: str) -> List[str]:
        return path.split('.')

    def get(self, path: str, default: Any = None) -> Any:
        node = self._config_dict
        for key in self._split(path):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return node

    def set(self, path: str, value: Any) -> None:
        """Set a value, creating intermediate sections as needed."""
        *sections, leaf = self._split(path)
        node = self._config_dict
        for key in sections:
            if not isinstance(node.get(key), dict):
                node[key] = {}
            node = node[key]
        node[leaf] = value

    def reset(self) -> None:
        self._config_dict = copy.deepcopy(DEFAULT_CONFIG)
        self._config_file = None

    def as_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._config_dict)

    def get_fill_value(self) -> int:
        """Value written into existing rows when a column is appended."""
        return int(self.get('schema.fill_value', 0))

    def get_validate_path(self) -> bool:
        return bool(self.get('line_join.validate_path', True))

    def get_default_strategy(self) -> str:
        return self.get('line_join.default_strategy', 'reduction')

    def save(self, config_file: Optional[str] = None) -> None:
        """Write the current settings as YAML, by default back to the loaded file."""
        file_path = config_file or self._config_file
        if not file_path:
            logger.warning("No config file specified for saving.")
            return

        try:
            with open(file_path, 'w') as f:
                yaml.safe_dump(self._config_dict, f, default_flow_style=False)
            logger.info(f"Saved configuration to {file_path}")
        except OSError as e:
            logger.error(f"Error saving config to {file_path}: {e}")

# Singleton instance
config = Config.get_instance()
