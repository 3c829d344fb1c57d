import os
from configparser import ConfigParser, NoOptionError, NoSectionError
from typing import Any, Dict, Optional


class ConfigManager:
    """
    Read-once configuration - merges the packaged defaults, the user config
    named in [DEFAULT] user_config and an optional custom file
    """

    def __init__(self, config_file: Optional[str] = None):
        self.base_config = self._load_configs(config_file)

    def _load_configs(self, config_file: Optional[str] = None) -> ConfigParser:
        """
        Load and merge configuration files
        :param config_file: optional path to a custom config file
        :return: ConfigParser object
        """
        default_config_file = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.ini')
        if not os.path.exists(default_config_file):
            raise FileNotFoundError(f'Could not find the default config file at {default_config_file}')

        config = ConfigParser()
        config.read(default_config_file, encoding='utf-8')

        # The user config is optional; skip it quietly when it isn't there
        if 'user_config' in config['DEFAULT']:
            user_config = self.resolve_file_path(config['DEFAULT']['user_config'])
            if user_config is not None:
                config.read(user_config, encoding='utf-8')

        if config_file is not None:
            file = self.resolve_file_path(config_file)
            if file is None:
                raise FileNotFoundError(f'Could not find the custom config file at {config_file}')
            config.read(file, encoding='utf-8')

        return config

    def get_option(self, section: str, option: str, fallback: Any = None) -> Any:
        """Get a normalized option value, or the fallback when it is missing"""
        try:
            return self.fix_values(self.base_config.get(section, option))
        except (NoSectionError, NoOptionError):
            return fallback

    def get_section(self, section: str) -> Dict[str, Any]:
        if not self.base_config.has_section(section):
            return {}
        return {k: self.fix_values(v) for k, v in self.base_config[section].items()}

    @staticmethod
    def fix_values(value: Any) -> Any:
        """Fix some values due to how they are stored and retrieved with ConfigParser"""
        if not isinstance(value, str):
            return value
        value = value.strip()

        # Only expand strings that clearly look like home-relative paths
        if value.startswith('~'):
            value = os.path.expanduser(value)

        if value.isdigit():
            return int(value)

        lower_value = value.lower()
        if lower_value in ('true', 'yes', 'on'):
            return True
        if lower_value in ('false', 'no', 'off'):
            return False

        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            return value[1:-1]

        return value

    @staticmethod
    def resolve_file_path(file_name: Optional[str], base_dir: Optional[str] = None) -> Optional[str]:
        """
        Works out the path to a file based on the filename and optional base directory
        :param file_name: name of the file to resolve the path to
        :param base_dir: directory relative names resolve against (defaults to the cwd)
        :return: absolute path to the file or None
        """
        if file_name is None:
            return None

        base_dir = os.path.expanduser(base_dir) if base_dir is not None else os.getcwd()
        if not os.path.isdir(base_dir):
            return None

        file_name = os.path.expanduser(file_name)
        full_path = file_name if os.path.isabs(file_name) else os.path.join(base_dir, file_name)
        if os.path.isfile(full_path):
            return os.path.abspath(full_path)
        return None
