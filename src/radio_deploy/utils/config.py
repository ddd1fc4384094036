"""Deployment configuration: built-in defaults plus an optional YAML file"""
import copy
import logging
from typing import Any, Dict, Optional

import yaml

from radio_deploy.core.protocols import ConfigLoader
from radio_deploy.deploy.base import DeployConfig, DEFAULT_TARGET_TRIPLE
from radio_deploy.deploy.exceptions import ConfigError
from radio_deploy.deploy.plan import VALID_PROFILES

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "deploy.yaml"

# Section/key layout of deploy.yaml. Values are the defaults.
DEFAULT_CONFIG: Dict[str, Dict[str, str]] = {
    'build': {
        'toolchain': 'cross',
        'target_triple': DEFAULT_TARGET_TRIPLE,
        'profile': 'debug',
        'binary': 'radio',
    },
    'copy': {
        'program': 'scp',
        'service_file': 'radio.service',
        'remote_dir': './',
    },
}

# (section, key) -> DeployConfig field
_FIELD_MAP = {
    ('build', 'toolchain'): 'toolchain',
    ('build', 'target_triple'): 'target_triple',
    ('build', 'profile'): 'profile',
    ('build', 'binary'): 'binary',
    ('copy', 'program'): 'copy_program',
    ('copy', 'service_file'): 'service_file',
    ('copy', 'remote_dir'): 'remote_dir',
}


def merge_config(overrides: Dict[str, Any]) -> Dict[str, Dict[str, str]]:
    """Overlay a parsed deploy.yaml onto DEFAULT_CONFIG.

    Args:
        overrides: Parsed YAML mapping (may be partial)

    Returns:
        Full config dict with every section and key present

    Raises:
        ConfigError: On unknown sections/keys or non-string values
    """
    if not isinstance(overrides, dict):
        raise ConfigError(f"Config must be a mapping, got {type(overrides).__name__}")

    config = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in overrides.items():
        if section not in config:
            raise ConfigError(
                f"Unknown config section: '{section}'\n"
                f"Expected: {', '.join(DEFAULT_CONFIG)}"
            )
        if values is None:
            continue
        if not isinstance(values, dict):
            raise ConfigError(f"Config section '{section}' must be a mapping")

        for key, value in values.items():
            if key not in config[section]:
                raise ConfigError(
                    f"Unknown key '{key}' in config section '{section}'\n"
                    f"Expected: {', '.join(DEFAULT_CONFIG[section])}"
                )
            if not isinstance(value, str):
                raise ConfigError(f"Config value {section}.{key} must be a string")
            config[section][key] = value

    return config


def to_deploy_config(config: Dict[str, Dict[str, str]]) -> DeployConfig:
    """Flatten a merged config dict into a DeployConfig."""
    profile = config['build']['profile']
    if profile not in VALID_PROFILES:
        raise ConfigError(
            f"Unknown build profile: {profile}\n"
            f"Expected one of: {', '.join(VALID_PROFILES)}"
        )

    fields = {
        field_name: config[section][key]
        for (section, key), field_name in _FIELD_MAP.items()
    }
    return DeployConfig(**fields)


def load_deploy_config(
    config_path: Optional[str] = None,
    config_loader: Optional[ConfigLoader] = None,
    profile: Optional[str] = None
) -> DeployConfig:
    """Load deployment settings.

    Args:
        config_path: Explicit YAML file; must exist. When None, deploy.yaml in
            the working directory is used if present, defaults otherwise.
        config_loader: YAML loader (default: YamlConfigLoader)
        profile: Override build.profile (e.g. from --release)

    Returns:
        DeployConfig ready for build_invocations()

    Raises:
        ConfigError: If the file is missing (explicit path), unreadable or invalid
    """
    if config_loader is None:
        from radio_deploy.core.implementations import YamlConfigLoader
        config_loader = YamlConfigLoader()

    path = config_path or DEFAULT_CONFIG_PATH
    overrides: Dict[str, Any] = {}

    if config_loader.exists(path):
        try:
            overrides = config_loader.load_yaml(path)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Could not read config file {path}: {e}") from e
        logger.debug("loaded deployment config from %s", path)
    elif config_path is not None:
        raise ConfigError(f"Config file not found: {config_path}")
    else:
        logger.debug("no %s found, using built-in defaults", DEFAULT_CONFIG_PATH)

    config = merge_config(overrides)
    if profile is not None:
        config['build']['profile'] = profile

    return to_deploy_config(config)
