# udpmultisender/configuration.py

"""
Configuration loader for UDP Multi Sender.

Handles loading settings from config.yaml. If the file doesn't exist,
it creates one with default values.
"""

import sys
import yaml
from typing import Dict, Any

DEFAULT_CONFIG: Dict[str, Any] = {
    'default_host': '127.0.0.1',
    'default_ports': '7777',
    'probe_payload': 'CONNECTION_TEST',
    'connect_check_delay_ms': 3000,
    'send_check_delay_ms': 2000,
    'ack_markers': ['RECEIVED', 'ACK', 'OK'],
    'receive_buffer_size': 65535,
    'receive_poll_interval_seconds': 0.2,
    # Connecting to more ports than this asks for confirmation first.
    'port_count_warning_threshold': 100,
    'test_message': 'UDP test data',
    'language': 'System',
}

_HEADER = (
    "# UDP Multi Sender Configuration File\n"
    "# You can edit these settings. The application will use them on next launch.\n\n"
)


def get_config_path() -> str:
    """Returns the path to the config file."""
    return "config.yaml"


def _write_config(config: Dict[str, Any], config_path: str) -> None:
    with open(config_path, 'w', encoding='utf-8') as f:
        f.write(_HEADER)
        yaml.dump(config, f, sort_keys=False, default_flow_style=False, indent=2, allow_unicode=True)


def save_config(config: Dict[str, Any]):
    """Saves the provided configuration dictionary to config.yaml."""
    config_path = get_config_path()
    try:
        _write_config(config, config_path)
    except IOError as e:
        print(f"ERROR: Could not write config file to '{config_path}': {e}", file=sys.stderr)


def load_or_create_config() -> Dict[str, Any]:
    """
    Loads configuration from config.yaml.

    If the file doesn't exist, it creates it with default values.
    If the file is invalid, it reports the error and exits.
    """
    config_path = get_config_path()
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            user_config = yaml.safe_load(f)

        config = dict(DEFAULT_CONFIG)
        if isinstance(user_config, dict):
            config.update(user_config)
        return config

    except FileNotFoundError:
        print(f"Configuration file not found. Creating '{config_path}' with default settings.")
        try:
            _write_config(DEFAULT_CONFIG, config_path)
            return dict(DEFAULT_CONFIG)
        except IOError as e:
            print(f"FATAL: Could not write default config file to '{config_path}': {e}", file=sys.stderr)
            sys.exit(1)

    except yaml.YAMLError as e:
        print(f"FATAL: Error parsing '{config_path}': {e}", file=sys.stderr)
        sys.exit(1)


def client_settings(config: Dict[str, Any]) -> Dict[str, Any]:
    """Maps config keys to UdpFanoutClient keyword arguments."""
    return {
        'probe_payload': str(config.get('probe_payload', DEFAULT_CONFIG['probe_payload'])),
        'ack_markers': list(config.get('ack_markers') or DEFAULT_CONFIG['ack_markers']),
        'connect_check_delay_ms': int(config.get('connect_check_delay_ms', 3000)),
        'send_check_delay_ms': int(config.get('send_check_delay_ms', 2000)),
        'receive_buffer_size': int(config.get('receive_buffer_size', 65535)),
        'poll_interval': float(config.get('receive_poll_interval_seconds', 0.2)),
        'test_message': str(config.get('test_message', DEFAULT_CONFIG['test_message'])),
    }
