import pytest
import yaml

from udpmultisender import configuration


@pytest.fixture(autouse=True)
def in_tmp_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_missing_file_is_created_with_defaults(in_tmp_dir):
    config = configuration.load_or_create_config()
    assert config == configuration.DEFAULT_CONFIG
    text = (in_tmp_dir / "config.yaml").read_text(encoding="utf-8")
    assert text.startswith("# UDP Multi Sender Configuration File")
    assert yaml.safe_load(text) == configuration.DEFAULT_CONFIG


def test_returned_defaults_are_a_copy():
    config = configuration.load_or_create_config()
    config['default_host'] = '10.0.0.1'
    assert configuration.DEFAULT_CONFIG['default_host'] == '127.0.0.1'


def test_user_values_override_defaults(in_tmp_dir):
    (in_tmp_dir / "config.yaml").write_text("default_ports: '7000-7010'\nsend_check_delay_ms: 500\n", encoding="utf-8")
    config = configuration.load_or_create_config()
    assert config['default_ports'] == '7000-7010'
    assert config['send_check_delay_ms'] == 500
    assert config['probe_payload'] == 'CONNECTION_TEST'


def test_empty_file_yields_defaults(in_tmp_dir):
    (in_tmp_dir / "config.yaml").write_text("", encoding="utf-8")
    assert configuration.load_or_create_config() == configuration.DEFAULT_CONFIG


def test_invalid_yaml_exits(in_tmp_dir):
    (in_tmp_dir / "config.yaml").write_text("default_host: [unclosed\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        configuration.load_or_create_config()


def test_save_config_round_trip():
    config = dict(configuration.DEFAULT_CONFIG, test_message="UDP 테스트 데이터")
    configuration.save_config(config)
    assert configuration.load_or_create_config() == config


def test_client_settings_mapping():
    config = dict(configuration.DEFAULT_CONFIG, receive_poll_interval_seconds=1, ack_markers=["DONE"])
    settings = configuration.client_settings(config)
    assert settings['poll_interval'] == 1.0
    assert settings['ack_markers'] == ["DONE"]
    assert settings['connect_check_delay_ms'] == 3000
    assert settings['send_check_delay_ms'] == 2000
