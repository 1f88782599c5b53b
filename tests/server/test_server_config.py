from __future__ import annotations

import pytest

from mytube.core.exceptions import ConfigError
from mytube.server.config import ServerConfig, default_server_config, load_server_config


def test_defaults():
    config = default_server_config()

    assert config.port == 8080
    assert config.use_tls is False
    assert config.cors is False
    assert config.allow_origins == []
    assert config.addr() == ":8080"


def test_load_server_config_none_path_gives_defaults():
    assert load_server_config(None) == ServerConfig()


def test_load_server_config_from_yaml(tmp_path):
    path = tmp_path / "server.yaml"
    path.write_text(
        "server:\n"
        "  port: 8443\n"
        "  use_tls: true\n"
        "  tls_crt: /etc/tls/crt.pem\n"
        "  tls_key: /etc/tls/key.pem\n"
        "  cors: true\n"
        "  allow_origins:\n"
        "    - https://app.example\n",
        encoding="utf-8",
    )

    config = load_server_config(path)

    assert config == ServerConfig(
        port=8443,
        use_tls=True,
        tls_crt="/etc/tls/crt.pem",
        tls_key="/etc/tls/key.pem",
        cors=True,
        allow_origins=["https://app.example"],
    )
    assert config.addr() == ":8443"


def test_missing_keys_fall_back_to_defaults(tmp_path):
    path = tmp_path / "server.yaml"
    path.write_text("server:\n  port: 9000\n", encoding="utf-8")

    config = load_server_config(path)

    assert config.port == 9000
    assert config.use_tls is False
    assert config.allow_origins == []


def test_invalid_port_is_config_error(tmp_path):
    path = tmp_path / "server.yaml"
    path.write_text("server:\n  port: http\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_server_config(path)


def test_non_mapping_section_is_config_error(tmp_path):
    path = tmp_path / "server.yaml"
    path.write_text("server: 8080\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_server_config(path)


def test_quoted_false_flags_stay_off():
    config = ServerConfig.from_mapping({"use_tls": "false", "cors": "false"})

    assert config.use_tls is False
    assert config.cors is False


def test_quoted_true_flags_turn_on():
    config = ServerConfig.from_mapping({"use_tls": "true", "cors": "True"})

    assert config.use_tls is True
    assert config.cors is True


def test_quoted_false_in_yaml(tmp_path):
    path = tmp_path / "server.yaml"
    path.write_text('server:\n  use_tls: "false"\n  cors: "no"\n', encoding="utf-8")

    config = load_server_config(path)

    assert config.use_tls is False
    assert config.cors is False


def test_null_flag_keeps_default():
    config = ServerConfig.from_mapping({"use_tls": None, "cors": None})

    assert config.use_tls is False
    assert config.cors is False


@pytest.mark.parametrize("key", ["use_tls", "cors"])
def test_unrecognised_flag_is_config_error(key):
    with pytest.raises(ConfigError, match=key):
        ServerConfig.from_mapping({key: "maybe"})
