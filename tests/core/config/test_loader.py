# tests/core/config/test_loader.py
"""
Testes do carregador de configuração (load_config).

Os testes asseguram que:
- path vazio falha sem acessar o filesystem
- erros de I/O são propagados sem encapsulamento
- erros de parse usam o template fixo e preservam a causa
- um arquivo válido é materializado com os tipos corretos
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from sql_dataset.core.config.errors import (
    ConfigDecodeError,
    ConfigError,
    ConfigParseError,
    ConfigPathMissingError,
)
from sql_dataset.core.config.loader import load_config, load_config_text
from sql_dataset.core.config.schema import (
    Config,
    DatabaseConfig,
    Dataset,
    Driver,
    Field,
    FieldType,
    TLSConfig,
    UpdateType,
)
from sql_dataset.core.config.validation import validate


PARSE_PREFIX = "Error occurred parsing the config: "


@pytest.mark.parametrize("path", ["", "   "])
def test_empty_path_raises_without_touching_filesystem(path: str, monkeypatch) -> None:
    def _boom(*args, **kwargs):
        raise AssertionError("filesystem must not be accessed")

    monkeypatch.setattr("builtins.open", _boom)

    with pytest.raises(ConfigPathMissingError) as exc:
        load_config(path)
    assert str(exc.value) == "File path is required to load config"


def test_missing_file_propagates_os_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yml"))


def test_missing_file_is_not_a_config_error(tmp_path: Path) -> None:
    with pytest.raises(OSError) as exc:
        load_config(str(tmp_path / "missing.yml"))
    assert not isinstance(exc.value, ConfigError)


def test_invalid_yaml_is_wrapped(invalid_config_path: str) -> None:
    with pytest.raises(ConfigParseError) as exc:
        load_config(invalid_config_path)

    assert str(exc.value).startswith(PARSE_PREFIX)
    assert isinstance(exc.value.__cause__, yaml.YAMLError)
    assert str(exc.value) == PARSE_PREFIX + str(exc.value.__cause__)


def test_refresh_time_out_of_range_is_parse_error(tmp_path: Path) -> None:
    p = tmp_path / "config.yml"
    p.write_text("geckoboard_api_key: k\nrefresh_time_sec: 70000\n", encoding="utf-8")

    with pytest.raises(ConfigParseError) as exc:
        load_config(str(p))

    assert isinstance(exc.value.__cause__, ConfigDecodeError)
    assert str(exc.value) == (
        PARSE_PREFIX + "refresh_time_sec must be an integer between 0 and 65535, got 70000"
    )


def test_non_mapping_root_is_parse_error() -> None:
    with pytest.raises(ConfigParseError) as exc:
        load_config_text("- just\n- a\n- list\n")
    assert str(exc.value) == PARSE_PREFIX + "config root must be a mapping, got list"


def test_empty_document_yields_empty_config(tmp_path: Path) -> None:
    p = tmp_path / "empty.yml"
    p.write_text("", encoding="utf-8")

    cfg = load_config(str(p))
    assert cfg == Config()
    assert validate(cfg) == [
        "Geckoboard api key is required",
        "Database config is required",
    ]


def test_load_valid_config(valid_config_path: str) -> None:
    cfg = load_config(valid_config_path)

    assert cfg == Config(
        geckoboard_api_key="1234dsfd21322",
        database_config=DatabaseConfig(
            driver=Driver.POSTGRES.value,
            url="postgres://fake",
        ),
        refresh_time_sec=60,
        datasets=(
            Dataset(
                name="active.users.by.org.plan",
                update_type=UpdateType.REPLACE.value,
                sql=(
                    "SELECT o.plan_type, count(*) user_count FROM users u, organisation o "
                    "where o.user_id = u.id AND o.plan_type <> 'trial' "
                    "order by user_count DESC limit 10"
                ),
                fields=(
                    Field(name="count", type=FieldType.NUMBER.value),
                    Field(name="org", type=FieldType.STRING.value),
                ),
            ),
        ),
    )
    assert isinstance(cfg.refresh_time_sec, int)
    assert validate(cfg) == []


def test_load_full_config(full_config_path: str) -> None:
    cfg = load_config(full_config_path)
    db = cfg.database_config

    assert db.port == "3306"
    assert db.username == "root"
    assert db.tls_config == TLSConfig(
        key_file="/etc/ssl/client-key.pem",
        cert_file="/etc/ssl/client-cert.pem",
        ca_file="/etc/ssl/ca.pem",
        ssl_mode="verify-full",
    )
    assert db.params == {"charset": "utf8mb4", "timeout": "30"}
    assert cfg.refresh_time_sec == 120
    assert [ds.name for ds in cfg.datasets] == ["users.count", "revenue.by.day"]
    assert [f.type for f in cfg.datasets[1].fields] == ["date", "money", "percentage"]
    assert validate(cfg) == []


def test_loaded_config_with_violations(tmp_path: Path) -> None:
    p = tmp_path / "config.yml"
    p.write_text(
        """
geckoboard_api_key: ''
database_config:
  driver: pear
  url: pear://localhost/test
datasets:
  - name: users.count
    update_type: wrong
    sql: fake sql
    fields:
      - name: count
        type: number
""".lstrip(),
        encoding="utf-8",
    )

    assert validate(load_config(str(p))) == [
        "Geckoboard api key is required",
        "Unsupported driver 'pear' only [mysql postgres sqlite3] are supported",
        "Dataset update type must be append or replace",
    ]


def test_invalid_utf8_is_parse_error(tmp_path: Path) -> None:
    p = tmp_path / "config.yml"
    p.write_bytes(b"geckoboard_api_key: \xff\xfe\n")

    with pytest.raises(ConfigParseError) as exc:
        load_config(str(p))

    assert str(exc.value).startswith(PARSE_PREFIX)
    assert isinstance(exc.value.__cause__, yaml.YAMLError)


def test_string_fields_keep_document_text(tmp_path: Path) -> None:
    p = tmp_path / "config.yml"
    p.write_text(
        """
geckoboard_api_key: 0x1F
database_config:
  driver: postgres
  url: postgres://fake
  port: 05432
  password: 0123
  username: 2024-01-01
  database: 1.50
  protocol: yes
  host: on
  params:
    parseTime: true
    timeout: 1_000
refresh_time_sec: 60
datasets:
  - name: 2024-01-01T10:00:00
    update_type: append
    sql: 1e3
    fields:
      - name: no
        type: number
""".lstrip(),
        encoding="utf-8",
    )

    cfg = load_config(str(p))
    db = cfg.database_config

    assert cfg.geckoboard_api_key == "0x1F"
    assert (db.port, db.password) == ("05432", "0123")
    assert db.username == "2024-01-01"
    assert db.database == "1.50"
    assert (db.protocol, db.host) == ("yes", "on")
    assert db.params == {"parseTime": "true", "timeout": "1_000"}
    assert cfg.refresh_time_sec == 60
    assert type(cfg.refresh_time_sec) is int
    assert cfg.datasets[0].name == "2024-01-01T10:00:00"
    assert cfg.datasets[0].sql == "1e3"
    assert cfg.datasets[0].fields[0].name == "no"
    assert validate(cfg) == []


def test_quoted_refresh_time_is_parse_error() -> None:
    with pytest.raises(ConfigParseError) as exc:
        load_config_text('refresh_time_sec: "60"\n')
    assert str(exc.value) == (
        PARSE_PREFIX + "refresh_time_sec must be an integer between 0 and 65535, got '60'"
    )


def test_load_config_text_accepts_bytes() -> None:
    cfg = load_config_text(b"geckoboard_api_key: k\nrefresh_time_sec: 0\n")
    assert cfg == Config(geckoboard_api_key="k", refresh_time_sec=0)
