"""Modelo canônico de configuração do SQL Dataset.

Este módulo concentra:
- as enumerações suportadas (driver, update type, field type), que são a
  única fonte de verdade para checagem de pertinência e para o texto
  exibido nas mensagens de erro
- as dataclasses imutáveis que representam o arquivo de configuração
- a decodificação de um mapa (resultado do YAML) para o modelo

Notas:
- Os nomes de chave seguem exatamente o arquivo YAML e são case-sensitive.
- Chaves desconhecidas são ignoradas.
- Incompatibilidade de tipo levanta `ConfigDecodeError`; regras de negócio
  ficam em `validation.py`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .errors import ConfigDecodeError


_UINT16_MAX = 65535


class ScalarText(str):
    """Texto original de um escalar YAML tipado implicitamente.

    Campos string usam o texto como escrito no arquivo (`0123`, `yes`,
    `2024-01-01`); campos numéricos usam `resolved`.
    """

    def __new__(cls, text: str, resolved: Any) -> "ScalarText":
        obj = super().__new__(cls, text)
        obj.resolved = resolved
        return obj


class _Choices(str, Enum):
    """Enum textual com checagem de pertinência e forma de exibição."""

    @classmethod
    def values(cls) -> List[str]:
        return [m.value for m in cls]

    @classmethod
    def is_supported(cls, value: Any) -> bool:
        return value in cls.values()

    @classmethod
    def display(cls) -> str:
        """Forma canônica exibida nas mensagens, ex.: `[mysql postgres sqlite3]`."""
        return "[" + " ".join(cls.values()) + "]"


class Driver(_Choices):
    MYSQL = "mysql"
    POSTGRES = "postgres"
    SQLITE = "sqlite3"


class UpdateType(_Choices):
    APPEND = "append"
    REPLACE = "replace"


class FieldType(_Choices):
    """Tipos de campo aceitos pela API de datasets do dashboard."""

    NUMBER = "number"
    STRING = "string"
    DATE = "date"
    DATETIME = "datetime"
    PERCENTAGE = "percentage"
    MONEY = "money"


# ---------------------------------------------------------------------------
# Helpers de decodificação
# ---------------------------------------------------------------------------

def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigDecodeError(msg)


def _as_str(value: Any, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    _expect(
        isinstance(value, (str, int, float)),
        f"{key} must be a scalar, got {type(value).__name__}",
    )
    return str(value)


def _as_mapping(value: Any, key: str) -> Optional[Dict[str, Any]]:
    if value is None:
        return None
    _expect(isinstance(value, dict), f"{key} must be a mapping, got {type(value).__name__}")
    return value


def _as_list(value: Any, key: str) -> List[Any]:
    if value is None:
        return []
    _expect(isinstance(value, list), f"{key} must be a list, got {type(value).__name__}")
    return value


def _as_uint16(value: Any, key: str) -> int:
    if value is None:
        return 0
    if isinstance(value, ScalarText):
        value = value.resolved
    _expect(
        isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= _UINT16_MAX,
        f"{key} must be an integer between 0 and {_UINT16_MAX}, got {value!r}",
    )
    return value


# ---------------------------------------------------------------------------
# Modelo
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TLSConfig:
    key_file: str = ""
    cert_file: str = ""
    ca_file: str = ""
    ssl_mode: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TLSConfig":
        return cls(
            key_file=_as_str(data.get("key_file"), "tls_config.key_file"),
            cert_file=_as_str(data.get("cert_file"), "tls_config.cert_file"),
            ca_file=_as_str(data.get("ca_file"), "tls_config.ca_file"),
            ssl_mode=_as_str(data.get("ssl_mode"), "tls_config.ssl_mode"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key_file": self.key_file,
            "cert_file": self.cert_file,
            "ca_file": self.ca_file,
            "ssl_mode": self.ssl_mode,
        }


@dataclass(frozen=True)
class DatabaseConfig:
    """Driver, url de conexão e opções específicas (tls, params).

    Os campos estruturados (host, port, ...) são informativos e não
    substituem a `url`.
    """

    driver: str = ""
    url: str = ""
    host: str = ""
    port: str = ""
    protocol: str = ""
    database: str = ""
    username: str = ""
    password: str = ""
    tls_config: Optional[TLSConfig] = None
    params: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __hash__(self) -> int:
        return hash(
            (
                self.driver,
                self.url,
                self.host,
                self.port,
                self.protocol,
                self.database,
                self.username,
                self.password,
                self.tls_config,
                tuple(sorted(self.params.items())),
            )
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DatabaseConfig":
        tls = _as_mapping(data.get("tls_config"), "database_config.tls_config")
        params = _as_mapping(data.get("params"), "database_config.params") or {}

        return cls(
            driver=_as_str(data.get("driver"), "database_config.driver"),
            url=_as_str(data.get("url"), "database_config.url"),
            host=_as_str(data.get("host"), "database_config.host"),
            port=_as_str(data.get("port"), "database_config.port"),
            protocol=_as_str(data.get("protocol"), "database_config.protocol"),
            database=_as_str(data.get("database"), "database_config.database"),
            username=_as_str(data.get("username"), "database_config.username"),
            password=_as_str(data.get("password"), "database_config.password"),
            tls_config=TLSConfig.from_dict(tls) if tls is not None else None,
            params={
                str(k): _as_str(v, f"database_config.params.{k}")
                for k, v in params.items()
            },
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "driver": self.driver,
            "url": self.url,
            "host": self.host,
            "port": self.port,
            "protocol": self.protocol,
            "database": self.database,
            "username": self.username,
            "password": self.password,
            "tls_config": self.tls_config.to_dict() if self.tls_config else None,
            "params": dict(self.params),
        }


@dataclass(frozen=True)
class Field:
    name: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any], *, where: str) -> "Field":
        return cls(
            name=_as_str(data.get("name"), f"{where}.name"),
            type=_as_str(data.get("type"), f"{where}.type"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type}


@dataclass(frozen=True)
class Dataset:
    """Fonte de dados de um widget: query SQL + schema de saída."""

    name: str = ""
    update_type: str = ""
    sql: str = ""
    fields: Tuple[Field, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any], *, where: str) -> "Dataset":
        fields: List[Field] = []
        for i, raw in enumerate(_as_list(data.get("fields"), f"{where}.fields")):
            item = _as_mapping(raw, f"{where}.fields[{i}]") or {}
            fields.append(Field.from_dict(item, where=f"{where}.fields[{i}]"))

        return cls(
            name=_as_str(data.get("name"), f"{where}.name"),
            update_type=_as_str(data.get("update_type"), f"{where}.update_type"),
            sql=_as_str(data.get("sql"), f"{where}.sql"),
            fields=tuple(fields),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "update_type": self.update_type,
            "sql": self.sql,
            "fields": [f.to_dict() for f in self.fields],
        }


@dataclass(frozen=True)
class Config:
    """Representação raiz e imutável do arquivo de configuração."""

    geckoboard_api_key: str = ""
    database_config: Optional[DatabaseConfig] = None
    refresh_time_sec: int = 0
    datasets: Tuple[Dataset, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Materializa um `Config` a partir do mapa decodificado do YAML.

        Raises:
            ConfigDecodeError: se a estrutura não corresponder ao modelo.
        """
        _expect(isinstance(data, dict), f"config root must be a mapping, got {type(data).__name__}")

        db = _as_mapping(data.get("database_config"), "database_config")

        datasets: List[Dataset] = []
        for i, raw in enumerate(_as_list(data.get("datasets"), "datasets")):
            item = _as_mapping(raw, f"datasets[{i}]") or {}
            datasets.append(Dataset.from_dict(item, where=f"datasets[{i}]"))

        return cls(
            geckoboard_api_key=_as_str(data.get("geckoboard_api_key"), "geckoboard_api_key"),
            database_config=DatabaseConfig.from_dict(db) if db is not None else None,
            refresh_time_sec=_as_uint16(data.get("refresh_time_sec"), "refresh_time_sec"),
            datasets=tuple(datasets),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "geckoboard_api_key": self.geckoboard_api_key,
            "database_config": self.database_config.to_dict() if self.database_config else None,
            "refresh_time_sec": self.refresh_time_sec,
            "datasets": [ds.to_dict() for ds in self.datasets],
        }
