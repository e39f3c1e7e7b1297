# tests/conftest.py
"""
Fixtures compartilhados para testes do SQL Dataset.

Este módulo define fixtures reutilizáveis que fornecem:
- caminhos para os arquivos YAML em `tests/fixtures`
- configurações mínimas e válidas já materializadas como `Config`

Invariantes:
    - Fixtures não executam pipeline real
    - Dados retornados são determinísticos e isolados
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas
"""

from pathlib import Path

import pytest


FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Diretório com os arquivos YAML de exemplo usados pelos testes."""
    return FIXTURES_DIR


@pytest.fixture
def valid_config_path(fixtures_dir: Path) -> str:
    return str(fixtures_dir / "valid_config.yml")


@pytest.fixture
def invalid_config_path(fixtures_dir: Path) -> str:
    return str(fixtures_dir / "invalid_config.yml")


@pytest.fixture
def full_config_path(fixtures_dir: Path) -> str:
    return str(fixtures_dir / "full_config.yml")


@pytest.fixture
def valid_config():
    """
    Fixture que fornece um `Config` mínimo e sem violações.

    Usado por:
        - Testes de validação (ponto de partida para cenários inválidos)
        - Testes de hashing
    """
    from sql_dataset.core.config.schema import (
        Config,
        DatabaseConfig,
        Dataset,
        Driver,
        Field,
        FieldType,
        UpdateType,
    )

    return Config(
        geckoboard_api_key="1234-12345",
        database_config=DatabaseConfig(
            driver=Driver.POSTGRES.value,
            url="postgres://localhost/testdb",
        ),
        refresh_time_sec=120,
        datasets=(
            Dataset(
                name="users.count",
                update_type=UpdateType.REPLACE.value,
                sql="SELECT count(*) FROM users",
                fields=(Field(name="count", type=FieldType.NUMBER.value),),
            ),
        ),
    )
