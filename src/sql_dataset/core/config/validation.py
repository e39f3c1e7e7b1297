# src/sql_dataset/core/config/validation.py
"""
Validação semântica da configuração do SQL Dataset.

Este módulo decide se um `Config` já decodificado pode ser entregue ao
pipeline. O resultado é sempre uma lista ordenada de mensagens legíveis;
lista vazia significa configuração válida.

Princípios fundamentais:
    - Nenhuma checagem interrompe as demais: todas as violações são
      reportadas em uma única passada
    - Violações são dados, não exceções
    - Funções puras: sem I/O, sem estado global, sem mutação do input

Ordem das mensagens:
    1. api key
    2. database config (presença, depois regras do bloco)
    3. datasets na ordem do arquivo; dentro de cada dataset, os fields
       na ordem do arquivo

Limites explícitos:
    - Não valida sintaxe SQL
    - Não conecta ao banco nem à API do dashboard
    - Não valida o bloco TLS além de sua estrutura
"""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from .schema import Config, DatabaseConfig, Dataset, Driver, Field, FieldType, UpdateType


def _driver_rule(db: DatabaseConfig) -> Optional[str]:
    if not db.driver:
        return "Database driver is required"
    if not Driver.is_supported(db.driver):
        return f"Unsupported driver '{db.driver}' only {Driver.display()} are supported"
    return None


def _url_rule(db: DatabaseConfig) -> Optional[str]:
    if not db.url:
        return "Database url is required"
    return None


# Regras do bloco database_config, aplicadas nesta ordem.
DATABASE_RULES: Tuple[Callable[[DatabaseConfig], Optional[str]], ...] = (
    _driver_rule,
    _url_rule,
)


def validate(config: Config) -> List[str]:
    """
    Valida a configuração completa e retorna todas as violações encontradas.

    Args:
        config (Config): Configuração decodificada pelo loader.

    Returns:
        List[str]: Violações em ordem determinística. Vazia se válida.
    """
    errors: List[str] = []

    if not config.geckoboard_api_key:
        errors.append("Geckoboard api key is required")

    if config.database_config is None:
        errors.append("Database config is required")
    else:
        errors.extend(validate_database(config.database_config))

    for ds in config.datasets:
        errors.extend(validate_dataset(ds))

    return errors


def validate_database(db: DatabaseConfig) -> List[str]:
    """Aplica `DATABASE_RULES` ao bloco de banco."""
    errors: List[str] = []
    for rule in DATABASE_RULES:
        msg = rule(db)
        if msg is not None:
            errors.append(msg)
    return errors


def validate_dataset(ds: Dataset) -> List[str]:
    """Valida um dataset e, em seguida, cada um de seus fields em ordem."""
    errors: List[str] = []

    if not ds.name:
        errors.append("Dataset name is required")

    if not UpdateType.is_supported(ds.update_type):
        errors.append("Dataset update type must be append or replace")

    if not ds.sql:
        errors.append("Dataset sql is required")

    for f in ds.fields:
        errors.extend(validate_field(f))

    return errors


def validate_field(f: Field) -> List[str]:
    """Valida nome e tipo de um field."""
    errors: List[str] = []

    if not f.name:
        errors.append("Field name is required")

    if not FieldType.is_supported(f.type):
        errors.append(f"Unsupported field type '{f.type}' only {FieldType.display()} are supported")

    return errors
