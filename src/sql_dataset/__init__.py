# src/sql_dataset/__init__.py
"""
SQL Dataset: configuração declarativa de datasets de dashboard alimentados por SQL.

O arquivo de configuração descreve a api key do dashboard, a conexão com
o banco, o intervalo de refresh e os datasets (query SQL + schema de
campos). Este pacote carrega e valida essa configuração antes que o
pipeline seja iniciado.

Arquitetura em alto nível:
    - core.config    → loader YAML, modelo imutável, validação, hashing
    - core.preflight → verificação de inicialização com eventos estruturados
"""

from .core.config import load_config, validate  # noqa: F401
from .core.preflight import run_preflight  # noqa: F401

__all__ = ["load_config", "validate", "run_preflight"]
