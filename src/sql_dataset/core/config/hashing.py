# src/sql_dataset/core/config/hashing.py
"""
Hashing canônico de configuração do SQL Dataset.

O hash representa a identidade estrutural de um `Config` e é usado pelo
preflight para rastreabilidade (ex.: detectar que o arquivo mudou entre
duas inicializações).

Política de hashing (v1):
    - Serialização via `Config.to_dict()`
    - JSON canônico (sort_keys, separadores compactos, UTF-8)
    - SHA-256, representação hexadecimal

Invariantes:
    - Configurações estruturalmente iguais produzem o mesmo hash
    - O valor retornado tem sempre 64 caracteres
    - Nenhuma mutação ocorre sobre o input
"""

from __future__ import annotations

import hashlib
import json

from .schema import Config


def compute_config_hash(config: Config) -> str:
    """
    Gera o hash SHA-256 do JSON canônico de uma configuração.

    Args:
        config (Config): Configuração materializada.

    Returns:
        str: Hash hexadecimal de 64 caracteres.

    Raises:
        TypeError: Se o objeto fornecido não for um `Config`.
    """
    if not isinstance(config, Config):
        raise TypeError(
            f"Config para hashing deve ser Config, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config.to_dict(),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
