# src/sql_dataset/core/config/__init__.py
"""
Camada de configuração do SQL Dataset.

Este pacote carrega, decodifica, valida e identifica o arquivo de
configuração do pipeline de datasets (api key, banco de dados,
intervalo de refresh e datasets).

Responsabilidades do pacote:
    - Leitura e decodificação do YAML (`loader`)
    - Modelo imutável e enumerações suportadas (`schema`)
    - Validação semântica com acumulação de violações (`validation`)
    - Hash canônico para rastreabilidade (`hashing`)

Dois canais de erro, nunca misturados:
    - Falhas estruturais/I/O são exceções (`ConfigError`, `OSError`)
    - Violações de regra são listas de mensagens retornadas por `validate`

Limites explícitos:
    - Não conecta ao banco nem executa SQL
    - Não fala com a API do dashboard
    - Não agenda refresh
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigPathMissingError,
    ConfigParseError,
    ConfigDecodeError,
)

from .hashing import compute_config_hash  # noqa: F401
from .loader import load_config, load_config_text  # noqa: F401
from .schema import (  # noqa: F401
    Config,
    DatabaseConfig,
    Dataset,
    Driver,
    Field,
    FieldType,
    TLSConfig,
    UpdateType,
)
from .validation import (  # noqa: F401
    validate,
    validate_database,
    validate_dataset,
    validate_field,
)
