# src/sql_dataset/core/config/errors.py
"""
Exceções canônicas da camada de configuração do SQL Dataset.

Este módulo define a hierarquia de exceções levantadas durante o
carregamento e a decodificação do arquivo de configuração.

Violações semânticas (api key ausente, driver não suportado, etc.)
não são exceções: elas são retornadas como lista de mensagens pelo
validador. As exceções aqui representam apenas falhas estruturais
ou de I/O, após as quais o bootstrap não pode prosseguir.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Erros de sistema de arquivos (OSError) não são encapsulados aqui

Limites explícitos:
    - Não representa violação de regra de negócio
    - Não realiza fallback ou recovery
"""


class ConfigError(Exception):
    """
    Exceção base para erros de carregamento de configuração.

    Permite captura genérica de falhas estruturais sem confundi-las
    com erros de sistema de arquivos, que são propagados sem alteração.
    """


class ConfigPathMissingError(ConfigError):
    """Caminho do arquivo de configuração não informado."""


class ConfigParseError(ConfigError):
    """
    Falha ao decodificar o documento de configuração.

    A mensagem segue sempre o template
    `Error occurred parsing the config: <causa>`, permitindo que
    chamadores reconheçam o prefixo sem perder a causa original.
    A exceção original fica disponível em `__cause__`.
    """


class ConfigDecodeError(ConfigError):
    """
    O documento é YAML válido, mas não tem o formato do modelo.

    Exemplos: raiz que não é mapa, `refresh_time_sec` fora de uint16,
    `datasets` que não é lista. O loader sempre encapsula esta exceção
    em `ConfigParseError`.
    """
