# src/sql_dataset/core/config/loader.py
"""
Loader canônico de configuração do SQL Dataset.

Este módulo lê o arquivo YAML de configuração e o materializa como um
`Config` imutável. Não aplica regras de negócio: o resultado deve ser
validado por `validation.validate` antes de ser usado pelo pipeline.

Política de erros:
    - path vazio → `ConfigPathMissingError`, sem acesso ao filesystem
    - falhas de leitura (arquivo inexistente, permissão) → `OSError`
      original, sem encapsulamento
    - YAML inválido ou estrutura incompatível com o modelo →
      `ConfigParseError` com o template
      `Error occurred parsing the config: <causa>`

Invariantes:
    - O arquivo é lido uma única vez e o handle é sempre liberado
    - Nenhuma configuração parcial é retornada em caso de erro
    - Documento vazio produz `Config()` vazio

Limites explícitos:
    - Não valida semântica
    - Não resolve variáveis de ambiente nem faz merge de arquivos
"""

from __future__ import annotations

from typing import Union

import yaml  # PyYAML
from yaml.constructor import SafeConstructor

from .errors import ConfigDecodeError, ConfigParseError, ConfigPathMissingError
from .schema import Config, ScalarText


PATH_REQUIRED_MESSAGE = "File path is required to load config"
PARSE_ERROR_TEMPLATE = "Error occurred parsing the config: {cause}"


class _ConfigLoader(yaml.SafeLoader):
    """SafeLoader que preserva o texto original de escalares tipados implicitamente."""


def _keep_text(construct):
    def _construct(loader: _ConfigLoader, node: yaml.ScalarNode) -> ScalarText:
        return ScalarText(node.value, construct(loader, node))

    return _construct


for _tag, _construct in (
    ("tag:yaml.org,2002:bool", SafeConstructor.construct_yaml_bool),
    ("tag:yaml.org,2002:int", SafeConstructor.construct_yaml_int),
    ("tag:yaml.org,2002:float", SafeConstructor.construct_yaml_float),
    ("tag:yaml.org,2002:timestamp", SafeConstructor.construct_yaml_timestamp),
):
    _ConfigLoader.add_constructor(_tag, _keep_text(_construct))


def load_config_text(text: Union[str, bytes]) -> Config:
    """
    Decodifica o conteúdo YAML de uma configuração.

    Bytes são decodificados pelo reader do PyYAML (UTF-8/UTF-16); bytes
    inválidos viram `ConfigParseError` como qualquer outro erro de YAML.

    Args:
        text (str | bytes): Documento YAML.

    Returns:
        Config: Configuração materializada (ainda não validada).

    Raises:
        ConfigParseError: Se o YAML for inválido ou não corresponder ao modelo.
    """
    try:
        data = yaml.load(text, Loader=_ConfigLoader)
        if data is None:
            return Config()
        return Config.from_dict(data)
    except (yaml.YAMLError, ConfigDecodeError) as e:
        raise ConfigParseError(PARSE_ERROR_TEMPLATE.format(cause=e)) from e


def load_config(path: str) -> Config:
    """
    Carrega a configuração a partir de um arquivo YAML.

    Args:
        path (str): Caminho do arquivo de configuração.

    Returns:
        Config: Configuração materializada (ainda não validada).

    Raises:
        ConfigPathMissingError: Se `path` estiver vazio.
        OSError: Se o arquivo não puder ser lido (propagado sem alteração).
        ConfigParseError: Se o conteúdo não puder ser decodificado.
    """
    if not path or not str(path).strip():
        raise ConfigPathMissingError(PATH_REQUIRED_MESSAGE)

    with open(path, "rb") as f:
        raw = f.read()

    return load_config_text(raw)
