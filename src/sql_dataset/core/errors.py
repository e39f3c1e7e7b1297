"""
SQL Dataset: Canonical Error Structures (v1)

Este módulo define o payload canônico de erro usado pelo preflight para
reportar por que o pipeline não pode iniciar. Erros são:

- explícitos
- serializáveis
- acionáveis (trazem `hint` de onde corrigir)
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do SQL Dataset.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    - decision_required: o operador precisa corrigir a configuração antes
      de reexecutar; não há auto-correção
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    decision_required: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

CONFIG_PATH_MISSING = "CONFIG_PATH_MISSING"
CONFIG_FILE_UNREADABLE = "CONFIG_FILE_UNREADABLE"
CONFIG_PARSE_ERROR = "CONFIG_PARSE_ERROR"
CONFIG_INVALID = "CONFIG_INVALID"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def config_path_missing(
    *,
    message: str,
    hint: str = "Informe o caminho do arquivo de configuração YAML.",
) -> ErrorPayload:
    return ErrorPayload(
        type=CONFIG_PATH_MISSING,
        message=message,
        details={},
        hint=hint,
        decision_required=True,
    )


def config_file_unreadable(
    *,
    path: str,
    exc_type: str,
    exc_message: str,
    hint: str = "Verifique se o arquivo existe e se o processo tem permissão de leitura.",
) -> ErrorPayload:
    return ErrorPayload(
        type=CONFIG_FILE_UNREADABLE,
        message="Arquivo de configuração não pôde ser lido",
        details={
            "path": path,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
        decision_required=False,
    )


def config_parse_error(
    *,
    path: str,
    message: str,
    hint: str = "Corrija a sintaxe YAML ou o tipo dos valores no arquivo de configuração.",
) -> ErrorPayload:
    return ErrorPayload(
        type=CONFIG_PARSE_ERROR,
        message=message,
        details={"path": path},
        hint=hint,
        decision_required=True,
    )


def config_invalid(
    *,
    path: str,
    violations: List[str],
    hint: str = "Corrija todas as violações listadas antes de iniciar o pipeline.",
) -> ErrorPayload:
    return ErrorPayload(
        type=CONFIG_INVALID,
        message="Configuração inválida",
        details={
            "path": path,
            "violations": list(violations),
            "violations_count": len(violations),
        },
        hint=hint,
        decision_required=True,
    )
