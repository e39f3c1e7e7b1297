"""Preflight canônico: config.load + config.validate.

Responsabilidades:
- carregar a configuração a partir do path informado
- validar a configuração e coletar todas as violações
- registrar eventos estruturados no `PreflightContext`
- produzir um `PreflightResult` com status, hash e payload de erro

Política:
- falhas do loader (path, I/O, parse) → FAILED + ErrorPayload
- violações semânticas → INVALID + ErrorPayload com decision_required
- sem violações → READY com `Config` e hash
- exceções fora do contrato do loader são propagadas
"""

from __future__ import annotations

from typing import Optional

from ..config.errors import ConfigParseError, ConfigPathMissingError
from ..config.hashing import compute_config_hash
from ..config.loader import load_config
from ..config.validation import validate
from ..errors import (
    ErrorPayload,
    config_file_unreadable,
    config_invalid,
    config_parse_error,
    config_path_missing,
)
from .context import PreflightContext
from .types import PreflightResult, PreflightStatus


LOAD_STAGE = "config.load"
VALIDATE_STAGE = "config.validate"


def _failed(ctx: PreflightContext, path: str, err: ErrorPayload) -> PreflightResult:
    ctx.log(stage=LOAD_STAGE, level="ERROR", message=err.message, error_type=err.type)
    return PreflightResult(
        run_id=ctx.run_id,
        path=path,
        status=PreflightStatus.FAILED,
        error=err.to_dict(),
    )


def run_preflight(path: str, *, ctx: Optional[PreflightContext] = None) -> PreflightResult:
    """
    Carrega e valida a configuração, decidindo se o pipeline pode iniciar.

    Args:
        path: caminho do arquivo YAML de configuração.
        ctx: contexto para eventos e warnings; criado se ausente.

    Returns:
        PreflightResult: resultado com status READY, INVALID ou FAILED.
    """
    ctx = ctx or PreflightContext()
    ctx.log(stage=LOAD_STAGE, level="INFO", message="loading config", path=path)

    try:
        config = load_config(path)
    except ConfigPathMissingError as e:
        return _failed(ctx, path, config_path_missing(message=str(e)))
    except ConfigParseError as e:
        return _failed(ctx, path, config_parse_error(path=path, message=str(e)))
    except OSError as e:
        return _failed(
            ctx,
            path,
            config_file_unreadable(
                path=path,
                exc_type=e.__class__.__name__,
                exc_message=str(e),
            ),
        )

    config_hash = compute_config_hash(config)
    ctx.log(
        stage=LOAD_STAGE,
        level="INFO",
        message="config loaded",
        config_hash=config_hash,
        datasets_count=len(config.datasets),
    )

    violations = validate(config)
    for v in violations:
        ctx.add_warning(stage=VALIDATE_STAGE, message=v)

    if violations:
        err = config_invalid(path=path, violations=violations)
        ctx.log(
            stage=VALIDATE_STAGE,
            level="ERROR",
            message=err.message,
            violations_count=len(violations),
        )
        return PreflightResult(
            run_id=ctx.run_id,
            path=path,
            status=PreflightStatus.INVALID,
            config=config,
            config_hash=config_hash,
            violations=tuple(violations),
            error=err.to_dict(),
        )

    ctx.log(stage=VALIDATE_STAGE, level="INFO", message="config is valid")
    return PreflightResult(
        run_id=ctx.run_id,
        path=path,
        status=PreflightStatus.READY,
        config=config,
        config_hash=config_hash,
    )
