# src/sql_dataset/core/preflight/types.py
"""
Tipos canônicos do preflight.

Componentes:
    - PreflightStatus → estado final (READY, INVALID, FAILED)
    - PreflightResult → resultado imutável consumido pelo bootstrap

Os valores de enum são strings para facilitar serialização.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from ..config.schema import Config


class PreflightStatus(str, Enum):
    """
    Estados finais do preflight.

    - READY: configuração carregada e sem violações
    - INVALID: configuração carregada, mas com violações semânticas
    - FAILED: configuração não pôde ser carregada (path, I/O, parse)
    """

    READY = "ready"
    INVALID = "invalid"
    FAILED = "failed"


@dataclass(frozen=True)
class PreflightResult:
    """Resultado imutável de uma execução do preflight."""

    run_id: str
    path: str
    status: PreflightStatus
    config: Optional[Config] = None
    config_hash: Optional[str] = None
    violations: Tuple[str, ...] = ()
    error: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.status == PreflightStatus.READY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "run_id": self.run_id,
            "path": self.path,
            "status": self.status.value,
            "config_hash": self.config_hash,
            "violations": list(self.violations),
            "error": self.error,
        }
