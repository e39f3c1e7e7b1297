# src/sql_dataset/core/preflight/context.py
"""
Contexto de execução do preflight.

Este módulo define o `PreflightContext`, a estrutura que acumula os
eventos de log e os warnings produzidos enquanto a configuração é
carregada e validada.

Logs não são strings livres: cada evento é um dicionário estruturado
com `run_id`, `stage`, `level`, `message` e `timestamp` (UTC, ISO 8601),
acrescido de campos extras informados pelo chamador.

Invariantes:
    - Cada execução possui seu próprio contexto
    - Todos os eventos incluem `run_id` e `stage`
    - Warnings são agrupados por `stage`

Limites explícitos:
    - Não persiste eventos
    - Não decide se o pipeline inicia
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


def _new_run_id() -> str:
    return uuid.uuid4().hex


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PreflightContext:
    """Contexto isolado de uma execução do preflight."""

    run_id: str = field(default_factory=_new_run_id)
    created_at: datetime = field(default_factory=_utc_now)
    meta: Dict[str, Any] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": _utc_now().isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, stage: str, message: str) -> None:
        if stage not in self.warnings:
            self.warnings[stage] = []
        self.warnings[stage].append(message)
