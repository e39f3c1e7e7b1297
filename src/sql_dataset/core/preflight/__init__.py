"""SQL Dataset: Preflight (core).

Verificação executada antes do pipeline iniciar:
 - carregamento da configuração
 - validação semântica
 - hash canônico (rastreabilidade)
 - eventos estruturados de execução
"""

from .check import run_preflight  # noqa: F401
from .context import PreflightContext  # noqa: F401
from .types import PreflightResult, PreflightStatus  # noqa: F401
