# src/sql_dataset/core/__init__.py
"""
Core do SQL Dataset.

Componentes principais:
    - config    → carregamento, modelo, validação e hashing da configuração
    - errors    → payload canônico de erro
    - preflight → decisão de início do pipeline (load + validate)

Limites explícitos:
    - Não conecta ao banco de dados
    - Não executa SQL
    - Não envia dados para a API do dashboard
    - Não agenda refresh
"""
