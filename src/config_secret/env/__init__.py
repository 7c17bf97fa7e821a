# src/config_secret/env/__init__.py
"""Descoberta de variáveis de ambiente e resolução de paths."""
