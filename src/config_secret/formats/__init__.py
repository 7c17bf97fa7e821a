# src/config_secret/formats/__init__.py
"""Registro de formatos e loader de secret files."""
