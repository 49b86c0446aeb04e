"""Capa de aplicación: contratos, pipeline y handlers."""
