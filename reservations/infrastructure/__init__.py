"""Adaptadores de infraestructura."""
