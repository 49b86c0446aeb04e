"""Núcleo de reservaciones: dominio, aplicación e infraestructura in-memory."""

__version__ = "0.1.0"
