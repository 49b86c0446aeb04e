"""
Integration tests package.

Tests de integración que recorren el mediator completo:
- Flujo crear -> confirmar -> cancelar
- Rechazos del pipeline y errores de dominio como resultados de fallo
- Cancelación de tareas sin escrituras parciales
"""
