"""Núcleo: configuración, errores, contexto de llamada, dominio y contratos."""
