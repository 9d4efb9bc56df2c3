"""Core del cliente.

Por qué:
- Configuración, modelos y contratos sin dependencias de transporte.
"""
