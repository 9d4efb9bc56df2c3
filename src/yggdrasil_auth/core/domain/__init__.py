"""Modelos y errores del dominio.

Por qué:
- Aquí viven las estructuras del contrato JSON de Yggdrasil (Pydantic v2).
- El dominio no conoce httpx: solo conceptos del protocolo.
"""
