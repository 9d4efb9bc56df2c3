"""Adaptadores de I/O (HTTP contra el authserver)."""
