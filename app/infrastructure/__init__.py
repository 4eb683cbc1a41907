"""Adaptadores de infraestructura (DB, repositorios, providers, validación)."""
