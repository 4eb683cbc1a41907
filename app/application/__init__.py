"""Capa de aplicación: sanitizers, validadores compuestos y casos de uso."""
