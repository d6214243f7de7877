"""Adaptadores de I/O: HTTP al catálogo y exportación."""
