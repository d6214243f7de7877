"""Servicios del Core: cálculo de precios y orquestación del pipeline."""
