"""Outbound adapters, one package per memory backend."""
