"""Shared test fixtures and sample models."""
