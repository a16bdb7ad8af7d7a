"""Adapters for Keycloak and PostgreSQL."""
