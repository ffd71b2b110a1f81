"""Shared infrastructure (configuration, logging, errors) for the services."""
