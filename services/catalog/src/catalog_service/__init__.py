"""Catalog service - in-memory product catalog with CRUD and filtered queries."""
