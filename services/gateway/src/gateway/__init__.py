"""Gateway - single entry point proxying to the user and product services."""
