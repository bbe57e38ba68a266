"""User registration, login and task management HTTP API."""
