"""Collaborator services: configuration, events, persistence, input."""
