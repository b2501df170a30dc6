"""Audio collaborator."""
