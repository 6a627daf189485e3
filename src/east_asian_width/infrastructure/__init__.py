"""Infrastructure layer: platform collaborators and auditing."""
