"""Infrastructure layer — document loading and entry link resolution."""
