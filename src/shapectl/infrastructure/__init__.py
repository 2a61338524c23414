"""Infrastructure layer — document loading and schema resolution."""
