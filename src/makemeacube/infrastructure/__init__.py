"""Infrastructure layer: persistence, password hashing and outbound email."""
