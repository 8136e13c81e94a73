"""In-memory ticket board and counter screens."""
