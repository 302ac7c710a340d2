"""HTTP API for the treasure hoard generator."""
