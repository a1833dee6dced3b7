"""Application commands - write operations."""
