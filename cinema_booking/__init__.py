"""Cinema seat booking service."""
