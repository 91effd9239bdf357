"""Identity infrastructure: bearer token verification for the API."""
