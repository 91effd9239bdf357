"""
Application layer.

Orchestrates domain objects into the operations exposed to the HTTP API:
use cases, application services, repository protocols and DTOs.
"""
