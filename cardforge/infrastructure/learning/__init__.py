"""Learning infrastructure: repositories, mappers, API schemas and routers."""
