"""Host framework adapter: schemas, typed configs and lifecycle callbacks."""
