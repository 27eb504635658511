"""Application services: the command pipelines."""
