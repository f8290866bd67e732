"""Shared infrastructure: configuration, exceptions, storage, logging, CLI."""
