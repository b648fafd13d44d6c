"""Allows `python -m registration_api`."""

from registration_api.main import run

run()
