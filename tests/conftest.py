"""Test configuration and fixtures."""

import os

import logfire

# Cheap hashes and a fixed environment for every test run
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("PASSWORD__BCRYPT_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)
