"""
Test suite for Medibook.

Contains unit tests for the query, reporting and integrity services and
API tests for every endpoint.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
