"""
Test suite for the Clinic Appointment Registry.

Contains unit tests for the domain rules and registry, and API tests.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
