"""Test suite for statement intake.

- unit/: Unit tests with mocked host collaborators
"""
