"""Test suite for login-form."""
