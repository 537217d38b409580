"""
Shared test constants.

Credentials that pass the login form's validation rules (a well-formed
email and a password of at least 5 characters).
"""

TEST_EMAIL = "player@example.com"
TEST_PASSWORD = "SecureTest#9x7"
TEST_ACCESS_TOKEN = "tok-123"
