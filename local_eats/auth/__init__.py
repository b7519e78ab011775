"""
Admin authentication.

Responsibilities:
- Seed the admin account from environment configuration.
- Verify credentials with bcrypt.
- Guard admin-only routes through the session cookie.
"""
