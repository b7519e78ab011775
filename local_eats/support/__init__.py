"""
Support inbox.

Responsibilities:
- Accept contact messages from visitors.
- Let the admin list, mark and delete messages.
"""
