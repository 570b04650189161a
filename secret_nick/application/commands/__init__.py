"""
COMMANDS - Write operations (CQRS)

Subfolders:
- users/ -> delete_user
"""
