"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  -> Write operations (CQRS): delete_user
- queries/   -> Read operations (CQRS): get_room, list_users
- dto/       -> Data Transfer Objects returned by the API
- common/    -> Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities and repositories
"""
