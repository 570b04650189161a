"""
PORTS - Interfaces that infrastructure implements

A port defines WHAT the domain needs without saying HOW it is done:
- Domain says: "I need to load a room by a member's code"
- Infrastructure implements: "I'll query PostgreSQL through Prisma"

Subfolders:
- repositories/  -> user and room persistence interfaces
"""
