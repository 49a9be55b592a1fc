"""
Schemas module - domain entities plus the API contract.

Difference between the two halves of schemas.py:
- Domain entities: what the services consume and derive
- Response schemas: what the API returns
"""
