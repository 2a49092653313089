"""
Load Layer - Data Persistence

This layer handles the Redis connection and the single write.
- No business logic, just I/O operations
"""
