"""
json-to-redis-trigger

Waits until a trigger time, then writes a JSON document into a Redis key.
"""

__version__ = "1.0.0"
