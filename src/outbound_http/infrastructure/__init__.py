"""
Infrastructure Layer - outbound HTTP plumbing.

Contains:
- http: request building, client execution and status classification
"""
