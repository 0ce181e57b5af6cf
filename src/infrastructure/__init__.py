"""Infrastructure layer - adapters for external systems.

Structure:
- validator/: httpx and websockets clients for the validation service
- bank_directory/: in-memory bank code directory
- logging/: structlog console adapter
"""
