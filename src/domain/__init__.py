"""Domain layer - account search concepts.

Structure:
- entities/: Account records returned by the validator
- value_objects/: Queries, stream frames and search outcomes
- enums/: Query modes and connection states
- errors/: Validator errors and user-facing messages
- protocols/: Ports implemented by infrastructure adapters

The domain layer has NO dependencies on any framework or transport.
"""
