"""Application layer - account search use cases.

Structure:
- services/query_builder: raw input → validated AccountQuery
- services/search_session: per-query state machine and outcome reduction
- services/account_search_service: transport selection and session ownership

The application layer orchestrates domain logic through protocols only; it
never imports infrastructure.
"""
