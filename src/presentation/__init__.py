"""Presentation layer - command-line front end.

The presentation layer is thin: it parses arguments, submits queries to the
application layer and renders outcomes. It contains NO business logic.

Structure:
- cli.py: ``account-search`` command
"""
