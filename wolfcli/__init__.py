"""
Wolfram|Alpha Query Client.

- core/: Configuration, logging, exceptions
- cli/: Query parameters, HTTP client, response parsing, formatting, session
"""
