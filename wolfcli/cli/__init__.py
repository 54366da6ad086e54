"""
CLI Client Module.

Command-line client for the Wolfram|Alpha Full Results API.

Architecture:
- params: query parameters sent on every request
- client: synchronous HTTP client (httpx) with a Rich spinner
- parser: JSON decoding of the response body
- formatter: render mode selection and plain-text rendering
- shell: one-shot and interactive session driver

Usage:
    wolfq "integrate x^2"
    wolfq "solve x^2 = 4" --interactive
"""
