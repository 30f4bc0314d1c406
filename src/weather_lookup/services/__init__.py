"""
Shared service utilities.

- http.py      - requests.Session with fixed timeouts and no retries
"""
