"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, request building, transport
    ├── parsing.py        # JSON payload -> schemas models
    └── {feature}.py      # Derived helpers over parsed models

Only ``openweather/`` exists today.
"""
