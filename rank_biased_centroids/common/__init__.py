"""Common utilities shared across the package.

Includes:
- ``config``: pydantic-settings configuration from ``RBC_`` environment variables.
- ``logging``: structured logging setup with structlog.

Import pattern:
- from rank_biased_centroids.common.config import FusionSettings
- from rank_biased_centroids.common.logging import configure_logging
"""
