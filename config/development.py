"""Development environment configuration."""

import os
from config.base import BaseConfig


class DevelopmentConfig(BaseConfig):
    """Configuration for development environment."""

    def _setup_environment(self):
        """Setup development-specific configuration."""
        self.environment = "development"
        self.debug = True

        # Development logging
        os.environ.setdefault("LOG_LEVEL", "DEBUG")
