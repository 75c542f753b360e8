from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class LibraryConfig:
    """Configuration for loading the complex feature library."""
    properties_path: Optional[str] = field(default_factory=lambda: os.getenv("COMPLEX_FEATURES_PROPERTIES"))
    encoding: str = field(default_factory=lambda: os.getenv("COMPLEX_FEATURES_ENCODING", "utf-8"))
    log_level: str = field(default_factory=lambda: os.getenv("COMPLEX_FEATURES_LOG_LEVEL", "INFO"))

    def __post_init__(self):
        # An empty env var means "not configured"
        if not self.properties_path:
            self.properties_path = None
        self.log_level = self.log_level.upper()
