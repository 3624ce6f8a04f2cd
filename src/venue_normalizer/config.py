from dataclasses import dataclass
from typing import Optional


@dataclass
class NormalizerConfig:
    # Core Paths
    manifest_path: Optional[str] = None

    # Lookup tables (JSON); built-in defaults when unset
    lookup_tables_path: Optional[str] = None

    # Logging
    log_level: str = "INFO"
