"""Configuration management for the localization sync tasks."""

import logging
import os
import tempfile
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class ProductPreset:
    """Default paths for one of the products living in the app repository."""

    name: str
    project_path: str  # relative to the repository root
    xliff_name: str
    export_base_path: str


PRODUCTS: Dict[str, ProductPreset] = {
    "firefox": ProductPreset(
        name="firefox",
        project_path="firefox-ios/Client.xcodeproj",
        xliff_name="firefox-ios.xliff",
        export_base_path="/tmp/ios-localization",
    ),
    "focus": ProductPreset(
        name="focus",
        project_path="focus-ios/Blockzilla.xcodeproj",
        xliff_name="focus-ios.xliff",
        export_base_path="/tmp/ios-localization-focus",
    ),
}


def get_product(name: Optional[str]) -> Optional[ProductPreset]:
    """Look up a product preset by name (case-insensitive)."""
    if not name:
        return None
    return PRODUCTS.get(name.lower())


@dataclass
class Config:
    """Application configuration."""

    # File naming
    xliff_name: str = field(
        default_factory=lambda: os.getenv("L10N_XLIFF_NAME", "firefox-ios.xliff")
    )
    export_base_path: str = field(
        default_factory=lambda: os.getenv("L10N_EXPORT_BASE_PATH", "/tmp/ios-localization")
    )

    # xcloc manifest settings
    development_region: str = field(
        default_factory=lambda: os.getenv("L10N_DEVELOPMENT_REGION", "en-US")
    )
    project_name: str = field(
        default_factory=lambda: os.getenv("L10N_PROJECT_NAME", "Client.xcodeproj")
    )

    # External tooling
    xcodebuild_path: str = field(
        default_factory=lambda: os.getenv("L10N_XCODEBUILD", "xcodebuild")
    )
    import_work_dir: str = field(
        default_factory=lambda: os.getenv(
            "L10N_IMPORT_DIR", os.path.join(tempfile.gettempdir(), "l10nsync_import")
        )
    )

    # Export fan-out; 0 lets the executor pick
    max_workers: int = field(
        default_factory=lambda: int(os.getenv("L10N_MAX_WORKERS", "0"))
    )

    log_level: str = field(
        default_factory=lambda: os.getenv("L10N_LOG_LEVEL", "INFO").upper()
    )

    # Locale used as the source for template generation
    template_locale: str = "en-US"

    # Sidecar file next to the Xcode project holding note overrides
    comments_file_name: str = "l10n_comments.txt"

    @property
    def worker_limit(self) -> Optional[int]:
        """Worker count for the export pool, ``None`` meaning executor default."""
        return self.max_workers or None

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if self.max_workers < 0:
            errors.append("L10N_MAX_WORKERS must not be negative")
        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"L10N_LOG_LEVEL '{self.log_level}' is not a logging level")
        if not self.xcodebuild_path:
            errors.append("L10N_XCODEBUILD is empty")
        return errors


# Global config instance
config = Config()
