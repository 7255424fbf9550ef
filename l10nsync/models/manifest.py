"""The contents.json record stored inside an .xcloc bundle."""

import json
from dataclasses import dataclass, field, asdict
from typing import Dict

# Identity of the Xcode release whose bundle layout we reproduce
TOOL_INFO: Dict[str, str] = {
    "toolBuildNumber": "13A233",
    "toolID": "com.apple.dt.xcode",
    "toolName": "Xcode",
    "toolVersion": "13.0",
}


@dataclass
class XclocManifest:
    """Manifest xcodebuild reads before importing a localization bundle."""

    developmentRegion: str
    project: str
    targetLocale: str
    toolInfo: Dict[str, str] = field(default_factory=lambda: dict(TOOL_INFO))
    version: str = "1.0"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "XclocManifest":
        return cls(**data)

    def to_json(self) -> str:
        """Serialize the way Xcode writes contents.json (``"key" : value``)."""
        return json.dumps(
            self.to_dict(),
            indent=2,
            sort_keys=True,
            separators=(",", " : "),
            ensure_ascii=False,
        ) + "\n"
