"""
Configuration settings for YouTube Caption Fetcher.

Config file format (YAML or JSON):
```yaml
language_code: "en"
timeout: 20
max_redirects: 10
verify_ssl: true
user_agent: null        # null picks a random desktop Chrome user agent
accept_language: "en-US,en;q=0.9"
title_suffix: " - YouTube"
```
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class Settings:
    """Configuration settings for the caption fetcher."""

    # Caption language requested from the manifest
    language_code: str = "en"

    # HTTP behavior
    timeout: float = 20.0
    max_redirects: int = 10
    verify_ssl: bool = True

    # Browser emulation
    user_agent: Optional[str] = None  # None: random per client construction
    accept_language: str = "en-US,en;q=0.9"

    # Stripped from the end of the page <title>
    title_suffix: str = " - YouTube"

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create Settings from a dictionary (parsed YAML/JSON). Unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})

    @classmethod
    def from_file(cls, path: str) -> "Settings":
        """Load settings from a YAML or JSON file."""
        file_path = Path(path)
        with open(file_path, 'r', encoding='utf-8') as f:
            if file_path.suffix.lower() in ('.yaml', '.yml'):
                try:
                    data = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ValueError(f"Invalid config file {path}: {e}") from e
            else:
                data = json.load(f)

        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return cls.from_dict(data or {})

    def to_dict(self) -> dict:
        return {
            "language_code": self.language_code,
            "timeout": self.timeout,
            "max_redirects": self.max_redirects,
            "verify_ssl": self.verify_ssl,
            "user_agent": self.user_agent,
            "accept_language": self.accept_language,
            "title_suffix": self.title_suffix,
        }


DEFAULT_SETTINGS = Settings()
