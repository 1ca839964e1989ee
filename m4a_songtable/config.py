"""
Configuration handling for the song table locator.
"""

from dataclasses import dataclass, fields as dataclass_fields
from typing import Optional
import json
from pathlib import Path

from .search.song_table import MATCH_TOLERANCE, ALIGNMENT, TABLE_POINTER_DISPLACEMENT
from .utils.string_utils import to_camel_case, to_snake_case


@dataclass
class Config:
    """Configuration options for the song table locator."""

    # Scan options
    match_tolerance: int = MATCH_TOLERANCE
    alignment: int = ALIGNMENT
    table_pointer_displacement: int = TABLE_POINTER_DISPLACEMENT

    # Output options
    resolve_pointer: bool = True
    show_header: bool = True
    uppercase_hex: bool = False

    def validate(self) -> None:
        """Reject values the scanner cannot work with."""
        for name in ('match_tolerance', 'alignment', 'table_pointer_displacement'):
            value = getattr(self, name)
            # bool is a subclass of int but never a valid count
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{to_camel_case(name)} must be an integer, got {value!r}")
        for name in ('resolve_pointer', 'show_header', 'uppercase_hex'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{to_camel_case(name)} must be true or false, got {value!r}")
        if self.alignment <= 0:
            raise ValueError(f"alignment must be positive, got {self.alignment}")
        if self.table_pointer_displacement < 0:
            raise ValueError(
                f"tablePointerDisplacement must not be negative, got {self.table_pointer_displacement}"
            )

    @classmethod
    def load(cls, path: Optional[Path] = None) -> 'Config':
        """Load configuration from a JSON file."""
        if path is None:
            path = Path(__file__).parent / 'config.json'

        if not path.exists():
            return cls()

        with open(path, 'r') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a JSON object")

        # Convert camelCase to snake_case
        converted = {to_snake_case(key): value for key, value in data.items()}

        # Filter to only include valid fields
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in converted.items() if k in valid_fields}

        config = cls(**filtered)
        config.validate()
        return config

    def save(self, path: Path) -> None:
        """Save configuration to a JSON file."""
        data = {to_camel_case(key): value for key, value in self.__dict__.items()}

        with open(path, 'w') as f:
            json.dump(data, f, indent=2)
