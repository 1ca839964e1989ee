"""
Scan result structures.

These structures define what is printed for each ROM and the JSON format
written by --json.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any
import json

from ..utils.string_utils import format_offset


@dataclass
class SongTableResult:
    """Outcome of locating the song table in one ROM."""
    name: str = ""
    title: str = ""
    code: str = ""
    maker: str = ""
    table_pointer_offset: Optional[int] = None
    song_table_address: Optional[int] = None
    song_table_offset: Optional[int] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.table_pointer_offset is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "code": self.code,
            "maker": self.maker,
            "found": self.found,
            "tablePointerOffset": self.table_pointer_offset,
            "songTableAddress": self.song_table_address,
            "songTableOffset": self.song_table_offset,
            "error": self.error
        }

    def format_line(self, uppercase: bool = False) -> str:
        """Render the headline result the way the command line prints it."""
        if self.error is not None:
            return f"error: {self.error}"
        if not self.found:
            return "pointer to songtable not found"
        return f"pointer to songtable at: {format_offset(self.table_pointer_offset, uppercase)}"

    def format_details(self, uppercase: bool = False, show_header: bool = True) -> List[str]:
        """Extra lines describing the ROM header and the table itself."""
        lines = []
        if show_header and (self.title or self.code):
            lines.append(f"  game: {self.title} [{self.code}] maker {self.maker}")
        if self.song_table_offset is not None:
            lines.append(
                f"  songtable at: {format_offset(self.song_table_offset, uppercase)}"
                f" (address {format_offset(self.song_table_address, uppercase)})"
            )
        elif self.song_table_address is not None:
            lines.append(
                f"  invalid songtable pointer: {format_offset(self.song_table_address, uppercase)}"
            )
        return lines


@dataclass
class ScanReport:
    """
    Results for a batch of ROMs.

    Each ROM is scanned independently; a failure in one does not
    prevent the others from being reported.
    """
    results: List[SongTableResult] = field(default_factory=list)

    @property
    def all_found(self) -> bool:
        return bool(self.results) and all(r.found for r in self.results)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "results": [r.to_dict() for r in self.results],
            "found": sum(1 for r in self.results if r.found),
            "total": len(self.results)
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def save(self, path: str) -> None:
        """Save to file."""
        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.to_json())
