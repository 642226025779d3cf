"""Regex-based scanner for Protocol Buffer schema files.

Reads just enough of each ``.proto`` file to build a FileRecord: the
``package`` declaration, ``import`` statements and the number of top-level
``message`` and ``enum`` definitions. Syntax validation is left to a real
protobuf parser; a file that cannot be read is logged and skipped.
"""

from __future__ import annotations

import re
from fnmatch import fnmatch
from pathlib import Path
from typing import Optional

from ..config import ModularizerConfig, default_config
from ..exceptions import InvalidPathError, SchemaParseError
from ..logging_config import get_logger
from .models import FileRecord

logger = get_logger(__name__)

_STRING = re.compile(r""""(?:[^"\\\n]|\\.)*"|'(?:[^'\\\n]|\\.)*'""")
_STRING_OR_COMMENT = re.compile(
    r""""(?:[^"\\\n]|\\.)*"|'(?:[^'\\\n]|\\.)*'|/\*.*?\*/|//[^\n]*""", re.DOTALL
)
_PACKAGE = re.compile(r"^\s*package\s+([A-Za-z_][\w.]*)\s*;", re.MULTILINE)
_IMPORT = re.compile(r'^\s*import\s+(?:public\s+|weak\s+)?"([^"]+)"\s*;', re.MULTILINE)
_TYPE_DECL = re.compile(r"\b(message|enum)\s+[A-Za-z_]\w*\s*\{")


def parse_proto(content: str, path: str) -> FileRecord:
    """Parse proto source text into a FileRecord.

    Args:
        content: File content
        path: Path relative to the schema root, used as the record key

    Returns:
        FileRecord with namespace, imports and top-level type counts
    """
    stripped = _strip_comments(content)

    package_match = _PACKAGE.search(stripped)
    namespace = package_match.group(1) if package_match else None

    imports = tuple(match.group(1) for match in _IMPORT.finditer(stripped))

    message_count, enum_count = _count_top_level_types(stripped)

    return FileRecord(
        path=path,
        namespace=namespace,
        imports=imports,
        message_count=message_count,
        enum_count=enum_count,
    )


def _strip_comments(content: str) -> str:
    def _keep_strings(match: re.Match[str]) -> str:
        token = match.group(0)
        if token[0] in "\"'":
            return token
        # Keep line breaks so statements after a block comment still start a line
        return "\n" * token.count("\n") or " "

    return _STRING_OR_COMMENT.sub(_keep_strings, content)


def _count_top_level_types(content: str) -> tuple[int, int]:
    """Count message and enum declarations at brace depth 0."""
    # Blank out string literals so braces inside options do not count
    body = _STRING.sub("''", content)

    depth_at: list[int] = []
    depth = 0
    for char in body:
        depth_at.append(depth)
        if char == "{":
            depth += 1
        elif char == "}":
            depth = max(0, depth - 1)

    messages = 0
    enums = 0
    for match in _TYPE_DECL.finditer(body):
        if depth_at[match.start()] != 0:
            continue
        if match.group(1) == "message":
            messages += 1
        else:
            enums += 1
    return messages, enums


class ProtoScanner:
    """Walks a schema root and produces one FileRecord per proto file."""

    def __init__(self, root_dir: Path | str, config: Optional[ModularizerConfig] = None):
        self.root_dir = Path(root_dir)
        self.config = config or default_config
        if not self.root_dir.is_dir():
            raise InvalidPathError(self.root_dir, "schema root must be a directory")
        logger.debug(f"Initialized {self.__class__.__name__} for {self.root_dir}")

    def scan(self) -> list[FileRecord]:
        """Scan all schema files under the root.

        Returns:
            FileRecords sorted by relative path
        """
        records: list[FileRecord] = []
        skipped = 0
        extensions = set(self.config.proto_extensions)

        for filepath in sorted(self.root_dir.rglob("*")):
            if not filepath.is_file() or filepath.suffix not in extensions:
                continue

            relative = filepath.relative_to(self.root_dir).as_posix()
            if self._is_excluded(relative):
                skipped += 1
                logger.debug(f"Skipped (excluded): {relative}")
                continue

            if len(records) >= self.config.max_files:
                logger.warning(f"Reached max files limit ({self.config.max_files})")
                break

            try:
                records.append(self._read(filepath, relative))
            except SchemaParseError as e:
                skipped += 1
                logger.warning(str(e))

        logger.debug(f"Scanned {len(records)} schema files ({skipped} skipped)")
        return sorted(records, key=lambda r: r.path)

    def _read(self, filepath: Path, relative: str) -> FileRecord:
        try:
            content = filepath.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaParseError(filepath, str(e))
        return parse_proto(content, relative)

    def _is_excluded(self, relative: str) -> bool:
        return any(fnmatch(relative, pattern) for pattern in self.config.exclude_patterns)
