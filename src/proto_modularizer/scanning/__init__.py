"""Schema scanning: proto files to FileRecords."""

from .models import FileRecord
from .proto_scanner import ProtoScanner, parse_proto

__all__ = ["FileRecord", "ProtoScanner", "parse_proto"]
