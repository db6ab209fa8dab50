"""Values describing content summaries and namenode server defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class ContentSummary:
    """Information about a file or directory tree, as reported by the namenode."""

    name: str
    size: int = 0
    size_after_replication: int = 0
    file_count: int = 0
    directory_count: int = 0
    name_quota: int = 0
    space_quota: int = 0

    @classmethod
    def from_response(cls, name: str, summary: Optional[Mapping[str, Any]]) -> "ContentSummary":
        """Build from a content summary message; missing fields count as zero."""
        summary = summary or {}
        return cls(
            name=name,
            size=int(summary.get("length", 0)),
            size_after_replication=int(summary.get("spaceConsumed", 0)),
            file_count=int(summary.get("fileCount", 0)),
            directory_count=int(summary.get("directoryCount", 0)),
            name_quota=int(summary.get("quota", 0)),
            space_quota=int(summary.get("spaceQuota", 0)),
        )


@dataclass(frozen=True)
class ServerDefaults:
    """The filesystem configuration stored on the namenode."""

    block_size: int = 0
    bytes_per_checksum: int = 0
    write_packet_size: int = 0
    replication: int = 0
    file_buffer_size: int = 0
    encrypt_data_transfer: bool = False
    trash_interval: int = 0
    key_provider_uri: str = ""
    policy_id: int = 0

    @classmethod
    def from_response(cls, defaults: Optional[Mapping[str, Any]]) -> "ServerDefaults":
        """Build from a server defaults message; missing fields take zero values."""
        defaults = defaults or {}
        return cls(
            block_size=int(defaults.get("blockSize", 0)),
            bytes_per_checksum=int(defaults.get("bytesPerChecksum", 0)),
            write_packet_size=int(defaults.get("writePacketSize", 0)),
            replication=int(defaults.get("replication", 0)),
            file_buffer_size=int(defaults.get("fileBufferSize", 0)),
            encrypt_data_transfer=bool(defaults.get("encryptDataTransfer", False)),
            trash_interval=int(defaults.get("trashInterval", 0)),
            key_provider_uri=str(defaults.get("keyProviderUri", "")),
            policy_id=int(defaults.get("policyId", 0)),
        )