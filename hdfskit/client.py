"""A client bound to an HDFS namenode connection."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from .errors import RemoteError, interpret_exception, path_error
from .options import ClientOptions
from .summary import ContentSummary, ServerDefaults


class NamenodeConnection(Protocol):
    """What a Client needs from its namenode connection."""

    user: str
    client_name: str

    def execute(self, method: str, request: dict) -> Any: ...

    def close(self) -> Any: ...


class Client:
    """A connection to an HDFS cluster through a namenode RPC connection."""

    def __init__(self, options: ClientOptions, namenode: NamenodeConnection):
        kerberos = options.kerberos_client
        if kerberos is not None and getattr(kerberos, "credentials", None) is None:
            raise ValueError("kerberos enabled, but kerberos client is missing credentials")
        if kerberos is not None and not options.kerberos_service_principle_name:
            raise ValueError("kerberos enabled, but kerberos namenode SPN is not provided")

        self.options = options
        self.namenode = namenode
        self._defaults: Optional[Any] = None
        self._encryption_key: Optional[Any] = None

    @property
    def user(self) -> str:
        """The user the client acts as."""
        return self.namenode.user

    @property
    def name(self) -> str:
        """The unique name used when talking to namenodes and datanodes."""
        return self.namenode.client_name

    def _fetch_defaults(self) -> Any:
        if self._defaults is None:
            resp = self.namenode.execute("getServerDefaults", {})
            self._defaults = (resp or {}).get("serverDefaults")
        return self._defaults

    def server_defaults(self) -> ServerDefaults:
        """Fetch (once) and return the filesystem defaults stored on the namenode."""
        return ServerDefaults.from_response(self._fetch_defaults())

    def content_summary(self, name: str) -> ContentSummary:
        """Return the content summary for the tree rooted at ``name``."""
        try:
            resp = self.namenode.execute("getContentSummary", {"path": name})
        except (RemoteError, OSError) as err:
            raise path_error("content summary", name, interpret_exception(err)) from err
        return ContentSummary.from_response(name, (resp or {}).get("summary"))

    def data_encryption_key(self) -> Any:
        """Fetch (once) and return the namenode's data encryption key."""
        if self._encryption_key is None:
            resp = self.namenode.execute("getDataEncryptionKey", {})
            self._encryption_key = (resp or {}).get("dataEncryptionKey")
        return self._encryption_key

    def close(self) -> Any:
        """Close the underlying namenode connection."""
        return self.namenode.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()