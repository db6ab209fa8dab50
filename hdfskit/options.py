"""Client options and their derivation from a Hadoop configuration."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional


class DataTransferProtection(str, enum.Enum):
    """Protection level required when talking to datanodes, weakest first."""

    AUTHENTICATION = "authentication"
    INTEGRITY = "integrity"
    PRIVACY = "privacy"


_PROTECTION_ORDER = [
    DataTransferProtection.AUTHENTICATION,
    DataTransferProtection.INTEGRITY,
    DataTransferProtection.PRIVACY,
]


@dataclass
class UnconfiguredKerberosClient:
    """A Kerberos client without credentials.

    Set when the configuration demands Kerberos; it must be replaced with a
    credentialed client (or removed) before a Client is created.
    """

    credentials: Any = None


@dataclass
class ClientOptions:
    """Configurable options for a Client."""

    addresses: list[str] = field(default_factory=list)
    user: str = ""
    use_datanode_hostname: bool = False
    namenode_dial: Optional[Callable[..., Any]] = None
    datanode_dial: Optional[Callable[..., Any]] = None
    kerberos_client: Any = None
    kerberos_service_principle_name: str = ""
    data_transfer_protection: Optional[DataTransferProtection] = None
    skip_sasl_for_privileged_datanode_ports: bool = False


def client_options_from_conf(conf: Optional[Mapping[str, str]]) -> ClientOptions:
    """Derive ClientOptions from a Hadoop configuration mapping."""
    conf = conf or {}
    namenodes = getattr(conf, "namenodes", None)
    options = ClientOptions(addresses=list(namenodes() or []) if namenodes else [])

    options.use_datanode_hostname = conf.get("dfs.client.use.datanode.hostname") == "true"

    if conf.get("hadoop.security.authentication", "").lower() == "kerberos":
        options.kerberos_client = UnconfiguredKerberosClient()

    principal = conf.get("dfs.namenode.kerberos.principal", "")
    if principal:
        options.kerberos_service_principle_name = principal.split("@")[0]

    # The highest requested level wins.
    requested = set(conf.get("dfs.data.transfer.protection", "").lower().split(","))
    for level in _PROTECTION_ORDER:
        if level.value in requested:
            options.data_transfer_protection = level

    if conf.get("dfs.encrypt.data.transfer", "").lower() == "true":
        options.data_transfer_protection = DataTransferProtection.PRIVACY
    else:
        # Privileged datanode ports skip the SASL handshake unless
        # encryption is mandated.
        options.skip_sasl_for_privileged_datanode_ports = True

    return options