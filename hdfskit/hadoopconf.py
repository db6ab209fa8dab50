"""Reading and interpreting Hadoop XML configuration files."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from pathlib import Path
from urllib.parse import urlparse

CONF_FILES = ("core-site.xml", "hdfs-site.xml", "mapred-site.xml")

_HA_NAMENODES_PREFIX = "dfs.ha.namenodes."
_RPC_ADDRESS_PREFIX = "dfs.namenode.rpc-address."


class HadoopConf(dict):
    """All key/value pairs found in a user's Hadoop configuration files."""

    def namenodes(self) -> list[str]:
        """Return the sorted, deduplicated namenode addresses in the configuration.

        Addresses come from ``fs.defaultFS`` (or the deprecated
        ``fs.default.name``) and from keys starting with
        ``dfs.namenode.rpc-address.``. Logical cluster names declared by
        ``dfs.ha.namenodes.<cluster>`` are left out.
        """
        found: set[str] = set()
        cluster_names: list[str] = []

        for key, value in self.items():
            if "fs.default" in key:
                found.add(_url_host(value))
            elif key.startswith(_RPC_ADDRESS_PREFIX):
                found.add(value)
            elif key.startswith(_HA_NAMENODES_PREFIX):
                cluster_names.append(key[len(_HA_NAMENODES_PREFIX):])

        found.difference_update(cluster_names)
        return sorted(found)


def _url_host(value: str) -> str:
    netloc = urlparse(value).netloc
    return netloc.rpartition("@")[2]


def _read_properties(data: bytes) -> dict[str, str]:
    root = ET.fromstring(data)
    return {
        prop.findtext("name", default=""): prop.findtext("value", default="")
        for prop in root.findall("property")
    }


def load(path: str | os.PathLike[str]) -> HadoopConf | None:
    """Load core-site.xml, hdfs-site.xml and mapred-site.xml from a directory.

    Returns None when none of the files exist. Raises OSError if a file
    cannot be read and ValueError if one cannot be parsed.
    """
    conf: HadoopConf | None = None
    directory = Path(path)

    for name in CONF_FILES:
        try:
            data = (directory / name).read_bytes()
        except FileNotFoundError:
            continue

        try:
            properties = _read_properties(data)
        except ET.ParseError as err:
            raise ValueError(f"{path}: {err}") from err

        if conf is None:
            conf = HadoopConf()
        conf.update(properties)

    return conf


def load_from_environment() -> HadoopConf | None:
    """Locate and load the Hadoop configuration named by the environment.

    ``HADOOP_CONF_DIR`` is tried first, then ``$HADOOP_HOME/conf``. Returns
    None when no configuration is found.
    """
    conf_dir = os.environ.get("HADOOP_CONF_DIR", "")
    if conf_dir:
        conf = load(conf_dir)
        if conf is not None:
            return conf

    hadoop_home = os.environ.get("HADOOP_HOME", "")
    if hadoop_home:
        conf = load(os.path.join(hadoop_home, "conf"))
        if conf is not None:
            return conf

    return None