# hdfskit

Building blocks for working with an HDFS cluster from Python, using only the
standard library:

- `hdfskit.hadoopconf` reads Hadoop's XML configuration and finds the
  namenodes it names;
- `hdfskit.options` turns that configuration into `ClientOptions`;
- `hdfskit.errors` maps remote Java exceptions onto Python's `OSError` family;
- `hdfskit.summary` holds content summaries and server defaults as value
  objects;
- `hdfskit.client` provides a `Client` on top of a namenode connection that
  you supply;
- `hdfskit.cli` holds helpers for an HDFS command-line tool: path handling,
  size formatting, shell completion, head/tail sections and argument parsing.

## Loading configuration

```python
from hdfskit.hadoopconf import load, load_from_environment

conf = load_from_environment()   # HADOOP_CONF_DIR, then $HADOOP_HOME/conf
if conf is not None:
    print(conf.namenodes())      # sorted, de-duplicated "host:port" strings

conf = load("/etc/hadoop/conf")  # or read a directory explicitly
```

`load` reads `core-site.xml`, `hdfs-site.xml` and `mapred-site.xml` from the
directory, later files overriding earlier ones. It returns `None` when none of
them exist, lets `OSError` through when a file cannot be read, and raises
`ValueError` when one cannot be parsed. `load_from_environment` returns `None`
when neither location yields a configuration.

`HadoopConf` is a `dict`. Its `namenodes()` method draws on `fs.defaultFS`
(or the older `fs.default.name`) and every `dfs.namenode.rpc-address.*` key,
leaves out the logical cluster names declared by `dfs.ha.namenodes.*`, and
returns an empty list when nothing is found.

## Client options

```python
from hdfskit.hadoopconf import load_from_environment
from hdfskit.options import client_options_from_conf

options = client_options_from_conf(load_from_environment())
```

`client_options_from_conf` accepts any mapping (or `None`) and fills in:

- `addresses` from `namenodes()` when the mapping has that method;
- `use_datanode_hostname` from `dfs.client.use.datanode.hostname`;
- `kerberos_client`, set to an `UnconfiguredKerberosClient` placeholder when
  `hadoop.security.authentication` is `kerberos`; replace it with a
  credentialed client, or clear it, before creating a `Client`;
- `kerberos_service_principle_name` from `dfs.namenode.kerberos.principal`,
  with everything from the first `@` removed;
- `data_transfer_protection`, a `DataTransferProtection` member: the highest
  level listed in `dfs.data.transfer.protection`, or `PRIVACY` when
  `dfs.encrypt.data.transfer` is `true`;
- `skip_sasl_for_privileged_datanode_ports`, true unless
  `dfs.encrypt.data.transfer` is `true`.

## Errors

`RemoteError(method, exception, message="", desc="")` represents a remote
Java exception. `interpret_exception` maps the known exception class names
onto `OSError` with the matching errno, so Python produces
`FileNotFoundError`, `PermissionError` or `FileExistsError`, or a plain
`OSError` with `ENOTEMPTY` or `EINVAL`; anything else is returned unchanged.
`interpret_create_exception` additionally treats a file already being created
as existing.

`path_error(op, path, err)` builds an `OSError` for `path` carrying `op` and
the underlying `err` as attributes. `is_err_replicating` tells whether an
error is such a path error wrapping a `ReplicatingError`, meaning all data was
written but the namenode has not yet completed the file.

## Summaries and the client

`ContentSummary.from_response(name, summary)` and
`ServerDefaults.from_response(defaults)` build frozen dataclasses from
message mappings (keys such as `length`, `spaceConsumed`, `fileCount`,
`blockSize`, `replication`); missing fields take zero values.

`Client(options, namenode)` wraps a namenode connection object that has
`user` and `client_name` attributes, an `execute(method, request)` method
returning a response mapping, and `close()`. It raises `ValueError` when a
Kerberos client lacks credentials or no service principal name is set. It
offers the `user` and `name` properties, `server_defaults()` and
`data_encryption_key()` (each fetched once and cached), `content_summary(name)`
(remote failures become path errors with op `"content summary"`), `close()`,
and use as a context manager.

## Command-line helpers

```python
from hdfskit.cli.format import format_bytes
from hdfskit.cli.paths import has_glob, normalize_paths, user_dir
from hdfskit.cli.args import parse_owner, parse_mode

format_bytes(512)                      # '512B'
format_bytes(2048)                     # '2.0K'
has_glob("/data/*.csv")                # True
has_glob("/data/\\*.csv")              # False: the glob character is escaped
normalize_paths(["hdfs://nn:8020/a/../b", "c/"])   # (['/b', 'c'], 'nn:8020')
user_dir("alice")                      # '/user/alice'
parse_owner("alice")                   # ('alice', 'alice')
parse_mode("755")                      # 493
```

- `hdfskit.cli.paths`: `normalize_paths` raises `MultipleNamenodeUrlsError`
  when URLs name different hosts; `absolute_path(path, home)` resolves
  relative paths.
- `hdfskit.cli.complete`: `completion_words`, `count_position`,
  `is_known_command`, `complete_arg_kind` (returns `LOCAL_FILE`,
  `REMOTE_PATH` or `None`) and `completion_split`.
- `hdfskit.cli.section`: `resolve_section_limits` (ten lines by default,
  `ValueError` for both `-n` and `-c`), `head_lines`, `tail_lines` and
  `copy_bytes`, all working on binary file objects.
- `hdfskit.cli.args`: `parse_owner`, `parse_mode` (raises `ValueError` for
  anything but an octal mode under 32 bits) and `select_stat_test`, whose
  `StatTest` result is called with a stat result, or `None` for a missing path.

## What the package does not do

It contains no namenode RPC or datanode transfer implementation: it does not
connect to a cluster, and it cannot open, read, write, list, rename or delete
files. A `Client` works only with a connection object you provide. There is
no Kerberos authentication, and no installed command-line program; the
`hdfskit.cli` modules are helpers for building one.