"""Remote exceptions and their mapping onto Python's OSError family."""

from __future__ import annotations

import errno
import os

FILE_NOT_FOUND_EXCEPTION = "java.io.FileNotFoundException"
PERMISSION_DENIED_EXCEPTION = "org.apache.hadoop.security.AccessControlException"
PATH_IS_NOT_EMPTY_DIR_EXCEPTION = "org.apache.hadoop.fs.PathIsNotEmptyDirectoryException"
FILE_ALREADY_EXISTS_EXCEPTION = "org.apache.hadoop.fs.FileAlreadyExistsException"
ALREADY_BEING_CREATED_EXCEPTION = "org.apache.hadoop.hdfs.protocol.AlreadyBeingCreatedException"
ILLEGAL_ARGUMENT_EXCEPTION = "org.apache.hadoop.HadoopIllegalArgumentException"

_EXCEPTION_ERRNO = {
    FILE_NOT_FOUND_EXCEPTION: errno.ENOENT,
    PERMISSION_DENIED_EXCEPTION: errno.EACCES,
    PATH_IS_NOT_EMPTY_DIR_EXCEPTION: errno.ENOTEMPTY,
    FILE_ALREADY_EXISTS_EXCEPTION: errno.EEXIST,
    ILLEGAL_ARGUMENT_EXCEPTION: errno.EINVAL,
}


class RemoteError(Exception):
    """A remote Java exception reported by a namenode or datanode."""

    def __init__(self, method: str, exception: str, message: str = "", desc: str = ""):
        self.method = method
        self.exception = exception
        self.message = message
        self.desc = desc
        super().__init__(f"{method} call failed with {desc or exception}: {message or exception}")


class ReplicatingError(Exception):
    """All data was acknowledged, but the namenode has not completed the file yet."""

    def __init__(self, message: str = "replication in progress"):
        super().__init__(message)


def _errno_error(code: int) -> OSError:
    return OSError(code, os.strerror(code))


def interpret_exception(err: BaseException) -> BaseException:
    """Map a known remote exception onto an OSError; return anything else as is."""
    if isinstance(err, RemoteError):
        code = _EXCEPTION_ERRNO.get(err.exception)
        if code is not None:
            return _errno_error(code)
    return err


def interpret_create_exception(err: BaseException) -> BaseException:
    """Like interpret_exception, but a file being created elsewhere counts as existing."""
    if isinstance(err, RemoteError) and err.exception == ALREADY_BEING_CREATED_EXCEPTION:
        return _errno_error(errno.EEXIST)
    return interpret_exception(err)


def path_error(op: str, path: str, err: BaseException) -> OSError:
    """Build an OSError for an operation on a path, caused by ``err``.

    The result carries ``op``, ``filename`` and the underlying ``err``. When
    ``err`` has an errno, the matching OSError subclass is produced.
    """
    if isinstance(err, OSError) and err.errno is not None:
        exc = OSError(err.errno, err.strerror, path)
    else:
        exc = OSError(f"{op} {path}: {err}")
        exc.filename = path
    exc.op = op
    exc.err = err
    exc.__cause__ = err
    return exc


def is_err_replicating(err: BaseException | None) -> bool:
    """Tell whether ``err`` is a path error wrapping a ReplicatingError."""
    return isinstance(err, OSError) and isinstance(getattr(err, "err", None), ReplicatingError)