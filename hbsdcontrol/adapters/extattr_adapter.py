#!/usr/bin/env python3
"""
extattr(2) Adapter Implementation

This module provides the ExtattrAdapter class that implements the
AttributeStoreInterface Protocol on FreeBSD and HardenedBSD by calling the
libc extattr_*_file functions through ctypes.

The adapter is a translation layer only: it returns raw listing buffers and
raw values, and turns failed calls into AttributeStoreFailure. Decoding and
reconciliation happen in the feature state engine.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)

Usage:
    >>> from hbsdcontrol.adapters import ExtattrAdapter
    >>>
    >>> store = ExtattrAdapter()
    >>> buffer = store.list("/usr/local/bin/firefox")
    >>> store.set("/usr/local/bin/firefox", "hbsd.pax.mprotect", 0)
"""

import ctypes
import ctypes.util
import errno
import os

from ..core.constants import ATTRIBUTE_NAMESPACE, DEFAULT_LIST_BUFFER_LIMIT
from ..core.errors import AttributeStoreFailure, FileNotFound, HbsdControlError
from ..utils.logger import get_logger

logger = get_logger(__name__)

# FreeBSD reports a missing attribute as ENOATTR (87); Linux names it ENODATA.
ENOATTR = getattr(errno, "ENOATTR", getattr(errno, "ENODATA", 87))

# Attempts at sizing a listing while another writer keeps adding attributes
LIST_RETRIES = 3


def _load_libc() -> ctypes.CDLL:
    libc_path = ctypes.util.find_library("c")
    libc = ctypes.CDLL(libc_path, use_errno=True)
    if not hasattr(libc, "extattr_list_file"):
        raise HbsdControlError("extattr(2) is not available on this platform")
    _declare_prototypes(libc)
    return libc


def _declare_prototypes(libc: ctypes.CDLL) -> None:
    libc.extattr_string_to_namespace.argtypes = [ctypes.c_char_p, ctypes.POINTER(ctypes.c_int)]
    libc.extattr_string_to_namespace.restype = ctypes.c_int

    libc.extattr_list_file.argtypes = [
        ctypes.c_char_p,
        ctypes.c_int,
        ctypes.c_void_p,
        ctypes.c_size_t,
    ]
    libc.extattr_list_file.restype = ctypes.c_ssize_t

    for func in (libc.extattr_get_file, libc.extattr_set_file):
        func.argtypes = [
            ctypes.c_char_p,
            ctypes.c_int,
            ctypes.c_char_p,
            ctypes.c_void_p,
            ctypes.c_size_t,
        ]
        func.restype = ctypes.c_ssize_t

    libc.extattr_delete_file.argtypes = [ctypes.c_char_p, ctypes.c_int, ctypes.c_char_p]
    libc.extattr_delete_file.restype = ctypes.c_int


class ExtattrAdapter:
    """
    System namespace extended attribute access through libc.

    Attributes:
        list_buffer_limit: Largest listing, in bytes, the adapter will read
    """

    def __init__(self, libc=None, list_buffer_limit: int = DEFAULT_LIST_BUFFER_LIMIT):
        self._libc = libc if libc is not None else _load_libc()
        self.list_buffer_limit = list_buffer_limit
        self._namespace = self._resolve_namespace(ATTRIBUTE_NAMESPACE)

    def _resolve_namespace(self, name: str) -> int:
        namespace = ctypes.c_int()
        if self._libc.extattr_string_to_namespace(name.encode("ascii"), ctypes.byref(namespace)):
            raise HbsdControlError(f"unknown extended attribute namespace: {name}")
        return namespace.value

    def _failure(self, operation: str, path: str, name: str | None = None) -> Exception:
        err = ctypes.get_errno()
        if err == errno.ENOENT:
            return FileNotFound(path)
        return AttributeStoreFailure(operation, path, attribute=name, errno=err)

    def list(self, path: str) -> bytes:
        raw_path = os.fsencode(path)
        logger.debug(f"list attrs on file: {path}")

        for _ in range(LIST_RETRIES):
            size = self._libc.extattr_list_file(raw_path, self._namespace, None, 0)
            if size == -1:
                raise self._failure("list", path)
            if size == 0:
                return b""
            if size > self.list_buffer_limit:
                raise AttributeStoreFailure(
                    "list",
                    path,
                    detail=f"listing of {size} bytes exceeds limit of {self.list_buffer_limit}",
                )

            buffer = ctypes.create_string_buffer(size)
            nbytes = self._libc.extattr_list_file(raw_path, self._namespace, buffer, size)
            if nbytes == -1:
                raise self._failure("list", path)
            # A listing that exactly fills the buffer may have been truncated
            # by a concurrent writer; probe again to find out.
            if nbytes < size or self._libc.extattr_list_file(
                raw_path, self._namespace, None, 0
            ) <= size:
                return buffer.raw[:nbytes]

        raise AttributeStoreFailure("list", path, detail="attribute listing kept changing")

    def get(self, path: str, name: str) -> bytes | None:
        raw_path = os.fsencode(path)
        raw_name = name.encode("utf-8", "surrogateescape")

        size = self._libc.extattr_get_file(raw_path, self._namespace, raw_name, None, 0)
        if size == -1:
            if ctypes.get_errno() == ENOATTR:
                return None
            raise self._failure("get", path, name)

        buffer = ctypes.create_string_buffer(max(size, 1))
        nbytes = self._libc.extattr_get_file(raw_path, self._namespace, raw_name, buffer, size)
        if nbytes == -1:
            if ctypes.get_errno() == ENOATTR:
                return None
            raise self._failure("get", path, name)
        return buffer.raw[:nbytes]

    def set(self, path: str, name: str, value: int) -> None:
        data = str(int(value)).encode("ascii")
        nbytes = self._libc.extattr_set_file(
            os.fsencode(path),
            self._namespace,
            name.encode("utf-8", "surrogateescape"),
            data,
            len(data),
        )
        if nbytes == -1:
            raise self._failure("set", path, name)
        logger.info(f"{path}: {ATTRIBUTE_NAMESPACE}@{name} = {data.decode('ascii')}")

    def delete(self, path: str, name: str) -> None:
        logger.debug(f"reset attribute: {name} on file: {path}")
        rc = self._libc.extattr_delete_file(
            os.fsencode(path), self._namespace, name.encode("utf-8", "surrogateescape")
        )
        if rc == -1:
            if ctypes.get_errno() == ENOATTR:
                return
            raise self._failure("delete", path, name)
