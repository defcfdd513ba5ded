from __future__ import annotations

import logging
import threading
import weakref
from typing import ClassVar, Set

logger = logging.getLogger(__name__)


class SessionHandle:
    """Handle for an external library with process-global state.

    At most one live handle per subclass may exist in a process, and the
    handle can be neither copied nor pickled. Constraints receive it by
    reference. It is not thread-safe: only one thread may use it at a time.
    A handle that is garbage collected without :meth:`close` is released
    on collection.
    """

    _live: ClassVar[Set[type]] = set()
    _registry_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        cls = type(self)
        with SessionHandle._registry_lock:
            if cls in SessionHandle._live:
                raise RuntimeError(f"A {cls.__name__} session is already open in this process")
            SessionHandle._live.add(cls)
        self._finalizer = weakref.finalize(self, SessionHandle._release, cls)
        logger.debug("opened %s", cls.__name__)

    @staticmethod
    def _release(cls: type) -> None:
        with SessionHandle._registry_lock:
            SessionHandle._live.discard(cls)
        logger.debug("closed %s", cls.__name__)

    @property
    def is_open(self) -> bool:
        return self._finalizer.alive

    def close(self) -> None:
        # runs the release at most once
        self._finalizer()

    def __enter__(self) -> "SessionHandle":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __reduce__(self):
        raise TypeError(f"{type(self).__name__} cannot be pickled")
