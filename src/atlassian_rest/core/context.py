"""Contexto de llamada: cancelación y deadline de punta a punta.

Cada operación recibe un `Context`. El constructor de peticiones exige uno y el
ejecutor lo consulta antes y después del envío; el tiempo restante se aplica
como timeout de httpx para esa petición.

Ejemplo:
    >>> ctx = Context.with_timeout(10)
    >>> user, response = jira.myself.details(ctx)
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field

from atlassian_rest.core.errors import ContextCancelledError, DeadlineExceededError, TransportError


@dataclass(eq=False)
class Context:
    """Señal de cancelación compartible entre hilos, con deadline opcional."""

    deadline: float | None = None
    parent: Context | None = None
    _cancelled: threading.Event = field(default_factory=threading.Event, repr=False)

    @classmethod
    def background(cls) -> Context:
        """Contexto raíz: nunca expira salvo que se cancele explícitamente."""

        return cls()

    @classmethod
    def with_timeout(cls, seconds: float, parent: Context | None = None) -> Context:
        """Contexto que expira `seconds` segundos después de crearse.

        Si hay `parent`, el hijo hereda su cancelación y el deadline más cercano.
        """

        deadline = time.monotonic() + seconds
        if parent is not None and parent.deadline is not None:
            deadline = min(deadline, parent.deadline)
        return cls(deadline=deadline, parent=parent)

    def child(self, seconds: float) -> Context:
        return Context.with_timeout(seconds, parent=self)

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        if self._cancelled.is_set():
            return True
        return self.parent.cancelled if self.parent is not None else False

    def remaining(self) -> float | None:
        """Segundos hasta el deadline (0 si ya pasó), o `None` sin deadline."""

        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    def err(self) -> TransportError | None:
        """Devuelve el error que corresponde al estado actual, o `None` si sigue vivo."""

        if self.cancelled:
            return ContextCancelledError("context canceled")
        remaining = self.remaining()
        if remaining is not None and remaining <= 0:
            return DeadlineExceededError("context deadline exceeded")
        return None
