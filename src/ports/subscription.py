from typing import Callable, Optional


class Subscription:
    """Отсоединяемый handle живой подписки.

    unsubscribe() идемпотентен; после него колбэки подписки не вызываются.
    """

    def __init__(self, detach: Optional[Callable[[], None]] = None):
        self._detach = detach
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        if not self._active:
            return
        self._active = False
        detach, self._detach = self._detach, None
        if detach is not None:
            detach()
