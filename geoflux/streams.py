import asyncio
from collections.abc import AsyncIterator
from typing import Generic, TypeVar


T = TypeVar("T")

_CLOSED = object()


class Stream(Generic[T]):
    """Buffered single-subscription stream of decoded items.

    Items added before anyone listens are kept until they are consumed.
    Iteration ends once the stream is closed and its buffer is drained. A
    stream can be iterated only once.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[object] = asyncio.Queue()
        self._closed = False
        self._listened = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    def add(self, item: T) -> None:
        if self._closed:
            raise RuntimeError("Cannot add items to a closed stream")
        self._queue.put_nowait(item)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._queue.put_nowait(_CLOSED)

    def __aiter__(self) -> AsyncIterator[T]:
        if self._listened:
            raise RuntimeError("Stream has already been listened to")
        self._listened = True
        return self._iterate()

    async def _iterate(self) -> AsyncIterator[T]:
        while True:
            item = await self._queue.get()
            if item is _CLOSED:
                return
            yield item  # type: ignore[misc]
