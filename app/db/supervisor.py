"""
Connection Supervisor - keeps one database connection alive.

States:
    DISCONNECTED -> CONNECTING -> CONNECTED -> DISCONNECTED (fatal disconnect) -> ...
    CONNECTING -> FAILED (non-retryable error, terminal)

A single RetryPolicy decides how long to wait between attempts: a fixed delay,
no backoff, no jitter, unlimited attempts unless max_attempts is set.

The supervisor knows nothing about SQL. It is given:
- connect():       open the handle, raise on failure (runs in a worker thread)
- disconnect():    release the handle (optional)
- is_retryable():  which connect errors are worth retrying
- on_fatal():      called once with the error that moved it to FAILED
- sleep():         awaitable delay (asyncio.sleep, replaced in tests)
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

from loguru import logger


class ConnectionState(str, Enum):
    disconnected = "disconnected"
    connecting = "connecting"
    connected = "connected"
    failed = "failed"


@dataclass(frozen=True)
class RetryPolicy:
    delay: float = 5.0
    max_attempts: Optional[int] = None

    def should_retry(self, attempt: int) -> bool:
        """attempt is the number of attempts already made."""
        return self.max_attempts is None or attempt < self.max_attempts


class ConnectionSupervisor:

    def __init__(
        self,
        connect: Callable[[], None],
        disconnect: Optional[Callable[[], None]] = None,
        is_retryable: Callable[[Exception], bool] = lambda exc: True,
        policy: Optional[RetryPolicy] = None,
        on_fatal: Optional[Callable[[Exception], None]] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        name: str = "database",
    ):
        self._connect = connect
        self._disconnect = disconnect
        self._is_retryable = is_retryable
        self.policy = policy or RetryPolicy()
        self._on_fatal = on_fatal
        self._sleep = sleep
        self.name = name

        self.state = ConnectionState.disconnected
        self.attempts = 0
        self.last_error: Optional[Exception] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def is_connected(self) -> bool:
        return self.state is ConnectionState.connected

    def _transition(self, state: ConnectionState) -> None:
        if state is not self.state:
            logger.debug(f"{self.name}: {self.state.value} -> {state.value}")
            self.state = state

    async def connect(self) -> None:
        """
        Connect, retrying with the policy's fixed delay.

        Returns once CONNECTED. Re-raises the error that moved the
        supervisor to FAILED.
        """
        self._loop = asyncio.get_running_loop()
        attempt = 0
        while True:
            attempt += 1
            self.attempts += 1
            self._transition(ConnectionState.connecting)
            try:
                # blocking driver call, kept off the event loop
                await asyncio.to_thread(self._connect)
            except Exception as exc:
                self.last_error = exc
                if not self._is_retryable(exc) or not self.policy.should_retry(attempt):
                    self._fail(exc)
                    raise
                self._transition(ConnectionState.disconnected)
                logger.warning(
                    f"❌ {self.name} connection failed: {exc} - retrying in {self.policy.delay}s"
                )
                await self._sleep(self.policy.delay)
                continue

            self.last_error = None
            self._transition(ConnectionState.connected)
            logger.info(f"✅ {self.name} connected")
            return

    def _fail(self, exc: Exception) -> None:
        self._transition(ConnectionState.failed)
        logger.critical(f"{self.name} connection error is not recoverable: {exc!r}")
        if self._on_fatal is not None:
            self._on_fatal(exc)

    async def _run(self, delay: float = 0) -> None:
        if delay:
            await self._sleep(delay)
        try:
            await self.connect()
        except Exception:
            # Already reported through _fail / on_fatal
            pass

    def start(self) -> None:
        """Connect in the background. Must be called from the event loop."""
        self._loop = asyncio.get_running_loop()
        if self.state in (ConnectionState.connected, ConnectionState.failed):
            return
        self._spawn(0)

    def _spawn(self, delay: float) -> None:
        if self._task is not None and not self._task.done():
            return
        self._task = self._loop.create_task(self._run(delay))

    def notify_disconnect(self, exc: Exception) -> None:
        """
        Report a fatal disconnect seen on the live connection.

        Drops the handle and schedules a reconnect after policy.delay.
        Ignored unless currently CONNECTED.
        """
        if self.state is not ConnectionState.connected:
            return
        self.last_error = exc
        self._transition(ConnectionState.disconnected)
        logger.warning(
            f"❌ {self.name} connection lost: {exc} - reconnecting in {self.policy.delay}s"
        )
        self._release()

        loop = self._loop
        if loop is None or loop.is_closed():
            logger.warning(f"{self.name}: no running event loop, reconnect not scheduled")
            return
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is loop:
            self._spawn(self.policy.delay)
        else:
            loop.call_soon_threadsafe(self._spawn, self.policy.delay)

    def _release(self) -> None:
        if self._disconnect is None:
            return
        try:
            self._disconnect()
        except Exception as exc:
            logger.warning(f"{self.name}: error while releasing connection: {exc}")

    async def join(self) -> None:
        """Wait for a pending (re)connect task, if any."""
        if self._task is not None:
            await self._task

    def stop(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self._release()
        if self.state is not ConnectionState.failed:
            self._transition(ConnectionState.disconnected)
