from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

from turbine_swarm.config import Command
from turbine_swarm.sim.simulation import SimulationClock

# Scheduling: a start/stop-controlled repeating task with a cancellation token
# Stopping only takes effect between callbacks, a running tick always completes

logger = logging.getLogger(__name__)


class RepeatingTask:
    def __init__(self, callback: Callable[[], object], interval_s: float = 1.0 / 60.0, name: str = "repeating-task"):
        self.callback = callback
        self.interval_s = interval_s
        self.name = name
        self.error: Optional[BaseException] = None
        self._lock = threading.Lock() # Guards _thread / _cancel across caller and worker
        self._cancel = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def _alive(self) -> bool:
        # A worker whose token is set is on its way out and no longer counts
        return self._thread is not None and self._thread.is_alive() and not self._cancel.is_set()

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._alive()

    def start(self) -> None:
        with self._lock:
            if self._alive():
                return
            self.error = None
            self._cancel = threading.Event() # Fresh token per run
            self._thread = threading.Thread(target=self._loop, args=(self._cancel,), name=self.name, daemon=True)
            self._thread.start()
        logger.info("%s started (interval %.4fs)", self.name, self.interval_s)

    def stop(self) -> None:
        with self._lock:
            thread = self._thread
            self._cancel.set()
            self._thread = None
        if thread is None:
            return
        # Called from inside the callback: the loop exits after it returns
        if thread is not threading.current_thread():
            thread.join()
        logger.info("%s stopped", self.name)

    def cancel_if(self, predicate: Callable[[], bool]) -> bool:
        """Cancel the current worker when ``predicate()`` holds; call from the callback.

        The check and the cancellation happen under the same lock as start(), so a
        start() racing with a worker that is about to stop always gets a new worker.
        """
        with self._lock:
            if threading.current_thread() is not self._thread:
                return True # Superseded worker, its own token is already set
            if not predicate():
                return False
            self._cancel.set()
            self._thread = None
        logger.info("%s stopped", self.name)
        return True

    def _loop(self, cancel: threading.Event) -> None:
        while not cancel.is_set():
            try:
                self.callback()
            except Exception as exc:
                self.error = exc
                logger.exception("%s callback failed, stopping", self.name)
                cancel.set()
                break
            # wait() returns early as soon as the token is set
            cancel.wait(self.interval_s)


class SimulationRunner:
    """Drives a SimulationClock with a RepeatingTask.

    The UI command channel maps onto start / pause / toggle / reset. Reset always
    stops the driver synchronously before touching any accumulator.
    """

    def __init__(self, simulation: SimulationClock | None = None, interval_s: float = 1.0 / 60.0):
        self.simulation = simulation if simulation is not None else SimulationClock()
        self.task = RepeatingTask(self._tick, interval_s=interval_s, name="simulation-driver")

    def _tick(self) -> None:
        if self.task.cancel_if(lambda: not self.simulation.is_running):
            return
        self.simulation.tick()

    @property
    def is_running(self) -> bool:
        return self.simulation.is_running

    def start(self) -> None:
        self.simulation.start()
        self.task.start()

    def pause(self) -> None:
        self.task.stop()
        self.simulation.pause()

    def toggle(self) -> bool:
        if self.simulation.is_running:
            self.pause()
        else:
            self.start()
        return self.simulation.is_running

    def reset(self) -> None:
        self.task.stop()
        self.simulation.reset()

    def handle(self, command: Command | str) -> None:
        command = Command(command)
        if command is Command.START:
            self.start()
        elif command is Command.PAUSE:
            self.pause()
        elif command is Command.TOGGLE:
            self.toggle()
        else:
            self.reset()
