"""Heap allocation helpers with optional profiling, and memory pools."""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager, nullcontext
from typing import ClassVar, Dict, Iterator, List, Optional

import numpy as np

from marcort.options import simulation_options


class _Timer:
    """Accumulating wall-clock timer that tolerates nested start/stop pairs."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._running = 0
        self._started = 0
        self._accumulated = 0

    def start(self) -> None:
        with self._lock:
            if self._running == 0:
                self._started = time.perf_counter_ns()
            self._running += 1

    def stop(self) -> None:
        with self._lock:
            if self._running == 0:
                raise RuntimeError("timer is not running")
            self._running -= 1
            if self._running == 0:
                self._accumulated += time.perf_counter_ns() - self._started

    def reset(self) -> None:
        with self._lock:
            self._running = 0
            self._accumulated = 0

    def total_ms(self) -> float:
        with self._lock:
            total = self._accumulated
            if self._running:
                total += time.perf_counter_ns() - self._started
        return total / 1e6


def _key(buffer: Optional[bytearray]) -> Optional[int]:
    return None if buffer is None else id(buffer)


class MemoryProfiler:
    """Counts heap operations and tracks heap usage."""

    def __init__(self) -> None:
        self.name = "Memory management"
        self._lock = threading.Lock()
        self._timer = _Timer()
        self._sizes: Dict[Optional[int], int] = {}
        self.malloc_calls = 0
        self.realloc_calls = 0
        self.free_calls = 0
        self.total_heap_memory = 0
        self.current_heap_memory = 0
        self.peak_heap_memory = 0

    def reset(self) -> None:
        with self._lock:
            self.malloc_calls = 0
            self.realloc_calls = 0
            self.free_calls = 0
            self.total_heap_memory = 0
            self.current_heap_memory = 0
            self.peak_heap_memory = 0
            self._sizes.clear()
            self._timer.reset()

    @property
    def elapsed_ms(self) -> float:
        """Time spent in heap management, in milliseconds."""
        return self._timer.total_ms()

    @contextmanager
    def _timed(self) -> Iterator[None]:
        self._timer.start()
        try:
            yield
        finally:
            self._timer.stop()

    def _update_peak(self) -> None:
        if self.current_heap_memory > self.peak_heap_memory:
            self.peak_heap_memory = self.current_heap_memory

    def record_malloc(self, buffer: Optional[bytearray], size: int) -> None:
        with self._lock:
            self.malloc_calls += 1
            self.total_heap_memory += size
            self.current_heap_memory += size
            self._sizes[_key(buffer)] = size
            self._update_peak()

    def record_realloc(
        self,
        previous: Optional[bytearray],
        current: Optional[bytearray],
        size: int,
    ) -> None:
        with self._lock:
            self.realloc_calls += 1
            old = self._sizes.get(_key(previous), 0)
            self.total_heap_memory += size - old
            self.current_heap_memory += size - old
            self._sizes[_key(current)] = size
            self._update_peak()

    def record_free(self, buffer: Optional[bytearray]) -> None:
        with self._lock:
            self.free_calls += 1
            size = self._sizes.pop(_key(buffer), None)
            if size is not None:
                self.current_heap_memory -= size

    def report(self) -> str:
        """Human-readable summary of the collected statistics."""
        with self._lock:
            lines = [
                f"Number of 'malloc' invocations: {self.malloc_calls}",
                f"Number of 'realloc' invocations: {self.realloc_calls}",
                f"Number of 'free' invocations: {self.free_calls}",
            ]
            if self.malloc_calls > self.realloc_calls + self.free_calls:
                lines.append("[Warning] Possible memory leak detected")
            elif self.malloc_calls + self.realloc_calls < self.free_calls:
                lines.append("[Warning] Possible double 'free' detected")
            lines.append(
                f"Total amount of heap allocated memory: {self.total_heap_memory} bytes"
            )
            lines.append(f"Peak of heap memory usage: {self.peak_heap_memory} bytes")
        lines.append(f"Time spent on heap memory management: {self.elapsed_ms} ms")
        return "\n".join(lines) + "\n"


_PROFILER = MemoryProfiler()


def memory_profiler() -> MemoryProfiler:
    """The shared memory profiler."""
    return _PROFILER


def _measured(profiling: bool):
    return _PROFILER._timed() if profiling else nullcontext()


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"negative allocation size: {size}")


def allocate(size: int) -> Optional[bytearray]:
    """Allocate a zeroed buffer of the given size; None when size is zero."""
    _check_size(size)
    profiling = simulation_options().profiling
    with _measured(profiling):
        result = None if size == 0 else bytearray(size)
    if profiling:
        _PROFILER.record_malloc(result, size)
    return result


def reallocate(buffer: Optional[bytearray], size: int) -> Optional[bytearray]:
    """Resize a buffer in place, keeping its leading contents.

    A size of zero yields None and leaves the buffer untouched.
    """
    _check_size(size)
    profiling = simulation_options().profiling
    with _measured(profiling):
        if size == 0:
            result = None
        elif buffer is None:
            result = bytearray(size)
        else:
            if size < len(buffer):
                del buffer[size:]
            else:
                buffer.extend(bytes(size - len(buffer)))
            result = buffer
    if profiling:
        _PROFILER.record_realloc(buffer, result, size)
    return result


def release(buffer: Optional[bytearray]) -> None:
    """Release the storage held by a buffer."""
    profiling = simulation_options().profiling
    if profiling:
        _PROFILER.record_free(buffer)
    with _measured(profiling):
        if buffer is not None:
            buffer.clear()


class MemoryPool:
    """A set of float64 buffers addressed by sequential identifiers."""

    def __init__(self) -> None:
        self._buffers: List[np.ndarray] = []

    def __len__(self) -> int:
        return len(self._buffers)

    def get(self, buffer_id: int) -> np.ndarray:
        if not 0 <= buffer_id < len(self._buffers):
            raise IndexError(f"no buffer with id {buffer_id}")
        return self._buffers[buffer_id]

    def create(self, num_elements: int) -> int:
        if num_elements < 0:
            raise ValueError(f"negative number of elements: {num_elements}")
        self._buffers.append(np.zeros(num_elements, dtype=np.float64))
        return len(self._buffers) - 1


class MemoryPoolManager:
    """Registry of memory pools shared by the whole process."""

    _instance: ClassVar[Optional["MemoryPoolManager"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._pools: List[MemoryPool] = []

    @classmethod
    def instance(cls) -> "MemoryPoolManager":
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def __len__(self) -> int:
        return len(self._pools)

    def get(self, pool: int) -> MemoryPool:
        if not 0 <= pool < len(self._pools):
            raise IndexError(f"no memory pool with id {pool}")
        return self._pools[pool]

    def create(self) -> int:
        self._pools.append(MemoryPool())
        return len(self._pools) - 1


def memory_pool_get(pool: int, buffer: int) -> np.ndarray:
    """Fetch a buffer from a pool of the shared manager."""
    return MemoryPoolManager.instance().get(pool).get(buffer)