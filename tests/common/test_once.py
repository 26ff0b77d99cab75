from __future__ import annotations

import threading
import time

import pytest

from common.once import OnceCell


def test_get_or_init_runs_factory_once_sequentially(fresh_cell: OnceCell[object]) -> None:
    calls: list[int] = []

    def factory() -> object:
        calls.append(1)
        return object()

    assert not fresh_cell.is_initialized
    assert fresh_cell.get() is None

    first = fresh_cell.get_or_init(factory)
    for _ in range(10):
        assert fresh_cell.get_or_init(factory) is first

    assert len(calls) == 1
    assert fresh_cell.is_initialized
    assert fresh_cell.get() is first


def test_concurrent_first_access_constructs_once(fresh_cell: OnceCell[object]) -> None:
    n_threads = 16
    barrier = threading.Barrier(n_threads)
    lock = threading.Lock()
    calls = 0
    results: list[object] = []

    def factory() -> object:
        nonlocal calls
        with lock:
            calls += 1
        # 他スレッドが待機側へ回るよう構築を遅らせる
        time.sleep(0.05)
        return object()

    def worker() -> None:
        barrier.wait()
        value = fresh_cell.get_or_init(factory)
        with lock:
            results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(n_threads)]
    for th in threads:
        th.start()
    for th in threads:
        th.join(timeout=5.0)

    assert calls == 1
    assert len(results) == n_threads
    assert all(r is results[0] for r in results)


def test_failed_init_leaves_cell_uninitialized_and_retries(fresh_cell: OnceCell[object]) -> None:
    attempts = 0
    sentinel = object()

    def flaky() -> object:
        nonlocal attempts
        attempts += 1
        if attempts == 1:
            raise RuntimeError("boom")
        return sentinel

    with pytest.raises(RuntimeError, match="boom"):
        fresh_cell.get_or_init(flaky)

    assert not fresh_cell.is_initialized
    assert fresh_cell.get() is None

    assert fresh_cell.get_or_init(flaky) is sentinel
    assert fresh_cell.get_or_init(flaky) is sentinel
    assert attempts == 2


def test_repr_reflects_state(fresh_cell: OnceCell[object]) -> None:
    assert "uninitialized" in repr(fresh_cell)
    fresh_cell.get_or_init(lambda: 7)
    assert repr(fresh_cell) == "OnceCell(value=7)"


def test_reentrant_init_raises_instead_of_deadlocking(fresh_cell: OnceCell[object]) -> None:
    def recursive() -> object:
        return fresh_cell.get_or_init(lambda: "inner")

    with pytest.raises(RuntimeError):
        fresh_cell.get_or_init(recursive)

    # 失敗後は未初期化のまま、通常の初期化ができる
    assert not fresh_cell.is_initialized
    assert fresh_cell.get_or_init(lambda: "outer") == "outer"
