import threading

import pytest

from hecore.config import MUTEX_DEFAULT_SPIN_COUNT
from hecore.mutex import Mutex


def _try_in_thread(mutex):
    result = []
    worker = threading.Thread(target=lambda: result.append(mutex.try_acquire()))
    worker.start()
    worker.join()
    return result[0]


def test_default_spin_count():
    assert Mutex().spin_count == MUTEX_DEFAULT_SPIN_COUNT


def test_try_acquire_fails_while_held():
    mutex = Mutex()
    mutex.acquire()
    assert mutex.locked
    assert _try_in_thread(mutex) is False
    mutex.release()
    assert _try_in_thread(mutex) is True
    mutex.release()
    assert not mutex.locked


def test_try_acquire_is_not_recursive():
    mutex = Mutex(spin_count=0)
    assert mutex.try_acquire() is True
    assert mutex.try_acquire() is False
    mutex.release()


def test_context_manager_releases():
    mutex = Mutex()
    with mutex:
        assert mutex.locked
    assert not mutex.locked


def test_release_unlocked_raises():
    with pytest.raises(RuntimeError):
        Mutex().release()


def test_negative_spin_count_rejected():
    with pytest.raises(ValueError):
        Mutex(spin_count=-1)


def test_counter_is_consistent_under_contention():
    mutex = Mutex(spin_count=10)
    counter = [0]

    def work():
        for _ in range(1000):
            with mutex:
                counter[0] += 1

    workers = [threading.Thread(target=work) for _ in range(4)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()
    assert counter[0] == 4000
    assert not mutex.locked
    assert mutex.try_acquire() is True
    assert mutex.locked
    mutex.release()
    assert not mutex.locked