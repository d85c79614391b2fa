import pytest

from miniedit.libc.fdset import FD_SETSIZE, FdSet


def test_new_set_is_empty():
    fds = FdSet()
    assert all(fd not in fds for fd in range(FD_SETSIZE))


def test_add_and_contains():
    fds = FdSet()
    fds.add(0)
    fds.add(63)
    fds.add(64)
    fds.add(FD_SETSIZE - 1)
    members = [fd for fd in range(FD_SETSIZE) if fd in fds]
    assert members == [0, 63, 64, FD_SETSIZE - 1]


def test_discard_leaves_others():
    fds = FdSet()
    fds.add(3)
    fds.add(4)
    fds.discard(3)
    assert 3 not in fds
    assert 4 in fds


def test_discard_missing_is_harmless():
    fds = FdSet()
    fds.discard(10)
    assert 10 not in fds


def test_clear():
    fds = FdSet()
    for fd in range(0, 100, 7):
        fds.add(fd)
    fds.clear()
    assert not any(fd in fds for fd in range(100))


@pytest.mark.parametrize("fd", [-1, FD_SETSIZE, FD_SETSIZE + 5])
def test_out_of_range_rejected(fd):
    fds = FdSet()
    with pytest.raises(ValueError):
        fds.add(fd)
    with pytest.raises(ValueError):
        fds.discard(fd)
    assert fd not in fds