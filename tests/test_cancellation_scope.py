import asyncio

import pytest

from eolapi.errors import NotFoundError, TransportError
from eolapi.search import CancellationScope


def test_first_error_wins() -> None:
    scope = CancellationScope()
    first = TransportError("first", page=4)
    second = NotFoundError("second", page=5)

    assert scope.dying is False
    assert scope.fail(first) is True
    assert scope.fail(second) is False

    assert scope.dying is True
    assert scope.error is first


@pytest.mark.asyncio
async def test_wait_returns_once_every_worker_is_done() -> None:
    scope = CancellationScope()
    scope.add()
    scope.add()

    waiter = asyncio.create_task(scope.wait())
    await asyncio.sleep(0)
    assert not waiter.done()

    scope.done()
    await asyncio.sleep(0)
    assert not waiter.done()

    scope.done()
    await asyncio.wait_for(waiter, timeout=1)
    assert scope.live == 0


@pytest.mark.asyncio
async def test_wait_without_workers_returns_immediately() -> None:
    await asyncio.wait_for(CancellationScope().wait(), timeout=1)


def test_done_without_add_is_an_error() -> None:
    with pytest.raises(RuntimeError):
        CancellationScope().done()
