# -*- coding: utf-8 -*-
import queue
import time
from datetime import timedelta
from typing import Callable, Optional

import click

from genkeys.config import MODE_TREE
from genkeys.ranking import NODE_ID_RANKER, Ranker
from genkeys.searcher import WorkerFailure
from genkeys.utils.address import addr_for_key, format_address
from genkeys.utils.crypto import EntropySourceFailure, KeyPair


class SearchAborted(RuntimeError):
    """Workers stopped producing for a reason other than entropy failure."""


def format_elapsed(seconds: float) -> str:
    return str(timedelta(seconds=max(seconds, 0.0)))


class Aggregator:
    """Single consumer of worker results; owns the global best exclusively."""

    def __init__(
        self,
        ranker: Ranker = NODE_ID_RANKER,
        derive: Callable[[bytes], bytes] = addr_for_key,
        start_time: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ranker = ranker
        self.derive = derive
        self.clock = clock
        self.start_time = clock() if start_time is None else start_time
        self.best = None
        self.records = 0

    def offer(self, keys: KeyPair) -> bool:
        """Print ``keys`` if it beats the global best. Returns True when printed."""
        rank = self.ranker.rank_key(keys.public_key)
        if self.best is not None and not self.ranker.better(self.best, rank):
            return False
        self.best = rank
        self.records += 1
        self.report(keys, rank)
        return True

    def report(self, keys: KeyPair, rank: bytes) -> None:
        click.echo("----- {}".format(format_elapsed(self.clock() - self.start_time)))
        click.echo("Priv: {}".format(keys.private_hex()))
        click.echo("Pub: {}".format(keys.public_hex()))
        if self.ranker.name == MODE_TREE:
            click.echo("{}: {}".format(self.ranker.label, rank.hex()))
        else:
            click.echo("{}: {}".format(self.ranker.label, format_address(self.derive(keys.public_key))))

    def run(
        self,
        in_queue,
        limit: Optional[int] = None,
        alive: Optional[Callable[[], bool]] = None,
        poll_interval: float = 1.0,
    ) -> None:
        """Drain ``in_queue`` forever, or for ``limit`` items.

        With ``alive`` set, the queue is polled and SearchAborted is raised once
        it reports that no producer is left.
        """
        consumed = 0
        while limit is None or consumed < limit:
            if alive is None:
                item = in_queue.get()
            else:
                try:
                    item = in_queue.get(timeout=poll_interval)
                except queue.Empty:
                    if not alive():
                        raise SearchAborted("all workers exited without reporting")
                    continue
            consumed += 1
            if isinstance(item, WorkerFailure):
                message = "worker {}: {}".format(item.index, item.reason)
                if item.entropy:
                    raise EntropySourceFailure(message)
                raise SearchAborted(message)
            self.offer(item)
