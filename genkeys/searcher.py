# -*- coding: utf-8 -*-
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from genkeys.ranking import NODE_ID_RANKER, Ranker, get_ranker
from genkeys.utils.address import addr_for_key
from genkeys.utils.crypto import EntropySourceFailure, KeyPair, generate_keypair
from genkeys.utils.words import count_words


@dataclass(frozen=True)
class WorkerFailure:
    """Sent on the result queue in place of a key when a worker dies."""
    index: int
    reason: str
    entropy: bool = True


class Searcher:
    def __init__(
        self,
        out_queue,
        min_words: int = 0,
        ranker: Ranker = NODE_ID_RANKER,
        index: int = 0,
        generate: Callable[[], KeyPair] = generate_keypair,
        derive: Callable[[bytes], bytes] = addr_for_key,
    ):
        self.out_queue = out_queue
        self.min_words = int(min_words)
        self.ranker = ranker
        self.index = index
        self.generate = generate
        self.derive = derive
        self.best = ranker.worst()
        self.tested = 0
        self.emitted = 0

    def step(self) -> Optional[KeyPair]:
        """Generate one key; emit and return it if it passes both filters."""
        keys = self.generate()
        self.tested += 1
        hits = 0
        if self.min_words > 0:
            hits = count_words(self.derive(keys.public_key))
        if hits < self.min_words:
            return None
        rank = self.ranker.rank_key(keys.public_key)
        if not self.ranker.better(self.best, rank):
            return None
        self.best = rank
        # blocks while the queue is full
        self.out_queue.put(keys)
        self.emitted += 1
        return keys

    def run(self, iterations: Optional[int] = None) -> None:
        if iterations is None:
            while True:
                self.step()
        for _ in range(int(iterations)):
            self.step()


def worker_main(index: int, out_queue, min_words: int, mode: str) -> None:
    """Process entry point: search until killed or the worker fails.

    Any failure is reported on ``out_queue`` so the consumer never waits on a
    dead worker.
    """
    searcher = None
    try:
        searcher = Searcher(out_queue, min_words, get_ranker(mode), index)
        logging.debug("Worker {} started (mode={}, min_words={})".format(index, mode, min_words))
        searcher.run()
    except EntropySourceFailure as e:
        logging.error("Worker {} stopped after {:,} keys: {}".format(index, searcher.tested, e))
        out_queue.put(WorkerFailure(index, str(e)))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logging.exception("Worker {} crashed".format(index))
        out_queue.put(WorkerFailure(index, "{}: {}".format(type(e).__name__, e), entropy=False))
