# -*- coding: utf-8 -*-
import logging
import multiprocessing
import sys
import time
from typing import List

import click

from genkeys.aggregator import Aggregator, SearchAborted, format_elapsed
from genkeys.config import DEFAULT_MIN_WORDS, MODE_ADDRESS, MODE_TREE, SearchSetting, default_threads
from genkeys.ranking import get_ranker
from genkeys.searcher import worker_main
from genkeys.utils.crypto import EntropySourceFailure

logging.basicConfig(level=logging.INFO, format="[%(levelname)s %(asctime)s] %(message)s")

MP_CONTEXT = multiprocessing.get_context("spawn")


def start_workers(setting: SearchSetting, results) -> List[multiprocessing.process.BaseProcess]:
    workers = []
    for idx in range(setting.threads):
        proc = MP_CONTEXT.Process(
            target=worker_main,
            args=(idx, results, setting.min_words, setting.mode),
            name="genkeys-worker-{}".format(idx),
            daemon=True,
        )
        proc.start()
        workers.append(proc)
    logging.info("Started {} worker(s), ranking by {}".format(len(workers), setting.mode))
    return workers


def stop_workers(workers, timeout: float = 1.0) -> None:
    for proc in workers:
        if proc.is_alive():
            proc.terminate()
    for proc in workers:
        proc.join(timeout)


@click.command(context_settings={"show_default": True})
@click.option(
    "--words", "-words", "min_words", type=click.IntRange(min=0), default=DEFAULT_MIN_WORDS,
    help="Number of hex words (babe, beef, dead, ...) to find in the IP address; 0 disables word matching."
)
@click.option(
    "--threads", "-threads", type=click.IntRange(min=1), default=default_threads,
    help="Number of worker processes (defaults to the CPU count)."
)
@click.option(
    "--sig", "-sig", is_flag=True, default=False,
    help="Search for signing keys with a higher TreeID instead of a better IP address."
)
def cli(min_words, threads, sig):
    """Generate keys until killed, printing each new best one."""
    setting = SearchSetting(threads, min_words, MODE_TREE if sig else MODE_ADDRESS)
    click.echo("Threads: {} Minimum Words: {}".format(setting.threads, setting.min_words))

    run_start = time.monotonic()
    aggregator = Aggregator(get_ranker(setting.mode), start_time=run_start)
    results = MP_CONTEXT.Queue(maxsize=setting.queue_size)
    workers = start_workers(setting, results)
    try:
        aggregator.run(results, alive=lambda: any(proc.is_alive() for proc in workers))
    except EntropySourceFailure as e:
        logging.error("Secure random source failed, aborting: {}".format(e))
        stop_workers(workers)
        sys.exit(1)
    except SearchAborted as e:
        logging.error("Search aborted: {}".format(e))
        stop_workers(workers)
        sys.exit(1)
    except KeyboardInterrupt:
        logging.info("=== Summary ===")
        logging.info("Total runtime: {}".format(format_elapsed(time.monotonic() - run_start)))
        logging.info("Records printed: {}".format(aggregator.records))
        if aggregator.best is not None:
            logging.info("Best {} rank: {}".format(setting.mode, aggregator.best.hex()))
        stop_workers(workers)
        sys.exit(0)


if __name__ == "__main__":
    cli()
