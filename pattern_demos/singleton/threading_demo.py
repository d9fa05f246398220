"""Concurrent first access to the singleton Logger from several threads."""

import threading
import time
from typing import Optional

from ..output import ConsoleSink, OutputSink
from .logger import Logger


def run_threading_test(thread_count: int = 5, hold_seconds: float = 0.1,
                       sink: Optional[OutputSink] = None) -> int:
    """
    Request the Logger from several threads at once.

    Args:
        thread_count: Number of threads to start
        hold_seconds: How long each thread sleeps after logging
        sink: Destination for progress lines, stdout when omitted

    Returns:
        Logger instance count after all threads have joined
    """
    sink = sink or ConsoleSink()
    sink.emit("----- THREADING TEST -----")
    sink.emit("Creating logger instances from multiple threads...")

    # Threads wait here so they all hit get_instance() together
    start = threading.Barrier(thread_count)

    def worker() -> None:
        ident = threading.get_ident()
        start.wait()
        logger = Logger.get_instance()
        logger.log_info(f"Log from thread {ident}")
        time.sleep(hold_seconds)

    threads = [threading.Thread(target=worker, name=f"logger-worker-{i}")
               for i in range(thread_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    count = Logger.instance_count()
    sink.emit(f"Threading test complete. Instance count: {count}")
    sink.emit("----- END THREADING TEST -----")
    sink.emit()
    return count
