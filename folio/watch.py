import time
from pathlib import Path

from watchdog.events import FileSystemEventHandler  # pip install watchdog
from watchdog.observers import Observer

from .builder import RebuildQueue, run_build


class RebuildHandler(FileSystemEventHandler):
    """Turns file changes and additions into incremental build passes."""

    def __init__(self, queue: RebuildQueue, log):
        self.queue = queue
        self.log = log

    def _rebuild(self, verb: str, event):
        if event.is_directory:
            return
        self.log.emit("trigger", f"File {verb}: {event.src_path}", Path(event.src_path))
        self.queue.trigger()

    def on_modified(self, event):
        self._rebuild("changed", event)

    def on_created(self, event):
        self._rebuild("added", event)

    def on_moved(self, event):
        # atomic saves rename a temp file over the original
        if event.is_directory:
            return
        self.log.emit("trigger", f"File added: {event.dest_path}", Path(event.dest_path))
        self.queue.trigger()


def watched_dirs(cfg: dict):
    return [p for p in (cfg["content_root"], cfg["templates_dir"], cfg["static_dir"]) if p.is_dir()]


def make_observer(cfg: dict, log):
    queue = RebuildQueue(lambda: run_build(cfg, clean=False, log=log))
    handler = RebuildHandler(queue, log)

    observer = Observer()
    for path in watched_dirs(cfg):
        observer.schedule(handler, str(path), recursive=True)
        log.emit("info", f"Watching: {path}/")
    return observer


def watch(cfg: dict, log, poll_interval: float = 1.0):
    """Watch the source directories and rebuild until interrupted."""
    observer = make_observer(cfg, log)
    observer.start()
    log.emit("info", "Watching for changes... (Ctrl+C to stop)")
    try:
        while observer.is_alive():
            time.sleep(poll_interval)
    except KeyboardInterrupt:
        log.emit("info", "Stopping...")
    finally:
        observer.stop()
        observer.join()
