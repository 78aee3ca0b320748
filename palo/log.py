# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import functools, json, logging, sys, time
from datetime import datetime, timezone

_dest: str | None = None
_handle = None


def configure(dest: str | None) -> None:
    """
    Called once per CLI run. dest is None/null, 'stdout', or a file path.
    Opens the file handle if needed. No-op if dest is None/null.
    """
    global _dest, _handle
    close()
    _dest = None

    if not dest or str(dest).strip().lower() in ("null", "none", ""):
        return

    _dest = str(dest).strip()
    if _dest != "stdout":
        _handle = open(_dest, "a", encoding="utf-8", buffering=1)


def emit(**fields) -> None:
    """
    Write one JSON line to the ops stream. No-op if not configured.
    None values are dropped before serialisation.
    """
    if _dest is None:
        return
    ts = (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )
    payload: dict = {"ts": ts}
    payload.update({k: v for k, v in fields.items() if v is not None})
    line = json.dumps(payload, separators=(",", ":")) + "\n"
    if _dest == "stdout":
        sys.stdout.write(line)
    elif _handle is not None:
        _handle.write(line)


def close() -> None:
    """Flush and close the file handle if open."""
    global _handle
    if _handle is not None:
        try:
            _handle.flush()
            _handle.close()
        finally:
            _handle = None


# --------------- dev stream (stderr) ---------------

class _ColorFormatter(logging.Formatter):
    """Formatter with ANSI colors for terminal output."""
    COLORS = {
        logging.DEBUG:    "\033[36m",   # cyan
        logging.INFO:     "\033[32m",   # green
        logging.WARNING:  "\033[33m",   # yellow
        logging.ERROR:    "\033[31m",   # red
        logging.CRITICAL: "\033[35m",   # magenta
    }
    RESET = "\033[0m"
    BOLD  = "\033[1m"

    def __init__(self, fmt: str, datefmt: str, use_color: bool = True):
        super().__init__(fmt, datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color:
            return super().format(record)
        color = self.COLORS.get(record.levelno, "")
        # format a copy; other handlers must see the plain record
        record = logging.makeLogRecord(record.__dict__)
        if record.name.startswith("palo"):
            record.name = f"{self.BOLD}{record.name}{self.RESET}{color}"
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        record.msg = f"{color}{record.msg}{self.RESET}"
        return super().format(record)


def _init_logger() -> logging.Logger:
    """
    Sets up the palo logger:
      - palo (base) → colored on a TTY, to stderr
      - debug namespaces → DEBUG
      - watch namespaces (base -1 → more verbose)
      - quiet namespaces (base +1 → less verbose)
    Lazy import of get_cfg keeps config.py free of logging imports.
    """
    from palo.config import get_cfg
    cfg = get_cfg()
    base_level = getattr(logging, str(cfg.get("log.level", "INFO")).upper(), logging.INFO)

    def shift(level: int, delta: int) -> int:
        return min(logging.CRITICAL, max(logging.DEBUG, level + 10 * delta))

    use_color = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(_ColorFormatter(
        "%(asctime)s %(levelname)-5s %(name)s: %(message)s",
        "%H:%M:%S",
        use_color=use_color,
    ))

    palo_log = logging.getLogger("palo")
    palo_log.handlers.clear()
    palo_log.addHandler(handler)
    palo_log.setLevel(logging.DEBUG if cfg.get("dev", 0) else base_level)

    for ns in cfg.get("log.debug", []):
        logging.getLogger(ns).setLevel(logging.DEBUG)

    for ns in cfg.get("log.watch", []):
        logging.getLogger(ns).setLevel(shift(base_level, -1))

    for ns in cfg.get("log.quiet", []):
        logging.getLogger(ns).setLevel(shift(base_level, +1))

    return palo_log


_LOGGER_SINGLETON = _init_logger()


def reconfigure() -> logging.Logger:
    """Re-apply log.* settings after the config was reloaded (e.g. --config)."""
    global _LOGGER_SINGLETON, LOG
    _LOGGER_SINGLETON = LOG = _init_logger()
    return _LOGGER_SINGLETON


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns the palo logger, or a child of it."""
    if name:
        return _LOGGER_SINGLETON.getChild(name)
    return _LOGGER_SINGLETON


LOG = _LOGGER_SINGLETON

# --------------- ops stream ---------------

def ops_event(op: str):
    """
    Decorator: times one pipeline run and emits one ops line with
    ``op``, ``latency_ms``, ``status`` and, on failure, ``error_code``
    (the ``code`` attribute of the raised exception, if any) and ``error``
    (its ``to_dict()`` envelope for ChangelogError).
    """
    def decorator(fn):
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            _t0 = time.perf_counter()
            _s, _c, _e = "error", None, None
            try:
                result = fn(*args, **kwargs)
                _s = "ok"
                return result
            except Exception as e:
                _c = getattr(e, "code", type(e).__name__)
                if hasattr(e, "to_dict"):
                    _e = e.to_dict()
                raise
            finally:
                emit(
                    op=op,
                    latency_ms=round((time.perf_counter() - _t0) * 1000, 2),
                    status=_s, error_code=_c, error=_e,
                )
        return wrapper
    return decorator
