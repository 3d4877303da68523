# io/pipeline_logging.py
import json
import logging
import sys

from snapround.pipeline.hooks import NoopHooks


def _default_json_logger(name="snapround", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class PipelineLogging(NoopHooks):
    """
    Structured logs for one snap-rounding pipeline.
    Lifecycle at INFO, per-fragment detail at DEBUG (only with ``debug``).
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # --------------------------------------------------------

    def run_start(self, *, geom_type, num_points, linework_only):
        self._emit(
            "INFO", "run_start", geom_type=geom_type, num_points=num_points, linework_only=linework_only
        )

    def run_end(self, *, geom_type, wall_ms):
        self._emit("INFO", "run_end", geom_type=geom_type, wall_ms=round(wall_ms, 3))

    def extracted(self, *, fragments, ms):
        if self.debug:
            self._emit("DEBUG", "extracted", fragments=fragments, ms=round(ms, 3))

    def collapsed(self, *, tag, num_points):
        if self.debug:
            self._emit("DEBUG", "collapsed", tag=tag, num_points=num_points)

    def noded(self, *, fragments, surviving, nodes, ms):
        if self.debug:
            self._emit(
                "DEBUG", "noded", fragments=fragments, surviving=surviving, nodes=nodes, ms=round(ms, 3)
            )

    def repaired(self, *, geom_type, ms):
        self._emit("INFO", "repaired", geom_type=geom_type, ms=round(ms, 3))

    def error(self, *, reason: str, **extra):
        self._emit("ERROR", "pipeline_error", reason=reason, **extra)
