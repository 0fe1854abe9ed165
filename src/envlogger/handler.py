"""
Bridge between envlogger and the stdlib ``logging`` module.

Logger names are dotted paths, so they work as module prefixes directly:

    ENVLOG="warning,myapp.db=debug/slow"

    target = logging.StreamHandler()
    logging.getLogger().addHandler(EnvFilterHandler(target))
    logging.getLogger().setLevel(logging.DEBUG)

The wrapped ``target`` handler only ever sees records the spec lets through.
"""

import logging
from typing import Any, Dict, Optional

from .config import DEFAULT_ENV_VAR
from .levels import FilterLevel
from .logger import EnvLogger, LogBuilder, Record


# Attributes every LogRecord carries; anything else came in through extra=
_STANDARD_ATTRS = frozenset(
    logging.LogRecord('', logging.NOTSET, '', 0, '', (), None).__dict__
) | {'message', 'asctime'}


def record_from_logging(log_record: logging.LogRecord) -> Record:
    """Wrap a LogRecord as an envlogger Record.

    The ``extra=`` attributes become the record's kv context and the
    LogRecord itself travels along as ``origin``.
    """
    kv: Dict[str, Any] = {
        key: value for key, value in log_record.__dict__.items()
        if key not in _STANDARD_ATTRS
    }
    return Record(
        level=FilterLevel.from_logging(log_record.levelno),
        module=log_record.name,
        msg=log_record.msg,
        args=log_record.args or (),
        kv=kv,
        origin=log_record,
    )


class HandlerDrain:
    """Drain that hands the originating LogRecord to a stdlib handler."""

    def __init__(self, handler: logging.Handler):
        self.handler = handler

    def log(self, record: Record) -> Any:
        log_record = record.origin
        if not isinstance(log_record, logging.LogRecord):
            log_record = logging.LogRecord(
                record.module, record.level.to_logging(), '', 0,
                record.msg, record.args, None)
            log_record.__dict__.update(record.kv)
        return self.handler.handle(log_record)


class EnvFilterHandler(logging.Handler):
    """A logging.Handler that filters through an EnvLogger before ``target``.

    Args:
        target: Handler that receives the records let through
        spec: Explicit spec string; when None the spec comes from
            ``env_var`` or .envlog.json
        env_var: Environment variable holding the spec
        strategy: Content filter strategy, None to resolve from config
    """

    def __init__(self, target: logging.Handler, spec: Optional[str] = None,
                 env_var: str = DEFAULT_ENV_VAR, strategy: Optional[str] = None):
        super().__init__()
        self.target = target
        builder = LogBuilder(HandlerDrain(target))
        if strategy is not None:
            builder.strategy(strategy)
        if spec is not None:
            builder.parse(spec)
        else:
            builder.from_env(env_var)
        self.env_logger: EnvLogger = builder.build()

    def lowest_level(self) -> int:
        """Lowest stdlib level number any directive lets through.

        Suitable for ``logger.setLevel()`` so disabled records are not
        even created.
        """
        return self.env_logger.max_level().to_logging()

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.env_logger.log(record_from_logging(record))
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        try:
            self.target.close()
        finally:
            super().close()
