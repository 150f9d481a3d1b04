"""Option records: build dataclasses from loose mappings, logging what is dropped."""

import dataclasses
import logging
from typing import Any, Mapping, Optional, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_options(cls: Type[T], options: Optional[Mapping[str, Any]] = None, **overrides: Any) -> T:
    """Create ``cls`` from ``options``; unknown keys are logged and ignored."""
    values = dict(options or {})
    values.update(overrides)
    known = {f.name for f in dataclasses.fields(cls) if f.init}
    accepted = {}
    for key, value in values.items():
        if key in known:
            accepted[key] = value
        else:
            logger.warning("Ignoring option %r for %s", key, cls.__name__)
    return cls(**accepted)


def configure_logging(level: str = "warning") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
