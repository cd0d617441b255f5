import json
from pathlib import Path
from typing import Any

from .errors import DataFileError
from .log import get_logger
from .parser import Err, Ok, parse

logger = get_logger(__name__)


def load_raw(path: str | Path) -> Any:
    path = Path(path)
    logger.info("reading transactions from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataFileError(
            f"transactions file not found: {path}", details={"path": str(path)}
        ) from exc
    except OSError as exc:
        raise DataFileError(
            f"cannot read transactions file: {path}", details={"path": str(path)}
        ) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataFileError(
            f"transactions file is not valid JSON: {exc.msg}",
            details={"path": str(path), "line": exc.lineno, "column": exc.colno},
        ) from exc


def load_transactions(path: str | Path) -> Ok | Err:
    return parse(load_raw(path))
