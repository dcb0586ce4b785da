"""
Error boundary between the console and the services.

``safe_run`` executes one user action.  The three handled failure
kinds are logged at WARNING and reported with a short message; a
pydantic validation error raised while editing a field counts as an
invalid input.  Anything else is logged with its traceback and
reported generically.  In every case the session carries on, except
when the input stream is exhausted: ``EOFError`` is passed through so
the console can close.
"""

import logging
import sys
from typing import Callable, Optional, TextIO

from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import DuplicateError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _first_error(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    err = errors[0]
    field = ".".join(str(part) for part in err.get("loc", ()))
    return f"{field}: {err.get('msg')}" if field else str(err.get("msg"))


def safe_run(action: Callable[[], None], user_action: str, out: Optional[TextIO] = None) -> bool:
    """Run ``action`` and report failures on ``out``.

    Returns ``True`` if the action completed without raising.
    """
    out = out or sys.stdout
    try:
        action()
        return True
    except ValidationError as exc:
        logger.warning("%s - validation: %s", user_action, exc)
        print(f"Invalid input: {exc}", file=out)
    except PydanticValidationError as exc:
        message = _first_error(exc)
        logger.warning("%s - validation: %s", user_action, message)
        print(f"Invalid input: {message}", file=out)
    except DuplicateError as exc:
        logger.warning("%s - duplicate: %s", user_action, exc)
        print(f"Duplicate: {exc}", file=out)
    except NotFoundError as exc:
        logger.warning("%s - not found: %s", user_action, exc)
        print(f"Not found: {exc}", file=out)
    except EOFError:
        # input exhausted: the caller ends the session
        raise
    except Exception:
        logger.exception("%s - unexpected error", user_action)
        print("Unexpected error, please try again.", file=out)
    return False
