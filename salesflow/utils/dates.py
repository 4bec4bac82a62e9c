from datetime import date, datetime, timezone

from salesflow.utils.logger import get_logger

logger = get_logger(__name__)


def coerce_timestamp(value):
    """
    Lenient timestamp parsing for snapshot records.

    Accepts ISO-8601 strings (including a trailing "Z"), datetimes and dates.
    Naive values are taken as UTC. Anything unparseable becomes None so the
    caller can drop whatever depended on it.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            logger.warning("Dropping malformed timestamp %r", value)
            return None
    else:
        logger.debug("Dropping non-timestamp value %r", value)
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
