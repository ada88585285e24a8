from datetime import datetime
import pytz

def utc_now():
    """Get current time in UTC"""
    return datetime.now(pytz.utc)

def to_utc(dt):
    """Normalize a datetime to UTC, treating naive values as UTC"""
    if dt.tzinfo is None:
        return pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc)

def format_timestamp(dt):
    """Format datetime as ISO-8601 in UTC"""
    return to_utc(dt).isoformat()
