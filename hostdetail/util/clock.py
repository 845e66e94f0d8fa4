import datetime


def utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


def fixed_clock(moment: datetime.datetime):
    """
    Clock that always reports the same moment, for repeatable synthesis.
    """
    return lambda: moment
