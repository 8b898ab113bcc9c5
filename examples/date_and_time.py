import logging
from datetime import datetime, timezone

from fluent_pipe import pipe


def parse_date(input: str) -> float:
    """Milliseconds since the epoch. Dates without a zone are read as UTC."""
    parsed = datetime.strptime(input, "%b %d, %Y").replace(tzinfo=timezone.utc)
    return parsed.timestamp() * 1000


def from_timestamp(input: float) -> datetime:
    return datetime.fromtimestamp(input / 1000, tz=timezone.utc)


def to_iso_string(input: datetime) -> str:
    return input.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


string_to_date_and_time = (
    pipe(parse_date)
    .pipe(from_timestamp)
    .pipe(to_iso_string)
    .pipe(lambda s: s.split("T"))
    .pipe(lambda a: {"date": a[0], "time": a[1]})
)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    result = string_to_date_and_time("Jan 1, 2024")
    print(result)
