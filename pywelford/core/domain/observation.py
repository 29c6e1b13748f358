import re
from typing import List

_SEPARATORS = re.compile(r"[,\s]+")


def parse_observations(data: bytes) -> List[float]:
    """
    Parse raw bytes into a flat list of observations.

    Each line holds one or more numbers separated by commas or whitespace.
    Anything after a '#' is a comment. Empty lines are skipped.
    """
    values: List[float] = []

    for lineno, line in enumerate(data.decode("utf-8").splitlines(), start=1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue

        for token in _SEPARATORS.split(line):
            if not token:
                continue
            try:
                values.append(float(token))
            except ValueError:
                raise ValueError(f"Invalid observation on line {lineno}: {token!r}")

    return values
