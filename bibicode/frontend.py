"""Multi-number front end: split input lines, join converted outputs.

WHY: The conversion core handles exactly one number per call, but users
pipe whole lines ("ff 10 7d0") or text with numbers embedded in it
("id=0x7d0;id=0xff"). They also want control over how several results
are printed: separated, glued into one number, wrapped in a prefix/suffix.

HOW: split_numbers() extracts number strings from a line, by whitespace or
by a regular expression. join_outputs() assembles converted strings
according to an OutputFormat.

RULES:
- Without a pattern, numbers are whitespace separated
- With a pattern, every non-empty match is a number; group 1 is used when
  the pattern has capturing groups
- concat mode writes the target prefix once, then every output glued
  together; outputs must then be rendered without their prefix
- prefix/suffix wrap the whole joined result
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import List, Pattern, Union


@dataclass
class OutputFormat:
    """How several converted numbers are printed on one line.

    Attributes:
        separator: Text between outputs (ignored in concat mode).
        prefix: Text written before the joined result.
        suffix: Text written after the joined result.
        concat: Glue all outputs into a single number.
    """

    separator: str = " "
    prefix: str = ""
    suffix: str = ""
    concat: bool = False


def split_numbers(line: str, pattern: Union[str, Pattern[str], None] = None) -> List[str]:
    """Extract the number strings contained in ``line``.

    Raises:
        re.error: If ``pattern`` is not a valid regular expression.
    """
    if pattern is None:
        return line.split()

    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    numbers: List[str] = []
    for match in regex.finditer(line):
        text = match.group(1) if regex.groups else match.group(0)
        if text:
            numbers.append(text)
    return numbers


def join_outputs(
    outputs: Sequence[str],
    fmt: OutputFormat,
    system_prefix: str = "",
) -> str:
    """Join converted numbers into one printable line.

    Args:
        outputs: Converted numbers, in input order.
        fmt: Separator, wrapping and concat settings.
        system_prefix: Target system prefix, written once in concat mode.
    """
    if fmt.concat:
        body = system_prefix + "".join(outputs)
    else:
        body = fmt.separator.join(outputs)
    return fmt.prefix + body + fmt.suffix
