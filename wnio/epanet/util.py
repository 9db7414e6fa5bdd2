# coding: utf-8
"""
The wnio.epanet.util module contains constants and helpers shared by the
EPANET file readers.

.. rubric:: Contents

.. autosummary::

    SkippedLine
    LineResult
    split_fields
    pair_attributes
    to_float

"""
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from .exceptions import EpanetException, ENSyntaxError, ENValueError

MAGIC_NUMBER = 516114521
"""Magic number at the start of an EPANET binary output file"""

INP_SECTIONS = ['[JUNCTIONS]', '[TANKS]', '[RESERVOIRS]', '[PIPES]', '[PUMPS]']
"""INP file sections that are read; all other sections are ignored"""

INP_MIN_FIELDS = {
    '[JUNCTIONS]': 2,
    '[TANKS]': 5,
    '[RESERVOIRS]': 3,
    '[PIPES]': 5,
    '[PUMPS]': 3,
}
"""Minimum number of whitespace separated fields for a line in each INP section"""

RPT_SECTIONS = ['Node Results', 'Link Results', 'System Wide']
"""Text that identifies a report section header, checked in this order"""

_DECIMAL = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?', re.ASCII)

RPT_MIN_FIELDS = {
    'Node Results': 5,
    'Link Results': 5,
    'System Wide': 4,
}
"""Minimum number of whitespace separated fields for a line in each report section"""


@dataclass(frozen=True)
class SkippedLine:
    """A text line that did not produce a record.

    Parameters
    ----------
    section : str
        The section the line was read in
    line_num : int
        The 1-based line number within the file
    line : str
        The line contents
    error : EpanetException
        Why the line was skipped, an :class:`~wnio.epanet.exceptions.ENSyntaxError`
        for too few fields or an :class:`~wnio.epanet.exceptions.ENValueError`
        for a field that is not a number
    """

    section: str
    line_num: int
    line: str
    error: EpanetException = field(compare=False)

    def __str__(self):
        return str(self.error)


@dataclass(frozen=True)
class LineResult:
    """The outcome of reading one line: either a record or a skipped line."""

    record: Any = None
    skipped: Optional[SkippedLine] = None

    @property
    def ok(self):
        """True if the line produced a record"""
        return self.skipped is None


def split_fields(line: str) -> List[str]:
    """Split a line on runs of whitespace, dropping empty fields."""
    return line.split()


def strip_comment(line: str) -> str:
    """Remove an EPANET ``;`` comment from a line and trim it."""
    return line.split(';', 1)[0].strip()


def pair_attributes(values: Sequence[str]) -> Dict[str, str]:
    """
    Pair consecutive values into a dictionary (key, value, key, value, ...).

    An odd trailing value has no partner and is dropped. A repeated key keeps
    the last value.

    Parameters
    ----------
    values : list of str
        The fields following the positional fields of a line

    Returns
    -------
    dict
    """
    attributes = dict()
    for i in range(0, len(values) - 1, 2):
        attributes[values[i]] = values[i + 1]
    return attributes


def to_float(value: str, line_num=None, line=None) -> float:
    """
    Convert a field to a float.

    Parameters
    ----------
    value : str
        The field text
    line_num : int, optional
        The line number, used in the error message
    line : str, optional
        The line contents, used in the error message

    Raises
    ------
    ENValueError
        If the field is not a plain decimal number; digit separators,
        ``nan`` and ``inf`` are not accepted
    """
    if _DECIMAL.fullmatch(value) is None:
        raise ENValueError(202, value, line_num=line_num, line=line)
    return float(value)


def check_fields(current: Sequence[str], minimum: int, section: str, line_num=None, line=None):
    """
    Raise an :class:`~wnio.epanet.exceptions.ENSyntaxError` if a line has
    fewer than ``minimum`` fields.
    """
    if len(current) < minimum:
        raise ENSyntaxError(201, '{} requires {} fields, found {}'.format(section, minimum, len(current)),
                            line_num=line_num, line=line)
