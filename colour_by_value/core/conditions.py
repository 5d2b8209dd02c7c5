"""Value conditions for the `condition` mode.

Predicates deciding whether a cell value matches a target. They never
raise on odd input: a value that cannot be compared simply does not match.

Numeric comparisons read numbers the way a spreadsheet formula would:
a leading number is taken from text ("12 apples" -> 12), anything else
compares false.
"""

import datetime
import math
import re
from typing import Any

from colour_by_value.core.hashing import canonical_form
from colour_by_value.core.types import InvalidInputKind

CONDITIONS = (
    'equals',
    'notequals',
    'contains',
    'notcontains',
    'startswith',
    'endswith',
    'greater',
    'less',
    'greaterequal',
    'lessequal',
)

NUMBER_OPERATORS = ('greater', 'less', 'equal', 'greaterequal', 'lessequal')
DATE_OPERATORS = ('equals', 'greater', 'less', 'greaterequal', 'lessequal')

_LEADING_NUMBER = re.compile(r'^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


def _text(value: Any) -> str:
    try:
        text = canonical_form(value)
    except InvalidInputKind:
        text = str(value)
    return (text or '').lower()


def to_number(value: Any) -> float:
    """Leading number of value, or NaN."""
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    m = _LEADING_NUMBER.match(str(value))
    if not m:
        return math.nan
    return float(m.group(0))


def _compare(a: Any, b: Any, operator: str) -> bool:
    if operator == 'greater':
        return a > b
    if operator == 'less':
        return a < b
    if operator == 'greaterequal':
        return a >= b
    if operator == 'lessequal':
        return a <= b
    return a == b


def colour_condition(cell_value: Any, target: Any, condition: str) -> bool:
    """Case-insensitive text or numeric comparison. Unknown condition = equals."""
    if cell_value is None:
        return False
    cell = _text(cell_value)
    wanted = _text(target)
    condition = condition.lower()
    if condition in ('greater', 'less', 'greaterequal', 'lessequal'):
        return _compare(to_number(cell_value), to_number(target), condition)
    if condition == 'contains':
        return wanted in cell
    if condition == 'notcontains':
        return wanted not in cell
    if condition == 'notequals':
        return cell != wanted
    if condition == 'startswith':
        return cell.startswith(wanted)
    if condition == 'endswith':
        return cell.endswith(wanted)
    return cell == wanted


def number_condition(cell_value: Any, target: float, operator: str) -> bool:
    """Numeric comparison. Unknown operator = greater."""
    number = to_number(cell_value)
    if math.isnan(number):
        return False
    operator = operator.lower()
    if operator == 'equal':
        return number == target
    if operator not in NUMBER_OPERATORS:
        operator = 'greater'
    return _compare(number, target, operator)


def to_date(value: Any) -> datetime.date | None:
    """Calendar date of value (time of day dropped), or None."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        try:
            return datetime.datetime.fromisoformat(value.strip()).date()
        except ValueError:
            return None
    return None


def date_condition(
    cell_value: Any,
    target: str | datetime.date,
    operator: str,
    today: datetime.date | None = None,
) -> bool:
    """Compare calendar dates. Target may be 'today', 'yesterday' or a date."""
    cell = to_date(cell_value)
    if cell is None:
        return False
    if today is None:
        today = datetime.date.today()
    if isinstance(target, str) and target.lower() == 'today':
        wanted = today
    elif isinstance(target, str) and target.lower() == 'yesterday':
        wanted = today - datetime.timedelta(days=1)
    else:
        wanted = to_date(target)
        if wanted is None:
            return False
    operator = operator.lower()
    if operator not in DATE_OPERATORS:
        operator = 'equals'
    return _compare(cell, wanted, operator)


DATE_PREFIX = 'date-'
NUMBER_PREFIX = 'number-'


def matches(cell_value: Any, target: Any, when: str, today: datetime.date | None = None) -> bool:
    """Dispatch on the --when name.

    'date-<op>' compares calendar dates, 'number-<op>' compares numbers,
    anything else is a colour_condition name.
    """
    when = when.lower()
    if when.startswith(DATE_PREFIX):
        return date_condition(cell_value, target, when[len(DATE_PREFIX) :], today=today)
    if when.startswith(NUMBER_PREFIX):
        return number_condition(cell_value, to_number(target), when[len(NUMBER_PREFIX) :])
    return colour_condition(cell_value, target, when)
