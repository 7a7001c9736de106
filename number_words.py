import re

MAX_ZEROS = 3_000_000_000_003
DISPLAY_ZEROS_LIMIT = 3003

_LEADING_INT = re.compile(r"\s*[+-]?\d+")

_SMALL_NAMES = {
    0: "one",
    1: "ten",
    2: "one hundred",
    3: "one thousand",
    4: "ten thousand",
    5: "one hundred thousand",
}
_MULTIPLIERS = {
    0: "one",
    1: "ten",
    2: "one hundred",
}
_STANDARD_ILLIONS = (
    "",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
    "octillion",
    "nonillion",
    "decillion",
)
_ILLION_ROOTS = ("", "m", "b", "tr", "quadr", "quint", "sext", "sept", "oct", "non", "dec")
_ONES_PREFIX = ("", "un", "duo", "tre", "quattuor", "quin", "sex", "septen", "octo", "novem")
_TENS_PREFIX = (
    "",
    "deci",
    "viginti",
    "triginta",
    "quadraginta",
    "quinquaginta",
    "sexaginta",
    "septuaginta",
    "octoginta",
    "nonaginta",
)
_HUNDREDS_PREFIX = (
    "",
    "centi",
    "ducenti",
    "trecenti",
    "quadringenti",
    "quingenti",
    "sescenti",
    "septingenti",
    "octingenti",
    "nongenti",
)
_FUN_FACTS = {
    100: "This is a googol!",
    303: "One centillion! That's a LOT of zeros!",
    3003: "Millinillion! The biggest named number here!",
}


def _separator(use_dashes):
    return "-" if use_dashes else ""


def group_prefix(value, use_dashes=False):
    """Latin prefix for a single base-1000 group (0..999)."""
    if value <= 0:
        return ""
    if value <= 10:
        return _ILLION_ROOTS[value]
    ones = value % 10
    tens = (value // 10) % 10
    hundreds = value // 100
    # Latin compounds read ones, then tens, then hundreds.
    parts = []
    if ones > 0:
        parts.append(_ONES_PREFIX[ones])
    if tens > 0:
        parts.append(_TENS_PREFIX[tens])
    if hundreds > 0:
        parts.append(_HUNDREDS_PREFIX[hundreds])
    last = parts[-1]
    if last.endswith(("i", "a")):
        parts[-1] = last[:-1]
    return _separator(use_dashes).join(parts)


def _base_1000_groups(value):
    groups = []
    while value > 0:
        groups.append(value % 1000)
        value //= 1000
    groups.reverse()
    return groups


def illion_prefix(index, use_dashes=False):
    """Prefix of the index-th illion, without the trailing "illion".

    Indices of 1000 and above are spelled one base-1000 group at a time,
    most significant first, with an "illin" infix before every lower group:
    1000 -> "millin", 1_000_000 -> "millinillin", 1021 -> "millinunvigint".
    Empty lower groups still contribute their "illin".
    """
    if index <= 0:
        return ""
    if index <= 999:
        return group_prefix(index, use_dashes)
    sep = _separator(use_dashes)
    leading, *lower = _base_1000_groups(index)
    parts = [group_prefix(leading, use_dashes)]
    for group in lower:
        parts.append("illin")
        if group > 0:
            parts.append(group_prefix(group, use_dashes))
    return sep.join(parts)


def illion_name(index, use_dashes=False):
    if index <= 0:
        return ""
    if index <= 10:
        return _STANDARD_ILLIONS[index]
    return illion_prefix(index, use_dashes) + _separator(use_dashes) + "illion"


def split_zero_count(zeros):
    """Return (illion_index, remainder) for zeros >= 6."""
    return zeros // 3 - 1, zeros % 3


def name_for_zero_count(zeros, use_dashes=False):
    if zeros < 6:
        return _SMALL_NAMES[max(zeros, 0)]
    illion_index, remainder = split_zero_count(zeros)
    return f"{_MULTIPLIERS[remainder]} {illion_name(illion_index, use_dashes)}"


def format_zeros_with_commas(zeros):
    if zeros <= 0:
        return ""
    total_digits = zeros + 1
    first_group_len = ((total_digits - 1) % 3) + 1
    leading_zeros = first_group_len - 1
    full_groups = (zeros - leading_zeros) // 3
    parts = ["000"] * full_groups
    if leading_zeros > 0:
        return ",".join(["0" * leading_zeros] + parts)
    # The caller renders the leading "1" itself, so keep its comma here.
    return "," + ",".join(parts)


def clamp_zero_count(raw, max_zeros=MAX_ZEROS):
    """Read a leading integer from raw input and clamp it to 0..max_zeros."""
    match = _LEADING_INT.match(str(raw))
    if match is None:
        return 0
    value = int(match.group())
    if value <= 0:
        return 0
    return min(value, max_zeros)


def fun_fact(zeros):
    return _FUN_FACTS.get(zeros)
