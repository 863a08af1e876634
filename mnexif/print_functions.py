# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
MakerNote print functions

Each tag descriptor carries a FormattingRule naming one of a closed set of
print kinds. print_rule() dispatches to the matching printer. Every printer
checks the value's type and count first and, if they are not what it
expects, prints the value with its default representation instead.
Printing never raises.

Copyright 2025 DNAi inc.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from math import gcd
from typing import Callable, Dict, Optional

from mnexif.exceptions import RegistryError
from mnexif.i18n import N_, Translator, null_translator
from mnexif.tag_info import GroupId, TagDetails
from mnexif.value_types import RATIONAL_TYPES, TypeId, Value

logger = logging.getLogger(__name__)


class PrintKind(Enum):
    """Formatting rule variants."""
    VALUE = 'value'
    TAG = 'tag'
    EXIF_VERSION = 'exif_version'
    CAMERA_TEMPERATURE = 'camera_temperature'
    FOCAL_LENGTH_35 = 'focal_length_35'
    PW_COLOR = 'pw_color'
    VALUE_MINUS_4 = 'value_minus_4'
    EXPOSURE_BIAS = 'exposure_bias'
    EXPOSURE_TIME = 'exposure_time'
    FNUMBER = 'fnumber'
    COMPOSITE = 'composite'


@dataclass(frozen=True)
class FormattingRule:
    """
    How to print one tag.

    Attributes:
        kind: Printer to use
        details: Enumerated lookup table (PrintKind.TAG only)
        sub_group: Group decoding the payload (PrintKind.COMPOSITE only)
    """
    kind: PrintKind
    details: Optional[TagDetails] = None
    sub_group: Optional[GroupId] = None

    def __post_init__(self):
        if self.kind is PrintKind.TAG and self.details is None:
            raise RegistryError("PrintKind.TAG requires a lookup table")
        if self.kind is PrintKind.COMPOSITE and self.sub_group is None:
            raise RegistryError("PrintKind.COMPOSITE requires a sub-group")


def print_tag(details: TagDetails) -> FormattingRule:
    return FormattingRule(PrintKind.TAG, details=details)


def print_composite(sub_group: GroupId) -> FormattingRule:
    return FormattingRule(PrintKind.COMPOSITE, sub_group=sub_group)


PRINT_VALUE = FormattingRule(PrintKind.VALUE)
PRINT_EXIF_VERSION = FormattingRule(PrintKind.EXIF_VERSION)
PRINT_CAMERA_TEMPERATURE = FormattingRule(PrintKind.CAMERA_TEMPERATURE)
PRINT_FOCAL_LENGTH_35 = FormattingRule(PrintKind.FOCAL_LENGTH_35)
PRINT_PW_COLOR = FormattingRule(PrintKind.PW_COLOR)
PRINT_VALUE_MINUS_4 = FormattingRule(PrintKind.VALUE_MINUS_4)
PRINT_EXPOSURE_BIAS = FormattingRule(PrintKind.EXPOSURE_BIAS)
PRINT_EXPOSURE_TIME = FormattingRule(PrintKind.EXPOSURE_TIME)
PRINT_FNUMBER = FormattingRule(PrintKind.FNUMBER)


def _is_scalar(value: Value, type_id: TypeId) -> bool:
    return value.count() == 1 and value.type_id == type_id


def _fallback(rule: FormattingRule, value: Value) -> str:
    logger.debug("%s print does not apply to %r, using default print", rule.kind.value, value)
    return str(value)


def _print_value(rule, value, translate, assembler) -> str:
    return str(value)


def _print_tag(rule, value, translate, assembler) -> str:
    if value.count() != 1:
        return _fallback(rule, value)
    label = rule.details.find(value.to_int64())
    if label is None:
        return str(value)
    return translate(label)


def _print_exif_version(rule, value, translate, assembler) -> str:
    if value.count() != 4 or value.type_id != TypeId.UNDEFINED:
        return _fallback(rule, value)
    # "0221" -> "2.21", "1000" -> "10.00"
    chars = ''.join(chr(value.to_int64(i) & 0xFF) for i in range(4))
    major = chars[1] if chars[0] == '0' else chars[:2]
    return f"{major}.{chars[2:]}"


def _print_camera_temperature(rule, value, translate, assembler) -> str:
    if not _is_scalar(value, TypeId.SRATIONAL):
        return _fallback(rule, value)
    return f"{value.to_float():g} C"


def _print_focal_length_35(rule, value, translate, assembler) -> str:
    if not _is_scalar(value, TypeId.LONG):
        return _fallback(rule, value)
    length = value.to_int64()
    if length == 0:
        return translate(N_("Unknown"))
    return f"{length / 10.0:.1f} mm"


def _print_pw_color(rule, value, translate, assembler) -> str:
    if not _is_scalar(value, TypeId.SHORT):
        return _fallback(rule, value)
    # 65535: no color modification
    if value.to_int64() == 65535:
        return translate(N_("Neutral"))
    # Hue in degrees
    return str(value.to_int64())


def _print_value_minus_4(rule, value, translate, assembler) -> str:
    if not _is_scalar(value, TypeId.SHORT):
        return _fallback(rule, value)
    return str(value.to_int64() - 4)


def _print_exposure_bias(rule, value, translate, assembler) -> str:
    if value.count() != 1 or value.type_id not in RATIONAL_TYPES:
        return _fallback(rule, value)
    num, den = value.to_rational()
    if den <= 0:
        return _fallback(rule, value)
    if num == 0:
        return "0 EV"
    divisor = gcd(num, den)
    num, den = num // divisor, den // divisor
    if den == 1:
        return f"{num:+d} EV"
    return f"{num:+d}/{den} EV"


def _print_exposure_time(rule, value, translate, assembler) -> str:
    if not _is_scalar(value, TypeId.RATIONAL):
        return _fallback(rule, value)
    num, den = value.to_rational()
    if num == 0 or den == 0:
        return _fallback(rule, value)
    if num == den:
        return "1 s"
    if den % num == 0:
        return f"1/{den // num} s"
    return f"{num / den:g} s"


def _print_fnumber(rule, value, translate, assembler) -> str:
    if not _is_scalar(value, TypeId.RATIONAL):
        return _fallback(rule, value)
    num, den = value.to_rational()
    if den == 0:
        return _fallback(rule, value)
    return f"F{num / den:.2g}"


def _print_composite(rule, value, translate, assembler) -> str:
    from mnexif.composite import assemble_labeled, resolve_sub_tags

    resolved = resolve_sub_tags(value, rule.sub_group, translate, assembler)
    if not resolved:
        return _fallback(rule, value)
    if assembler is None:
        assembler = assemble_labeled()
    return assembler(resolved, translate)


_PRINTERS: Dict[PrintKind, Callable[..., str]] = {
    PrintKind.VALUE: _print_value,
    PrintKind.TAG: _print_tag,
    PrintKind.EXIF_VERSION: _print_exif_version,
    PrintKind.CAMERA_TEMPERATURE: _print_camera_temperature,
    PrintKind.FOCAL_LENGTH_35: _print_focal_length_35,
    PrintKind.PW_COLOR: _print_pw_color,
    PrintKind.VALUE_MINUS_4: _print_value_minus_4,
    PrintKind.EXPOSURE_BIAS: _print_exposure_bias,
    PrintKind.EXPOSURE_TIME: _print_exposure_time,
    PrintKind.FNUMBER: _print_fnumber,
    PrintKind.COMPOSITE: _print_composite,
}


def print_rule(
    rule: FormattingRule,
    value: Value,
    translate: Optional[Translator] = None,
    assembler=None
) -> str:
    """
    Print a value according to a formatting rule.

    Args:
        rule: Formatting rule of the tag
        value: Tag value
        translate: Translator for labels (identity if None)
        assembler: Composite assembler for PrintKind.COMPOSITE
                   (labeled "Name: text" list if None)

    Returns:
        Human-readable text; the value's default print if the rule
        does not apply
    """
    if translate is None:
        translate = null_translator
    printer = _PRINTERS.get(rule.kind, _print_value)
    try:
        return printer(rule, value, translate, assembler)
    except (ArithmeticError, IndexError, TypeError, ValueError) as e:
        logger.debug("Printing %r with %s failed: %s", value, rule.kind.value, e)
        return str(value)
