# -*- coding: utf-8 -*-
"""
SAC module helper functions and exceptions.

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import sys

from . import header as HD


# ------------- SAC-SPECIFIC EXCEPTIONS ---------------------------------------
class SacError(Exception):
    """
    Base class of all errors raised by this package.
    """
    pass


class SacFormatError(SacError, ValueError):
    """
    Raised if a buffer is not a SAC binary record: unrecognized header version,
    or too few bytes for the header or the data.
    """
    pass


class SacEndianMismatchError(SacFormatError):
    """
    Raised if a buffer is in foreign byte order and swapping was disabled.
    """
    pass


class SacInvalidRangeError(SacError, ValueError):
    """
    Raised if a requested time window lies outside of a trace.
    """
    pass


class SacValidationError(SacError, ValueError):
    """
    Raised if an operation receives an invalid parameter.
    """
    pass


class SacInvalidContentError(SacError):
    """
    Raised if headers and/or data are not valid.
    """
    pass


class SacHeaderError(SacError):
    """
    Raised if header has issues.
    """
    pass


# ------------- VALIDITY CHECKS -----------------------------------------------
def is_valid_enum_str(hdr, name):
    # is this a valid string name for this hdr
    # assume that, if a value isn't in HD.ACCEPTED_VALS, it's not valid
    if hdr in HD.ACCEPTED_VALS:
        tf = name in HD.ACCEPTED_VALS[hdr]
    else:
        tf = False
    return tf


def is_valid_enum_int(hdr, val, allow_null=True):
    # is this a valid integer for this hdr.
    if hdr in HD.ACCEPTED_INT:
        accep = list(HD.ACCEPTED_INT[hdr])
        if allow_null:
            accep += [HD.INULL]
        tf = val in accep
    else:
        tf = False
    return tf


# ------------- GENERAL -------------------------------------------------------
def enum_string_to_int(header):
    """
    Convert enumerated string values in header dictionary to int values.

    Integer values that are already valid for the header are kept.
    """
    for hdr, val in header.items():
        if hdr not in HD.ACCEPTED_VALS or val is None:
            continue
        if is_valid_enum_str(hdr, val):
            header[hdr] = HD.ENUM_VALS[val]
        elif not is_valid_enum_int(hdr, val):
            msg = 'Unrecognized enumerated value "{}" for header "{}"'
            raise SacHeaderError(msg.format(val, hdr))
    return header


def byteorder_char(byteorder):
    """
    Translate a byte order name into a NumPy dtype prefix.

    :param byteorder: One of {'little', 'big', 'native'}, or one of the NumPy
        characters {'<', '>', '='}.
    :type byteorder: str
    :rtype: str

    >>> byteorder_char('big')
    '>'
    """
    if byteorder in ('little', '<'):
        return '<'
    elif byteorder in ('big', '>'):
        return '>'
    elif byteorder in ('native', '='):
        return '<' if sys.byteorder == 'little' else '>'
    msg = "Unrecognized byteorder '{}'. Use {{'little', 'big', 'native'}}"
    raise SacValidationError(msg.format(byteorder))


def sacstring(value, width=HD.STRSLOT_WIDTH):
    """
    Right-pad or right-truncate a value to a fixed-width SAC string.

    >>> sacstring(30.5)
    '30.5    '
    >>> sacstring('a long station name')
    'a long s'
    """
    return '{:<{width}.{width}s}'.format(str(value), width=width)
