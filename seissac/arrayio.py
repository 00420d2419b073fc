# -*- coding: utf-8 -*-
"""
Low-level array interface to the SAC file format.

Functions in this module work directly with NumPy arrays that mirror the SAC
format.  The 'primitives' in this module are the float, int, logical and
string header arrays, the float data array, and a header dictionary.
Convenience functions are provided to convert between header arrays and more
user-friendly dictionaries.

The codec is very literal; there is almost no value checking, except for the
header version (which doubles as the byte order mark) and header/data array
lengths.  Array-based checking routines are provided for additional checks
where desired.

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import logging
import warnings

import decorator
import numpy as np

from . import header as HD
from .util import (SacEndianMismatchError, SacFormatError, SacHeaderError,
                   SacInvalidContentError, byteorder_char, is_valid_enum_int)


logger = logging.getLogger('seissac.arrayio')

# byte positions of the four header blocks
_INT_OFFSET = 4 * HD.NFLOATS
_BOOL_OFFSET = _INT_OFFSET + 4 * HD.NINTS
_STR_OFFSET = _BOOL_OFFSET + 4 * HD.NBOOLS


@decorator.decorator
def _open_file(func, *args, **kwargs):
    """
    Ensure a readable binary buffer is passed as first argument to the
    decorated function.

    :param func: callable that takes at least one argument;
        the first argument must be treated as a buffer.
    :return: callable
    """
    first_arg = args[0]
    try:
        with open(first_arg, 'rb') as fi:
            args = tuple([fi] + list(args[1:]))
            return func(*args, **kwargs)
    except TypeError:  # assume we have been passed a buffer
        if not hasattr(first_arg, 'read'):
            raise  # type error was in function call, not in opening file
        return func(*args, **kwargs)


def init_header_arrays(arrays=('float', 'int', 'bool', 'str'),
                       byteorder='='):
    """
    Initialize arbitrary header arrays.

    :param arrays: Specify which arrays to initialize and the desired order.
        If omitted, returned arrays are ('float', 'int', 'bool', 'str'), in
        that order.
    :type arrays: tuple(str)
    :param byteorder: Desired byte order of initialized arrays
        (little, native, big) as {'<', '=', '>'}.
    :type byteorder: str

    :rtype: list(:class:`~numpy.ndarray`)
    :returns: The desired SAC header arrays.

    """
    out = []
    for itype in arrays:
        if itype == 'float':
            hf = np.empty(HD.NFLOATS, dtype=byteorder + 'f4')
            hf.fill(HD.FNULL)
            out.append(hf)
        elif itype == 'int':
            hi = np.empty(HD.NINTS, dtype=byteorder + 'i4')
            hi.fill(HD.INULL)
            out.append(hi)
        elif itype == 'bool':
            # logicals start out False, not null
            hl = np.zeros(HD.NBOOLS, dtype=byteorder + 'i4')
            out.append(hl)
        elif itype == 'str':
            hs = np.empty(HD.NSTRSLOTS, dtype='|S8')
            hs.fill(HD.SNULL)
            out.append(hs)
        else:
            raise ValueError("Unrecognized header array type {}".format(itype))

    return out


def detect_byteorder(buf):
    """
    Find the byte order of a SAC binary buffer from its header version.

    :param buf: At least the first ``HD.NVHDR_OFFSET + 4`` bytes of a SAC
        binary record.
    :type buf: bytes
    :return: '<' or '>'
    :rtype: str
    :raises: :class:`~seissac.util.SacFormatError` if the header version is
        6 in neither byte order.

    """
    if len(buf) < HD.NVHDR_OFFSET + 4:
        msg = "Buffer of {} bytes is too short for a SAC header."
        raise SacFormatError(msg.format(len(buf)))
    for endian in ('<', '>'):
        nvhdr = np.frombuffer(buf, dtype=endian + 'i4', count=1,
                              offset=HD.NVHDR_OFFSET)[0]
        if nvhdr == HD.SAC_VERSION:
            return endian
    msg = "Header version is not {} in either byte order. Not a SAC file?"
    raise SacFormatError(msg.format(HD.SAC_VERSION))


def decode(buf, swap=True, terse=False):
    """
    Decode a SAC binary record.

    :param buf: Bytes of a complete SAC binary record.
    :type buf: bytes, bytearray or memoryview
    :param swap: If False, a record in foreign byte order is an error instead
        of being byte swapped.
    :type swap: bool
    :param terse: If True, do not log byte swapping.
    :type terse: bool

    :return: The float, integer, logical and string header arrays, and data
        array, in that order, all in native byte order.
    :rtype: tuple(:class:`numpy.ndarray`)

    :raises: :class:`~seissac.util.SacFormatError` if the header version is
        not recognized, or the buffer is too short for the header or for
        ``npts`` samples. :class:`~seissac.util.SacEndianMismatchError` if
        the record is in foreign byte order and ``swap`` is False.

    """
    if len(buf) < HD.HEADER_LENGTH:
        msg = "Buffer of {} bytes is too short for a SAC header ({} bytes)."
        raise SacFormatError(msg.format(len(buf), HD.HEADER_LENGTH))

    endian = detect_byteorder(buf)
    if endian != byteorder_char('native'):
        if not swap:
            msg = "SAC record is in foreign byte order and swap is disabled."
            raise SacEndianMismatchError(msg)
        if not terse:
            logger.info("Byte swapping SAC record read in foreign byte order.")

    hf = np.frombuffer(buf, dtype=endian + 'f4', count=HD.NFLOATS, offset=0)
    hi = np.frombuffer(buf, dtype=endian + 'i4', count=HD.NINTS,
                       offset=_INT_OFFSET)
    hl = np.frombuffer(buf, dtype=endian + 'i4', count=HD.NBOOLS,
                       offset=_BOOL_OFFSET)
    hs = np.frombuffer(buf, dtype='|S8', count=HD.NSTRSLOTS,
                       offset=_STR_OFFSET)

    delta = float(hf[HD.FLOATHDRS.index('delta')])
    if delta == HD.FNULL or not delta > 0:
        msg = "Sampling interval must be set and positive, not {}"
        raise SacFormatError(msg.format(delta))

    npts = int(hi[HD.INTHDRS.index('npts')])
    if npts < 0:
        raise SacFormatError("Negative number of points: {}".format(npts))
    if len(buf) < HD.HEADER_LENGTH + 4 * npts:
        msg = "Cannot read all data points. Expected {}, got {} bytes."
        raise SacFormatError(msg.format(4 * npts,
                                        len(buf) - HD.HEADER_LENGTH))
    data = np.frombuffer(buf, dtype=endian + 'f4', count=npts,
                         offset=HD.HEADER_LENGTH)

    # astype copies, so the arrays don't point into (read-only) buf
    return (hf.astype('=f4'), hi.astype('=i4'), hl.astype('=i4'),
            hs.copy(), data.astype('=f4'))


def encode(hf, hi, hl, hs, data, byteorder=HD.DEFAULT_BYTEORDER):
    """
    Encode header and data arrays as a SAC binary record.

    String slots are written as stored; the header setters keep them padded
    with spaces to their full width.

    :param byteorder: Desired output byte order {'little', 'big', 'native'}.
    :type byteorder: str

    :rtype: bytes

    """
    endian = byteorder_char(byteorder)
    return b''.join([np.asarray(hf).astype(endian + 'f4').tobytes(),
                     np.asarray(hi).astype(endian + 'i4').tobytes(),
                     np.asarray(hl).astype(endian + 'i4').tobytes(),
                     np.asarray(hs).astype('|S8').tobytes(),
                     np.asarray(data).astype(endian + 'f4').tobytes()])


@_open_file
def read_sac(source, swap=True, terse=False):
    """
    Read a SAC binary file.

    :param source: Full path string or File-like object from a SAC binary
        file on disk.  If it is an open File object, open 'rb'.
    :type source: str or file

    See :func:`decode` for the other parameters, return value and errors.
    Errors of the underlying file system propagate unchanged.

    """
    return decode(source.read(), swap=swap, terse=terse)


def write_sac(dest, hf, hi, hl, hs, data, byteorder=HD.DEFAULT_BYTEORDER):
    """
    Write the header and data arrays to a SAC binary file.

    :param dest: Full path or File-like object to SAC binary file on disk.
    :type dest: str or file
    :param byteorder: Desired output byte order {'little', 'big', 'native'}.
    :type byteorder: str

    """
    buf = encode(hf, hi, hl, hs, data, byteorder=byteorder)
    try:
        with open(dest, 'wb') as f:
            f.write(buf)
    except TypeError:
        if not hasattr(dest, 'write'):
            raise
        dest.write(buf)


@_open_file
def file_is_native_endian(source):
    """
    Return True if a SAC binary file is in the byte order of this machine.

    Only the header version is read.

    """
    buf = source.read(HD.NVHDR_OFFSET + 4)
    return detect_byteorder(buf) == byteorder_char('native')


def header_arrays_to_dict(hf, hi, hl, hs, nulls=False):
    """
    Convert SAC header arrays to a more user-friendly dict.

    :param nulls: If True, return all header values, including nulls, else
        omit them.
    :type nulls: bool

    :return: SAC header dictionary. Logicals are bools, strings are stripped
        of padding and 'kevnm' is reassembled from its two slots.
    :rtype: dict

    """
    items = [(key, float(val)) for (key, val) in zip(HD.FLOATHDRS, hf)
             if nulls or val != HD.FNULL]
    items += [(key, int(val)) for (key, val) in zip(HD.INTHDRS, hi)
              if nulls or val != HD.INULL]
    items += [(key, bool(val)) for (key, val) in zip(HD.BOOLHDRS, hl)]

    strings = dict((key, val.decode('ascii', 'replace'))
                   for (key, val) in zip(HD.STRSLOTS, hs))
    strings['kevnm'] = strings['kevnm'] + strings.pop('kevnm2')
    for key in HD.STRHDRS:
        val = strings[key]
        if val.startswith(HD.SNULL.strip()):
            if nulls:
                items.append((key, HD.SNULL.strip()))
        else:
            items.append((key, val.strip()))

    return dict(items)


def dict_to_header_arrays(header=None, byteorder='='):
    """
    Returns null hf, hi, hl, hs arrays, optionally filled with values from a
    dictionary.

    Enumerated headers must already be integers.  Unknown names are ignored
    with a warning.

    :param header: SAC header dictionary.
    :type header: dict
    :param byteorder: Desired byte order of initialized arrays (little,
        native, big, as {'<', '=', '>'}).
    :type byteorder: str

    :return: The float, integer, logical and string header arrays.
    :rtype: tuple(:class:`numpy.ndarray`)

    """
    hf, hi, hl, hs = init_header_arrays(byteorder=byteorder)

    for hdr, value in (header or {}).items():
        if hdr in HD.FLOATHDRS:
            hf[HD.FLOATHDRS.index(hdr)] = HD.FNULL if value is None else value
        elif hdr in HD.INTHDRS:
            if value is None:
                value = HD.INULL
            elif not isinstance(value, (np.integer, int)):
                msg = "Non-integers may be truncated: {} = {}"
                warnings.warn(msg.format(hdr, value))
            hi[HD.INTHDRS.index(hdr)] = value
        elif hdr in HD.BOOLHDRS:
            if value not in (True, False, 1, 0):
                msg = "Logical header values must be {True, False, 1, 0}"
                raise SacHeaderError(msg)
            hl[HD.BOOLHDRS.index(hdr)] = value
        elif hdr == 'kevnm':
            kevnm = HD.SNULL * 2 if value is None else '{:<16.16s}'.format(
                value)
            hs[HD.STRSLOTS.index('kevnm')] = kevnm[:8].encode('ascii')
            hs[HD.STRSLOTS.index('kevnm2')] = kevnm[8:].encode('ascii')
        elif hdr in HD.STRHDRS:
            value = HD.SNULL if value is None else '{:<8.8s}'.format(value)
            hs[HD.STRSLOTS.index(hdr)] = value.encode('ascii')
        else:
            msg = "Unrecognized header name: {}. Ignored.".format(hdr)
            warnings.warn(msg)

    return hf, hi, hl, hs


def validate_sac_content(hf, hi, hl, hs, data, *tests):
    """
    Check validity of loaded SAC file content, such as header/data
    consistency.

    :param tests: One or more of the following validity tests:
        'delta' : Time step "delta" is positive.
        'logicals' : Logical values are 0 or 1.
        'data_hdrs' : Length, end time, min, mean, max of data array match
            header values.
        'enums' : Check validity of enumerated values.
        'all' : Do all tests.
    :type tests: str

    :raises: :class:`~seissac.util.SacInvalidContentError` if any of the
        specified tests fail. :class:`ValueError` if no or unknown tests are
        specified.

    """
    _all = ('delta', 'logicals', 'data_hdrs', 'enums')

    if 'all' in tests:
        tests = _all

    if not tests:
        raise ValueError("No validation tests specified.")
    elif any([(itest not in _all) for itest in tests]):
        msg = "Unrecognized validation test specified"
        raise ValueError(msg)

    if 'delta' in tests:
        dval = hf[HD.FLOATHDRS.index('delta')]
        if not (dval > 0.0):
            msg = "Header 'delta' must be > 0."
            raise SacInvalidContentError(msg)

    if 'logicals' in tests:
        for hdr, lval in zip(HD.BOOLHDRS, hl):
            if lval not in (0, 1):
                msg = "Header '{}' must be {{0, 1}}, not {}."
                raise SacInvalidContentError(msg.format(hdr, lval))

    if 'data_hdrs' in tests:
        npts = hi[HD.INTHDRS.index('npts')]
        if npts != len(data):
            msg = "Header 'npts' ({}) doesn't match data length ({})."
            raise SacInvalidContentError(msg.format(npts, len(data)))
        b = hf[HD.FLOATHDRS.index('b')]
        delta = hf[HD.FLOATHDRS.index('delta')]
        e = b + delta * (npts - 1) if npts else b
        if not np.allclose(hf[HD.FLOATHDRS.index('e')], e):
            raise SacInvalidContentError("Header 'e' doesn't match b, npts.")
        if npts:
            is_min = np.allclose(hf[HD.FLOATHDRS.index('depmin')], data.min())
            is_max = np.allclose(hf[HD.FLOATHDRS.index('depmax')], data.max())
            is_mean = np.allclose(hf[HD.FLOATHDRS.index('depmen')],
                                  data.mean(dtype=np.float64))
            if not all([is_min, is_max, is_mean]):
                msg = "Data headers don't match data array."
                raise SacInvalidContentError(msg)

    if 'enums' in tests:
        for hdr in HD.ACCEPTED_VALS:
            enval = hi[HD.INTHDRS.index(hdr)]
            if not is_valid_enum_int(hdr, enval, allow_null=True):
                msg = "Invalid enumerated value, '{}': {}".format(hdr, enval)
                raise SacInvalidContentError(msg)
