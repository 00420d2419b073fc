# -*- coding: utf-8 -*-
"""
Filter design and application for evenly sampled traces.

Filter coefficients are never computed here; a :class:`FilterDesigner`
delegates the design to a numerical library and applies the result.  The
default, :class:`ScipyFilterDesigner`, uses :func:`scipy.signal.iirfilter`
in second-order sections and :func:`scipy.signal.sosfilt`.

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import abc
from collections import namedtuple

from scipy.signal import iirfilter, sosfilt

from ..util import SacValidationError


FILTER_KINDS = ('lowpass', 'highpass', 'bandpass')
MAX_POLES = 10

# kind: one of FILTER_KINDS
# corners: tuple of corner frequencies in Hz, one or (for bandpass) two
# sampling_rate: in Hz
FilterSpec = namedtuple('FilterSpec', ['kind', 'corners', 'sampling_rate'])

# name: analog prototype; npoles: number of poles
Prototype = namedtuple('Prototype', ['name', 'npoles'])


def get_filter_spec(kind, corners, sampling_rate):
    """
    Build and check a :class:`FilterSpec`.

    :param kind: 'lowpass', 'highpass' or 'bandpass'.
    :param corners: Corner frequency in Hz, or a (low, high) pair for
        'bandpass'.
    :param sampling_rate: Sampling rate in Hz.
    :raises: :class:`~seissac.util.SacValidationError` on a bad kind, a wrong
        number of corners, corners that are not increasing, or corners not
        between zero and Nyquist.
    """
    if kind not in FILTER_KINDS:
        msg = "Unknown filter type '{}'. Use one of {}."
        raise SacValidationError(msg.format(kind, FILTER_KINDS))
    try:
        corners = tuple(float(c) for c in corners)
    except TypeError:
        corners = (float(corners),)
    if kind == 'bandpass':
        if len(corners) != 2:
            msg = "Bandpass filters need two corner frequencies."
            raise SacValidationError(msg)
        if not corners[0] < corners[1]:
            msg = "First corner must be lower than second corner."
            raise SacValidationError(msg)
    elif len(corners) != 1:
        msg = "{} filters need exactly one corner frequency.".format(kind)
        raise SacValidationError(msg)
    nyquist = 0.5 * sampling_rate
    for corner in corners:
        if not 0.0 < corner < nyquist:
            msg = ("Corner frequency ({}) must be above zero and below "
                   "Nyquist ({}).").format(corner, nyquist)
            raise SacValidationError(msg)
    return FilterSpec(kind, corners, sampling_rate)


def get_filter_prototype(ftype, npoles):
    """
    Build and check a :class:`Prototype`.

    Prototypes are recognized by their first two letters, ignoring case:
    'bu' (Butterworth), 'be' (Bessel), 'c1' (Chebyshev type I) and 'c2'
    (Chebyshev type II).  Only Butterworth filters are implemented.

    >>> get_filter_prototype('Butterworth', 4)
    Prototype(name='butterworth', npoles=4)
    """
    if len(ftype) < 2:
        msg = "Filter prototype must be at least two characters: '{}'"
        raise SacValidationError(msg.format(ftype))
    key = ftype[:2].lower()
    if key == 'bu':
        name = 'butterworth'
    elif key in ('be', 'c1', 'c2', 'ch'):
        msg = "Filter prototype '{}' is not implemented yet.".format(ftype)
        raise SacValidationError(msg)
    else:
        msg = "Unrecognized filter prototype '{}'.".format(ftype)
        raise SacValidationError(msg)
    if int(npoles) != npoles or not 1 <= npoles <= MAX_POLES:
        msg = "Number of poles must be an integer from 1 to {}, not {}."
        raise SacValidationError(msg.format(MAX_POLES, npoles))
    return Prototype(name, int(npoles))


class FilterDesigner(metaclass=abc.ABCMeta):
    """
    Interface of filter design back ends.
    """
    @abc.abstractmethod
    def design_filter(self, spec, prototype):
        """
        Return filter coefficients for a :class:`FilterSpec` and a
        :class:`Prototype`.
        """
        pass

    @abc.abstractmethod
    def apply_forward(self, coeffs, data):
        """
        Filter data once, forwards (causal).
        """
        pass

    @abc.abstractmethod
    def apply_zero_phase(self, coeffs, data):
        """
        Filter data forwards and backwards (zero phase).
        """
        pass


class ScipyFilterDesigner(FilterDesigner):
    """
    Butterworth filters from :mod:`scipy.signal`, as second-order sections.
    """
    _BTYPES = {'lowpass': 'lowpass', 'highpass': 'highpass',
               'bandpass': 'bandpass'}
    _FTYPES = {'butterworth': 'butter'}

    def design_filter(self, spec, prototype):
        fe = 0.5 * spec.sampling_rate
        freqs = [corner / fe for corner in spec.corners]
        if len(freqs) == 1:
            freqs = freqs[0]
        return iirfilter(prototype.npoles, freqs,
                         btype=self._BTYPES[spec.kind],
                         ftype=self._FTYPES[prototype.name], output='sos')

    def apply_forward(self, coeffs, data):
        return sosfilt(coeffs, data)

    def apply_zero_phase(self, coeffs, data):
        firstpass = sosfilt(coeffs, data)
        return sosfilt(coeffs, firstpass[::-1])[::-1]


DEFAULT_DESIGNER = ScipyFilterDesigner()


def filter_data(data, kind, corners, sampling_rate, npoles=2, passes=1,
                ftype='butterworth', designer=None):
    """
    Filter a data array.

    :type data: numpy.ndarray
    :param data: Data to filter.
    :param kind: 'lowpass', 'highpass' or 'bandpass'.
    :param corners: Corner frequency in Hz, or a (low, high) pair.
    :param sampling_rate: Sampling rate in Hz.
    :param npoles: Number of poles, 1 to 10.
    :param passes: 1 filters forwards only; 2 filters forwards and backwards,
        for zero phase shift.
    :param ftype: Analog prototype, see :func:`get_filter_prototype`.
    :param designer: A :class:`FilterDesigner`, by default
        :class:`ScipyFilterDesigner`.
    :return: Filtered data.
    """
    if passes not in (1, 2):
        msg = "Number of passes must be 1 or 2, not {}.".format(passes)
        raise SacValidationError(msg)
    spec = get_filter_spec(kind, corners, sampling_rate)
    prototype = get_filter_prototype(ftype, npoles)
    designer = designer or DEFAULT_DESIGNER
    coeffs = designer.design_filter(spec, prototype)
    if passes == 1:
        return designer.apply_forward(coeffs, data)
    return designer.apply_zero_phase(coeffs, data)
