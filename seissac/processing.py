# -*- coding: utf-8 -*-
"""
Trace level processing of SAC data.

Every operation in this module changes its trace (or each trace of a list of
traces) in place, returns what it was given and leaves the derived headers
consistent with the new data.  A ``*_copy`` sibling of every operation works
on a deep copy instead and leaves its input alone.

>>> import numpy as np
>>> from seissac import SACTrace
>>> sac = SACTrace(delta=0.02, data=np.arange(1., 6.))
>>> _ = differentiate(sac)
>>> sac.npts, round(sac.b, 4)
(4, 0.01)

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import logging
import math

import decorator
import numpy as np
from scipy.signal import detrend, hilbert

from . import header as HD
from .batch import _per_trace, copying, for_each
from .sactrace import SACTrace
from .signal import differentiate_and_integrate as _di
from .signal.filter import filter_data
from .signal.interpolation import interpolate_spline
from .signal.rotate import is_orthogonal, rotate_through as _rotate
from .util import SacInvalidRangeError, SacValidationError


logger = logging.getLogger('seissac.processing')

TAPER_FORMS = ('hanning', 'hamming', 'cosine')
INTEGRATION_METHODS = ('trapezium', 'rectangle')
# minimum number of samples for each differentiation stencil
DIFF_MIN_NPTS = {2: 2, 3: 3, 5: 3}
# offset and cosine coefficient of the raised cosine tapers
_RAISED_COSINE = {'hanning': (0.5, 0.5), 'hamming': (0.54, 0.46)}


def _round(value):
    """
    Round half away from zero.

    >>> _round(2.5), _round(-2.5), _round(0.49)
    (3, -3, 0)
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@decorator.decorator
def _map_traces(func, *args, **kwargs):
    """
    Let a single trace operation also take a collection of traces as its
    first argument.
    """
    if isinstance(args[0], SACTrace):
        return func(*args, **kwargs)
    return for_each(func, *args, **kwargs)


@_map_traces
def update_headers(trace):
    """
    Recalculate the data derived headers and, if all coordinates are set,
    gcarc, az and baz.
    """
    trace.refresh()
    trace.refresh_geometry()
    return trace


def _cut_trace(trace, b, e):
    if b > e:
        msg = "Beginning cut time {} is later than end cut time {}."
        raise SacInvalidRangeError(msg.format(b, e))
    if b > trace.e:
        msg = "Beginning cut time {} is later than end of trace ({})."
        raise SacInvalidRangeError(msg.format(b, trace.e))
    if e < trace.b:
        msg = "End cut time {} is earlier than start of trace ({})."
        raise SacInvalidRangeError(msg.format(e, trace.b))
    if b < trace.b:
        logger.warning("Beginning cut time %s is before start of trace. "
                       "Setting to %s.", b, trace.b)
        b = trace.b
    if e > trace.e:
        logger.warning("End cut time %s is after end of trace. "
                       "Setting to %s.", e, trace.e)
        e = trace.e
    start = _round((b - trace.b) / trace.delta)
    # window length from e - b, so half-sample bounds don't lose a sample
    end = min(start + _round((e - b) / trace.delta) + 1, trace.npts)
    trace.data = np.array(trace.data[start:end])
    trace.b = b
    return trace


def cut(traces, b, e):
    """
    Keep only the samples between times ``b`` and ``e``, inclusive.

    Times are relative to the reference time, like the ``b`` header.  Cut
    times outside of the trace are clamped to its ends with a warning.

    :param traces: A :class:`~seissac.sactrace.SACTrace` or a list of them.
    :param b: Beginning cut time, a single value or one per trace.
    :param e: End cut time, a single value or one per trace.
    :raises: :class:`~seissac.util.SacInvalidRangeError` if ``b`` is after
        the end of the trace, ``e`` before its start, or ``b`` after ``e``.

    .. rubric:: Example

    >>> sac = SACTrace(delta=0.01, data=[1., 2., 3., 4., 5., 6., 7., 8.])
    >>> cut(sac, 0.01, 0.04).data.tolist()
    [2.0, 3.0, 4.0, 5.0]
    """
    if isinstance(traces, SACTrace):
        return _cut_trace(traces, b, e)
    traces_ = list(traces)
    bs = _per_trace(b, len(traces_), 'b')
    es = _per_trace(e, len(traces_), 'e')
    for trace, b_, e_ in zip(traces_, bs, es):
        _cut_trace(trace, b_, e_)
    return traces


@_map_traces
def differentiate(trace, npoints=2):
    """
    Differentiate the data with a finite difference stencil.

    :param npoints: Stencil size, one of

        ``2``
            Forward difference.  One sample fewer, and ``b`` moves half a
            sample later.
        ``3``
            Centred difference.  Two samples fewer, ``b`` moves one sample
            later.
        ``5``
            Fourth order centred difference inside, centred differences at
            the second and penultimate samples.  Two samples fewer, ``b``
            moves one sample later.
    """
    if npoints not in DIFF_MIN_NPTS:
        msg = "Number of points for differentiation must be 2, 3 or 5, " \
              "not {}."
        raise SacValidationError(msg.format(npoints))
    if trace.npts < DIFF_MIN_NPTS[npoints]:
        msg = "{}-point differentiation needs at least {} samples, got {}."
        raise SacValidationError(msg.format(
            npoints, DIFF_MIN_NPTS[npoints], trace.npts))
    delta = trace.delta
    b = trace.b
    if npoints == 2:
        trace.data = _di.differentiate_two_point(trace.data, delta)
        trace.b = b + delta / 2.0
    elif npoints == 3:
        trace.data = _di.differentiate_three_point(trace.data, delta)
        trace.b = b + delta
    else:
        trace.data = _di.differentiate_five_point(trace.data, delta)
        trace.b = b + delta
    return trace


@_map_traces
def integrate(trace, method='trapezium'):
    """
    Replace the data by its running integral.

    :param method: ``'trapezium'`` (one sample fewer, ``b`` moves half a
        sample later) or ``'rectangle'`` (``delta`` times the running sum,
        same length).
    """
    if method not in INTEGRATION_METHODS:
        msg = "Integration method must be one of {}, not '{}'."
        raise SacValidationError(msg.format(INTEGRATION_METHODS, method))
    delta = trace.delta
    if method == 'trapezium':
        if trace.npts < 2:
            msg = "Trapezium integration needs at least 2 samples, got {}."
            raise SacValidationError(msg.format(trace.npts))
        b = trace.b
        trace.data = _di.integrate_trapezium(trace.data, delta)
        trace.b = b + delta / 2.0
    else:
        trace.data = _di.integrate_rectangle(trace.data, delta)
    return trace


def _taper_weights(n, form):
    i = np.arange(n)
    if form == 'cosine':
        return np.sin(np.pi * i / (2.0 * n))
    offset, coeff = _RAISED_COSINE[form]
    return offset - coeff * np.cos(np.pi * i / n)


@_map_traces
def taper(trace, width=0.05, form='hanning'):
    """
    Taper both ends of the data.

    The taper covers ``floor((npts + 1) * width)`` samples at each end, at
    least 2 and at most ``npts``.

    :param width: Fraction of the trace tapered at each end, in (0, 0.5].
    :param form: Taper shape, one of 'hanning', 'hamming' or 'cosine'.
    """
    if form not in TAPER_FORMS:
        msg = "Taper form must be one of {}, not '{}'."
        raise SacValidationError(msg.format(TAPER_FORMS, form))
    if not 0 < width <= 0.5:
        msg = "Taper width must be in (0, 0.5], not {}."
        raise SacValidationError(msg.format(width))
    npts = trace.npts
    n = min(max(2, int(math.floor((npts + 1) * width))), npts)
    weights = _taper_weights(n, form)
    data = trace.data.astype(np.float64)
    data[:n] *= weights
    data[npts - n:] *= weights[::-1]
    trace.data = data
    return trace


@_map_traces
def apply_filter(trace, kind, corners, npoles=HD.SAC_NPOLES,
                 passes=HD.SAC_PASSES, ftype='butterworth', designer=None):
    """
    Filter the data.

    :param kind: 'lowpass', 'highpass' or 'bandpass'.
    :param corners: Corner frequency in Hz, or a (low, high) pair for
        'bandpass'.  Must be below the Nyquist frequency.
    :param npoles: Number of poles, 1 to 10.
    :param passes: 1 for a forward (causal) filter, 2 for a forward and
        backward (zero phase) one.
    :param ftype: Filter prototype.  Only 'butterworth' is implemented.
    :param designer: A :class:`~seissac.signal.filter.FilterDesigner`.

    See :func:`~seissac.signal.filter.filter_data`.
    """
    trace.data = filter_data(trace.data, kind, corners, 1.0 / trace.delta,
                             npoles=npoles, passes=passes, ftype=ftype,
                             designer=designer)
    return trace


def lowpass(traces, corner, npoles=HD.SAC_NPOLES, passes=HD.SAC_PASSES,
            ftype='butterworth', designer=None):
    """
    Lowpass filter with corner frequency ``corner``.  See
    :func:`apply_filter`.
    """
    return apply_filter(traces, 'lowpass', corner, npoles=npoles,
                        passes=passes, ftype=ftype, designer=designer)


def highpass(traces, corner, npoles=HD.SAC_NPOLES, passes=HD.SAC_PASSES,
             ftype='butterworth', designer=None):
    """
    Highpass filter with corner frequency ``corner``.  See
    :func:`apply_filter`.
    """
    return apply_filter(traces, 'highpass', corner, npoles=npoles,
                        passes=passes, ftype=ftype, designer=designer)


def bandpass(traces, freqmin, freqmax, npoles=HD.SAC_NPOLES,
             passes=HD.SAC_PASSES, ftype='butterworth', designer=None):
    """
    Bandpass filter between ``freqmin`` and ``freqmax``.  See
    :func:`apply_filter`.
    """
    return apply_filter(traces, 'bandpass', (freqmin, freqmax),
                        npoles=npoles, passes=passes, ftype=ftype,
                        designer=designer)


def _wrap_azimuth(azimuth):
    """
    Azimuth in [0, 360) at the float32 precision of the header.

    >>> float(_wrap_azimuth(-7.6e-7)), float(_wrap_azimuth(370.0))
    (0.0, 10.0)
    """
    azimuth = np.float32(azimuth) % np.float32(360.0)
    # tiny negative values wrap to 360 in float32
    if azimuth >= 360.0:
        azimuth = np.float32(0.0)
    return azimuth


def rotate_through(trace1, trace2, phi):
    """
    Rotate a pair of orthogonal horizontal components clockwise by ``phi``
    degrees.

    ``trace2`` must point 90 degrees clockwise of ``trace1``.  Both get new
    data, ``cmpaz`` increased by ``phi`` and ``kcmpnm`` set to the new
    azimuth.

    :raises: :class:`~seissac.util.SacValidationError` if the traces differ
        in npts or delta, or are not orthogonal.
    :return: ``(trace1, trace2)``
    """
    if trace1.npts != trace2.npts:
        msg = "Traces have different number of points: {} and {}."
        raise SacValidationError(msg.format(trace1.npts, trace2.npts))
    if trace1.delta != trace2.delta:
        msg = "Traces have different sampling interval: {} and {}."
        raise SacValidationError(msg.format(trace1.delta, trace2.delta))
    if trace1.cmpaz is None or trace2.cmpaz is None:
        raise SacValidationError("Component azimuth (cmpaz) must be set.")
    if not is_orthogonal(trace1.cmpaz, trace2.cmpaz):
        msg = "Components are not orthogonal: cmpaz {} and {}."
        raise SacValidationError(msg.format(trace1.cmpaz, trace2.cmpaz))
    rotated = _rotate(trace1.data, trace2.data, phi)
    for trace, data in zip((trace1, trace2), rotated):
        trace.data = data
        trace.cmpaz = _wrap_azimuth(trace.cmpaz + phi)
        trace.kcmpnm = str(np.float32(trace.cmpaz))[:HD.STRSLOT_WIDTH]
    return trace1, trace2


def rotate_pairs(traces, phi):
    """
    Rotate consecutive pairs of a list of traces by ``phi`` degrees.

    Traces 0 and 1 form the first pair, 2 and 3 the second, and so on.  See
    :func:`rotate_through`.
    """
    traces_ = list(traces)
    if len(traces_) % 2:
        msg = "Need an even number of traces to rotate in pairs, got {}."
        raise SacValidationError(msg.format(len(traces_)))
    for trace1, trace2 in zip(traces_[::2], traces_[1::2]):
        rotate_through(trace1, trace2, phi)
    return traces


@_map_traces
def time_shift(trace, seconds, wrap=True, verbose=True):
    """
    Circularly shift the data by ``seconds``, rounded to whole samples.

    The headers are not changed.

    :param wrap: If False, samples shifted in from the other end are zeroed.
    :param verbose: If True, log when the shift rounds to zero samples.
    """
    n = _round(seconds / trace.delta)
    if n == 0:
        if verbose:
            logger.warning("Time shift %s s is smaller than half a sample; "
                           "data not shifted.", seconds)
        return trace
    data = np.roll(trace.data, n)
    if not wrap:
        if n > 0:
            data[:n] = 0.0
        else:
            data[n:] = 0.0
    trace.data = data
    return trace


@_map_traces
def interpolate(trace, npts=None, delta=None, n=None, fitter=None):
    """
    Resample the data with a quadratic interpolating spline between ``b``
    and ``e``.

    Give exactly one of

    :param npts: New number of samples, at least 2.
    :param delta: New sampling interval, shorter than the trace duration.
    :param n: Integer upsampling factor, at least 1.

    :param fitter: A :class:`~seissac.signal.interpolation.SplineFitter`.
    """
    if sum(x is not None for x in (npts, delta, n)) != 1:
        raise SacValidationError(
            "Exactly one of npts, delta or n must be given.")
    if trace.npts < 3:
        msg = "Interpolation needs at least 3 samples, got {}."
        raise SacValidationError(msg.format(trace.npts))
    b, e = trace.b, trace.e
    if npts is not None:
        if npts < 2 or npts % 1:
            msg = "npts must be an integer of at least 2, not {}."
            raise SacValidationError(msg.format(npts))
        new_npts = int(npts)
        new_delta = (e - b) / (new_npts - 1)
    elif delta is not None:
        if not 0 < delta < e - b:
            msg = "delta must be positive and shorter than the trace " \
                  "duration ({} s), not {}."
            raise SacValidationError(msg.format(e - b, delta))
        new_npts = int(math.floor(round((e - b) / delta, 6))) + 1
        new_delta = delta
    else:
        if n < 1 or n % 1:
            msg = "Upsampling factor must be a positive integer, not {}."
            raise SacValidationError(msg.format(n))
        new_npts = (trace.npts - 1) * int(n) + 1
        new_delta = (e - b) / (new_npts - 1)
    new_times = b + new_delta * np.arange(new_npts)
    trace.data = interpolate_spline(trace.data, trace.times(), new_times,
                                    degree=2, fitter=fitter)
    trace.delta = new_delta
    return trace


@_map_traces
def multiply(trace, value):
    """
    Multiply the data by ``value``.
    """
    trace.data = trace.data * value
    return trace


@_map_traces
def add(trace, value):
    """
    Add ``value`` to the data.
    """
    trace.data = trace.data + value
    return trace


@_map_traces
def divide(trace, value):
    """
    Divide the data by ``value``, which must not be zero.

    Same as :func:`multiply` with ``1 / value``.
    """
    if value == 0:
        raise SacValidationError("Cannot divide by zero.")
    return multiply(trace, 1.0 / value)


@_map_traces
def rmean(trace):
    """
    Remove the mean of the data.
    """
    if trace.npts:
        trace.data = detrend(trace.data.astype(np.float64), type='constant')
    return trace


@_map_traces
def rtrend(trace):
    """
    Remove the least squares straight line fit of the data.
    """
    if trace.npts > 1:
        trace.data = detrend(trace.data.astype(np.float64), type='linear')
    return trace


@_map_traces
def envelope(trace):
    """
    Replace the data by its envelope, the modulus of the analytic signal.
    """
    if trace.npts:
        trace.data = np.abs(hilbert(trace.data.astype(np.float64)))
    return trace


def _spectrum_trace(trace):
    freqs = np.fft.rfftfreq(trace.npts, d=trace.delta)
    return freqs, np.fft.rfft(trace.data.astype(np.float64))


def spectrum(traces):
    """
    Amplitude spectrum of the data.  The trace is not changed.

    :return: Frequencies in Hz and the complex one-sided Fourier transform,
        or a list of such pairs for a list of traces.
    """
    if isinstance(traces, SACTrace):
        return _spectrum_trace(traces)
    return [_spectrum_trace(trace) for trace in traces]


# short names
diff = differentiate
lp = lowpass
hp = highpass
bp = bandpass
tshift = time_shift
mul = multiply
div = divide

cut_copy = copying(cut)
differentiate_copy = copying(differentiate)
integrate_copy = copying(integrate)
taper_copy = copying(taper)
apply_filter_copy = copying(apply_filter)
lowpass_copy = copying(lowpass)
highpass_copy = copying(highpass)
bandpass_copy = copying(bandpass)
rotate_through_copy = copying(rotate_through, ntraces=2)
rotate_pairs_copy = copying(rotate_pairs)
time_shift_copy = copying(time_shift)
interpolate_copy = copying(interpolate)
multiply_copy = copying(multiply)
add_copy = copying(add)
divide_copy = copying(divide)
rmean_copy = copying(rmean)
rtrend_copy = copying(rtrend)
envelope_copy = copying(envelope)
