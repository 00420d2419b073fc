# -*- coding: utf-8 -*-
"""
Python interface to the Seismic Analysis Code (SAC) binary format.

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)


The SACTrace object keeps the SAC header consistent with its data.  Header
values are managed attributes with native Python logicals (True, False) and
nulls (None) instead of SAC's 0, 1, or -12345.

Header consistency
------------------

The derived headers ``npts``, ``e``, ``depmin``, ``depmax`` and ``depmen``
are read-only.  They are recalculated by :meth:`SACTrace.refresh`, which
runs whenever ``data``, ``b`` or ``delta`` are assigned and at the end of
every operation in :mod:`seissac.processing`.

Assigning one of ``evla``, ``evlo``, ``stla`` or ``stlo`` recalculates
``gcarc``, ``az`` and ``baz`` through :meth:`SACTrace.refresh_geometry`, as
soon as all four are set.

Usage examples
--------------

.. rubric:: Example

>>> sac = SACTrace(delta=0.02, data=np.array([1., 2., 3., 4., 5.]))
>>> sac.npts, sac.e, sac.depmax, sac.depmen
(5, 0.07999999821186066, 5.0, 3.0)
>>> sac.kstnm = 'ANMO'
>>> sac['kstnm']
'ANMO'
>>> sac.evla, sac.evlo, sac.stla = 0.0, 0.0, 0.0
>>> sac.gcarc is None
True
>>> sac.stlo = 10.0
>>> round(sac.gcarc, 3), round(sac.az, 1), round(sac.baz, 1)
(10.0, 90.0, 270.0)

Read/write SAC files
~~~~~~~~~~~~~~~~~~~~

.. code:: python

    # read from a binary file, in either byte order
    sac = SACTrace.read(filename)

    # refuse files that would need byte swapping
    sac = SACTrace.read(filename, swap=False)

    # write a little-endian binary SAC file
    sac.write(filename, byteorder='little')

"""
import datetime
import warnings
from copy import deepcopy
from itertools import chain

import numpy as np

from . import header as HD
from . import arrayio as _io
from . import util as _ut
from .geodetics import DEFAULT_GEODESY, WGS84_F
from .util import SacHeaderError, SacValidationError


# ------------- HEADER DESCRIPTORS --------------------------------------------
#
# A descriptor is a class that manages an object attribute, using the
# descriptor protocol.  A single instance of a descriptor class (FloatHeader,
# for example) exists for the host class and all its instances.  Methods
# therefore check "if instance is None" to tell whether they are called on
# the class or on an instance.

class SACHeader(object):
    def __init__(self, name):
        try:
            self.__doc__ = HD.DOC[name]
        except KeyError:
            # header doesn't have a docstring entry in HD.DOC
            pass
        self.name = name


class FloatHeader(SACHeader):
    def __init__(self, name):
        super(FloatHeader, self).__init__(name)
        self.index = HD.FLOATHDRS.index(name)

    def __get__(self, instance, instance_type):
        if instance is None:
            return self
        value = float(instance._hf[self.index])
        if value == HD.FNULL:
            value = None
        return value

    def __set__(self, instance, value):
        if value is None:
            value = HD.FNULL
        instance._hf[self.index] = value


# b and delta define the time axis, so e has to follow them
class TimingHeader(FloatHeader):
    def __set__(self, instance, value):
        if value is None:
            msg = "Header '{}' can't be unset.".format(self.name)
            raise SacHeaderError(msg)
        if self.name == 'delta' and not value > 0:
            msg = "Sampling interval must be positive, not {}".format(value)
            raise SacValidationError(msg)
        super(TimingHeader, self).__set__(instance, value)
        instance.refresh()


def _check_latitude(name, value):
    if name in ('evla', 'stla') and value is not None and \
            not -90.0 <= value <= 90.0:
        msg = "Latitude '{}' must be within [-90, 90], not {}"
        raise SacValidationError(msg.format(name, value))


# event and station coordinates: recalculate gcarc, az and baz
class GeographicHeader(FloatHeader):
    def __set__(self, instance, value):
        _check_latitude(self.name, value)
        super(GeographicHeader, self).__set__(instance, value)
        instance.refresh_geometry()


class IntHeader(SACHeader):
    def __init__(self, name):
        super(IntHeader, self).__init__(name)
        self.index = HD.INTHDRS.index(name)

    def __get__(self, instance, instance_type):
        if instance is None:
            return self
        value = int(instance._hi[self.index])
        if value == HD.INULL:
            value = None
        return value

    def __set__(self, instance, value):
        if value is None:
            value = HD.INULL
        if value % 1:
            warnings.warn("Non-integers may be truncated. ({}: {})".format(
                self.name, value))
        instance._hi[self.index] = value


class BoolHeader(SACHeader):
    def __init__(self, name):
        super(BoolHeader, self).__init__(name)
        self.index = HD.BOOLHDRS.index(name)

    def __get__(self, instance, instance_type):
        if instance is None:
            return self
        return bool(instance._hl[self.index])

    def __set__(self, instance, value):
        if value not in (True, False, 1, 0):
            msg = "Logical header values must be {True, False, 1, 0}"
            raise SacHeaderError(msg)
        instance._hl[self.index] = value


class EnumHeader(IntHeader):
    def __get__(self, instance, instance_type):
        value = super(EnumHeader, self).__get__(instance, instance_type)
        if instance is None or value is None:
            return value
        elif _ut.is_valid_enum_int(self.name, value):
            return HD.ENUM_NAMES[value]
        msg = ('Unrecognized enumerated value {} for header "{}". '
               'See .header for allowed values.').format(value, self.name)
        warnings.warn(msg)
        return None

    def __set__(self, instance, value):
        if value is None:
            value = HD.INULL
        elif _ut.is_valid_enum_str(self.name, value):
            value = HD.ENUM_VALS[value]
        elif not _ut.is_valid_enum_int(self.name, value, allow_null=False):
            msg = 'Unrecognized enumerated value "{}" for header "{}"'
            raise SacHeaderError(msg.format(value, self.name))
        super(EnumHeader, self).__set__(instance, value)


class StringHeader(SACHeader):
    def __init__(self, name):
        super(StringHeader, self).__init__(name)
        self.index = HD.STRSLOTS.index(name)

    def __get__(self, instance, instance_type):
        if instance is None:
            return self
        value = instance._hs[self.index].decode('ascii', 'replace')
        if value.startswith(HD.SNULL.strip()):
            return None
        return value.strip()

    def __set__(self, instance, value):
        if value is None:
            value = HD.SNULL
        elif len(value) > HD.STRSLOT_WIDTH:
            msg = ("Alphanumeric headers longer than 8 characters are "
                   "right-truncated.")
            warnings.warn(msg)
        instance._hs[self.index] = _ut.sacstring(value).encode('ascii')


# Headers that follow from the data and the time axis
class DerivedHeader(SACHeader):
    def __get__(self, instance, instance_type):
        if instance is None:
            return self
        if self.name in HD.FLOATHDRS:
            value = float(instance._hf[HD.FLOATHDRS.index(self.name)])
            return None if value == HD.FNULL else value
        return int(instance._hi[HD.INTHDRS.index(self.name)])

    def __set__(self, instance, value):
        msg = "{} is read-only. It follows from data, b and delta.".format(
            self.name)
        raise SacHeaderError(msg)


# kevnm is 16 characters, split into two 8-character slots
def _get_kevnm(self):
    value = (self._hs[HD.STRSLOTS.index('kevnm')] +
             self._hs[HD.STRSLOTS.index('kevnm2')]).decode('ascii', 'replace')
    if value.startswith(HD.SNULL.strip()):
        return None
    return value.strip()


def _set_kevnm(self, value):
    if value is None:
        value = HD.SNULL * 2
    elif len(value) > 2 * HD.STRSLOT_WIDTH:
        msg = "kevnm over 16 characters.  Truncated to {}.".format(value[:16])
        warnings.warn(msg)
    value = _ut.sacstring(value, width=2 * HD.STRSLOT_WIDTH)
    self._hs[HD.STRSLOTS.index('kevnm')] = value[:8].encode('ascii')
    self._hs[HD.STRSLOTS.index('kevnm2')] = value[8:].encode('ascii')


# -------------------------- SAC OBJECT INTERFACE -----------------------------
class SACTrace(object):
    __doc__ = """
    Consistent in-memory representation of a Seismic Analysis Code (SAC)
    record: the fixed SAC header plus evenly sampled float32 data.

    :param delta: Sampling interval in seconds, must be positive.
    :type delta: float
    :param npts: Number of zero samples to start with.  Ignored if ``data``
        is given.
    :type npts: int
    :param b: Begin time in seconds, relative to the reference time.
    :type b: float
    :param data: Samples, converted to float32.
    :type data: array-like

    Any other header key/value pair is an optional keyword argument.  Headers
    not given are null, except for ``nvhdr=6, iftype='itime',
    idep='iunkn', iztype='ib', ievtyp='iunkn', leven=True, lpspol=False,
    lovrok=True, lcalda=True``.

    Any header name is an attribute, and a key (``sac['kstnm']``).  See
    below, :mod:`seissac.header`, or individual attribute docstrings for more
    header information.

    :var geodesy: The :class:`~seissac.geodetics.GeodesyProvider` used by
        :meth:`refresh_geometry`.  Set it on an instance to use another one
        for that trace only.

                                 THE SAC HEADER

    NOTE: All header names and string values are lowercase. Header value
    access should be through instance attributes.

    """ + HD.HEADER_DOCSTRING

    geodesy = DEFAULT_GEODESY

    # ------------------------------- SAC HEADERS -----------------------------
    # SAC header values are managed attributes, defined at the class level
    # and shared across all instances.  Each one reads and writes its slot
    # of the underlying header arrays, so writing a file is just dumping the
    # arrays.
    #
    # FLOATS
    delta = TimingHeader('delta')
    depmin = DerivedHeader('depmin')
    depmax = DerivedHeader('depmax')
    scale = FloatHeader('scale')
    odelta = FloatHeader('odelta')
    b = TimingHeader('b')
    e = DerivedHeader('e')
    o = FloatHeader('o')
    a = FloatHeader('a')
    internal0 = FloatHeader('internal0')
    t0 = FloatHeader('t0')
    t1 = FloatHeader('t1')
    t2 = FloatHeader('t2')
    t3 = FloatHeader('t3')
    t4 = FloatHeader('t4')
    t5 = FloatHeader('t5')
    t6 = FloatHeader('t6')
    t7 = FloatHeader('t7')
    t8 = FloatHeader('t8')
    t9 = FloatHeader('t9')
    f = FloatHeader('f')
    resp0 = FloatHeader('resp0')
    resp1 = FloatHeader('resp1')
    resp2 = FloatHeader('resp2')
    resp3 = FloatHeader('resp3')
    resp4 = FloatHeader('resp4')
    resp5 = FloatHeader('resp5')
    resp6 = FloatHeader('resp6')
    resp7 = FloatHeader('resp7')
    resp8 = FloatHeader('resp8')
    resp9 = FloatHeader('resp9')
    stla = GeographicHeader('stla')
    stlo = GeographicHeader('stlo')
    stel = FloatHeader('stel')
    stdp = FloatHeader('stdp')
    evla = GeographicHeader('evla')
    evlo = GeographicHeader('evlo')
    evel = FloatHeader('evel')
    evdp = FloatHeader('evdp')
    mag = FloatHeader('mag')
    user0 = FloatHeader('user0')
    user1 = FloatHeader('user1')
    user2 = FloatHeader('user2')
    user3 = FloatHeader('user3')
    user4 = FloatHeader('user4')
    user5 = FloatHeader('user5')
    user6 = FloatHeader('user6')
    user7 = FloatHeader('user7')
    user8 = FloatHeader('user8')
    user9 = FloatHeader('user9')
    dist = FloatHeader('dist')
    az = FloatHeader('az')
    baz = FloatHeader('baz')
    gcarc = FloatHeader('gcarc')
    internal1 = FloatHeader('internal1')
    internal2 = FloatHeader('internal2')
    depmen = DerivedHeader('depmen')
    cmpaz = FloatHeader('cmpaz')
    cmpinc = FloatHeader('cmpinc')
    xminimum = FloatHeader('xminimum')
    xmaximum = FloatHeader('xmaximum')
    yminimum = FloatHeader('yminimum')
    ymaximum = FloatHeader('ymaximum')
    unused6 = FloatHeader('unused6')
    unused7 = FloatHeader('unused7')
    unused8 = FloatHeader('unused8')
    unused9 = FloatHeader('unused9')
    unused10 = FloatHeader('unused10')
    unused11 = FloatHeader('unused11')
    unused12 = FloatHeader('unused12')
    #
    # INTS
    nzyear = IntHeader('nzyear')
    nzjday = IntHeader('nzjday')
    nzhour = IntHeader('nzhour')
    nzmin = IntHeader('nzmin')
    nzsec = IntHeader('nzsec')
    nzmsec = IntHeader('nzmsec')
    nvhdr = IntHeader('nvhdr')
    norid = IntHeader('norid')
    nevid = IntHeader('nevid')
    npts = DerivedHeader('npts')
    internal3 = IntHeader('internal3')
    nwfid = IntHeader('nwfid')
    nxsize = IntHeader('nxsize')
    nysize = IntHeader('nysize')
    unused13 = IntHeader('unused13')
    iftype = EnumHeader('iftype')
    idep = EnumHeader('idep')
    iztype = EnumHeader('iztype')
    unused14 = IntHeader('unused14')
    iinst = IntHeader('iinst')
    istreg = IntHeader('istreg')
    ievreg = IntHeader('ievreg')
    ievtyp = EnumHeader('ievtyp')
    iqual = EnumHeader('iqual')
    isynth = EnumHeader('isynth')
    imagtyp = EnumHeader('imagtyp')
    imagsrc = EnumHeader('imagsrc')
    unused15 = IntHeader('unused15')
    unused16 = IntHeader('unused16')
    unused17 = IntHeader('unused17')
    unused18 = IntHeader('unused18')
    unused19 = IntHeader('unused19')
    unused20 = IntHeader('unused20')
    unused21 = IntHeader('unused21')
    unused22 = IntHeader('unused22')
    #
    # LOGICALS
    leven = BoolHeader('leven')
    lpspol = BoolHeader('lpspol')
    lovrok = BoolHeader('lovrok')
    lcalda = BoolHeader('lcalda')
    unused23 = BoolHeader('unused23')
    #
    # STRINGS
    kstnm = StringHeader('kstnm')
    kevnm = property(_get_kevnm, _set_kevnm, doc=HD.DOC['kevnm'])
    khole = StringHeader('khole')
    ko = StringHeader('ko')
    ka = StringHeader('ka')
    kt0 = StringHeader('kt0')
    kt1 = StringHeader('kt1')
    kt2 = StringHeader('kt2')
    kt3 = StringHeader('kt3')
    kt4 = StringHeader('kt4')
    kt5 = StringHeader('kt5')
    kt6 = StringHeader('kt6')
    kt7 = StringHeader('kt7')
    kt8 = StringHeader('kt8')
    kt9 = StringHeader('kt9')
    kf = StringHeader('kf')
    kuser0 = StringHeader('kuser0')
    kuser1 = StringHeader('kuser1')
    kuser2 = StringHeader('kuser2')
    kcmpnm = StringHeader('kcmpnm')
    knetwk = StringHeader('knetwk')
    kdatrd = StringHeader('kdatrd')
    kinst = StringHeader('kinst')

    def __init__(self, delta=1.0, npts=0, b=0.0, data=None, **kwargs):
        """
        Initialize a SACTrace object using header key-value pairs and the
        data, both optional.
        """
        if not delta > 0:
            msg = "Sampling interval must be positive, not {}".format(delta)
            raise SacValidationError(msg)
        if data is None:
            if npts < 0:
                msg = "Number of points must not be negative: {}".format(npts)
                raise SacValidationError(msg)
            data = np.zeros(npts, dtype=np.float32)
        derived = set(kwargs).intersection(HD.DERIVEDHDRS)
        if derived:
            msg = "Derived headers can't be set: {}".format(sorted(derived))
            raise SacHeaderError(msg)
        for name in ('evla', 'stla'):
            _check_latitude(name, kwargs.get(name))

        header = dict(HD.DEFAULT_HEADER)
        header.update(kwargs)
        header['delta'] = delta
        header['b'] = b

        # swap enum names for integer values in the header dictionary
        header = _ut.enum_string_to_int(header)

        # this completely sidesteps any checks provided by the descriptors
        self._hf, self._hi, self._hl, self._hs = \
            _io.dict_to_header_arrays(header)
        self.data = data
        self.refresh_geometry()

    @property
    def data(self):
        """
        Samples as a float32 :class:`numpy.ndarray`.  Assigning new data
        refreshes the derived headers.
        """
        return self._data

    @data.setter
    def data(self, value):
        value = np.ascontiguousarray(value, dtype=np.float32)
        if value.ndim != 1:
            msg = "Data must be one-dimensional, not {}-dimensional."
            raise SacValidationError(msg.format(value.ndim))
        self._data = value
        self.refresh()

    @property
    def header(self):
        """
        Convenient read-only dictionary of non-null header array values.

        Header value access should be through instance attributes.
        Enumerated values are integers.  Computed every time, so use
        frugally.
        """
        return _io.header_arrays_to_dict(self._hf, self._hi, self._hl,
                                         self._hs, nulls=False)

    @property
    def reftime(self):
        """
        Reference time as a :class:`datetime.datetime`, or None if any of
        the nz-time headers is null.
        """
        values = (self.nzyear, self.nzjday, self.nzhour, self.nzmin,
                  self.nzsec, self.nzmsec)
        if None in values:
            return None
        year, jday, hour, minute, sec, msec = values
        return datetime.datetime(year, 1, 1) + datetime.timedelta(
            days=jday - 1, hours=hour, minutes=minute, seconds=sec,
            milliseconds=msec)

    def __getitem__(self, name):
        if name not in HD.ALLHDRS:
            raise SacHeaderError("Unknown SAC header '{}'".format(name))
        return getattr(self, name)

    def __setitem__(self, name, value):
        if name not in HD.ALLHDRS:
            raise SacHeaderError("Unknown SAC header '{}'".format(name))
        setattr(self, name, value)

    # --------------------------- I/O METHODS ---------------------------------
    @classmethod
    def read(cls, source, swap=True, terse=False):
        """
        Construct an instance from a binary file on disk.

        :param source: Full path string or File-like object from a SAC binary
            file on disk.  If it is an open File object, open 'rb'.
        :type source: str or file
        :param swap: If False, a file in foreign byte order raises
            :class:`~seissac.util.SacEndianMismatchError` instead of being
            byte swapped.
        :type swap: bool
        :param terse: If True, byte swapping is not logged.
        :type terse: bool

        :raises: :class:`~seissac.util.SacFormatError` if the file is not a
            SAC binary file or is truncated.

        """
        return cls._from_arrays(*_io.read_sac(source, swap=swap, terse=terse))

    @classmethod
    def from_bytes(cls, buf, swap=True, terse=False):
        """
        Construct an instance from the bytes of a SAC binary record.

        See :meth:`read` for the parameters.
        """
        return cls._from_arrays(*_io.decode(buf, swap=swap, terse=terse))

    def write(self, dest, byteorder=HD.DEFAULT_BYTEORDER):
        """
        Write the header and data arrays to a SAC binary file.

        :param dest: Full path or File-like object to SAC binary file on disk.
        :type dest: str or file
        :param byteorder: Output byte order {'little', 'big', 'native'}.
        :type byteorder: str

        """
        self.refresh()
        _io.write_sac(dest, self._hf, self._hi, self._hl, self._hs,
                      self._data, byteorder=byteorder)

    def to_bytes(self, byteorder=HD.DEFAULT_BYTEORDER):
        """
        Return the SAC binary record as bytes.  See :meth:`write`.
        """
        self.refresh()
        return _io.encode(self._hf, self._hi, self._hl, self._hs, self._data,
                          byteorder=byteorder)

    @classmethod
    def _from_arrays(cls, hf, hi, hl, hs, data):
        """
        Low-level array-based constructor.

        No value checking is done and header values are completely taken
        from the provided arrays.  Derived headers are refreshed, and
        ``gcarc``, ``az`` and ``baz`` calculated if any of them is null.

        """
        sac = cls.__new__(cls)
        sac._hf = hf
        sac._hi = hi
        sac._hl = hl
        sac._hs = hs
        sac.data = data
        if None in (sac.gcarc, sac.az, sac.baz):
            sac.refresh_geometry()
        return sac

    # ------------------------ HEADER CONSISTENCY -----------------------------
    def refresh(self):
        """
        Update the derived headers from the data, b and delta.

        Sets ``npts`` to the data length, ``e`` to ``b + delta * (npts - 1)``
        (``b`` when there is no data) and ``depmin``, ``depmax``, ``depmen``
        to the minimum, maximum and mean of the data (null when there is no
        data).  Calling it again without changes is a no-op.
        """
        hf = self._hf
        npts = len(self._data)
        self._hi[HD.INTHDRS.index('npts')] = npts
        b = self.b
        if b is None:
            hf[HD.FLOATHDRS.index('e')] = HD.FNULL
        elif npts:
            hf[HD.FLOATHDRS.index('e')] = b + self.delta * (npts - 1)
        else:
            hf[HD.FLOATHDRS.index('e')] = b
        if npts:
            hf[HD.FLOATHDRS.index('depmin')] = self._data.min()
            hf[HD.FLOATHDRS.index('depmax')] = self._data.max()
            hf[HD.FLOATHDRS.index('depmen')] = self._data.mean(
                dtype=np.float64)
        else:
            for hdr in ('depmin', 'depmax', 'depmen'):
                hf[HD.FLOATHDRS.index(hdr)] = HD.FNULL

    def refresh_geometry(self, provider=None):
        """
        Calculate gcarc, az and baz from the event and station coordinates.

        Does nothing unless evla, evlo, stla and stlo are all set.

        :param provider: A :class:`~seissac.geodetics.GeodesyProvider`,
            by default the ``geodesy`` attribute.
        """
        coords = (self.evlo, self.evla, self.stlo, self.stla)
        if None in coords:
            return
        provider = provider or self.geodesy
        gcarc, az, baz = provider.great_circle(*coords, flattening=WGS84_F)
        self._hf[HD.FLOATHDRS.index('gcarc')] = gcarc
        self._hf[HD.FLOATHDRS.index('az')] = az
        self._hf[HD.FLOATHDRS.index('baz')] = baz

    # ---------------------- other properties/methods -------------------------
    def times(self):
        """
        Sample times relative to the reference time, ``b + delta * i``.
        """
        return self.b + self.delta * np.arange(self.npts)

    def validate(self, *tests):
        """
        Check validity of SAC content, such as header/data consistency.

        :param tests: One or more of 'delta', 'logicals', 'data_hdrs',
            'enums' or 'all'.  See
            :func:`~seissac.arrayio.validate_sac_content`.

        :raises: :class:`~seissac.util.SacInvalidContentError` if any of the
            specified tests fail.

        .. rubric:: Example

        >>> from seissac.util import SacInvalidContentError
        >>> sac = SACTrace(data=np.arange(10))
        >>> # change a sample in place, behind the back of the headers
        >>> sac.data[0] += 5.0
        >>> try:
        ...     sac.validate('data_hdrs')
        ... except SacInvalidContentError:
        ...     sac.refresh()
        ...     sac.validate('data_hdrs')

        """
        _io.validate_sac_content(self._hf, self._hi, self._hl, self._hs,
                                 self._data, *tests)

    def _format_header_str(self, hdrlist='all'):
        """
        Produce a print-friendly string of header values for __str__,
        .listhdr(), and .lh()

        """
        if hdrlist == 'all':
            hdrlist = sorted(self.header.keys())
        elif hdrlist == 'picks':
            hdrlist = ('a', 'b', 'e', 'f', 'o', 't0', 't1', 't2', 't3', 't4',
                       't5', 't6', 't7', 't8', 't9')

        header_str = []
        reftime = self.reftime
        if reftime is None:
            header_str.append("Reference Time = XX/XX/XX (XXX) "
                              "XX:XX:XX.XXXXXX")
        else:
            timefmt = "Reference Time = %m/%d/%Y (%j) %H:%M:%S.%f"
            header_str.append(reftime.strftime(timefmt))

        hdrfmt = "{:10.10s} = {}"
        for hdr in hdrlist:
            header_str.append(hdrfmt.format(hdr, self[hdr]))

        return '\n'.join(header_str)

    def listhdr(self, hdrlist='all'):
        """
        Print header values.

        :param hdrlist: Which header fields to you want to list. Choose one of
            {'all', 'picks'} or iterable of header fields.  An iterable of
            header fields can look like 'bea' or ('b', 'e', 'a').

            'all' (default) prints all non-null values.
            'picks' prints fields which are used to define time picks.

        """
        print(self._format_header_str(hdrlist))

    def lh(self, *args, **kwargs):
        """Alias of listhdr method."""
        self.listhdr(*args, **kwargs)

    def __str__(self):
        return self._format_header_str()

    def __repr__(self):
        h = sorted(self.header.items())
        fmt = ", {}={!r}" * len(h)
        argstr = fmt.format(*chain.from_iterable(h))[2:]
        return self.__class__.__name__ + "(" + argstr + ")"

    def __eq__(self, other):
        if not isinstance(other, SACTrace):
            return NotImplemented
        return (np.array_equal(self._hf, other._hf, equal_nan=True) and
                np.array_equal(self._hi, other._hi) and
                np.array_equal(self._hl, other._hl) and
                np.array_equal(self._hs, other._hs) and
                np.array_equal(self._data, other._data, equal_nan=True))

    __hash__ = None

    def copy(self):
        """
        Return a deep copy of the trace.
        """
        return deepcopy(self)
