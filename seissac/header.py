# -*- coding: utf-8 -*-
MODULE_DOCSTRING = """
SAC header specification, including documentation.

Header names, order, types, and nulls, as well as allowed enumerated values,
are specified here.  The binary layout is four blocks, in this order: 70
floats, 35 integers, 5 logicals (stored as integers) and 23 alphanumeric
fields.  The alphanumeric fields occupy 24 slots of 8 bytes, because 'kevnm'
is 16 characters wide.  Header names and their array positions are kept in
separate tuples, so that ``FLOATHDRS.index('az')`` gives the array position
and ``FLOATHDRS[51]`` gives the name.

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)

"""

# header documentation is used by the descriptors and the module docstring
DOC = {'npts': 'N    Number of points per data component. [required]',
       'nvhdr': 'N    Header version number. Must be the integer 6. [required]',
       'b': 'F    Beginning value of the independent variable. [required]',
       'e': 'F    Ending value of the independent variable. [required]',
       'iftype': '''I    Type of file [required]:
                  * ITIME {Time series file}
                  * IRLIM {Spectral file---real and imaginary}
                  * IAMPH {Spectral file---amplitude and phase}
                  * IXY {General x versus y data}''',
       'leven': 'L    TRUE if data is evenly spaced. [required]',
       'delta': 'F    Increment between evenly spaced samples. [required]',
       'odelta': 'F    Observed increment if different from nominal value.',
       'idep': '''I    Type of dependent variable:
                  * IUNKN (Unknown)
                  * IDISP (Displacement in nm)
                  * IVEL (Velocity in nm/sec)
                  * IVOLTS (Velocity in volts)
                  * IACC (Acceleration in nm/sec/sec)''',
       'scale': 'F    Multiplying scale factor for dependent variable.',
       'depmin': 'F    Minimum value of dependent variable. [derived]',
       'depmax': 'F    Maximum value of dependent variable. [derived]',
       'depmen': 'F    Mean value of dependent variable. [derived]',
       'nzyear': 'N    GMT year corresponding to reference (zero) time.',
       'nzjday': 'N    GMT julian day.',
       'nzhour': 'N    GMT hour.',
       'nzmin': 'N    GMT minute.',
       'nzsec': 'N    GMT second.',
       'nzmsec': 'N    GMT millisecond.',
       'iztype': '''I    Reference time equivalence:
                  * IUNKN (5): Unknown
                  * IB (9): Begin time
                  * IDAY (10): Midnight of reference GMT day
                  * IO (11): Event origin time
                  * IA (12): First arrival time
                  * ITn (13-22): User defined time pick n, n=0,9''',
       'o': 'F    Event origin time, relative to reference time.',
       'ko': 'K    Event origin time identification.',
       'a': 'F    First arrival time, relative to reference time.',
       'ka': 'K    First arrival time identification.',
       'f': 'F    End of event time, relative to reference time.',
       'kf': 'K    End of event time identification.',
       'kinst': 'K    Generic name of recording instrument.',
       'iinst': 'I    Type of recording instrument.',
       'knetwk': 'K    Name of seismic network.',
       'kstnm': 'K    Station name.',
       'istreg': 'I    Station geographic region.',
       'stla': 'F    Station latitude (degrees, north positive).',
       'stlo': 'F    Station longitude (degrees, east positive).',
       'stel': 'F    Station elevation (meters).',
       'stdp': 'F    Station depth below surface (meters).',
       'cmpaz': 'F    Component azimuth (degrees, clockwise from north).',
       'cmpinc': 'F    Component incident angle (degrees, from vertical).',
       'kcmpnm': 'K    Component name.',
       'lpspol': 'L    TRUE if station components have a positive polarity.',
       'kevnm': 'K    Event name, 16 characters.',
       'ievreg': 'I    Event geographic region.',
       'evla': 'F    Event latitude (degrees, north positive).',
       'evlo': 'F    Event longitude (degrees, east positive).',
       'evel': 'F    Event elevation (meters).',
       'evdp': 'F    Event depth below surface.',
       'mag': 'F    Event magnitude.',
       'imagtyp': '''I    Magnitude type:
                  * IMB (52): Bodywave Magnitude
                  * IMS (53): Surfacewave Magnitude
                  * IML (54): Local Magnitude
                  * IMW (55): Moment Magnitude
                  * IMD (56): Duration Magnitude
                  * IMX (57): User Defined Magnitude''',
       'imagsrc': 'I    Source of magnitude information.',
       'ievtyp': '''I    Type of event, e.g.:
                  * IUNKN (Unknown)
                  * INUCL (Nuclear event)
                  * IQUAKE (Earthquake)
                  * ICHEM (Chemical explosion)
                  * IOTHER (Other)''',
       'nevid': 'N    Event ID (CSS 3.0).',
       'norid': 'N    Origin ID (CSS 3.0).',
       'nwfid': 'N    Waveform ID (CSS 3.0).',
       'khole': 'K    Hole identification if nuclear event.',
       'dist': 'F    Station to event distance (km).',
       'az': 'F    Event to station azimuth (degrees). [derived]',
       'baz': 'F    Station to event azimuth (degrees). [derived]',
       'gcarc': 'F    Station to event great circle arc (degrees). [derived]',
       'lcalda': 'L    TRUE if distance and azimuths are calculated.',
       'iqual': 'I    Quality of data.',
       'isynth': 'I    Synthetic data flag.',
       'lovrok': 'L    TRUE if it is okay to overwrite this file on disk.'}

for _i in range(10):
    DOC['t%d' % _i] = 'F    User defined time pick %d.' % _i
    DOC['kt%d' % _i] = 'K    User defined time pick %d identification.' % _i
    DOC['user%d' % _i] = 'F    User defined variable storage area %d.' % _i
    DOC['resp%d' % _i] = 'F    Instrument response parameter %d.' % _i
for _i in range(3):
    DOC['kuser%d' % _i] = 'K    User defined variable storage area %d.' % _i

HEADER_DOCSTRING = """
============ ==== =========================================================
Field Name   Type Description
============ ==== =========================================================
""" + \
    '\n'.join(["{:10.10s} = {}".format(_hdr, _doc)
               for _hdr, _doc in sorted(DOC.items())]) + \
    "\n============ ==== ========================================================="

# Module documentation string
__doc__ = MODULE_DOCSTRING + HEADER_DOCSTRING

# ------------ NULL VALUES ----------------------------------------------------
FNULL = -12345.0
INULL = -12345
SNULL = '-12345  '

# ------------ BINARY LAYOUT --------------------------------------------------
SAC_VERSION = 6
NFLOATS = 70
NINTS = 35
NBOOLS = 5
NSTRSLOTS = 24
STRSLOT_WIDTH = 8
HEADER_LENGTH = 4 * (NFLOATS + NINTS + NBOOLS) + STRSLOT_WIDTH * NSTRSLOTS
# byte position of 'nvhdr', used to detect the byte order of a buffer
NVHDR_OFFSET = 4 * NFLOATS + 4 * 6

# ------------ DEFAULTS -------------------------------------------------------
DEFAULT_BYTEORDER = 'big'
SAC_NPOLES = 2
SAC_PASSES = 1

# ------------ HEADER NAMES, TYPES, ARRAY POSITIONS ---------------------------
FLOATHDRS = ('delta', 'depmin', 'depmax', 'scale', 'odelta', 'b', 'e', 'o',
             'a', 'internal0', 't0', 't1', 't2', 't3', 't4', 't5', 't6', 't7',
             't8', 't9', 'f', 'resp0', 'resp1', 'resp2', 'resp3', 'resp4',
             'resp5', 'resp6', 'resp7', 'resp8', 'resp9', 'stla', 'stlo',
             'stel', 'stdp', 'evla', 'evlo', 'evel', 'evdp', 'mag', 'user0',
             'user1', 'user2', 'user3', 'user4', 'user5', 'user6', 'user7',
             'user8', 'user9', 'dist', 'az', 'baz', 'gcarc', 'internal1',
             'internal2', 'depmen', 'cmpaz', 'cmpinc', 'xminimum', 'xmaximum',
             'yminimum', 'ymaximum', 'unused6', 'unused7', 'unused8',
             'unused9', 'unused10', 'unused11', 'unused12')

INTHDRS = ('nzyear', 'nzjday', 'nzhour', 'nzmin', 'nzsec', 'nzmsec', 'nvhdr',
           'norid', 'nevid', 'npts', 'internal3', 'nwfid', 'nxsize', 'nysize',
           'unused13', 'iftype', 'idep', 'iztype', 'unused14', 'iinst',
           'istreg', 'ievreg', 'ievtyp', 'iqual', 'isynth', 'imagtyp',
           'imagsrc', 'unused15', 'unused16', 'unused17', 'unused18',
           'unused19', 'unused20', 'unused21', 'unused22')

BOOLHDRS = ('leven', 'lpspol', 'lovrok', 'lcalda', 'unused23')

STRHDRS = ('kstnm', 'kevnm', 'khole', 'ko', 'ka', 'kt0', 'kt1', 'kt2', 'kt3',
           'kt4', 'kt5', 'kt6', 'kt7', 'kt8', 'kt9', 'kf', 'kuser0', 'kuser1',
           'kuser2', 'kcmpnm', 'knetwk', 'kdatrd', 'kinst')

# kevnm takes two 8-byte slots on disk; 'kevnm2' is its second half and is
# never exposed as a header of its own.
STRSLOTS = STRHDRS[:2] + ('kevnm2',) + STRHDRS[2:]

ALLHDRS = FLOATHDRS + INTHDRS + BOOLHDRS + STRHDRS

# headers that only the consistency machinery may write
DERIVEDHDRS = ('npts', 'e', 'depmin', 'depmax', 'depmen')

# ------------ ENUMERATED VALUES ----------------------------------------------
# These are stored in the header as integers.
ENUM_VALS = {'itime': 1, 'irlim': 2, 'iamph': 3, 'ixy': 4, 'iunkn': 5,
             'idisp': 6, 'ivel': 7, 'iacc': 8, 'ib': 9, 'iday': 10, 'io': 11,
             'ia': 12, 'it0': 13, 'it1': 14, 'it2': 15, 'it3': 16, 'it4': 17,
             'it5': 18, 'it6': 19, 'it7': 20, 'it8': 21, 'it9': 22,
             'iradnv': 23, 'itannv': 24, 'iradev': 25, 'itanev': 26,
             'inorth': 27, 'ieast': 28, 'ihorza': 29, 'idown': 30, 'iup': 31,
             'illlbb': 32, 'iwwsn1': 33, 'iwwsn2': 34, 'ihglp': 35, 'isro': 36,
             'inucl': 37, 'ipren': 38, 'ipostn': 39, 'iquake': 40, 'ipreq': 41,
             'ipostq': 42, 'ichem': 43, 'iother': 44, 'igood': 45, 'iglch': 46,
             'idrop': 47, 'ilowsn': 48, 'irldta': 49, 'ivolts': 50, 'imb': 52,
             'ims': 53, 'iml': 54, 'imw': 55, 'imd': 56, 'imx': 57,
             'ineic': 58, 'ipdeq': 59, 'ipdew': 60, 'ipde': 61, 'iisc': 62,
             'ireb': 63, 'iusgs': 64, 'ibrk': 65, 'icaltech': 66, 'illnl': 67,
             'ievloc': 68, 'ijsop': 69, 'iuser': 70, 'iunknown': 71, 'iqb': 72,
             'iqb1': 73, 'iqb2': 74, 'iqbx': 75, 'iqmt': 76, 'ieq': 77,
             'ieq1': 78, 'ieq2': 79, 'ime': 80, 'iex': 81, 'inu': 82,
             'inc': 83, 'io_': 84, 'il': 85, 'ir': 86, 'it': 87, 'iu': 88,
             'ieq3': 89, 'ieq0': 90, 'iex0': 91, 'iqc': 92, 'iqb0': 93,
             'igey': 94, 'ilit': 95, 'imet': 96, 'iodor': 97, 'ios': 103}

# reverse look-up: you have the number, want the string
ENUM_NAMES = dict((v, k) for k, v in ENUM_VALS.items())

# accepted values, by header
ACCEPTED_VALS = {'iftype': ['itime', 'irlim', 'iamph', 'ixy'],
                 'idep': ['iunkn', 'idisp', 'ivel', 'ivolts', 'iacc'],
                 'iztype': ['iunkn', 'ib', 'iday', 'io', 'ia', 'it0', 'it1',
                            'it2', 'it3', 'it4', 'it5', 'it6', 'it7', 'it8',
                            'it9'],
                 'imagtyp': ['imb', 'ims', 'iml', 'imw', 'imd', 'imx'],
                 'imagsrc': ['ineic', 'ipde', 'iisc', 'ireb', 'iusgs', 'ipdeq',
                             'ibrk', 'icaltech', 'illnl', 'ievloc', 'ijsop',
                             'iuser', 'iunknown'],
                 'ievtyp': ['iunkn', 'inucl', 'ipren', 'ipostn', 'iquake',
                            'ipreq', 'ipostq', 'ichem', 'iqb', 'iqb1', 'iqb2',
                            'iqbx', 'iqmt', 'ieq', 'ieq1', 'ieq2', 'ime', 'iex',
                            'inu', 'inc', 'io_', 'il', 'ir', 'it', 'iu',
                            'iother'],
                 'iqual': ['igood', 'iglch', 'idrop', 'ilowsn', 'iother'],
                 'isynth': ['irldta']}

ACCEPTED_INT = dict((_hdr, [ENUM_VALS[_name] for _name in _names])
                    for _hdr, _names in ACCEPTED_VALS.items())

# values of a freshly constructed trace, besides delta, npts and b
DEFAULT_HEADER = {'nvhdr': SAC_VERSION, 'iftype': 'itime', 'idep': 'iunkn',
                  'iztype': 'ib', 'ievtyp': 'iunkn', 'leven': True,
                  'lpspol': False, 'lovrok': True, 'lcalda': True}
