# -*- coding: utf-8 -*-
"""
Working with collections of SAC traces.

:copyright:
    The SeisSAC Development Team
:license:
    GNU Lesser General Public License, Version 3
    (https://www.gnu.org/copyleft/lesser.html)
"""
import functools
import glob
import logging
import os
from copy import deepcopy

import numpy as np

from . import header as HD
from .sactrace import SACTrace
from .util import SacValidationError


logger = logging.getLogger('seissac.batch')


def copying(func, ntraces=1):
    """
    Make a non-mutating version of an in-place trace operation.

    The returned function deep-copies its first ``ntraces`` positional
    arguments, applies ``func`` to the copies and returns them; the arguments
    themselves stay untouched.

    :param func: Operation that modifies its first ``ntraces`` positional
        arguments in place.
    :param ntraces: Number of leading trace (or trace collection) arguments.
    :return: Function returning the processed copy, or a tuple of copies if
        ``ntraces > 1``.

    .. rubric:: Example

    >>> from seissac.processing import multiply
    >>> multiply_copy = copying(multiply)
    >>> sac = SACTrace(data=[1., 2., 3.])
    >>> multiply_copy(sac, 2).data.tolist(), sac.data.tolist()
    ([2.0, 4.0, 6.0], [1.0, 2.0, 3.0])
    """
    @functools.wraps(func)
    def copying_func(*args, **kwargs):
        copies = [deepcopy(arg) for arg in args[:ntraces]]
        func(*(copies + list(args[ntraces:])), **kwargs)
        if ntraces == 1:
            return copies[0]
        return tuple(copies)

    copying_func.__name__ = func.__name__ + '_copy'
    copying_func.__qualname__ = copying_func.__name__
    copying_func.__doc__ = (
        "Copying version of :func:`{}`: the input is left untouched and a "
        "processed deep copy is returned.\n{}".format(func.__name__,
                                                    func.__doc__ or ''))
    return copying_func


def for_each(func, traces, *args, **kwargs):
    """
    Apply a single-trace operation to every trace of a collection, in order.

    There is no rollback: the first failure propagates, and traces processed
    before it stay processed.

    :return: ``traces``
    """
    for trace in traces:
        func(trace, *args, **kwargs)
    return traces


def _per_trace(value, ntraces, name):
    """
    One value per trace: scalars are repeated, sequences must have the
    right length.
    """
    if isinstance(value, str) or np.ndim(value) == 0:
        return [value] * ntraces
    value = list(value)
    if len(value) != ntraces:
        msg = "Got {} values of '{}' for {} traces."
        raise SacValidationError(msg.format(len(value), name, ntraces))
    return value


def get_headers(traces, name):
    """
    List of the values of header ``name`` of every trace.
    """
    return [trace[name] for trace in traces]


def set_headers(traces, name, values):
    """
    Set header ``name`` of every trace.

    :param values: A single value for all traces, or one value per trace.
    """
    traces = list(traces)
    for trace, value in zip(traces, _per_trace(values, len(traces), name)):
        trace[name] = value


def read_wild(pattern, directory='.', echo=True, swap=True, terse=False):
    """
    Read all SAC files matching a glob pattern in a directory.

    :param pattern: Shell-style wildcard pattern, like ``'*.BHZ.SAC'``.
    :param directory: Directory to search.
    :param echo: If True, log the name of every file read.
    :return: The traces and the matching file names, sorted by name.  Both
        lists are empty if the directory doesn't exist or nothing matches.
    :rtype: tuple(list, list)
    """
    if not os.path.isdir(directory):
        logger.info("Directory '%s' does not exist.", directory)
        return [], []
    files = sorted(glob.glob(os.path.join(directory, pattern)))
    if not files:
        logger.info("No files matching '%s' in directory '%s'.", pattern,
                    directory)
        return [], []
    traces = []
    for file_ in files:
        if echo:
            logger.info("Reading file '%s'.", file_)
        traces.append(SACTrace.read(file_, swap=swap, terse=terse))
    return traces, files


def write_many(traces, files, byteorder=HD.DEFAULT_BYTEORDER):
    """
    Write each trace to the file of the same index.
    """
    traces = list(traces)
    files = list(files)
    if len(traces) != len(files):
        msg = "Got {} traces but {} file names."
        raise SacValidationError(msg.format(len(traces), len(files)))
    for trace, file_ in zip(traces, files):
        trace.write(file_, byteorder=byteorder)
