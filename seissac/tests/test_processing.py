# -*- coding: utf-8 -*-
import unittest
from unittest import mock

import numpy as np

from .. import processing as pr
from ..sactrace import SACTrace
from ..signal.interpolation import ScipySplineFitter
from ..util import SacInvalidRangeError, SacValidationError


def _assert_consistent(testcase, sac):
    """
    Derived headers agree with data, b and delta.
    """
    testcase.assertEqual(sac.npts, len(sac.data))
    if sac.npts:
        testcase.assertAlmostEqual(sac.e, sac.b + sac.delta * (sac.npts - 1),
                                   places=4)
        testcase.assertAlmostEqual(sac.depmin, float(sac.data.min()))
        testcase.assertAlmostEqual(sac.depmax, float(sac.data.max()))
        testcase.assertAlmostEqual(sac.depmen, float(sac.data.mean()),
                                   places=5)
    else:
        testcase.assertEqual(sac.e, sac.b)
    sac.validate('data_hdrs')


class ProcessingTestCase(unittest.TestCase):
    """
    Test suite for seissac.processing
    """
    def setUp(self):
        self.sac = SACTrace(delta=0.02, b=0.0,
                            data=np.array([1., 2., 3., 4., 5.]))
        t = np.arange(200) * 0.05
        self.noise = SACTrace(delta=0.05, b=-1.0,
                              data=np.sin(2 * np.pi * 0.5 * t) + 0.3 * t)

    # ---- cut
    def test_cut(self):
        result = pr.cut(self.sac, 0.01, 0.07)
        self.assertIs(result, self.sac)
        self.assertEqual(self.sac.npts, 4)
        np.testing.assert_allclose(self.sac.data, [2., 3., 4., 5.])
        self.assertAlmostEqual(self.sac.b, 0.01, places=6)
        self.assertAlmostEqual(self.sac.e, 0.07, places=6)
        _assert_consistent(self, self.sac)

    def test_cut_window_length(self):
        sac = self.noise
        pr.cut(sac, 0.0, 2.0)
        self.assertEqual(sac.npts, int(round(2.0 / 0.05)) + 1)
        self.assertAlmostEqual(sac.b, 0.0, places=5)
        self.assertAlmostEqual(sac.e, 2.0, places=5)
        _assert_consistent(self, sac)

    def test_cut_half_sample_bounds(self):
        """
        Bounds halfway between samples keep round((e - b) / delta) + 1
        samples.
        """
        sac = SACTrace(delta=1.0, data=[0., 1., 2., 3., 4.])
        pr.cut(sac, 0.5, 2.5)
        self.assertEqual(sac.npts, 3)
        np.testing.assert_array_equal(sac.data, [1., 2., 3.])
        self.assertEqual(sac.b, 0.5)
        self.assertEqual(sac.e, 2.5)
        sac = SACTrace(delta=1.0, data=[0., 1., 2., 3., 4.])
        pr.cut(sac, 2.5, 2.5)
        np.testing.assert_array_equal(sac.data, [3.])
        _assert_consistent(self, sac)

    def test_cut_clamps_with_warning(self):
        with self.assertLogs('seissac.processing', level='WARNING') as cm:
            pr.cut(self.sac, -1.0, 10.0)
        self.assertEqual(len(cm.output), 2)
        self.assertEqual(self.sac.npts, 5)
        self.assertEqual(self.sac.b, 0.0)

    def test_cut_invalid_range(self):
        with self.assertRaises(SacInvalidRangeError):
            pr.cut(self.sac, 1.0, 2.0)
        with self.assertRaises(SacInvalidRangeError):
            pr.cut(self.sac, -2.0, -1.0)
        with self.assertRaises(SacInvalidRangeError):
            pr.cut(self.sac, 0.06, 0.02)
        self.assertEqual(self.sac.npts, 5)

    def test_cut_collection(self):
        traces = [self.sac.copy(), self.sac.copy()]
        self.assertIs(pr.cut(traces, 0.01, 0.07), traces)
        for sac in traces:
            self.assertEqual(sac.npts, 4)
        traces = [self.sac.copy(), self.sac.copy()]
        pr.cut(traces, [0.0, 0.02], [0.04, 0.08])
        np.testing.assert_allclose(traces[0].data, [1., 2., 3.])
        np.testing.assert_allclose(traces[1].data, [2., 3., 4., 5.])
        with self.assertRaises(SacValidationError):
            pr.cut(traces, [0.0, 0.0, 0.0], 0.04)

    # ---- differentiate
    def test_differentiate_two_point(self):
        result = pr.differentiate(self.sac)
        self.assertIs(result, self.sac)
        self.assertEqual(self.sac.npts, 4)
        self.assertAlmostEqual(self.sac.b, 0.01, places=6)
        np.testing.assert_allclose(self.sac.data, [50.] * 4, rtol=1e-5)
        _assert_consistent(self, self.sac)

    def test_differentiate_three_and_five_point(self):
        delta = 0.5
        t = np.arange(9) * delta
        for npoints in (3, 5):
            sac = SACTrace(delta=delta, b=0.0, data=t ** 2)
            pr.differentiate(sac, npoints=npoints)
            self.assertEqual(sac.npts, 7)
            self.assertAlmostEqual(sac.b, delta)
            np.testing.assert_allclose(sac.data, 2 * t[1:-1], rtol=1e-5)
            _assert_consistent(self, sac)

    def test_differentiate_five_point_short_trace(self):
        sac = SACTrace(delta=1.0, data=[0., 1., 4.])
        pr.diff(sac, npoints=5)
        np.testing.assert_allclose(sac.data, [2.0])

    def test_differentiate_errors(self):
        with self.assertRaises(SacValidationError):
            pr.differentiate(self.sac, npoints=4)
        with self.assertRaises(SacValidationError):
            pr.differentiate(SACTrace(data=[1.0]), npoints=2)
        with self.assertRaises(SacValidationError):
            pr.differentiate(SACTrace(data=[1.0, 2.0]), npoints=3)
        self.assertEqual(self.sac.npts, 5)

    # ---- integrate
    def test_integrate(self):
        sac = SACTrace(delta=0.5, b=1.0, data=np.ones(5))
        pr.integrate(sac)
        self.assertEqual(sac.npts, 4)
        self.assertAlmostEqual(sac.b, 1.25)
        np.testing.assert_allclose(sac.data, [0.5, 1.0, 1.5, 2.0])
        _assert_consistent(self, sac)
        sac = SACTrace(delta=0.5, b=1.0, data=np.ones(5))
        pr.integrate(sac, method='rectangle')
        self.assertEqual(sac.npts, 5)
        self.assertEqual(sac.b, 1.0)
        np.testing.assert_allclose(sac.data, [0.5, 1.0, 1.5, 2.0, 2.5])
        _assert_consistent(self, sac)

    def test_integrate_errors(self):
        with self.assertRaises(SacValidationError):
            pr.integrate(self.sac, method='simpson')
        with self.assertRaises(SacValidationError):
            pr.integrate(SACTrace(data=[1.0]))

    def test_differentiate_undoes_integrate(self):
        sac = self.noise
        original = sac.copy()
        pr.integrate(sac)
        pr.differentiate(sac)
        self.assertEqual(sac.npts, original.npts - 2)
        self.assertAlmostEqual(sac.b, original.b + original.delta, places=6)
        expected = 0.5 * (original.data[1:-1] + original.data[2:])
        np.testing.assert_allclose(sac.data, expected, atol=5e-4)

    # ---- taper
    def test_taper(self):
        sac = SACTrace(delta=0.1, data=np.ones(101))
        pr.taper(sac, width=0.1)
        n = 10
        self.assertEqual(sac.data[0], 0.0)
        self.assertEqual(sac.data[-1], 0.0)
        np.testing.assert_allclose(sac.data[n:-n], 1.0)
        self.assertTrue((np.diff(sac.data[:n]) > 0).all())
        np.testing.assert_allclose(sac.data[:n], sac.data[::-1][:n])
        _assert_consistent(self, sac)

    def test_taper_forms(self):
        for form, first in (('hanning', 0.0), ('hamming', 0.08),
                            ('cosine', 0.0)):
            sac = SACTrace(data=np.ones(50))
            pr.taper(sac, form=form)
            self.assertAlmostEqual(sac.data[0], first, places=6)
            self.assertEqual(sac.data[25], 1.0)

    def test_taper_short_trace(self):
        # at least two samples at each end are tapered
        sac = SACTrace(data=np.ones(10))
        pr.taper(sac, width=0.05)
        self.assertEqual(sac.data[0], 0.0)
        self.assertAlmostEqual(sac.data[1], 0.5)
        self.assertEqual(sac.data[5], 1.0)
        pr.taper(SACTrace(data=[1.0]))

    def test_taper_errors(self):
        with self.assertRaises(SacValidationError):
            pr.taper(self.sac, width=0.0)
        with self.assertRaises(SacValidationError):
            pr.taper(self.sac, width=0.6)
        with self.assertRaises(SacValidationError):
            pr.taper(self.sac, form='triangle')

    # ---- filters
    def test_lowpass(self):
        t = np.arange(1000) * 0.01
        low = np.sin(2 * np.pi * 1.0 * t)
        sac = SACTrace(delta=0.01, data=low + np.sin(2 * np.pi * 40.0 * t))
        pr.lowpass(sac, 5.0, npoles=4, passes=2)
        np.testing.assert_allclose(sac.data[200:-200], low[200:-200],
                                   atol=1e-2)
        _assert_consistent(self, sac)

    def test_highpass_and_bandpass(self):
        t = np.arange(1000) * 0.01
        high = np.sin(2 * np.pi * 20.0 * t)
        sac = SACTrace(delta=0.01, data=high + np.sin(2 * np.pi * 0.2 * t))
        pr.hp(sac, 5.0, npoles=4, passes=2)
        np.testing.assert_allclose(sac.data[200:-200], high[200:-200],
                                   atol=2e-2)
        sac = SACTrace(delta=0.01, data=high + np.sin(2 * np.pi * 0.2 * t))
        pr.bp(sac, 10.0, 30.0, npoles=4, passes=2)
        np.testing.assert_allclose(sac.data[200:-200], high[200:-200],
                                   atol=5e-2)
        _assert_consistent(self, sac)

    def test_apply_filter_errors(self):
        original = self.noise.copy()
        with self.assertRaises(SacValidationError):
            pr.bandpass(self.noise, 3.0, 1.0)
        with self.assertRaises(SacValidationError):
            pr.lowpass(self.noise, 10.0)
        with self.assertRaises(SacValidationError):
            pr.lowpass(self.noise, 1.0, passes=0)
        with self.assertRaises(SacValidationError):
            pr.lowpass(self.noise, 1.0, passes=3)
        with self.assertRaisesRegex(SacValidationError, 'not implemented'):
            pr.lowpass(self.noise, 1.0, ftype='bessel')
        with self.assertRaises(SacValidationError):
            pr.apply_filter(self.noise, 'notch', 1.0)
        self.assertEqual(self.noise, original)

    # ---- rotation
    def _pair(self, cmpaz1=0.0, cmpaz2=90.0):
        north = SACTrace(delta=0.1, data=[1.0, 0.0, -1.0, 2.0],
                         cmpaz=cmpaz1, kcmpnm='BHN')
        east = SACTrace(delta=0.1, data=[0.0, 1.0, 1.0, -2.0],
                        cmpaz=cmpaz2, kcmpnm='BHE')
        return north, east

    def test_rotate_through(self):
        north, east = self._pair()
        result = pr.rotate_through(north, east, 90.0)
        self.assertEqual(result, (north, east))
        np.testing.assert_allclose(north.data, [0.0, 1.0, 1.0, -2.0],
                                   atol=1e-6)
        np.testing.assert_allclose(east.data, [-1.0, 0.0, 1.0, -2.0],
                                   atol=1e-6)
        self.assertEqual(north.cmpaz, 90.0)
        self.assertEqual(east.cmpaz, 180.0)
        self.assertEqual(north.kcmpnm, '90.0')
        self.assertEqual(east.kcmpnm, '180.0')
        _assert_consistent(self, north)
        _assert_consistent(self, east)

    def test_rotate_through_and_back(self):
        north, east = self._pair(cmpaz1=10.0, cmpaz2=100.0)
        n0, e0 = north.copy(), east.copy()
        pr.rotate_through(north, east, 30.0)
        pr.rotate_through(north, east, -30.0)
        np.testing.assert_allclose(north.data, n0.data, atol=1e-6)
        np.testing.assert_allclose(east.data, e0.data, atol=1e-6)
        self.assertAlmostEqual(north.cmpaz, 10.0, places=4)
        self.assertAlmostEqual(east.cmpaz, 100.0, places=4)

    def test_rotate_through_and_back_from_north(self):
        north, east = self._pair()
        pr.rotate_through(north, east, 33.3)
        pr.rotate_through(north, east, -33.3)
        self.assertGreaterEqual(north.cmpaz, 0.0)
        self.assertLess(north.cmpaz, 360.0)
        self.assertEqual(north.cmpaz, 0.0)
        self.assertEqual(north.kcmpnm, '0.0')
        self.assertAlmostEqual(east.cmpaz, 90.0, places=4)
        np.testing.assert_allclose(north.data, [1.0, 0.0, -1.0, 2.0],
                                   atol=1e-6)

    def test_rotate_through_wraps_azimuth(self):
        north, east = self._pair(cmpaz1=300.0, cmpaz2=30.0)
        pr.rotate_through(north, east, 90.0)
        self.assertEqual(north.cmpaz, 30.0)
        self.assertEqual(east.cmpaz, 120.0)

    def test_rotate_through_errors(self):
        north, east = self._pair(cmpaz2=80.0)
        with self.assertRaises(SacValidationError):
            pr.rotate_through(north, east, 30.0)
        north, east = self._pair()
        east.data = [1.0, 2.0]
        with self.assertRaises(SacValidationError):
            pr.rotate_through(north, east, 30.0)
        north, east = self._pair()
        east.delta = 0.2
        with self.assertRaises(SacValidationError):
            pr.rotate_through(north, east, 30.0)
        north, east = self._pair()
        east.cmpaz = None
        with self.assertRaises(SacValidationError):
            pr.rotate_through(north, east, 30.0)

    def test_rotate_pairs(self):
        traces = list(self._pair()) + list(self._pair())
        self.assertIs(pr.rotate_pairs(traces, 90.0), traces)
        self.assertEqual([tr.cmpaz for tr in traces],
                         [90.0, 180.0, 90.0, 180.0])
        with self.assertRaises(SacValidationError):
            pr.rotate_pairs(traces[:3], 90.0)

    # ---- time shift
    def test_time_shift(self):
        sac = self.sac
        pr.time_shift(sac, 0.04)
        np.testing.assert_array_equal(sac.data, [4., 5., 1., 2., 3.])
        self.assertEqual(sac.b, 0.0)
        pr.tshift(sac, -0.04)
        np.testing.assert_array_equal(sac.data, [1., 2., 3., 4., 5.])

    def test_time_shift_round_trip(self):
        sac = self.noise
        original = sac.data.copy()
        for seconds in (0.125, -0.3, 7.0):
            pr.time_shift(sac, seconds)
            pr.time_shift(sac, -seconds)
            np.testing.assert_array_equal(sac.data, original)

    def test_time_shift_no_wrap(self):
        sac = self.sac.copy()
        pr.time_shift(sac, 0.04, wrap=False)
        np.testing.assert_array_equal(sac.data, [0., 0., 1., 2., 3.])
        _assert_consistent(self, sac)
        sac = self.sac.copy()
        pr.time_shift(sac, -0.02, wrap=False)
        np.testing.assert_array_equal(sac.data, [2., 3., 4., 5., 0.])

    def test_time_shift_below_half_sample(self):
        with self.assertLogs('seissac.processing', level='WARNING'):
            pr.time_shift(self.sac, 0.009)
        np.testing.assert_array_equal(self.sac.data, [1., 2., 3., 4., 5.])
        with self.assertRaises(AssertionError):
            with self.assertLogs('seissac.processing', level='WARNING'):
                pr.time_shift(self.sac, 0.009, verbose=False)

    # ---- interpolation
    def test_interpolate_npts(self):
        sac = SACTrace(delta=1.0, b=0.0, data=2.0 * np.arange(11) + 1.0)
        pr.interpolate(sac, npts=21)
        self.assertEqual(sac.npts, 21)
        self.assertAlmostEqual(sac.delta, 0.5)
        self.assertAlmostEqual(sac.e, 10.0, places=5)
        np.testing.assert_allclose(sac.data, 2.0 * sac.times() + 1.0,
                                   rtol=1e-5)
        _assert_consistent(self, sac)

    def test_interpolate_delta_and_factor(self):
        data = (np.arange(11) * 0.1) ** 2
        sac = SACTrace(delta=0.1, data=data)
        pr.interpolate(sac, delta=0.05)
        self.assertEqual(sac.npts, 21)
        np.testing.assert_allclose(sac.data, sac.times() ** 2, atol=1e-5)
        sac = SACTrace(delta=0.1, data=data)
        pr.interpolate(sac, n=4, fitter=ScipySplineFitter())
        self.assertEqual(sac.npts, 41)
        self.assertAlmostEqual(sac.delta, 0.025)
        np.testing.assert_allclose(sac.data, sac.times() ** 2, atol=1e-5)
        _assert_consistent(self, sac)

    def test_interpolate_errors(self):
        sac = self.noise
        for kwargs in ({}, {'npts': 10, 'delta': 0.1},
                       {'npts': 10, 'n': 2}, {'npts': 0}, {'npts': -5},
                       {'delta': 0.0}, {'delta': -0.1}, {'delta': 100.0},
                       {'n': 0}, {'n': 1.5}):
            with self.assertRaises(SacValidationError):
                pr.interpolate(sac, **kwargs)
        with self.assertRaises(SacValidationError):
            pr.interpolate(SACTrace(data=[1.0, 2.0]), n=2)
        self.assertEqual(sac.npts, 200)

    # ---- arithmetic
    def test_arithmetic(self):
        sac = self.sac
        pr.multiply(sac, 2.0)
        np.testing.assert_allclose(sac.data, [2., 4., 6., 8., 10.])
        pr.add(sac, -1.0)
        np.testing.assert_allclose(sac.data, [1., 3., 5., 7., 9.])
        pr.divide(sac, 2.0)
        np.testing.assert_allclose(sac.data, [0.5, 1.5, 2.5, 3.5, 4.5])
        pr.mul(sac, 2.0)
        pr.div(sac, 4.0)
        np.testing.assert_allclose(sac.data, [0.25, 0.75, 1.25, 1.75, 2.25])
        self.assertEqual(sac.depmax, 2.25)
        _assert_consistent(self, sac)

    def test_divide_multiplies_by_reciprocal(self):
        traces = [self.sac, self.noise]
        with mock.patch.object(pr, 'multiply', wraps=pr.multiply) as m:
            pr.divide(traces, 4.0)
        self.assertEqual(m.call_args_list, [mock.call(self.sac, 0.25),
                                            mock.call(self.noise, 0.25)])
        np.testing.assert_allclose(self.sac.data,
                                   [0.25, 0.5, 0.75, 1.0, 1.25])

    def test_divide_by_zero(self):
        original = self.sac.copy()
        with self.assertRaises(SacValidationError):
            pr.divide(self.sac, 0.0)
        self.assertEqual(self.sac, original)
        traces = [self.sac, self.sac.copy()]
        with self.assertRaises(SacValidationError):
            pr.divide(traces, 0)
        self.assertEqual(traces[0], original)
        self.assertEqual(traces[1], original)

    def test_collection_forms(self):
        traces = [self.sac.copy(), self.noise.copy()]
        self.assertIs(pr.multiply(traces, 3.0), traces)
        np.testing.assert_allclose(traces[0].data, 3 * self.sac.data)
        np.testing.assert_allclose(traces[1].data, 3 * self.noise.data,
                                   rtol=1e-6)
        pr.differentiate(traces)
        self.assertEqual([tr.npts for tr in traces], [4, 199])
        pr.time_shift(traces, 0.0, verbose=False)
        for sac in traces:
            _assert_consistent(self, sac)

    def test_collection_failure_keeps_earlier_changes(self):
        long_ = SACTrace(data=[1.0, 2.0, 4.0])
        short = SACTrace(data=[1.0])
        last = SACTrace(data=[1.0, 2.0, 4.0])
        with self.assertRaises(SacValidationError):
            pr.differentiate([long_, short, last])
        np.testing.assert_allclose(long_.data, [1.0, 2.0])
        self.assertEqual(short.npts, 1)
        self.assertEqual(last.npts, 3)

    # ---- detrending and friends
    def test_rmean_and_rtrend(self):
        sac = self.noise
        pr.rmean(sac)
        self.assertAlmostEqual(sac.depmen, 0.0, places=5)
        sac = SACTrace(delta=0.5, data=3.0 * np.arange(50) - 7.0)
        pr.rtrend(sac)
        np.testing.assert_allclose(sac.data, 0.0, atol=1e-4)
        _assert_consistent(self, sac)
        # nothing to do on empty traces
        pr.rmean(SACTrace())
        pr.rtrend(SACTrace())

    def test_envelope(self):
        t = np.arange(1000) * 0.01
        sac = SACTrace(delta=0.01, data=2.0 * np.cos(2 * np.pi * 5.0 * t))
        pr.envelope(sac)
        np.testing.assert_allclose(sac.data[100:-100], 2.0, rtol=1e-2)
        _assert_consistent(self, sac)

    def test_spectrum(self):
        t = np.arange(100) * 0.01
        sac = SACTrace(delta=0.01, data=np.sin(2 * np.pi * 10.0 * t))
        before = sac.copy()
        freqs, values = pr.spectrum(sac)
        self.assertEqual(len(freqs), 51)
        self.assertAlmostEqual(freqs[-1], 50.0, places=4)
        self.assertAlmostEqual(freqs[np.argmax(np.abs(values))], 10.0,
                               places=4)
        self.assertEqual(sac, before)
        spectra = pr.spectrum([sac, sac])
        self.assertEqual(len(spectra), 2)

    def test_update_headers(self):
        sac = self.sac
        sac.data[0] = 100.0
        pr.update_headers([sac])
        self.assertEqual(sac.depmax, 100.0)
        _assert_consistent(self, sac)

    # ---- copying siblings
    def test_copying_siblings_leave_input_alone(self):
        original = self.sac.copy()
        for func, args in ((pr.cut_copy, (0.01, 0.07)),
                           (pr.differentiate_copy, ()),
                           (pr.integrate_copy, ('rectangle',)),
                           (pr.taper_copy, ()),
                           (pr.time_shift_copy, (0.04,)),
                           (pr.interpolate_copy, (None, None, 2)),
                           (pr.multiply_copy, (2.0,)),
                           (pr.add_copy, (2.0,)),
                           (pr.divide_copy, (2.0,)),
                           (pr.rmean_copy, ()),
                           (pr.rtrend_copy, ()),
                           (pr.envelope_copy, ())):
            result = func(self.sac, *args)
            self.assertIsNot(result, self.sac)
            self.assertIsInstance(result, SACTrace)
            self.assertEqual(self.sac, original, func.__name__)
        self.assertEqual(pr.cut_copy.__name__, 'cut_copy')
        np.testing.assert_allclose(pr.differentiate_copy(self.sac).data,
                                   [50.] * 4, rtol=1e-5)

    def test_copying_filters(self):
        original = self.noise.copy()
        for func, args in ((pr.apply_filter_copy, ('lowpass', 2.0)),
                           (pr.lowpass_copy, (2.0,)),
                           (pr.highpass_copy, (2.0,)),
                           (pr.bandpass_copy, (1.0, 2.0))):
            func(self.noise, *args)
            self.assertEqual(self.noise, original)

    def test_copying_rotation(self):
        north, east = self._pair()
        n0, e0 = north.copy(), east.copy()
        n1, e1 = pr.rotate_through_copy(north, east, 90.0)
        self.assertEqual((north, east), (n0, e0))
        self.assertEqual(n1.cmpaz, 90.0)
        traces = [north, east]
        rotated = pr.rotate_pairs_copy(traces, 90.0)
        self.assertEqual(traces, [n0, e0])
        self.assertEqual(rotated[1].cmpaz, 180.0)

    def test_copying_collection(self):
        traces = [self.sac.copy(), self.sac.copy()]
        copies = pr.multiply_copy(traces, 2.0)
        self.assertEqual(len(copies), 2)
        np.testing.assert_allclose(copies[1].data, 2 * self.sac.data)
        np.testing.assert_allclose(traces[1].data, self.sac.data)


if __name__ == '__main__':
    unittest.main()
