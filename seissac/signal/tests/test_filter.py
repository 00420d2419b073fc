#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
The Filter test suite.
"""
import unittest

import numpy as np
import scipy.signal as sg

from seissac.signal.filter import (FilterDesigner, FilterSpec, Prototype,
                                   ScipyFilterDesigner, filter_data,
                                   get_filter_prototype, get_filter_spec)
from seissac.util import SacValidationError


class RecordingDesigner(FilterDesigner):
    """
    Filter designer that remembers how it was used.
    """
    def __init__(self):
        self.designed = []
        self.applied = []

    def design_filter(self, spec, prototype):
        self.designed.append((spec, prototype))
        return 'coefficients'

    def apply_forward(self, coeffs, data):
        self.applied.append(('forward', coeffs))
        return data

    def apply_zero_phase(self, coeffs, data):
        self.applied.append(('zero_phase', coeffs))
        return data


class FilterTestCase(unittest.TestCase):
    """
    Test cases for Filter.
    """
    def setUp(self):
        self.sampling_rate = 100.0
        self.t = np.arange(2000) / self.sampling_rate
        self.slow = np.sin(2 * np.pi * 0.5 * self.t)
        self.fast = np.sin(2 * np.pi * 25.0 * self.t)

    def test_filter_spec(self):
        spec = get_filter_spec('lowpass', 5, 100.0)
        self.assertEqual(spec, FilterSpec('lowpass', (5.0,), 100.0))
        spec = get_filter_spec('bandpass', [1, 2], 100.0)
        self.assertEqual(spec.corners, (1.0, 2.0))
        for kind, corners in (('bandstop', 1.0), ('bandpass', 1.0),
                              ('bandpass', (2.0, 1.0)),
                              ('bandpass', (1.0, 1.0)),
                              ('lowpass', (1.0, 2.0)),
                              ('highpass', 0.0), ('highpass', -1.0),
                              ('lowpass', 50.0), ('bandpass', (1.0, 60.0))):
            with self.assertRaises(SacValidationError):
                get_filter_spec(kind, corners, 100.0)

    def test_filter_prototype(self):
        self.assertEqual(get_filter_prototype('butterworth', 2),
                         Prototype('butterworth', 2))
        self.assertEqual(get_filter_prototype('BU', 10).npoles, 10)
        for ftype in ('bessel', 'chebyshev1', 'c2'):
            with self.assertRaisesRegex(SacValidationError, ftype):
                get_filter_prototype(ftype, 2)
        for ftype in ('elliptic', 'b'):
            with self.assertRaises(SacValidationError):
                get_filter_prototype(ftype, 2)
        for npoles in (0, 11, 2.5, -1):
            with self.assertRaises(SacValidationError):
                get_filter_prototype('butterworth', npoles)

    def test_scipy_designer_matches_butter(self):
        """
        Coefficients are Butterworth second-order sections.
        """
        designer = ScipyFilterDesigner()
        spec = get_filter_spec('bandpass', (2.0, 10.0), self.sampling_rate)
        sos = designer.design_filter(spec, Prototype('butterworth', 4))
        expected = sg.butter(4, [2.0 / 50.0, 10.0 / 50.0], btype='bandpass',
                             output='sos')
        np.testing.assert_allclose(sos, expected)

    def test_lowpass_zero_phase(self):
        data = self.slow + self.fast
        filtered = filter_data(data, 'lowpass', 5.0, self.sampling_rate,
                               npoles=4, passes=2)
        np.testing.assert_allclose(filtered[300:-300], self.slow[300:-300],
                                   atol=1e-2)

    def test_highpass_zero_phase(self):
        data = self.slow + self.fast
        filtered = filter_data(data, 'highpass', 10.0, self.sampling_rate,
                               npoles=4, passes=2)
        np.testing.assert_allclose(filtered[300:-300], self.fast[300:-300],
                                   atol=1e-2)

    def test_single_pass_is_causal(self):
        """
        A forward filter doesn't respond before an impulse, the zero phase
        filter does.
        """
        impulse = np.zeros(200)
        impulse[100] = 1.0
        forward = filter_data(impulse, 'lowpass', 10.0, self.sampling_rate)
        self.assertTrue((forward[:100] == 0).all())
        self.assertNotEqual(forward[100], 0)
        zero_phase = filter_data(impulse, 'lowpass', 10.0,
                                 self.sampling_rate, passes=2)
        self.assertNotEqual(zero_phase[99], 0)
        # symmetric around the impulse
        np.testing.assert_allclose(zero_phase[90:100], zero_phase[110:100:-1],
                                   atol=1e-8)

    def test_passes(self):
        for passes in (0, 3, -1):
            with self.assertRaises(SacValidationError):
                filter_data(self.slow, 'lowpass', 5.0, self.sampling_rate,
                            passes=passes)

    def test_custom_designer(self):
        designer = RecordingDesigner()
        filter_data(self.slow, 'highpass', 1.0, self.sampling_rate,
                    npoles=3, passes=1, designer=designer)
        filter_data(self.slow, 'highpass', 1.0, self.sampling_rate,
                    passes=2, designer=designer)
        spec, prototype = designer.designed[0]
        self.assertEqual(spec, FilterSpec('highpass', (1.0,), 100.0))
        self.assertEqual(prototype, Prototype('butterworth', 3))
        self.assertEqual(designer.applied, [('forward', 'coefficients'),
                                            ('zero_phase', 'coefficients')])


if __name__ == '__main__':
    unittest.main()
