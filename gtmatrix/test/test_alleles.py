# -*- coding: utf-8 -*-
import unittest
import warnings


import numpy as np
import pandas
import pytest


from gtmatrix import get_alleles, split_alleles
from gtmatrix.test.tools import assert_array_items_equal as aeq, compare_arrays


class TestGetAlleles(unittest.TestCase):

    def test_unique_first_occurrence(self):
        aeq(['A', 'C', 'G'], get_alleles(['A/A', 'C/G']))
        aeq(['A', 'C', 'G'], get_alleles(['A/C', 'C/G'], split='/'))
        aeq(['G', 'A', 'T'], get_alleles(['G/A', 'A/G', 'T/A']))

    def test_na_rm(self):
        x = ['A/NA', 'C/G']
        aeq(['A', 'NA', 'C', 'G'], get_alleles(x))
        aeq(['A', 'C', 'G'], get_alleles(x, na_rm=True))

    def test_na_rm_keeps_missing(self):
        x = [None, 'A/C', np.nan, 'NA/NA']
        aeq([None, 'A', 'C', 'NA'], get_alleles(x))
        aeq([None, 'A', 'C'], get_alleles(x, na_rm=True))

    def test_as_numeric(self):
        actual = get_alleles(['1/2', '2/3'], as_numeric=True)
        assert np.dtype('f8') == actual.dtype
        compare_arrays([1., 2., 3.], actual)

    def test_as_numeric_before_unique(self):
        x = ['1/2', '1.0/2']
        aeq(['1', '2', '1.0'], get_alleles(x))
        compare_arrays([1., 2.], get_alleles(x, as_numeric=True))

    def test_as_numeric_parse_failure(self):
        with pytest.warns(RuntimeWarning):
            actual = get_alleles(['A/1', 'C/1'], as_numeric=True)
        compare_arrays([np.nan, 1.], actual)

    def test_as_numeric_na(self):
        # 'NA' and missing values coerce silently and count once
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            actual = get_alleles(['NA/1', None, '2/NA'], as_numeric=True)
        compare_arrays([np.nan, 1., 2.], actual)
        actual = get_alleles(['NA/1', '2/NA'], na_rm=True, as_numeric=True)
        compare_arrays([1., 2.], actual)

    def test_empty(self):
        actual = get_alleles([])
        assert (0,) == actual.shape
        actual = get_alleles([], as_numeric=True)
        assert (0,) == actual.shape
        assert np.dtype('f8') == actual.dtype

    def test_delimiter_absent(self):
        aeq(['A/A', 'C/G'], get_alleles(['A/A', 'C/G', 'A/A'], split='|'))

    def test_phased(self):
        aeq(['0', '1'], get_alleles(['0|1', '1|1', '0|0'], split='|'))

    def test_multi_character_delimiter(self):
        aeq(['A', 'C'], get_alleles(['A::C', 'C::A'], split='::'))

    def test_matrix(self):
        x = np.array([['A/C', 'G/G'],
                      ['T/T', 'A/A']])
        aeq(['A', 'C', 'G', 'T'], get_alleles(x))

    def test_bytes(self):
        aeq(['A', 'C'], get_alleles(np.array([b'A/C', b'C/C'])))

    def test_series(self):
        s = pandas.Series(['0/1', '1/2'], index=['s1', 's2'])
        compare_arrays([0., 1., 2.], get_alleles(s, as_numeric=True))

    def test_string_dtype_series(self):
        s = pandas.Series(['A/C', None, 'C/NA'], dtype='string')
        aeq(['A', 'C', None, 'NA'], get_alleles(s))
        aeq(['A', 'C', None], get_alleles(s, na_rm=True))
        s = pandas.Series(['0/1', None], dtype='string')
        compare_arrays([0., 1., np.nan], get_alleles(s, as_numeric=True))

    def test_bad_split(self):
        for split in '', None:
            with self.assertRaises(ValueError):
                get_alleles(['A/A'], split=split)

    def test_bad_cell(self):
        with self.assertRaises(TypeError):
            get_alleles(['A/A', 1])


def test_split_alleles():
    assert ['A', 'A', 'C', 'G'] == split_alleles(['A/A', 'C/G'])
    assert ['A', 'C', None] == split_alleles(['A/C', None])


def test_split_alleles_empty_tokens():
    # no trailing empty token, leading and interior empty tokens kept
    assert ['A', '', 'C', 'G', '', 'T'] == split_alleles(['A/', '/C', '', 'G//T'])
