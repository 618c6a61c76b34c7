# -*- coding: utf-8 -*-
import logging
import warnings


import numpy as np


from gtmatrix.constants import SEP_UNPHASED, NA_TOKEN
from gtmatrix.util import asarray_cells, as_text, is_missing, check_delimiter, \
    check_text


__all__ = ['get_alleles', 'split_alleles']


logger = logging.getLogger(__name__)
debug = logger.debug


def split_alleles(x2, split=SEP_UNPHASED):
    """Split genotype strings into a flat list of allele tokens.

    Parameters
    ----------
    x2 : array_like
        Genotype strings. Multidimensional input is flattened.
    split : string, optional
        Delimiter, matched literally.

    Returns
    -------
    tokens : list

    Notes
    -----

    A string ending with the delimiter gives no trailing empty token, and
    an empty string gives no tokens at all. Missing values (None or NaN)
    give a single None token.

    Examples
    --------

    >>> from gtmatrix import split_alleles
    >>> split_alleles(['A/A', 'C/G', 'T'])
    ['A', 'A', 'C', 'G', 'T']

    """

    check_delimiter(split)
    a = asarray_cells(x2)

    tokens = []
    for v in a.ravel():
        v = as_text(v)
        if is_missing(v):
            tokens.append(None)
            continue
        check_text(v)
        parts = v.split(split)
        if parts[-1] == '':
            parts.pop()
        tokens.extend(parts)

    debug('split %s genotypes into %s tokens', a.size, len(tokens))
    return tokens


def _to_numeric(tokens):
    values = []
    bad = []
    for t in tokens:
        if t is None or t == NA_TOKEN:
            values.append(np.nan)
            continue
        try:
            values.append(float(t))
        except ValueError:
            values.append(np.nan)
            bad.append(t)
    if bad:
        warnings.warn('NAs introduced by coercion: %s' % ', '.join(map(repr, bad)),
                      RuntimeWarning)
    return values


def _unique(values):
    seen = set()
    seen_missing = False
    out = []
    for v in values:
        if is_missing(v):
            if seen_missing:
                continue
            seen_missing = True
        elif v in seen:
            continue
        else:
            seen.add(v)
        out.append(v)
    return out


def get_alleles(x2, split=SEP_UNPHASED, na_rm=False, as_numeric=False):
    """Take a vector of genotypes and return the unique alleles.

    Parameters
    ----------
    x2 : array_like
        Vector of genotypes, e.g., ['A/A', 'C/G']. Multidimensional input is
        flattened.
    split : string, optional
        Delimiter used to split each genotype into alleles, matched
        literally.
    na_rm : bool, optional
        If True, remove alleles whose text is 'NA'. Missing values (None or
        NaN) are not removed.
    as_numeric : bool, optional
        If True, convert alleles to numbers before finding unique values.
        Alleles which cannot be parsed become NaN.

    Returns
    -------
    alleles : ndarray
        Unique alleles in order of first occurrence. Float dtype if
        `as_numeric`, otherwise object dtype.

    Examples
    --------

    >>> import gtmatrix
    >>> gtmatrix.get_alleles(['A/C', 'C/G'])
    array(['A', 'C', 'G'], dtype=object)
    >>> gtmatrix.get_alleles(['A/NA', 'C/G'], na_rm=True)
    array(['A', 'C', 'G'], dtype=object)
    >>> gtmatrix.get_alleles(['1/2', '2/3', '1.0/3'], as_numeric=True)
    array([1., 2., 3.])

    """

    tokens = split_alleles(x2, split=split)

    if na_rm:
        tokens = [t for t in tokens if t != NA_TOKEN]

    # coerce before finding unique values, '1' and '1.0' are the same number
    if as_numeric:
        return np.array(_unique(_to_numeric(tokens)), dtype='f8')

    return np.array(_unique(tokens), dtype=object)
