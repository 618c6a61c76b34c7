# -*- coding: utf-8 -*-
import logging


import numpy as np
import dask.array as da


from gtmatrix.constants import SEPARATORS


logger = logging.getLogger(__name__)
debug = logger.debug


def is_missing(v):
    """Test whether a single cell holds a missing value (None or NaN)."""
    if v is None:
        return True
    if isinstance(v, (float, np.floating)):
        return bool(np.isnan(v))
    return False


def as_text(v):
    """Decode a bytes cell as ASCII, pass anything else through.

    Bytes which are not valid ASCII are returned unchanged.

    """
    if isinstance(v, bytes):
        try:
            return v.decode('ascii')
        except UnicodeDecodeError:
            return v
    return v


def asarray_cells(a):
    """Ensure numpy array of cells.

    Containers without a dtype (lists, tuples, scalars) are converted with
    object dtype, so that missing values such as None or NaN mixed in with
    strings are not coerced to text.

    Parameters
    ----------
    a : array_like

    Returns
    -------
    a : numpy.ndarray

    """
    if hasattr(a, 'to_numpy') and hasattr(a, 'index'):
        # pandas
        return a.to_numpy(dtype=object, na_value=None)
    if not hasattr(a, 'dtype'):
        return np.array(a, dtype=object)
    return np.asarray(a)


def check_separator(sep):
    if sep not in SEPARATORS:
        raise ValueError('bad allele separator: expected one of %s; found %r' %
                         (SEPARATORS, sep))


def check_delimiter(split):
    if not isinstance(split, str) or not split:
        raise ValueError('bad delimiter: expected non-empty string; found %r' % (split,))


def check_text(v):
    if not isinstance(v, str):
        raise TypeError('bad cell type, expected %s, found %s' % (str, type(v)))


def _map_ndarray(f, a):
    a = np.asarray(a)
    out = np.empty(a.shape, dtype=object)
    if a.size:
        np.frompyfunc(f, 1, 1)(a, out=out)
    return out


def _map_pandas(f, x):
    import pandas

    values = _map_ndarray(f, x.to_numpy(dtype=object, na_value=None))
    if isinstance(x, pandas.DataFrame):
        return pandas.DataFrame(values, index=x.index, columns=x.columns, dtype=object)
    return pandas.Series(values, index=x.index, name=x.name, dtype=object)


def map_cells(f, x):
    """Apply a per-cell function over a container of any dimensionality.

    Parameters
    ----------
    f : callable
        Function taking a single cell value and returning the new value.
    x : array_like, pandas.DataFrame, pandas.Series or dask.array.Array
        Input container. It is never modified.

    Returns
    -------
    out
        New container of the same kind and shape as `x`, with object dtype.
        A dask array input gives a lazy dask array with the same chunks;
        a pandas input keeps its index, columns and name; anything else
        gives a numpy.ndarray.

    Examples
    --------

    >>> from gtmatrix.util import map_cells
    >>> map_cells(str.lower, [['A', 'C'], ['G', 'T']])
    array([['a', 'c'],
           ['g', 't']], dtype=object)

    """

    if isinstance(x, da.Array):
        debug('mapping %s block-wise over dask array, chunks %s', f, x.chunks)

        def block_f(block):
            return _map_ndarray(f, block)

        return da.map_blocks(block_f, x, dtype=object)

    if hasattr(x, 'to_numpy') and hasattr(x, 'index'):
        debug('mapping %s over pandas %s, shape %s', f, type(x).__name__, x.shape)
        return _map_pandas(f, x)

    a = asarray_cells(x)
    debug('mapping %s over array, shape %s', f, a.shape)
    return _map_ndarray(f, a)
