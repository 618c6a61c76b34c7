# -*- coding: utf-8 -*-
import logging
from functools import partial


from gtmatrix.constants import IUPAC_CONSENSUS, SEPARATORS, SEP_UNPHASED, \
    MISSING_ALLELE, MISSING_GENOTYPES, MISSING_CONSENSUS
from gtmatrix.util import as_text, is_missing, check_separator, map_cells


__all__ = ['alleles_to_consensus', 'genotype_to_consensus']


logger = logging.getLogger(__name__)
debug = logger.debug


def genotype_to_consensus(gt, na_to_n=True):
    """Convert a single diploid genotype call to its IUPAC consensus
    character.

    Parameters
    ----------
    gt : string, bytes or None
        Genotype call, e.g., 'A/T' or 'C|G'.
    na_to_n : bool, optional
        If True, missing genotypes are returned as 'n', otherwise None.

    Returns
    -------
    code
        Lowercase IUPAC character, 'n' or None for missing calls, or `gt`
        itself if it is not a recognised call.

    Examples
    --------

    >>> from gtmatrix import genotype_to_consensus
    >>> genotype_to_consensus('A/T')
    'w'
    >>> genotype_to_consensus('G|G')
    'g'
    >>> genotype_to_consensus('A/.')
    'n'
    >>> genotype_to_consensus('./.', na_to_n=False) is None
    True
    >>> genotype_to_consensus('A/N')
    'A/N'

    """

    gt = as_text(gt)

    # both alleles missing, or either allele missing
    if is_missing(gt) or (isinstance(gt, str) and
                          (gt in MISSING_GENOTYPES or MISSING_ALLELE in gt)):
        return MISSING_CONSENSUS if na_to_n else None

    # exact match on a called pair, either separator
    if isinstance(gt, str) and len(gt) == 3 and gt[1] in SEPARATORS:
        return IUPAC_CONSENSUS.get((gt[0], gt[2]), gt)

    return gt


def alleles_to_consensus(x, sep=SEP_UNPHASED, na_to_n=True):
    """Convert genotypes to a single consensus allele using IUPAC ambiguity
    codes for heterozygotes.

    Parameters
    ----------
    x : array_like, pandas.DataFrame, pandas.Series or dask.array.Array
        Matrix or vector of genotype strings (e.g., 'A/A', 'C/G'), of any
        dimensionality. None and NaN are treated as missing.
    sep : {'/', '|'}, optional
        Character which delimits the alleles in a genotype. Genotypes using
        either separator are converted whatever the value given here.
    na_to_n : bool, optional
        If True, missing genotypes are scored as 'n', otherwise None.

    Returns
    -------
    out
        New container of the same kind and shape as `x`, with object dtype.

    Notes
    -----

    Missing data are handled in a number of steps. When both alleles are
    missing ('./.' or '.|.') the genotype is converted to missing. Secondly,
    if one of the alleles is missing (the call contains a '.') the genotype
    is converted to missing. Lastly, missing genotypes can optionally be
    scored as 'n' for compatibility with tools that only recognise 'n' as
    an ambiguity character.

    Calls that are not one of the 16 ordered pairs over A, C, G and T (for
    example already converted characters, lowercase or other bases) are
    returned unchanged, so converting the output again has no effect.
    Bytes are decoded as ASCII.

    Examples
    --------

    >>> import gtmatrix
    >>> gtmatrix.alleles_to_consensus([['A/A', 'A/T'],
    ...                                ['C|G', './.'],
    ...                                ['G/.', 'T/C']])
    array([['a', 'w'],
           ['s', 'n'],
           ['n', 'y']], dtype=object)
    >>> gtmatrix.alleles_to_consensus(['A/A', './.'], na_to_n=False)
    array(['a', None], dtype=object)

    """

    check_separator(sep)
    debug('converting genotypes to consensus, sep %r, na_to_n %r', sep, na_to_n)
    return map_cells(partial(genotype_to_consensus, na_to_n=na_to_n), x)
