# -*- coding: utf-8 -*-
from types import MappingProxyType


# nucleotides
BASES = ('A', 'C', 'G', 'T')

# allele call separators
SEP_UNPHASED = '/'
SEP_PHASED = '|'
SEPARATORS = (SEP_UNPHASED, SEP_PHASED)

# missing data
MISSING_ALLELE = '.'
MISSING_GENOTYPES = tuple(MISSING_ALLELE + s + MISSING_ALLELE for s in SEPARATORS)
MISSING_CONSENSUS = 'n'
NA_TOKEN = 'NA'

# IUPAC ambiguity codes for ordered pairs of allele calls
IUPAC_CONSENSUS = MappingProxyType({
    # homozygotes
    ('A', 'A'): 'a',
    ('C', 'C'): 'c',
    ('G', 'G'): 'g',
    ('T', 'T'): 't',
    # heterozygotes
    ('A', 'T'): 'w',
    ('T', 'A'): 'w',
    ('C', 'G'): 's',
    ('G', 'C'): 's',
    ('A', 'C'): 'm',
    ('C', 'A'): 'm',
    ('G', 'T'): 'k',
    ('T', 'G'): 'k',
    ('A', 'G'): 'r',
    ('G', 'A'): 'r',
    ('C', 'T'): 'y',
    ('T', 'C'): 'y',
})
