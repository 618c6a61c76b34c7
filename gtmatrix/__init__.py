# -*- coding: utf-8 -*-
# flake8: noqa
"""
This package provides functions which modify a matrix or vector of genotype
calls represented as strings, e.g., 'A/A' or 'C|G'.

"""

from .consensus import alleles_to_consensus, genotype_to_consensus
from .alleles import get_alleles, split_alleles
from .constants import IUPAC_CONSENSUS

from .version import version as __version__
