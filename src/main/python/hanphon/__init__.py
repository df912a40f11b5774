# -*- coding: utf-8 -*-


"""
hanphon: Korean pronunciation with sound change rules and Hangul jamo assembler
__copyright__ = 'Copyright (C) 2026-, hanphon authors. All rights reserved.'
"""


###########
# imports #
###########
from hanphon.assembler import Assembler, State
from hanphon.phonemizer import HanphonExcept, Phonemizer, Pronunciation, TraceRecord, phonemize


__version__ = '0.1.0'
__all__ = ['Assembler', 'State', 'HanphonExcept', 'Phonemizer', 'Pronunciation', 'TraceRecord',
           'phonemize']
