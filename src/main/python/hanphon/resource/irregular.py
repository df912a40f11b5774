# -*- coding: utf-8 -*-


"""
irregular (lexicalized) pronunciations which sound change rules can not derive
__copyright__ = 'Copyright (C) 2026-, hanphon authors. All rights reserved.'
"""


###########
# imports #
###########
import logging
import os
from typing import Dict


#############
# constants #
#############
DEFAULT_DIC_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'share',
                                'irregular.dic')


#############
# variables #
#############
_LOG = logging.getLogger(__name__)


#########
# types #
#########
class Irregular:
    """
    irregular pronunciation of a whole word
    """
    def __init__(self, pronounced: str, rule: str, description: str):
        """
        Args:
            pronounced:  pronunciation
            rule:  rule label
            description:  explanation
        """
        self.pronounced = pronounced
        self.rule = rule
        self.description = description

    def __str__(self):
        return '{}\t{}\t{}'.format(self.pronounced, self.rule, self.description)


#############
# functions #
#############
def load_dic(path: str = DEFAULT_DIC_PATH) -> Dict[str, Irregular]:
    """
    load irregular pronunciation dictionary.
    each line is "word<TAB>pronounced<TAB>rule<TAB>description"
    Args:
        path:  file path
    Returns:
        word to irregular pronunciation mapping
    """
    file_name = os.path.basename(path)
    dic = {}
    with open(path, 'r', encoding='UTF-8') as fin:
        for line_num, line in enumerate(fin, start=1):
            line = line.rstrip('\r\n')
            if not line or line[0] == '#':
                continue
            cols = line.split('\t')
            if len(cols) != 4 or not all(cols):
                _LOG.error('%s:%d: invalid format: %s', file_name, line_num, line)
                continue
            word, pronounced, rule, description = cols
            if word in dic:
                _LOG.error('%s:%d: duplicated word: %s', file_name, line_num, word)
                continue
            dic[word] = Irregular(pronounced, rule, description)
    _LOG.info('%s: %d entries', file_name, len(dic))
    return dic
