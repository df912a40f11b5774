#!/usr/bin/env python3
# -*- coding: utf-8 -*-


"""
jaso module tests
__copyright__ = 'Copyright (C) 2026-, hanphon authors. All rights reserved.'
"""


###########
# imports #
###########
import unittest

from hanphon.resource import jaso


#########
# tests #
#########
class TestJaso(unittest.TestCase):
    """
    jaso module tests
    """
    def test_tables(self):
        """
        test size of jamo tables
        """
        self.assertEqual(len(jaso.FIRST), 19)
        self.assertEqual(len(jaso.MIDDLE), 21)
        self.assertEqual(len(jaso.LAST), 28)
        self.assertEqual(jaso.LAST[0], '')

    def test_is_syllable(self):
        """
        test is_syllable()
        """
        self.assertTrue(jaso.is_syllable('가'))
        self.assertTrue(jaso.is_syllable('힣'))
        self.assertFalse(jaso.is_syllable('ㄱ'))
        self.assertFalse(jaso.is_syllable('a'))
        self.assertFalse(jaso.is_syllable(' '))

    def test_decompose(self):
        """
        test decompose()
        """
        self.assertEqual(jaso.decompose('가'), (0, 0, 0))
        self.assertEqual(jaso.decompose('힣'), (18, 20, 27))
        self.assertEqual(jaso.decompose('닭'), (3, 0, 9))
        self.assertIsNone(jaso.decompose('ㄱ'))
        self.assertIsNone(jaso.decompose('?'))

    def test_compose(self):
        """
        test compose()
        """
        self.assertEqual(jaso.compose(0, 0, 4), '간')
        self.assertEqual(jaso.compose(0, 0), '가')
        self.assertEqual(jaso.compose(18, 20, 27), '힣')

    def test_round_trip(self):
        """
        composing and decomposing all valid index triples
        """
        for first in range(len(jaso.FIRST)):
            for middle in range(len(jaso.MIDDLE)):
                for last in range(len(jaso.LAST)):
                    char = jaso.compose(first, middle, last)
                    self.assertTrue(jaso.is_syllable(char))
                    self.assertEqual(jaso.decompose(char), (first, middle, last))

    def test_index(self):
        """
        test first_idx(), middle_idx(), last_idx()
        """
        self.assertEqual(jaso.first_idx('ㄸ'), 4)
        self.assertEqual(jaso.first_idx('ㄳ'), -1)
        self.assertEqual(jaso.middle_idx('ㅣ'), 20)
        self.assertEqual(jaso.middle_idx('ㄱ'), -1)
        self.assertEqual(jaso.last_idx('ㄱ'), 1)
        self.assertEqual(jaso.last_idx('ㅎ'), 27)
        self.assertEqual(jaso.last_idx('ㄸ'), -1)
        self.assertEqual(jaso.last_idx(''), -1)

    def test_consonant_vowel(self):
        """
        test is_consonant(), is_vowel()
        """
        self.assertTrue(jaso.is_consonant('ㄱ'))
        self.assertTrue(jaso.is_consonant('ㄸ'))
        self.assertTrue(jaso.is_consonant('ㄺ'))
        self.assertFalse(jaso.is_consonant('ㅏ'))
        self.assertTrue(jaso.is_vowel('ㅘ'))
        self.assertFalse(jaso.is_vowel('ㄱ'))
        self.assertFalse(jaso.is_vowel('a'))

    def test_merge(self):
        """
        test merge_middle(), merge_last()
        """
        self.assertEqual(jaso.merge_middle('ㅗ', 'ㅏ'), 'ㅘ')
        self.assertEqual(jaso.merge_middle('ㅜ', 'ㅔ'), 'ㅞ')
        self.assertEqual(jaso.merge_middle('ㅡ', 'ㅣ'), 'ㅢ')
        self.assertIsNone(jaso.merge_middle('ㅏ', 'ㅗ'))
        self.assertEqual(jaso.merge_last('ㄹ', 'ㄱ'), 'ㄺ')
        self.assertEqual(jaso.merge_last('ㅂ', 'ㅅ'), 'ㅄ')
        self.assertIsNone(jaso.merge_last('ㄱ', 'ㄱ'))
        for complex_, (left, right) in jaso.COMPLEX_LAST.items():
            self.assertEqual(jaso.merge_last(left, right), complex_)

    def test_norm_compat(self):
        """
        test norm_compat()
        """
        self.assertEqual(jaso.norm_compat(''), '')
        self.assertEqual(jaso.norm_compat('\u1100\u1161\u11ab'), 'ㄱㅏㄴ')
        self.assertEqual(jaso.norm_compat('\uffa1\uffc2'), 'ㄱㅏ')
        self.assertEqual(jaso.norm_compat('가a'), '가a')


########
# main #
########
if __name__ == '__main__':
    unittest.main()
