#!/usr/bin/env python3
# -*- coding: utf-8 -*-


"""
hanphon assembler tests
__copyright__ = 'Copyright (C) 2026-, hanphon authors. All rights reserved.'
"""


###########
# imports #
###########
import unittest

from hanphon import Assembler


#########
# tests #
#########
class TestAssembler(unittest.TestCase):
    """
    assembler tests
    """
    def setUp(self):
        self._asm = Assembler()

    def _add_all(self, jamos: str) -> str:
        for jamo in jamos:
            self._asm.add(jamo)
        return self._asm.text

    def test_add(self):
        """
        test add() api
        """
        self.assertEqual(self._asm.add('ㄱ'), 'ㄱ')
        self.assertEqual(self._asm.add('ㅏ'), '가')
        self.assertEqual(self._asm.add('ㄴ'), '간')
        self.assertEqual(self._asm.text, '간')
        self.assertEqual(len(self._asm), 3)

    def test_backspace(self):
        """
        test backspace() api
        """
        self._add_all('ㄱㅏㄴ')
        self.assertEqual(self._asm.backspace(), '가')
        self.assertEqual(self._asm.backspace(), 'ㄱ')
        self.assertEqual(self._asm.backspace(), '')
        self.assertEqual(self._asm.backspace(), '')
        self.assertEqual(len(self._asm), 0)

    def test_clear(self):
        """
        test clear() api
        """
        self._add_all('ㄱㅏㄴ')
        self.assertEqual(self._asm.clear(), '')
        self.assertEqual(len(self._asm), 0)
        self.assertEqual(self._asm.add('ㅎ'), 'ㅎ')

    def test_resyllabify(self):
        """
        a vowel after a final consonant takes it as onset
        """
        self.assertEqual(self._add_all('ㄱㅏㄴㅏ'), '가나')
        self.assertEqual(self._asm.backspace(), '간')
        self.assertEqual(self._add_all('ㅇㅏ'), '간아')
        self._asm.clear()
        self.assertEqual(self._add_all('ㄱㅏㅇㅏ'), '가아')

    def test_compound_last(self):
        """
        compound final consonants merge and split
        """
        self.assertEqual(self._add_all('ㄷㅏㄹㄱ'), '닭')
        self.assertEqual(self._asm.add('ㅣ'), '달기')
        self._asm.clear()
        self.assertEqual(self._add_all('ㄱㅏㅂㅅ'), '값')
        self.assertEqual(self._asm.add('ㅣ'), '갑시')
        self._asm.clear()
        self.assertEqual(self._add_all('ㅇㅏㄴㅎ'), '않')
        self.assertEqual(self._asm.add('ㅏ'), '안하')
        self._asm.clear()
        self.assertEqual(self._add_all('ㄱㅏㄴㄱ'), '간ㄱ')

    def test_compound_middle(self):
        """
        compound vowels merge
        """
        self.assertEqual(self._add_all('ㄱㅗㅏ'), '과')
        self._asm.clear()
        self.assertEqual(self._add_all('ㅇㅡㅣ'), '의')
        self._asm.clear()
        self.assertEqual(self._add_all('ㄱㅏㅏ'), '가ㅏ')

    def test_bare_jamo(self):
        """
        jamo which can not be composed are rendered as they are
        """
        self.assertEqual(self._add_all('ㄱㄴ'), 'ㄱㄴ')
        self._asm.clear()
        self.assertEqual(self._add_all('ㅏ'), 'ㅏ')
        self._asm.clear()
        self.assertEqual(self._add_all('ㄳ'), 'ㄳ')
        self._asm.clear()
        self.assertEqual(self._add_all('ㄱㅏㄸ'), '가ㄸ')
        self.assertEqual(self._asm.add('ㅏ'), '가따')

    def test_other(self):
        """
        non-jamo characters flush the syllable
        """
        self.assertEqual(self._add_all('ㄱㅏ ㄴㅏ'), '가 나')
        self._asm.clear()
        self.assertEqual(self._add_all('ㄱa'), 'ㄱa')
        self._asm.clear()
        self.assertEqual(self._add_all('ㄱㅏㄴ!'), '간!')

    def test_norm_compat(self):
        """
        conjoining and half-width jamo are normalized
        """
        self.assertEqual(self._asm.add('\u1100'), 'ㄱ')
        self.assertEqual(self._asm.add('\u1161'), '가')
        self.assertEqual(self._asm.add('\uffa4'), '간')


########
# main #
########
if __name__ == '__main__':
    unittest.main()
