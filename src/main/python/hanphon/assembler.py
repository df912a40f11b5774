# -*- coding: utf-8 -*-


"""
자모 입력으로 한글 음절을 조합하는 오토마타
__copyright__ = 'Copyright (C) 2026-, hanphon authors. All rights reserved.'
"""


###########
# imports #
###########
from enum import Enum
from typing import List

from hanphon.resource import jaso


#########
# types #
#########
class State(Enum):
    """
    조합 상태
    """
    EMPTY = 0
    ONSET = 1
    ONSET_VOWEL = 2
    ONSET_VOWEL_CODA = 3


class _Composer:
    """
    입력 버퍼를 처음부터 다시 조합하는 상태 기계
    """
    def __init__(self):
        self.out = []
        self.state = State.EMPTY
        self.first = ''
        self.middle = ''
        self.last = ''

    def flush(self):
        """
        조합 중인 음절을 출력하고 EMPTY 상태로 돌아간다.
        """
        if self.state == State.ONSET:
            self.out.append(self.first)
        elif self.state in (State.ONSET_VOWEL, State.ONSET_VOWEL_CODA):
            last = jaso.last_idx(self.last) if self.last else 0
            self.out.append(jaso.compose(jaso.first_idx(self.first), jaso.middle_idx(self.middle),
                                         last))
        self.state = State.EMPTY
        self.first = ''
        self.middle = ''
        self.last = ''

    def start(self, jamo: str):
        """
        새 음절의 초성으로 시작한다. 초성이 될 수 없으면 그대로 출력한다.
        """
        if jaso.first_idx(jamo) < 0:
            self.out.append(jamo)
            return
        self.first = jamo
        self.state = State.ONSET

    def feed(self, jamo: str):
        """
        자모 하나를 입력한다.
        Args:
            jamo:  자모 (혹은 그 밖의 문자)
        """
        if self.state == State.EMPTY:
            if jaso.is_consonant(jamo):
                self.start(jamo)
            else:
                self.out.append(jamo)
        elif self.state == State.ONSET:
            if jaso.is_vowel(jamo):
                self.middle = jamo
                self.state = State.ONSET_VOWEL
            else:
                self._restart(jamo)
        elif self.state == State.ONSET_VOWEL:
            if jaso.is_vowel(jamo):
                merged = jaso.merge_middle(self.middle, jamo)
                if merged:
                    self.middle = merged
                else:
                    self.flush()
                    self.out.append(jamo)
            elif jaso.last_idx(jamo) > 0:
                self.last = jamo
                self.state = State.ONSET_VOWEL_CODA
            else:
                self._restart(jamo)
        elif jaso.is_vowel(jamo):
            self._resyllabify(jamo)
        else:
            merged = jaso.merge_last(self.last, jamo)
            if merged:
                self.last = merged
            else:
                self._restart(jamo)

    def _restart(self, jamo: str):
        """
        조합 중인 음절을 끝내고, 자음이면 새 음절을 시작하고 아니면 그대로 출력한다.
        """
        self.flush()
        if jaso.is_consonant(jamo):
            self.start(jamo)
        else:
            self.out.append(jamo)

    def _resyllabify(self, vowel: str):
        """
        받침 뒤에 모음이 오면 받침(겹받침이면 뒤 자음)이 다음 음절의 초성이 된다.
        """
        if self.last in jaso.COMPLEX_LAST:
            remain, move = jaso.COMPLEX_LAST[self.last]
        else:
            remain, move = '', self.last
        self.last = remain
        self.flush()
        self.first = move
        self.middle = vowel
        self.state = State.ONSET_VOWEL


class Assembler:
    """
    자모를 하나씩 입력받아 한글 음절로 조합한 문자열을 만든다.
    입력이 바뀔 때마다 버퍼 전체를 처음부터 다시 조합한다.
    """
    def __init__(self):
        self._buffer: List[str] = []
        self._text = ''

    def __len__(self):
        return len(self._buffer)

    @property
    def text(self) -> str:
        """
        현재 조합된 문자열
        """
        return self._text

    def add(self, jamo: str) -> str:
        """
        자모를 하나 입력한다. 첫가끝 자모나 반각 자모는 호환 자모로 바꾼다.
        Args:
            jamo:  자모
        Returns:
            조합된 문자열
        """
        self._buffer.append(jaso.norm_compat(jamo))
        return self._assemble()

    def backspace(self) -> str:
        """
        마지막 입력을 지운다.
        Returns:
            조합된 문자열
        """
        if self._buffer:
            self._buffer.pop()
        return self._assemble()

    def clear(self) -> str:
        """
        모든 입력을 지운다.
        Returns:
            빈 문자열
        """
        self._buffer = []
        self._text = ''
        return self._text

    def _assemble(self) -> str:
        composer = _Composer()
        for jamo in self._buffer:
            composer.feed(jamo)
        composer.flush()
        self._text = ''.join(composer.out)
        return self._text
