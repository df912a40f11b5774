#!/usr/bin/env python3
# -*- coding: utf-8 -*-


"""
Korean pronunciation API module
__copyright__ = 'Copyright (C) 2026-, hanphon authors. All rights reserved.'
"""


###########
# imports #
###########
from argparse import ArgumentParser, Namespace
import copy
import json
import logging
import os
import sys
from typing import Callable, List, Optional

from hanphon.assembler import Assembler
from hanphon.resource import irregular, jaso, rules
from hanphon.resource.rules import Sound


#############
# constants #
#############
_IEUNG = jaso.first_idx('ㅇ')
_HIEUT = jaso.first_idx('ㅎ')
_NIEUN = jaso.first_idx('ㄴ')
_RIEUL = jaso.first_idx('ㄹ')
_MIEUM = jaso.first_idx('ㅁ')
_I = jaso.middle_idx('ㅣ')
_LAST_IEUNG = jaso.last_idx('ㅇ')
_LAST_HIEUT = jaso.last_idx('ㅎ')

# 예사소리 -> 거센소리
_ASPIRATE = {jaso.first_idx(plain): jaso.first_idx(aspirate)
             for plain, aspirate in zip('ㄱㄷㅂㅈ', 'ㅋㅌㅍㅊ')}
# 예사소리 -> 된소리
_TENSE = {jaso.first_idx(plain): jaso.first_idx(tense)
          for plain, tense in zip('ㄱㄷㅂㅅㅈ', 'ㄲㄸㅃㅆㅉ')}
_PALATAL = {jaso.first_idx('ㄷ'): jaso.first_idx('ㅈ'),
            jaso.first_idx('ㅌ'): jaso.first_idx('ㅊ')}
# 파열음 대표음 -> 같은 자리의 비음
_STOP_TO_NASAL = {Sound.K: Sound.NG, Sound.T: Sound.N, Sound.P: Sound.M}

# 연음될 때 된소리가 되는 겹받침의 뒤 자음
_LIAISON_TENSE = {'ㅅ': 'ㅆ'}

# ㅎ을 포함한 받침 -> ㅎ과 합쳐지고 남는 받침
_H_LAST = {_LAST_HIEUT: 0,
           jaso.last_idx('ㄶ'): jaso.last_idx('ㄴ'),
           jaso.last_idx('ㅀ'): jaso.last_idx('ㄹ')}
# 뒤 음절의 ㅎ과 합쳐지는 받침의 파열음 초성 (ㄾ은 대표음이 ㄹ이라 없음)
_STOP_BEFORE_H = {last: jaso.first_idx(rules.representative(last).value)
                  for last in range(1, len(jaso.LAST))
                  if rules.representative(last) in _STOP_TO_NASAL}
_STOP_BEFORE_H[jaso.last_idx('ㄵ')] = jaso.first_idx('ㅈ')
_STOP_BEFORE_H[jaso.last_idx('ㄼ')] = jaso.first_idx('ㅂ')
_REMAIN_BEFORE_H = {jaso.last_idx('ㄺ'): jaso.last_idx('ㄹ'),
                    jaso.last_idx('ㄼ'): jaso.last_idx('ㄹ'),
                    jaso.last_idx('ㄵ'): jaso.last_idx('ㄴ')}


#############
# variables #
#############
_LOG = logging.getLogger(__name__)
_DEFAULT_PHONEMIZER = None


#########
# types #
#########
class HanphonExcept(Exception):
    """
    hanphon API를 위한 표준 예외 클래스
    """


class Cell:
    """
    음절 칸. 한글 음절이 아닌 문자는 그대로 두고 규칙 적용의 경계가 된다.
    """
    def __init__(self, char: str):
        """
        Args:
            char:  입력 문자
        """
        self.char = char    # 원래 쓰여진 문자
        idx = jaso.decompose(char)
        self.is_hangul = idx is not None
        self.first, self.middle, self.last = idx if idx else (-1, -1, 0)

    def __str__(self):
        if not self.is_hangul:
            return self.char
        return jaso.compose(self.first, self.middle, self.last)


class TraceRecord:
    """
    규칙 적용 기록
    """
    def __init__(self, index: int, rule: str, description: str):
        """
        Args:
            index:  음절 위치
            rule:  규칙 이름
            description:  설명
        """
        self.index = index
        self.rule = rule
        self.description = description

    def __str__(self):
        return '{}\t{}\t{}'.format(self.index, self.rule, self.description)

    def to_dict(self) -> dict:
        """
        Returns:
            {index, rule, description} 사전
        """
        return {'index': self.index, 'rule': self.rule, 'description': self.description}


class Pronunciation:
    """
    발음 변환 결과
    """
    def __init__(self, original: str, pronounced: str, trace: List[TraceRecord]):
        """
        Args:
            original:  입력 문자열. 음성 재생에는 발음이 아닌 이 문자열을 사용한다.
            pronounced:  발음
            trace:  적용된 규칙의 순서대로의 기록
        """
        self.original = original
        self.pronounced = pronounced
        self.trace = trace

    def __str__(self):
        lines = ['{}\t{}'.format(self.original, self.pronounced), ]
        lines.extend([str(record) for record in self.trace])
        return '\n'.join(lines)

    def to_dict(self) -> dict:
        """
        Returns:
            {original, pronounced, trace} 사전
        """
        return {'original': self.original, 'pronounced': self.pronounced,
                'trace': [record.to_dict() for record in self.trace]}


class Phonemizer:
    """
    발음 변환기. 호출마다 새로 음절 칸과 기록을 만들므로 여러 곳에서 함께 써도 된다.
    """
    def __init__(self, dic_path: str = ''):
        """
        Args:
            dic_path:  예외 발음 사전 경로. 없으면 패키지에 포함된 사전
        """
        if not dic_path:
            dic_path = irregular.DEFAULT_DIC_PATH
        if not os.path.isfile(dic_path):
            raise HanphonExcept('fail to find irregular dictionary: {}'.format(dic_path))
        self._irregulars = irregular.load_dic(dic_path)

    def phonemize(self, text: str, is_verb: bool = False) -> Pronunciation:    # pylint: disable=unused-argument
        """
        입력 문자열의 발음을 구한다.
        Args:
            text:  입력 문자열
            is_verb:  용언 여부. 아직 어느 규칙도 사용하지 않는다.
        Returns:
            발음 변환 결과
        """
        irr = self._irregulars.get(text)
        if irr:
            _LOG.debug('irregular pronunciation: %s -> %s', text, irr.pronounced)
            return Pronunciation(text, irr.pronounced, [TraceRecord(0, irr.rule, irr.description)])

        cells = [Cell(char) for char in text]
        trace = []
        for rule in _PAIR_RULES:
            _apply_pair_rule(rule, cells, trace)
        _normalize_lasts(cells, trace)
        _LOG.debug('%s: %d rule(s) applied', text, len(trace))
        return Pronunciation(text, ''.join([str(cell) for cell in cells]), trace)


#############
# functions #
#############
def _resyllabify(idx: int, curr: Cell, nxt: Cell) -> Optional[TraceRecord]:
    """
    연음. 받침이 뒤 음절의 빈 초성(ㅇ) 자리로 넘어간다.
    """
    if not curr.last or nxt.first != _IEUNG:
        return None
    last = jaso.LAST[curr.last]
    if curr.last == _LAST_HIEUT:
        curr.last = 0
        return TraceRecord(idx, rules.H_DELETION, '{} disappears before a vowel.'.format(last))
    if curr.last == _LAST_IEUNG:
        return None
    if last in jaso.COMPLEX_LAST:
        remain, move = jaso.COMPLEX_LAST[last]
        curr.last = jaso.last_idx(remain)
        if move == 'ㅎ':
            return TraceRecord(idx, rules.RESYLLABIFICATION_COMPLEX,
                               '{} splits, ㅎ is silent.'.format(last))
        nxt.first = jaso.first_idx(_LIAISON_TENSE.get(move, move))
        return TraceRecord(idx, rules.RESYLLABIFICATION_COMPLEX,
                           '{} splits: {} stays, {} moves to next syllable.'.format(last, remain,
                                                                                    move))
    curr.last = 0
    nxt.first = jaso.first_idx(last)
    return TraceRecord(idx, rules.RESYLLABIFICATION,
                       '{} moves to replace the empty initial sound.'.format(last))


def _aspirate(idx: int, curr: Cell, nxt: Cell) -> Optional[TraceRecord]:
    """
    격음화. ㅎ과 예사소리가 만나 거센소리가 된다.
    """
    if curr.last in _H_LAST and nxt.first in _ASPIRATE:
        plain = nxt.first
        curr.last = _H_LAST[curr.last]
        nxt.first = _ASPIRATE[plain]
        return TraceRecord(idx, rules.ASPIRATION,
                           'ㅎ merges with {} to form {}.'.format(jaso.FIRST[plain],
                                                                  jaso.FIRST[nxt.first]))
    if curr.last in _STOP_BEFORE_H and nxt.first == _HIEUT:
        last = jaso.LAST[curr.last]
        nxt.first = _ASPIRATE[_STOP_BEFORE_H[curr.last]]
        curr.last = _REMAIN_BEFORE_H.get(curr.last, 0)
        return TraceRecord(idx, rules.ASPIRATION,
                           '{} merges with ㅎ to form {}.'.format(last, jaso.FIRST[nxt.first]))
    return None


def _palatalize(idx: int, curr: Cell, nxt: Cell) -> Optional[TraceRecord]:    # pylint: disable=unused-argument
    """
    구개음화. 앞 규칙들로 생겨난 ㄷ, ㅌ이 ㅣ 앞에서 ㅈ, ㅊ이 된다.
    원래부터 디, 티로 쓰여진 음절(잔디, 티끌 등)은 쓰인 대로 읽는다.
    """
    if nxt.first not in _PALATAL or nxt.middle != _I:
        return None
    written_first, written_middle, _ = jaso.decompose(nxt.char)
    if written_first in _PALATAL and written_middle == nxt.middle:
        return None
    plain = nxt.first
    nxt.first = _PALATAL[plain]
    return TraceRecord(idx + 1, rules.PALATALIZATION,
                       '{} becomes {} before {}.'.format(jaso.FIRST[plain], jaso.FIRST[nxt.first],
                                                         jaso.MIDDLE[nxt.middle]))


def _assimilate(idx: int, curr: Cell, nxt: Cell) -> Optional[TraceRecord]:
    """
    유음화와 비음화. 먼저 해당하는 규칙 하나만 적용한다.
    """
    sound = rules.representative(curr.last)
    if (sound == Sound.N and nxt.first == _RIEUL) or (sound == Sound.L and nxt.first == _NIEUN):
        curr.last = Sound.L.last
        nxt.first = _RIEUL
        return TraceRecord(idx, rules.LIQUIDIZATION, 'ㄴ and ㄹ meet to become ㄹㄹ.')
    if sound in _STOP_TO_NASAL and nxt.first in (_NIEUN, _MIEUM):
        nasal = _STOP_TO_NASAL[sound]
        curr.last = nasal.last
        return TraceRecord(idx, rules.NASALIZATION,
                           'Stop {} becomes nasal {} before {}.'.format(sound.value, nasal.value,
                                                                        jaso.FIRST[nxt.first]))
    if nxt.first != _RIEUL:
        return None
    if sound in (Sound.M, Sound.NG):
        nxt.first = _NIEUN
        return TraceRecord(idx + 1, rules.NASALIZATION, 'ㄹ becomes ㄴ after nasal.')
    if sound in _STOP_TO_NASAL:
        # ㄹ이 ㄴ이 되고, 그 ㄴ 앞에서 파열음이 다시 비음이 된다. ex) 국력 -> [궁녁]
        curr.last = _STOP_TO_NASAL[sound].last
        nxt.first = _NIEUN
        return TraceRecord(idx, rules.NASALIZATION_MUTUAL,
                           'Stop + ㄹ interaction: Both change to nasals.')
    return None


def _tensify(idx: int, curr: Cell, nxt: Cell) -> Optional[TraceRecord]:
    """
    경음화. 파열음 받침 뒤의 예사소리가 된소리가 된다.
    """
    if rules.representative(curr.last) not in _STOP_TO_NASAL or nxt.first not in _TENSE:
        return None
    plain = nxt.first
    nxt.first = _TENSE[plain]
    return TraceRecord(idx + 1, rules.TENSIFICATION,
                       'Initial {} hardens to {} after stop sound.'.format(jaso.FIRST[plain],
                                                                           jaso.FIRST[nxt.first]))


_PAIR_RULES = (_resyllabify, _aspirate, _palatalize, _assimilate, _tensify)


def _apply_pair_rule(rule: Callable[[int, Cell, Cell], Optional[TraceRecord]], cells: List[Cell],
                     trace: List[TraceRecord]):
    """
    이웃한 두 한글 음절 칸마다 규칙을 적용한다.
    규칙은 칸의 사본을 고치고, 기록을 남긴 경우에만 사본을 되돌려 쓴다.
    Args:
        rule:  규칙 함수
        cells:  음절 칸 리스트
        trace:  기록 리스트
    """
    for idx in range(len(cells) - 1):
        if not (cells[idx].is_hangul and cells[idx + 1].is_hangul):
            continue
        curr, nxt = copy.copy(cells[idx]), copy.copy(cells[idx + 1])
        record = rule(idx, curr, nxt)
        if record:
            cells[idx], cells[idx + 1] = curr, nxt
            trace.append(record)


def _normalize_lasts(cells: List[Cell], trace: List[TraceRecord]):
    """
    남아 있는 받침을 대표음으로 바꾼다. ex) 닭 -> [닥]
    Args:
        cells:  음절 칸 리스트
        trace:  기록 리스트
    """
    for idx, cell in enumerate(cells):
        if not cell.is_hangul or not cell.last:
            continue
        sound = rules.representative(cell.last)
        if cell.last == sound.last:
            continue
        cell = copy.copy(cell)
        trace.append(TraceRecord(idx, rules.SIMPLIFICATION,
                                 '{} simplifies to {}.'.format(jaso.LAST[cell.last], sound.value)))
        cell.last = sound.last
        cells[idx] = cell


def phonemize(text: str, is_verb: bool = False) -> Pronunciation:
    """
    기본 예외 발음 사전을 사용하는 발음 변환기로 발음을 구한다.
    Args:
        text:  입력 문자열
        is_verb:  용언 여부
    Returns:
        발음 변환 결과
    """
    global _DEFAULT_PHONEMIZER    # pylint: disable=global-statement
    if _DEFAULT_PHONEMIZER is None:
        _DEFAULT_PHONEMIZER = Phonemizer()
    return _DEFAULT_PHONEMIZER.phonemize(text, is_verb)


def run(args: Namespace):
    """
    run function which is the start point of program
    Args:
        args:  program arguments
    """
    if args.rules:
        for info in rules.GLOSSARY:
            print(info)
        for info in rules.SOUND_GUIDE:
            print(info)
        return
    if args.assemble:
        for line in sys.stdin:
            assembler = Assembler()
            for jamo in line.rstrip('\r\n'):
                assembler.add(jamo)
            print(assembler.text)
        return

    phonemizer = Phonemizer(args.dic_path)
    for line in sys.stdin:
        line = line.rstrip('\r\n')
        if not line.strip():
            continue
        result = phonemizer.phonemize(line)
        if args.json:
            print(json.dumps(result.to_dict(), ensure_ascii=False))
            continue
        print(result)
        print()


########
# main #
########
def main():
    """
    main function processes only argument parsing
    """
    parser = ArgumentParser(description='Korean pronunciation with sound change rules')
    parser.add_argument('--dic-path', help='irregular pronunciation dictionary', metavar='FILE',
                        default='')
    parser.add_argument('--input', help='input file <default: stdin>', metavar='FILE')
    parser.add_argument('--output', help='output file <default: stdout>', metavar='FILE')
    parser.add_argument('--json', help='print results in JSON lines', action='store_true')
    parser.add_argument('--assemble', help='assemble jamo keystrokes of each line',
                        action='store_true')
    parser.add_argument('--rules', help='print rule glossary and final consonant guide', action='store_true')
    parser.add_argument('--debug', help='enable debug', action='store_true')
    args = parser.parse_args()

    if args.input:
        sys.stdin = open(args.input, 'r', encoding='UTF-8')
    if args.output:
        sys.stdout = open(args.output, 'w', encoding='UTF-8')
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    run(args)


if __name__ == '__main__':
    main()
