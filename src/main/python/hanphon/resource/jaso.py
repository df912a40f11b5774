# -*- coding: utf-8 -*-


"""
한글 자소 관련 유틸리티 모듈
__copyright__ = 'Copyright (C) 2026-, hanphon authors. All rights reserved.'
"""


###########
# imports #
###########
from typing import Optional, Tuple


#############
# constants #
#############
SYLLABLE_BEGIN = 0xAC00    # '가'
SYLLABLE_END = 0xD7A3    # '힣'

# 한글 자모 호환 영역 (초성과 종성이 같음. 두벌식 키보드로 입력할 때 들어가는 코드)
FIRST = ('ㄱ', 'ㄲ', 'ㄴ', 'ㄷ', 'ㄸ',    # 초성
         'ㄹ', 'ㅁ', 'ㅂ', 'ㅃ', 'ㅅ',
         'ㅆ', 'ㅇ', 'ㅈ', 'ㅉ', 'ㅊ',
         'ㅋ', 'ㅌ', 'ㅍ', 'ㅎ')
MIDDLE = ('ㅏ', 'ㅐ', 'ㅑ', 'ㅒ', 'ㅓ',    # 중성
          'ㅔ', 'ㅕ', 'ㅖ', 'ㅗ', 'ㅘ',
          'ㅙ', 'ㅚ', 'ㅛ', 'ㅜ', 'ㅝ',
          'ㅞ', 'ㅟ', 'ㅠ', 'ㅡ', 'ㅢ',
          'ㅣ')
LAST = ('',    # 종성 없음
        'ㄱ', 'ㄲ', 'ㄳ', 'ㄴ', 'ㄵ',    # 종성
        'ㄶ', 'ㄷ', 'ㄹ', 'ㄺ', 'ㄻ',
        'ㄼ', 'ㄽ', 'ㄾ', 'ㄿ', 'ㅀ',
        'ㅁ', 'ㅂ', 'ㅄ', 'ㅅ', 'ㅆ',
        'ㅇ', 'ㅈ', 'ㅊ', 'ㅋ', 'ㅌ',
        'ㅍ', 'ㅎ')
_ALL_COMPAT = FIRST + MIDDLE + LAST[1:]

_FIRST_IDX = {jamo: idx for idx, jamo in enumerate(FIRST)}
_MIDDLE_IDX = {jamo: idx for idx, jamo in enumerate(MIDDLE)}
_LAST_IDX = {jamo: idx for idx, jamo in enumerate(LAST) if jamo}

# 한글 자모 영역 (초성과 종성이 다름)
_FIRST_JAMO = ['\u1100', '\u1101', '\u1102', '\u1103', '\u1104',    # 초성
               '\u1105', '\u1106', '\u1107', '\u1108', '\u1109',
               '\u110a', '\u110b', '\u110c', '\u110d', '\u110e',
               '\u110f', '\u1110', '\u1111', '\u1112']
_MIDDLE_JAMO = ['\u1161', '\u1162', '\u1163', '\u1164', '\u1165',    # 중성
                '\u1166', '\u1167', '\u1168', '\u1169', '\u116a',
                '\u116b', '\u116c', '\u116d', '\u116e', '\u116f',
                '\u1170', '\u1171', '\u1172', '\u1173', '\u1174',
                '\u1175']
_LAST_JAMO = ['\u11a8', '\u11a9', '\u11aa', '\u11ab', '\u11ac',    # 종성
              '\u11ad', '\u11ae', '\u11af', '\u11b0', '\u11b1',
              '\u11b2', '\u11b3', '\u11b4', '\u11b5', '\u11b6',
              '\u11b7', '\u11b8', '\u11b9', '\u11ba', '\u11bb',
              '\u11bc', '\u11bd', '\u11be', '\u11bf', '\u11c0',
              '\u11c1', '\u11c2']
_JAMO_TO_COMPAT = dict(zip(_FIRST_JAMO + _MIDDLE_JAMO + _LAST_JAMO, _ALL_COMPAT))

# 반각 자모 영역 (호환 영역과 비슷하게 초성과 종성이 같으나 글자 폭이 절반인 코드)
_FIRST_HALFWIDTH = ['\uffa1', '\uffa2', '\uffa4', '\uffa7', '\uffa8',    # 초성
                    '\uffa9', '\uffb1', '\uffb2', '\uffb3', '\uffb5',
                    '\uffb6', '\uffb7', '\uffb8', '\uffb9', '\uffba',
                    '\uffbb', '\uffbc', '\uffbd', '\uffbe']
_MIDDLE_HALFWIDTH = ['\uffc2', '\uffc3', '\uffc4', '\uffc5', '\uffc6',    # 중성
                     '\uffc7', '\uffca', '\uffcb', '\uffcc', '\uffcd',
                     '\uffce', '\uffcf', '\uffd2', '\uffd3', '\uffd4',
                     '\uffd5', '\uffd6', '\uffd7', '\uffda', '\uffdb',
                     '\uffdc']
_LAST_HALFWIDTH = ['\uffa1', '\uffa2', '\uffa3', '\uffa4', '\uffa5',    # 종성
                   '\uffa6', '\uffa7', '\uffa9', '\uffaa', '\uffab',
                   '\uffac', '\uffad', '\uffae', '\uffaf', '\uffb0',
                   '\uffb1', '\uffb2', '\uffb4', '\uffb5', '\uffb6',
                   '\uffb7', '\uffb8', '\uffba', '\uffbb', '\uffbc',
                   '\uffbd', '\uffbe']
_HALFWIDTH_TO_COMPAT = dict(zip(_FIRST_HALFWIDTH + _MIDDLE_HALFWIDTH + _LAST_HALFWIDTH,
                                _ALL_COMPAT))

# 겹받침 -> (남는 자음, 넘어가는 자음)
COMPLEX_LAST = {
    'ㄳ': ('ㄱ', 'ㅅ'), 'ㄵ': ('ㄴ', 'ㅈ'), 'ㄶ': ('ㄴ', 'ㅎ'),
    'ㄺ': ('ㄹ', 'ㄱ'), 'ㄻ': ('ㄹ', 'ㅁ'), 'ㄼ': ('ㄹ', 'ㅂ'),
    'ㄽ': ('ㄹ', 'ㅅ'), 'ㄾ': ('ㄹ', 'ㅌ'), 'ㄿ': ('ㄹ', 'ㅍ'),
    'ㅀ': ('ㄹ', 'ㅎ'), 'ㅄ': ('ㅂ', 'ㅅ'),
}
_MERGE_LAST = {pair: complex_ for complex_, pair in COMPLEX_LAST.items()}

# 이중 모음
_MERGE_MIDDLE = {
    ('ㅗ', 'ㅏ'): 'ㅘ', ('ㅗ', 'ㅐ'): 'ㅙ', ('ㅗ', 'ㅣ'): 'ㅚ',
    ('ㅜ', 'ㅓ'): 'ㅝ', ('ㅜ', 'ㅔ'): 'ㅞ', ('ㅜ', 'ㅣ'): 'ㅟ',
    ('ㅡ', 'ㅣ'): 'ㅢ',
}


#############
# functions #
#############
def is_syllable(char: str) -> bool:
    """
    한글 음절 영역의 문자인 지 여부
    Args:
        char:  문자
    Returns:
        한글 음절 여부
    """
    return len(char) == 1 and SYLLABLE_BEGIN <= ord(char) <= SYLLABLE_END


def decompose(char: str) -> Optional[Tuple[int, int, int]]:
    """
    한글 음절 하나를 자소 번호로 분해한다.
    Args:
        char:  한글 음절
    Returns:
        (초성, 중성, 종성) 번호 tuple. 종성이 없으면 종성 번호는 0.
        한글 음절이 아닐 경우 None
    """
    if not is_syllable(char):
        return None
    code = ord(char) - SYLLABLE_BEGIN
    last = code % 28
    middle = ((code - last) // 28) % 21
    first = code // 28 // 21
    return first, middle, last


def compose(first: int, middle: int, last: int = 0) -> str:
    """
    자소 번호로부터 한글 음절을 조합한다.
    Args:
        first:  초성 번호 [0, 18]
        middle:  중성 번호 [0, 20]
        last:  종성 번호 [0, 27]
    Returns:
        한글 음절
    """
    assert 0 <= first < len(FIRST), 'invalid first index: {}'.format(first)
    assert 0 <= middle < len(MIDDLE), 'invalid middle index: {}'.format(middle)
    assert 0 <= last < len(LAST), 'invalid last index: {}'.format(last)
    return chr(SYLLABLE_BEGIN + (first * 21 + middle) * 28 + last)


def first_idx(jamo: str) -> int:
    """
    Returns:
        초성 번호. 초성이 될 수 없는 문자는 -1
    """
    return _FIRST_IDX.get(jamo, -1)


def middle_idx(jamo: str) -> int:
    """
    Returns:
        중성 번호. 모음이 아닌 문자는 -1
    """
    return _MIDDLE_IDX.get(jamo, -1)


def last_idx(jamo: str) -> int:
    """
    Returns:
        종성 번호 [1, 27]. 종성이 될 수 없는 문자는 -1
    """
    return _LAST_IDX.get(jamo, -1)


def is_consonant(jamo: str) -> bool:
    """
    초성이나 종성이 될 수 있는 자음인 지 여부
    """
    return jamo in _FIRST_IDX or jamo in _LAST_IDX


def is_vowel(jamo: str) -> bool:
    """
    모음인 지 여부
    """
    return jamo in _MIDDLE_IDX


def merge_middle(left: str, right: str) -> Optional[str]:
    """
    두 모음을 이중 모음으로 합친다. ex) ㅗ + ㅏ -> ㅘ
    Returns:
        이중 모음. 합칠 수 없으면 None
    """
    return _MERGE_MIDDLE.get((left, right))


def merge_last(left: str, right: str) -> Optional[str]:
    """
    두 자음을 겹받침으로 합친다. ex) ㄹ + ㄱ -> ㄺ
    Returns:
        겹받침. 합칠 수 없으면 None
    """
    return _MERGE_LAST.get((left, right))


def norm_compat(text: str) -> str:
    """
    유니코드 내 한글 자소를 호환 영역으로 정규화한다.
    Args:
        text:  한글 텍스트
    Returns:
        자소가 호환 영역으로 정규화된 텍스트
    """
    if not text:
        return text

    normalized = []
    for char in text:
        if char in _JAMO_TO_COMPAT:
            normalized.append(_JAMO_TO_COMPAT[char])
        elif char in _HALFWIDTH_TO_COMPAT:
            normalized.append(_HALFWIDTH_TO_COMPAT[char])
        else:
            normalized.append(char)
    return ''.join(normalized)
